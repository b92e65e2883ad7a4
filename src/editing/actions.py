"""Button vocabulary understood by the rhythm chooser."""
from __future__ import annotations

from enum import Enum, StrEnum

from notation.models import Duration, Note, Rest, Tie

REST_PREFIX = "rest_"
DEFAULT_PITCH = "B4"


class UnknownActionError(ValueError):
    """Raised when a button value falls outside the rhythm vocabulary."""


class EditMode(Enum):
    """How the chooser addresses its stream, fixed at construction."""

    FLAT = "flat"
    MEASURED = "measured"


class ActionId(StrEnum):
    """Every button value a rhythm chooser can receive."""

    WHOLE = "whole"
    HALF = "half"
    QUARTER = "quarter"
    EIGHTH = "eighth"
    SIXTEENTH = "16th"
    THIRTY_SECOND = "32nd"
    DOT = "dot"
    UNDO = "undo"
    TIE = "tie"
    ADD_MEASURE = "addMeasure"
    REST_WHOLE = "rest_whole"
    REST_HALF = "rest_half"
    REST_QUARTER = "rest_quarter"
    REST_EIGHTH = "rest_eighth"
    REST_SIXTEENTH = "rest_16th"
    REST_THIRTY_SECOND = "rest_32nd"

    @classmethod
    def parse(cls, value: ActionId | str) -> ActionId:
        """Coerce ``value`` into a member, raising :class:`UnknownActionError`."""

        try:
            return cls(value)
        except ValueError as exc:
            raise UnknownActionError(f"Unknown rhythm action {value!r}") from exc

    @property
    def is_rest(self) -> bool:
        return self.value.startswith(REST_PREFIX)

    @property
    def adds_element(self) -> bool:
        """True for the note and rest buttons handled by the default handler."""

        return self not in EDIT_ACTIONS

    @property
    def duration_type(self) -> str | None:
        if not self.adds_element:
            return None
        if self.is_rest:
            return self.value[len(REST_PREFIX):]
        return self.value


EDIT_ACTIONS = frozenset({ActionId.DOT, ActionId.UNDO, ActionId.TIE, ActionId.ADD_MEASURE})


def new_element(action: ActionId, *, close_tie: bool = False) -> Note | Rest:
    """Build the note or rest a note-adding button stands for.

    Notes are created at the default pitch with the stem up. When
    ``close_tie`` is set the new note receives a ``stop`` tie; rests have
    no tie to close and are returned unchanged.
    """

    if not action.adds_element:
        raise UnknownActionError(f"{action.value!r} does not add a note or rest")
    duration = Duration(type=action.duration_type)
    if action.is_rest:
        return Rest(duration=duration)
    note = Note(pitch=DEFAULT_PITCH, duration=duration, stem_direction="up")
    if close_tie:
        note.tie = Tie(type="stop")
    return note


__all__ = [
    "ActionId",
    "EditMode",
    "UnknownActionError",
    "EDIT_ACTIONS",
    "new_element",
]
