"""Rhythm entry core that turns button presses into stream edits."""
from __future__ import annotations

import logging
from typing import Iterable, List

from notation.models import Element, Measure, Note, RenderTarget, Stream, Tie

from .actions import ActionId, EditMode, new_element
from .buttons import ButtonSpec, build_button_specs, size_ratio_for

logger = logging.getLogger(__name__)

DEFAULT_VALUES = (
    ActionId.WHOLE,
    ActionId.HALF,
    ActionId.QUARTER,
    ActionId.EIGHTH,
    ActionId.SIXTEENTH,
    ActionId.DOT,
    ActionId.UNDO,
)


class RhythmChooser:
    """Apply rhythm button presses to a stream and redraw it.

    A stream without sub-streams is edited directly (flat mode). A stream
    of measures is edited through its last measure (measured mode), with a
    new measure appended automatically once the last one is full.
    """

    def __init__(
        self,
        stream: Stream,
        render_target: RenderTarget | None = None,
        *,
        size: str = "normal",
        values: Iterable[ActionId | str] | None = None,
        auto_add_measure: bool = True,
    ) -> None:
        self._stream = stream
        self.render_target = render_target
        self._size = size
        self._size_ratio = size_ratio_for(size)
        chosen = DEFAULT_VALUES if values is None else values
        self._values: List[ActionId] = [ActionId.parse(value) for value in chosen]
        self._mode = EditMode.MEASURED if stream.has_sub_streams() else EditMode.FLAT
        self.tie_active = False
        self.auto_add_measure = auto_add_measure

    @property
    def stream(self) -> Stream:
        """Return the edited stream."""

        return self._stream

    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def size(self) -> str:
        return self._size

    @property
    def size_ratio(self) -> float:
        return self._size_ratio

    @property
    def values(self) -> List[ActionId]:
        """Return the buttons offered by this chooser, in display order."""

        return list(self._values)

    def button_specs(self) -> List[ButtonSpec]:
        return build_button_specs(self._values, size=self._size)

    def handle_button(self, action: ActionId | str) -> None:
        """Apply ``action`` to the stream, then redraw the affected view."""

        self.dispatch(action)
        if self.render_target is not None:
            self._redraw_site().redraw(self.render_target)

    def dispatch(self, action: ActionId | str) -> Element | None:
        """Run the handler for ``action`` and return the touched element.

        ``None`` means nothing changed (or, for ``addMeasure``, that the
        edit produced no note or rest).
        """

        action = ActionId.parse(action)
        if self._mode is EditMode.MEASURED:
            result = self._dispatch_measured(action)
        else:
            result = self._dispatch_flat(action)
        logger.debug("Handled %s in %s mode: %r", action.value, self._mode.value, result)
        return result

    # ------------------------------------------------------------------
    # Flat mode
    # ------------------------------------------------------------------
    def _dispatch_flat(self, action: ActionId) -> Element | None:
        match action:
            case ActionId.UNDO:
                return self._stream.pop()
            case ActionId.DOT:
                return self._add_dot(self._stream)
            case ActionId.TIE:
                return self._tie(self._stream.last(), allow_continue=False)
            case ActionId.ADD_MEASURE:
                logger.debug("Ignoring addMeasure for a stream without measures")
                return None
            case _:
                return self._add_element(action, self._stream)

    # ------------------------------------------------------------------
    # Measured mode
    # ------------------------------------------------------------------
    def _dispatch_measured(self, action: ActionId) -> Element | None:
        match action:
            case ActionId.UNDO:
                return self._undo_in_measure()
            case ActionId.DOT:
                measure = self._last_measure()
                if measure is None:
                    return None
                return self._add_dot(measure)
            case ActionId.TIE:
                return self._tie(self._tie_source(), allow_continue=True)
            case ActionId.ADD_MEASURE:
                self._add_measure()
                return None
            case _:
                return self._add_element(action, self._measure_with_room())

    def _undo_in_measure(self) -> Element | None:
        measure = self._last_measure()
        if measure is None:
            return None
        element = measure.pop()
        if len(measure) == 0 and len(self._stream) > 1:
            self._stream.pop()
        return element

    def _tie_source(self) -> Element | None:
        measure = self._last_measure()
        if measure is None:
            return None
        if len(measure) > 0:
            return measure.last()
        previous = self._stream.second_to_last()
        if isinstance(previous, Stream):
            return previous.last()
        return None

    def _add_measure(self) -> Measure:
        previous = self._last_measure()
        measure = Measure()
        if previous is not None:
            measure.render_options.staff_lines = previous.render_options.staff_lines
            measure.render_options.measure_index = previous.render_options.measure_index + 1
            previous.render_options.right_barline = "single"
            measure.auto_beam = previous.auto_beam
        measure.render_options.right_barline = "end"
        self._stream.append(measure)
        logger.debug("Appended measure %d", measure.render_options.measure_index)
        return measure

    def _measure_with_room(self) -> Stream:
        measure = self._last_measure()
        if measure is None:
            return self._add_measure()
        if self.auto_add_measure and self._is_full(measure):
            return self._add_measure()
        return measure

    def _is_full(self, measure: Stream) -> bool:
        bar = self._stream.active_time_signature().bar_duration
        return measure.duration.quarter_length >= bar.quarter_length

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _last_measure(self) -> Stream | None:
        last = self._stream.last()
        if isinstance(last, Stream):
            return last
        return None

    def _add_dot(self, container: Stream) -> Element | None:
        element = container.pop()
        if element is None:
            return None
        element.duration.dots += 1
        container.append(element)
        return element

    def _tie(self, element: Element | None, *, allow_continue: bool) -> Element | None:
        if not isinstance(element, Note):
            return None
        tie_type = "continue" if allow_continue and element.tie is not None else "start"
        element.tie = Tie(type=tie_type)
        self.tie_active = True
        return element

    def _add_element(self, action: ActionId, destination: Stream) -> Element:
        element = new_element(action, close_tie=self.tie_active)
        self.tie_active = False
        destination.append(element)
        return element

    def _redraw_site(self) -> Stream:
        stream = self._stream
        if stream.is_class_or_subclass("Part") and stream.active_site is not None:
            return stream.active_site
        return stream


__all__ = ["RhythmChooser", "DEFAULT_VALUES"]
