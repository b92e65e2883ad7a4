"""Pydantic-powered notation models edited by the rhythm widgets.

A :class:`Stream` is an ordered, mutable sequence of notes, rests and
nested streams. Measure-partitioned material is a stream of
:class:`Measure` objects, each of which holds the notes of one bar. The
models only carry what the editing widgets read or write: durations,
ties, time signatures and the small amount of render metadata a measure
needs when a new bar is appended.
"""
from __future__ import annotations

import math
from typing import Annotated, Any, Dict, Iterator, List, Literal, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

DurationType = Literal[
    "duplex-maxima",
    "maxima",
    "longa",
    "breve",
    "whole",
    "half",
    "quarter",
    "eighth",
    "16th",
    "32nd",
    "64th",
    "128th",
    "256th",
    "512th",
    "1024th",
    "2048th",
    "zero",
    "complex",
]

TieType = Literal["start", "continue", "stop"]

QUARTER_LENGTHS: Dict[str, float] = {
    "duplex-maxima": 64.0,
    "maxima": 32.0,
    "longa": 16.0,
    "breve": 8.0,
    "whole": 4.0,
    "half": 2.0,
    "quarter": 1.0,
    "eighth": 0.5,
    "16th": 0.25,
    "32nd": 0.125,
    "64th": 0.0625,
    "128th": 0.03125,
    "256th": 0.015625,
    "512th": 0.0078125,
    "1024th": 0.00390625,
    "2048th": 0.001953125,
}

MAX_DOTS = 4


def dotted_quarter_length(duration_type: str, dots: int) -> float:
    """Return the quarter length of ``duration_type`` carrying ``dots`` dots."""

    if duration_type == "zero":
        return 0.0
    return QUARTER_LENGTHS[duration_type] * (2.0 - 0.5**dots)


def type_and_dots_for(quarter_length: float) -> Tuple[str, int] | None:
    """Find the duration type and dot count expressing ``quarter_length``."""

    if quarter_length == 0.0:
        return "zero", 0
    for duration_type in QUARTER_LENGTHS:
        for dots in range(MAX_DOTS + 1):
            if math.isclose(dotted_quarter_length(duration_type, dots), quarter_length):
                return duration_type, dots
    return None


class Duration(BaseModel):
    """Notated length of an element expressed as a type plus dots."""

    model_config = ConfigDict(validate_assignment=True)

    type: DurationType = "quarter"
    dots: int = Field(0, ge=0, description="Number of augmentation dots")
    complex_quarter_length: Optional[float] = Field(
        None, description="Explicit length used when the type is `complex`"
    )

    @classmethod
    def from_quarter_length(cls, quarter_length: float) -> Duration:
        duration = cls()
        duration.quarter_length = quarter_length
        return duration

    @property
    def quarter_length(self) -> float:
        """Length in quarter notes derived from the type and dots."""

        if self.type == "complex":
            return float(self.complex_quarter_length or 0.0)
        return dotted_quarter_length(self.type, self.dots)

    @quarter_length.setter
    def quarter_length(self, value: float) -> None:
        value = float(value)
        match = type_and_dots_for(value)
        if match is None:
            self.complex_quarter_length = value
            self.dots = 0
            self.type = "complex"
            return
        self.type, self.dots = match
        self.complex_quarter_length = None


class Tie(BaseModel):
    """Marker linking a note to its neighbour into one sustained sound."""

    type: TieType = "start"


class TimeSignature(BaseModel):
    """Meter of a stream; the denominator is rescaled by the augmenter."""

    numerator: int = Field(4, gt=0)
    denominator: float = Field(4.0, gt=0)

    @property
    def bar_duration(self) -> Duration:
        """Return the length of one full bar."""

        return Duration.from_quarter_length(self.numerator * 4.0 / self.denominator)

    @property
    def ratio_string(self) -> str:
        return f"{self.numerator}/{self.denominator:g}"


class RenderOptions(BaseModel):
    """Layout hints a renderer reads from a stream or measure."""

    staff_lines: int = Field(5, ge=0)
    measure_index: int = 0
    right_barline: Optional[str] = None


class Element(BaseModel):
    """Base for everything that can live inside a :class:`Stream`."""

    _active_site: Any = PrivateAttr(default=None)

    @property
    def active_site(self) -> Optional[Stream]:
        """Return the stream this element was most recently appended to."""

        return self._active_site

    @property
    def is_stream(self) -> bool:
        return False

    def is_class_or_subclass(self, tag: str) -> bool:
        """Return ``True`` when ``tag`` names this class or one of its bases."""

        return any(klass.__name__ == tag for klass in type(self).__mro__)

    def __eq__(self, other: object) -> bool:
        # Field-only comparison; the active site points back up the tree.
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.__dict__ == other.__dict__


class Note(Element):
    """Pitched element with an optional tie."""

    kind: Literal["note"] = "note"
    pitch: str = "B4"
    duration: Duration = Field(default_factory=Duration)
    tie: Optional[Tie] = None
    stem_direction: Optional[Literal["up", "down", "noStem", "double"]] = None


class Rest(Element):
    """Silent element; rests never carry ties."""

    kind: Literal["rest"] = "rest"
    duration: Duration = Field(default_factory=Duration)


class RenderTarget(Protocol):
    """Anything able to draw a stream, e.g. a GUI view."""

    def render(self, stream: Stream) -> None:
        """Redraw ``stream`` in place of whatever was shown before."""


class Stream(Element):
    """Ordered, mutable collection of elements, possibly nesting streams."""

    kind: Literal["stream"] = "stream"
    elements: List[StreamElement] = Field(default_factory=list)
    time_signature: Optional[TimeSignature] = None
    render_options: RenderOptions = Field(default_factory=RenderOptions)
    auto_beam: bool = True

    @model_validator(mode="after")
    def claim_elements(self) -> Stream:
        for element in self.elements:
            element._active_site = self
        return self

    def __len__(self) -> int:
        return len(self.elements)

    @property
    def is_stream(self) -> bool:
        return True

    @property
    def duration(self) -> Duration:
        """Return the summed length of the elements laid end to end."""

        total = sum(element.duration.quarter_length for element in self.elements)
        return Duration.from_quarter_length(total)

    def append(self, element: Element) -> None:
        """Add ``element`` at the end and make this stream its active site."""

        element._active_site = self
        self.elements.append(element)

    def pop(self) -> Optional[Element]:
        """Remove and return the last element, or ``None`` when empty."""

        if not self.elements:
            return None
        element = self.elements.pop()
        if element._active_site is self:
            element._active_site = None
        return element

    def get(self, index: int) -> Optional[Element]:
        """Return the element at ``index`` (negative counts from the end)."""

        try:
            return self.elements[index]
        except IndexError:
            return None

    def last(self) -> Optional[Element]:
        return self.get(-1)

    def second_to_last(self) -> Optional[Element]:
        return self.get(-2)

    def has_sub_streams(self) -> bool:
        return any(element.is_stream for element in self.elements)

    def iter_elements(self) -> Iterator[Element]:
        """Yield a snapshot of the elements in order."""

        yield from list(self.elements)

    def active_time_signature(self) -> TimeSignature:
        """Return the meter governing this stream.

        The stream's own time signature wins, then the closest one found on
        the enclosing sites, then the most recent measure carrying one.
        Streams without any meter fall back to 4/4.
        """

        site: Optional[Stream] = self
        while site is not None:
            if site.time_signature is not None:
                return site.time_signature
            site = site.active_site
        for element in reversed(self.elements):
            if isinstance(element, Stream) and element.time_signature is not None:
                return element.time_signature
        return TimeSignature()

    def redraw(self, target: RenderTarget) -> RenderTarget:
        """Render this stream into ``target`` and hand the target back."""

        target.render(self)
        return target


class Measure(Stream):
    """One bar of music inside a part."""

    kind: Literal["measure"] = "measure"


class Part(Stream):
    """A single voice or instrument, usually a stream of measures."""

    kind: Literal["part"] = "part"


class Score(Stream):
    """Top-level container of parts."""

    kind: Literal["score"] = "score"


StreamElement = Annotated[
    Union[Note, Rest, Stream, Measure, Part, Score],
    Field(discriminator="kind"),
]

for _model in (Stream, Measure, Part, Score):
    _model.model_rebuild()
