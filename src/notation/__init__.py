"""Notation package exposing the stream models edited by the rhythm widgets."""
from .models import (
    Duration,
    Element,
    Measure,
    Note,
    Part,
    RenderOptions,
    RenderTarget,
    Rest,
    Score,
    Stream,
    Tie,
    TimeSignature,
)
from .text import describe_stream

__all__ = [
    "Duration",
    "Element",
    "Measure",
    "Note",
    "Part",
    "RenderOptions",
    "RenderTarget",
    "Rest",
    "Score",
    "Stream",
    "Tie",
    "TimeSignature",
    "describe_stream",
]
