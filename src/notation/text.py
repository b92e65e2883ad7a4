"""Compact single-line text rendering of streams for views and logs."""
from __future__ import annotations

from .models import Element, Note, Rest, Stream

EMPTY_MEASURE = "-"


def describe_element(element: Element) -> str:
    """Return a token such as ``B4:quarter.~`` or ``r:half``."""

    if isinstance(element, Stream):
        return describe_stream(element)
    duration = element.duration  # type: ignore[attr-defined]
    if duration.type == "complex":
        length = f"{duration.quarter_length:g}ql"
    else:
        length = duration.type + "." * duration.dots
    if isinstance(element, Rest):
        return f"r:{length}"
    if not isinstance(element, Note):
        return length
    token = f"{element.pitch}:{length}"
    if element.tie is None:
        return token
    if element.tie.type in ("continue", "stop"):
        token = "~" + token
    if element.tie.type in ("start", "continue"):
        token = token + "~"
    return token


def describe_stream(stream: Stream) -> str:
    """Render ``stream`` with measures separated by barlines.

    A leading ``[3/4]`` shows the stream's own time signature and a closing
    ``||`` marks a final barline on the last measure.
    """

    pieces = []
    if stream.time_signature is not None:
        pieces.append(f"[{stream.time_signature.ratio_string}]")
    if stream.has_sub_streams():
        bars = [describe_element(child) or EMPTY_MEASURE for child in stream.iter_elements()]
        pieces.append(" | ".join(bars))
        last = stream.last()
        if isinstance(last, Stream) and last.render_options.right_barline == "end":
            pieces.append("||")
    else:
        pieces.extend(describe_element(child) for child in stream.iter_elements())
    return " ".join(pieces)


__all__ = ["describe_element", "describe_stream"]
