"""Descriptors for the buttons the rhythm widgets expose.

Labels are SMuFL code points (Bravura Text) written as HTML entities so
that web front ends can use them verbatim; :attr:`ButtonSpec.text`
decodes them for toolkits that expect plain strings.
"""
from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

SIZE_RATIOS = {"normal": 1.0, "small": 0.5, "sm": 0.5}
SMALL_BUTTON_CLASS = "btButtonSm"

_TAG_PATTERN = re.compile(r"<[^>]+>")

VALUE_MAPPINGS = {
    "whole": "&#xEB9B;&#xE1D2;",
    "half": "&#xEB9B;&#xE1D3;",
    "quarter": "&#xEB9B;&#xE1D5;",
    "eighth": "&#xEB9B;&#xE1D7;",
    "16th": "&#xEB9B;&#xE1D9;",
    "32nd": "&#xEB9B;&#xE1DB;",
    "addMeasure": "&#xE031;",
    "dot": "&#xEB9B;&#xE1E7;",
    "undo": "&#x232B;",
    "rest_whole": "&#xE4F4;",
    "rest_half": "&#xE4F5;",
    "rest_quarter": "&#xE4E5;",
    "rest_eighth": "&#xE4E6;",
    "rest_16th": "&#xE4E7;",
    "rest_32nd": "&#xE4E8;",
}

AUGMENTER_LABELS = {
    "smaller": "Make Smaller",
    "larger": "Make Larger",
}


def size_ratio_for(size: str) -> float:
    """Translate a widget size name into its scaling ratio."""

    try:
        return SIZE_RATIOS[size]
    except KeyError:
        raise ValueError(f"Unsupported widget size {size!r}") from None


@dataclass(frozen=True)
class ButtonSpec:
    """Everything a front end needs to draw one button."""

    value: str
    label: str
    style: str | None = None
    css_classes: Tuple[str, ...] = field(default=("btButton",))

    @property
    def text(self) -> str:
        """Return the label with markup stripped and entities decoded."""

        return html.unescape(_TAG_PATTERN.sub("", self.label))


def label_for(value: str, size_ratio: float = 1.0) -> str:
    if value == "tie":
        offset = -20 * size_ratio
        return f'<span style="position: relative; top: {offset:g}px;">&#xE1FD;</span>'
    return VALUE_MAPPINGS.get(value, value)


def style_for(value: str, size_ratio: float = 1.0) -> str | None:
    if value == "undo":
        return f"font-family: serif; font-size: {30 * size_ratio:g}pt; top: -{8 * size_ratio:g}px;"
    return None


def build_button_specs(values: Iterable[str], *, size: str = "normal") -> List[ButtonSpec]:
    """Describe one button per value, in order, for a widget of ``size``."""

    ratio = size_ratio_for(size)
    classes: Tuple[str, ...] = ("btButton",)
    if ratio != 1.0:
        classes = ("btButton", SMALL_BUTTON_CLASS)
    return [
        ButtonSpec(
            value=str(value),
            label=label_for(str(value), ratio),
            style=style_for(str(value), ratio),
            css_classes=classes,
        )
        for value in values
    ]


def augmenter_button_specs() -> List[ButtonSpec]:
    return [
        ButtonSpec(value=value, label=label, css_classes=("augmenterButton",))
        for value, label in AUGMENTER_LABELS.items()
    ]


__all__ = [
    "ButtonSpec",
    "VALUE_MAPPINGS",
    "augmenter_button_specs",
    "build_button_specs",
    "label_for",
    "size_ratio_for",
    "style_for",
]
