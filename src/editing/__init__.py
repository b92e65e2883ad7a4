"""Rhythm entry widgets that edit notation streams in place."""

from .actions import ActionId, EditMode, UnknownActionError, new_element
from .augmenter import Augmenter
from .buttons import ButtonSpec, augmenter_button_specs, build_button_specs
from .rhythm_chooser import DEFAULT_VALUES, RhythmChooser

__all__ = [
    "ActionId",
    "Augmenter",
    "ButtonSpec",
    "DEFAULT_VALUES",
    "EditMode",
    "RhythmChooser",
    "UnknownActionError",
    "augmenter_button_specs",
    "build_button_specs",
    "new_element",
]
