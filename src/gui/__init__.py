"""Kivy front end for the rhythm entry widgets."""

from .app import RhythmEditorApp, RhythmEditorRoot, default_part
from .rhythm_panel import AugmenterButtonBar, RhythmButtonBar, StreamView

__all__ = [
    "RhythmEditorApp",
    "RhythmEditorRoot",
    "default_part",
    "AugmenterButtonBar",
    "RhythmButtonBar",
    "StreamView",
]
