"""Kivy application shell combining a stream view with the rhythm widgets."""
from __future__ import annotations

from kivy.app import App
from kivy.properties import ObjectProperty
from kivy.uix.boxlayout import BoxLayout

from editing.augmenter import Augmenter
from editing.rhythm_chooser import RhythmChooser
from notation.models import Measure, Part, Stream, TimeSignature

from .rhythm_panel import AugmenterButtonBar, RhythmButtonBar, StreamView


class RhythmEditorRoot(BoxLayout):
    """Top-level widget stacking the stream view above the button rows."""

    stream_view = ObjectProperty(None)
    rhythm_bar = ObjectProperty(None)
    augmenter_bar = ObjectProperty(None)

    def __init__(self, stream: Stream, *, size: str = "normal", **kwargs) -> None:
        kwargs.setdefault("orientation", "vertical")
        super().__init__(**kwargs)
        self.stream_view = StreamView()
        self.chooser = RhythmChooser(stream, self.stream_view, size=size)
        self.augmenter = Augmenter(stream, self.stream_view)
        self.rhythm_bar = RhythmButtonBar(self.chooser)
        self.augmenter_bar = AugmenterButtonBar(self.augmenter)
        for widget in (self.stream_view, self.rhythm_bar, self.augmenter_bar):
            self.add_widget(widget)
        self.stream_view.render(stream)


def default_part() -> Part:
    """Return a 4/4 part holding one empty, final measure."""

    measure = Measure()
    measure.render_options.right_barline = "end"
    return Part(time_signature=TimeSignature(numerator=4, denominator=4), elements=[measure])


class RhythmEditorApp(App):
    """Standalone rhythm entry demo."""

    def __init__(self, stream: Stream | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._stream = stream if stream is not None else default_part()

    def build(self) -> RhythmEditorRoot:
        return RhythmEditorRoot(self._stream)


def main() -> None:  # pragma: no cover - interactive entry point
    RhythmEditorApp().run()


__all__ = ["RhythmEditorApp", "RhythmEditorRoot", "default_part", "main"]
