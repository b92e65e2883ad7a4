"""Kivy widgets that expose the rhythm chooser and augmenter as buttons."""
from __future__ import annotations

from functools import partial
from typing import Dict

from kivy.properties import NumericProperty, ObjectProperty, StringProperty
from kivy.uix.boxlayout import BoxLayout
from kivy.uix.button import Button
from kivy.uix.label import Label

from editing.augmenter import Augmenter
from editing.buttons import ButtonSpec
from editing.rhythm_chooser import RhythmChooser
from notation.models import Stream
from notation.text import describe_stream

BASE_FONT_SIZE = 28.0


class StreamView(Label):
    """Label that shows the text rendering of the last stream drawn into it."""

    render_count = NumericProperty(0)

    def render(self, stream: Stream) -> None:
        self.text = describe_stream(stream)
        self.render_count += 1


class RhythmButtonBar(BoxLayout):
    """Row of rhythm buttons wired to a :class:`RhythmChooser`."""

    chooser = ObjectProperty(None, allownone=True)
    font_name = StringProperty("Roboto")

    def __init__(self, chooser: RhythmChooser | None = None, **kwargs) -> None:
        kwargs.setdefault("orientation", "horizontal")
        super().__init__(**kwargs)
        self.buttons: Dict[str, Button] = {}
        if chooser is not None:
            self.bind_chooser(chooser)

    def bind_chooser(self, chooser: RhythmChooser) -> None:
        """Rebuild the buttons from ``chooser`` and route presses to it."""

        self.clear_widgets()
        self.buttons = {}
        self.chooser = chooser
        font_size = BASE_FONT_SIZE * chooser.size_ratio
        for spec in chooser.button_specs():
            button = self._make_button(spec, font_size)
            button.bind(on_release=partial(self._on_release, spec.value))
            self.add_widget(button)
            self.buttons[spec.value] = button

    def _make_button(self, spec: ButtonSpec, font_size: float) -> Button:
        return Button(text=spec.text, font_name=self.font_name, font_size=font_size)

    def _on_release(self, value: str, _button: Button) -> None:
        if self.chooser is not None:
            self.chooser.handle_button(value)


class AugmenterButtonBar(BoxLayout):
    """Buttons that shrink or stretch every duration through an :class:`Augmenter`."""

    augmenter = ObjectProperty(None, allownone=True)

    def __init__(self, augmenter: Augmenter | None = None, **kwargs) -> None:
        kwargs.setdefault("orientation", "horizontal")
        super().__init__(**kwargs)
        self.buttons: Dict[str, Button] = {}
        if augmenter is not None:
            self.bind_augmenter(augmenter)

    def bind_augmenter(self, augmenter: Augmenter) -> None:
        self.clear_widgets()
        self.buttons = {}
        self.augmenter = augmenter
        for spec in augmenter.button_specs():
            button = Button(text=spec.text)
            button.bind(on_release=partial(self._on_release, spec.value))
            self.add_widget(button)
            self.buttons[spec.value] = button

    def _on_release(self, value: str, _button: Button) -> None:
        if self.augmenter is not None:
            self.augmenter.handle_button(value)


__all__ = ["AugmenterButtonBar", "RhythmButtonBar", "StreamView"]
