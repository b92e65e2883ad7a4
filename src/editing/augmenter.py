"""Augmentation and diminution of every duration in a stream."""
from __future__ import annotations

import logging
from typing import List

from notation.models import RenderTarget, Stream

from .buttons import ButtonSpec, augmenter_button_specs

logger = logging.getLogger(__name__)


class Augmenter:
    """Rescale a stream's rhythm while keeping the notated bar length."""

    def __init__(self, stream: Stream, render_target: RenderTarget | None = None) -> None:
        self._stream = stream
        self.render_target = render_target

    @property
    def stream(self) -> Stream:
        return self._stream

    def perform_change(self, scale_factor: float, target: Stream | None = None) -> None:
        """Multiply every leaf duration under ``target`` by ``scale_factor``.

        Nested streams are scaled recursively and any time signature met
        along the way has its denominator divided by the factor. Only the
        outermost call (the one without an explicit ``target``) redraws.
        """

        redraw = False
        if target is None:
            redraw = True
            target = self._stream
            if scale_factor <= 0:
                logger.warning("Scaling durations by non-positive factor %s", scale_factor)
        for element in target.iter_elements():
            if isinstance(element, Stream):
                self.perform_change(scale_factor, element)
            else:
                element.duration.quarter_length *= scale_factor
        if target.time_signature is not None:
            target.time_signature.denominator *= 1 / scale_factor
        if redraw:
            logger.debug("Scaled %d elements by %s", len(target), scale_factor)
            if self.render_target is not None:
                self.render_target = target.redraw(self.render_target)

    def make_smaller(self) -> None:
        self.perform_change(0.5)

    def make_larger(self) -> None:
        self.perform_change(2.0)

    def button_specs(self) -> List[ButtonSpec]:
        return augmenter_button_specs()

    def handle_button(self, value: str) -> None:
        """Route an augmenter button press to the matching change."""

        if value == "smaller":
            self.make_smaller()
        elif value == "larger":
            self.make_larger()
        else:
            raise ValueError(f"Unknown augmenter button {value!r}")


__all__ = ["Augmenter"]
