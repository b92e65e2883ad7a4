import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

os.environ.setdefault("KIVY_NO_ARGS", "1")
os.environ.setdefault("KIVY_NO_CONSOLELOG", "1")

from notation.models import Measure, Part, RenderOptions, Stream, TimeSignature  # noqa: E402


class RecordingTarget:
    """Render target that remembers every stream drawn into it."""

    def __init__(self) -> None:
        self.rendered = []

    def render(self, stream: Stream) -> None:
        self.rendered.append(stream)


@pytest.fixture()
def recording_target() -> RecordingTarget:
    return RecordingTarget()


@pytest.fixture()
def flat_stream() -> Stream:
    return Stream()


@pytest.fixture()
def measured_part() -> Part:
    measure = Measure(render_options=RenderOptions(measure_index=0, right_barline="end"))
    return Part(time_signature=TimeSignature(numerator=4, denominator=4), elements=[measure])
