import pytest
from pydantic import ValidationError

from notation.models import (
    Duration,
    Measure,
    Note,
    Part,
    Rest,
    Score,
    Stream,
    Tie,
    TimeSignature,
)


def test_duration_quarter_length_follows_type_and_dots():
    duration = Duration(type="half")
    assert duration.quarter_length == pytest.approx(2.0)

    duration.dots = 1
    assert duration.quarter_length == pytest.approx(3.0)

    duration.dots = 2
    assert duration.quarter_length == pytest.approx(3.5)


def test_setting_quarter_length_rederives_type_and_dots():
    duration = Duration(type="quarter", dots=1)

    duration.quarter_length *= 2
    assert duration.type == "half"
    assert duration.dots == 1

    duration.quarter_length = 0.125
    assert duration.type == "32nd"
    assert duration.dots == 0


def test_inexpressible_quarter_length_becomes_complex():
    duration = Duration.from_quarter_length(1.0 / 3.0)

    assert duration.type == "complex"
    assert duration.quarter_length == pytest.approx(1.0 / 3.0)

    duration.type = "eighth"
    assert duration.quarter_length == pytest.approx(0.5)


@pytest.mark.parametrize("payload", [{"dots": -1}, {"type": "quaver"}])
def test_duration_rejects_invalid_data(payload):
    with pytest.raises(ValidationError):
        Duration(**payload)


def test_tie_rejects_unknown_type():
    with pytest.raises(ValidationError):
        Tie(type="begin")


def test_time_signature_bar_duration_and_ratio():
    waltz = TimeSignature(numerator=3, denominator=4)
    assert waltz.bar_duration.quarter_length == pytest.approx(3.0)
    assert waltz.ratio_string == "3/4"

    compound = TimeSignature(numerator=6, denominator=8)
    assert compound.bar_duration.quarter_length == pytest.approx(3.0)
    assert compound.ratio_string == "6/8"


def test_stream_get_supports_negative_indices_and_misses():
    first, second = Note(pitch="C4"), Rest()
    stream = Stream(elements=[first, second])

    assert stream.get(0) is first
    assert stream.get(-1) is second
    assert stream.last() is second
    assert stream.second_to_last() is first
    assert stream.get(2) is None
    assert stream.get(-3) is None
    assert Stream().last() is None
    assert Stream(elements=[Note()]).second_to_last() is None


def test_append_and_pop_track_active_site():
    stream = Stream()
    note = Note()

    stream.append(note)
    assert len(stream) == 1
    assert note.active_site is stream

    popped = stream.pop()
    assert popped is note
    assert note.active_site is None
    assert stream.pop() is None
    assert len(stream) == 0


def test_construction_claims_elements():
    measure = Measure(elements=[Note()])
    part = Part(elements=[measure])

    assert measure.active_site is part
    assert measure.elements[0].active_site is measure
    assert part.has_sub_streams()
    assert not measure.has_sub_streams()


def test_class_tags_follow_inheritance():
    part = Part()

    assert part.is_class_or_subclass("Part")
    assert part.is_class_or_subclass("Stream")
    assert not part.is_class_or_subclass("Measure")
    assert Note().is_class_or_subclass("Element")
    assert part.is_stream
    assert not Note().is_stream


def test_stream_duration_sums_nested_elements():
    first = Measure(elements=[Note(duration=Duration(type="half")), Rest(duration=Duration(type="half"))])
    second = Measure(elements=[Note(duration=Duration(type="quarter", dots=1))])
    part = Part(elements=[first, second])

    assert first.duration.quarter_length == pytest.approx(4.0)
    assert part.duration.quarter_length == pytest.approx(5.5)
    assert Stream().duration.quarter_length == 0.0


def test_active_time_signature_lookup_order():
    part = Part(elements=[Measure()])
    assert part.active_time_signature().ratio_string == "4/4"

    measure_meter = TimeSignature(numerator=3, denominator=4)
    part.elements[0].time_signature = measure_meter
    assert part.active_time_signature() is measure_meter

    part_meter = TimeSignature(numerator=2, denominator=4)
    part.time_signature = part_meter
    assert part.active_time_signature() is part_meter

    score_meter = TimeSignature(numerator=5, denominator=8)
    score = Score(time_signature=score_meter, elements=[Part()])
    assert score.elements[0].active_time_signature() is score_meter


def test_redraw_renders_into_target(recording_target):
    stream = Stream(elements=[Note()])

    returned = stream.redraw(recording_target)

    assert returned is recording_target
    assert recording_target.rendered == [stream]


def test_equality_ignores_active_site():
    placed = Note(pitch="D4")
    Stream(elements=[placed])

    assert placed == Note(pitch="D4")
    assert placed != Note(pitch="E4")
    assert placed != Rest()
