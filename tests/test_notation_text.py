from editing.rhythm_chooser import RhythmChooser
from notation.models import Duration, Measure, Note, Part, Rest, Stream, Tie, TimeSignature
from notation.text import describe_element, describe_stream


def test_describe_element_marks_dots_and_ties():
    assert describe_element(Note(pitch="C5", duration=Duration(type="half", dots=1))) == "C5:half."
    assert describe_element(Rest(duration=Duration(type="16th"))) == "r:16th"
    assert describe_element(Note(tie=Tie(type="start"))) == "B4:quarter~"
    assert describe_element(Note(tie=Tie(type="continue"))) == "~B4:quarter~"
    assert describe_element(Note(tie=Tie(type="stop"))) == "~B4:quarter"
    assert describe_element(Note(duration=Duration.from_quarter_length(0.3))) == "B4:0.3ql"


def test_describe_flat_stream():
    stream = Stream(elements=[Note(), Rest(duration=Duration(type="eighth"))])

    assert describe_stream(stream) == "B4:quarter r:eighth"
    assert describe_stream(Stream()) == ""


def test_describe_measured_part_after_editing():
    part = Part(
        time_signature=TimeSignature(numerator=2, denominator=4),
        elements=[Measure()],
    )
    chooser = RhythmChooser(part)
    for action in ("half", "tie", "quarter", "addMeasure"):
        chooser.dispatch(action)

    assert describe_stream(part) == "[2/4] B4:half~ | ~B4:quarter | - ||"
