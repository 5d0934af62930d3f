from __future__ import annotations

from mathseg.detection import MathSpan, detect_math_spans
from mathseg.grouping import build_aligned_system, group_equations
from mathseg.segments import MathSegment, TextSegment


SYSTEM = r"\left\{\begin{aligned} x + y &= 5 \\ x - y &= 1 \end{aligned}\right."


def test_build_aligned_system_anchors_first_equals() -> None:
    assert build_aligned_system(["x + y = 5", "x - y = 1"]) == SYSTEM


def test_only_the_first_equals_becomes_an_anchor() -> None:
    system = build_aligned_system(["a = b = c", "d = e"])

    assert "a &= b = c" in system
    assert "d &= e" in system


def test_chunk_without_equals_is_kept_verbatim() -> None:
    system = build_aligned_system(["x > 0", "y = 2"])

    assert r"\begin{aligned} x > 0 \\ y &= 2 \end{aligned}" in system


def test_two_equations_collapse_into_one_display_segment(emitter) -> None:
    text = "$x + y = 5$, $x - y = 1$"

    segments = group_equations(detect_math_spans(text), text, emitter=emitter)

    assert segments == [MathSegment(SYSTEM, display_mode=True)]
    assert segments[0].grouped is True
    assert emitter.named("dropped_text") == [{"text": ","}]


def test_three_equations_stack_in_order() -> None:
    text = "$a = 1$ $b = 2$ $c = 3$"

    (segment,) = group_equations(detect_math_spans(text), text)

    assert segment.content.count(r" \\ ") == 2
    assert segment.content.index("a &= 1") < segment.content.index("c &= 3")


def test_leading_and_trailing_text_survive_grouping(emitter) -> None:
    text = "Given $a = 1$ and $b = 2$ so done"

    segments = group_equations(detect_math_spans(text), text, emitter=emitter)

    assert segments[0] == TextSegment("Given")
    assert isinstance(segments[1], MathSegment) and segments[1].display_mode
    assert segments[2] == TextSegment("so done")
    assert emitter.named("dropped_text") == [{"text": "and"}]


def test_single_candidate_is_emitted_in_place() -> None:
    text = "Solve: $x^2 = 4$ quickly"

    segments = group_equations(detect_math_spans(text), text)

    assert segments == [
        TextSegment("Solve:"),
        MathSegment("x^2 = 4"),
        TextSegment("quickly"),
    ]


def test_display_hint_is_carried_from_double_dollars() -> None:
    text = "Area $$\\pi r^2$$"

    segments = group_equations(detect_math_spans(text), text)

    assert segments[1].display_hint is True
    assert segments[1].display_mode is False


def test_without_math_the_trimmed_source_is_one_text_segment() -> None:
    spans = [MathSpan(False, "  just words  ")]

    assert group_equations(spans, "  just words  ") == [TextSegment("just words")]


def test_without_source_the_spans_are_joined() -> None:
    spans = [MathSpan(False, "half "), MathSpan(False, "and half")]

    assert group_equations(spans) == [TextSegment("half and half")]


def test_blank_text_only_input_yields_nothing() -> None:
    assert group_equations([MathSpan(False, "   ")], "   ") == []
    assert group_equations([]) == []
