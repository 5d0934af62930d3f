from __future__ import annotations

import pytest

from mathseg.detection import MathSpan, detect_math_spans, find_trigger


def test_inline_pair_splits_prose_and_math() -> None:
    spans = detect_math_spans("Solve: $x^2 = 4$")

    assert spans == [
        MathSpan(False, "Solve: "),
        MathSpan(True, "x^2 = 4", delimited=True),
    ]


def test_text_between_and_after_pairs_is_kept() -> None:
    spans = detect_math_spans("Let $a$ and $b$ be reals.")

    assert [(span.is_math, span.text) for span in spans] == [
        (False, "Let "),
        (True, "a"),
        (False, " and "),
        (True, "b"),
        (False, " be reals."),
    ]


def test_double_dollars_mark_display_math() -> None:
    spans = detect_math_spans("Area: $$\\pi r^2$$ done")

    assert spans[1] == MathSpan(True, "\\pi r^2", delimited=True, display=True)
    assert spans[2] == MathSpan(False, " done")


def test_payload_whitespace_is_trimmed() -> None:
    spans = detect_math_spans("$  y = mx + b  $")

    assert spans == [MathSpan(True, "y = mx + b", delimited=True)]


def test_blank_pair_yields_no_candidate() -> None:
    spans = detect_math_spans("$ $ nothing here")

    assert spans == [MathSpan(False, " nothing here")]


def test_odd_dollar_count_keeps_remainder_as_text() -> None:
    spans = detect_math_spans("$a$ then $b")

    assert spans[0] == MathSpan(True, "a", delimited=True)
    assert spans[1] == MathSpan(False, " then $b", unterminated=True)
    assert "".join(span.text for span in spans) == "a then $b"


def test_escaped_dollar_is_literal_text() -> None:
    spans = detect_math_spans("Price \\$5 and \\$6")

    assert spans == [MathSpan(False, "Price \\$5 and \\$6")]


def test_escaped_dollar_inside_pair_does_not_close_it() -> None:
    spans = detect_math_spans("$\\$5 + x$")

    assert spans == [MathSpan(True, "\\$5 + x", delimited=True)]


def test_trigger_fallback_without_delimiters() -> None:
    spans = detect_math_spans("Simplify \\frac{1}{2}x + 3")

    assert spans == [
        MathSpan(False, "Simplify"),
        MathSpan(True, "\\frac{1}{2}x + 3"),
    ]


def test_trigger_absorbs_trailing_prose() -> None:
    spans = detect_math_spans("Use \\sqrt{2} then stop")

    assert spans[-1] == MathSpan(True, "\\sqrt{2} then stop")


def test_trigger_at_start_yields_only_math() -> None:
    spans = detect_math_spans("\\left( x \\right)")

    assert spans == [MathSpan(True, "\\left( x \\right)")]


def test_lone_dollar_falls_back_to_trigger_scan() -> None:
    spans = detect_math_spans("Cost $5 today")

    assert spans == [MathSpan(False, "Cost"), MathSpan(True, "$5 today")]


def test_plain_prose_is_a_single_text_span() -> None:
    assert detect_math_spans("  Hello world  ") == [MathSpan(False, "Hello world")]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None])
def test_blank_input_has_no_spans(text: str | None) -> None:
    assert detect_math_spans(text) == []


def test_display_delimiters_can_be_disabled() -> None:
    default = detect_math_spans("See $$x$$ here")
    single = detect_math_spans("See $$x$$ here", display_delimiters=False)

    assert default[1] == MathSpan(True, "x", delimited=True, display=True)
    assert single == [
        MathSpan(False, "See "),
        MathSpan(False, "x"),
        MathSpan(False, " here"),
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("plain words", -1),
        ("a \\left( b", 2),
        ("x \\sqrt{2} \\frac{1}{2}", 2),
        ("row one \\\\ row two", 8),
        ("the \\begin{cases} block", 4),
        ("cost \\$5", -1),
    ],
)
def test_find_trigger_reports_earliest_token(text: str, expected: int) -> None:
    assert find_trigger(text) == expected


def test_detection_is_repeatable() -> None:
    text = "First $a = 1$ then \\frac{1}{2} and $b$"

    assert detect_math_spans(text) == detect_math_spans(text)
