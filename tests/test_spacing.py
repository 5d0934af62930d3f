from __future__ import annotations

from mathseg.segments import SEPARATOR, FormattedSegment, MathSegment, TextSegment
from mathseg.spacing import normalize_spacing


def test_adjacent_text_segments_receive_a_separator() -> None:
    segments = [TextSegment("Hello"), FormattedSegment("**world**", "<strong>world</strong>")]

    result = normalize_spacing(segments)

    assert result == [segments[0], SEPARATOR, segments[1]]
    assert result[1].separator is True


def test_existing_whitespace_prevents_a_separator() -> None:
    trailing = [TextSegment("Hello "), TextSegment("world")]
    leading = [TextSegment("Hello"), TextSegment(" world")]

    assert normalize_spacing(trailing) == trailing
    assert normalize_spacing(leading) == leading


def test_math_boundaries_are_left_alone() -> None:
    segments = [TextSegment("Solve:"), MathSegment("x = 1"), TextSegment("now")]

    assert normalize_spacing(segments) == segments


def test_normalize_spacing_is_idempotent() -> None:
    segments = [
        TextSegment("a"),
        FormattedSegment("*b*", "<em>b</em>"),
        TextSegment("c"),
        MathSegment("d"),
        TextSegment("e"),
    ]

    once = normalize_spacing(segments)

    assert normalize_spacing(once) == once
    assert len(once) == 7


def test_empty_list_stays_empty() -> None:
    assert normalize_spacing([]) == []
