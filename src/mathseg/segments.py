"""Typed render instructions produced by the segmentation pipeline.

A raw content string is turned into an ordered list of segments. Each segment
is one of three frozen variants sharing a ``kind`` discriminator:

`TextSegment`
: Plain prose. ``separator`` marks the single-space segment inserted by the
  spacing pass between two adjacent non-math segments.

`MathSegment`
: A LaTeX payload stripped of its delimiters. ``display_mode`` decides
  between inline and block rendering. ``grouped`` and ``display_hint`` record
  where the segment came from (equation grouping, explicit ``$$`` delimiters)
  so later passes can resolve the display mode without re-parsing.

`FormattedSegment`
: A markdown emphasis piece together with its pre-rendered inline HTML.

Bookkeeping flags do not take part in equality, so two segments compare equal
when they would render the same way.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias


class SegmentKind(str, Enum):
    """Discriminator shared by every segment variant."""

    TEXT = "text"
    MATH = "math"
    FORMATTED = "formatted"


@dataclass(frozen=True, slots=True)
class TextSegment:
    """Plain text rendered in the normal reading flow."""

    content: str
    separator: bool = field(default=False, compare=False)

    @property
    def kind(self) -> SegmentKind:
        return SegmentKind.TEXT


@dataclass(frozen=True, slots=True)
class MathSegment:
    """LaTeX payload handed to the typesetter."""

    content: str
    display_mode: bool = False
    grouped: bool = field(default=False, compare=False)
    display_hint: bool = field(default=False, compare=False)

    @property
    def kind(self) -> SegmentKind:
        return SegmentKind.MATH


@dataclass(frozen=True, slots=True)
class FormattedSegment:
    """Markdown emphasis with its inline HTML rendering."""

    content: str
    html: str

    @property
    def kind(self) -> SegmentKind:
        return SegmentKind.FORMATTED


ContentSegment: TypeAlias = TextSegment | MathSegment | FormattedSegment

SEPARATOR = TextSegment(" ", separator=True)


def segment_to_dict(segment: ContentSegment) -> dict[str, object]:
    """Return a JSON-friendly mapping describing ``segment``."""
    payload: dict[str, object] = {"kind": segment.kind.value, "content": segment.content}
    match segment:
        case MathSegment(display_mode=display_mode):
            payload["display_mode"] = display_mode
        case FormattedSegment(html=html):
            payload["html"] = html
        case TextSegment():
            pass
    return payload


__all__ = [
    "SEPARATOR",
    "ContentSegment",
    "FormattedSegment",
    "MathSegment",
    "SegmentKind",
    "TextSegment",
    "segment_to_dict",
]
