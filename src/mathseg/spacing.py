"""Restore word boundaries between adjacent non-math segments."""

from __future__ import annotations

from collections.abc import Sequence

from .segments import SEPARATOR, ContentSegment, MathSegment


def _needs_separator(previous: ContentSegment, current: ContentSegment) -> bool:
    if isinstance(previous, MathSegment) or isinstance(current, MathSegment):
        return False
    if not previous.content or not current.content:
        return False
    return not previous.content[-1].isspace() and not current.content[0].isspace()


def normalize_spacing(segments: Sequence[ContentSegment]) -> list[ContentSegment]:
    """Insert a single-space text segment where two non-math segments touch.

    Boundaries next to math are left alone: the renderer's margins space
    them and inline math must be able to abut punctuation.
    """
    spaced: list[ContentSegment] = []
    for segment in segments:
        if spaced and _needs_separator(spaced[-1], segment):
            spaced.append(SEPARATOR)
        spaced.append(segment)
    return spaced


__all__ = ["normalize_spacing"]
