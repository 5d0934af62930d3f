"""Decide whether each math segment renders inline or as its own block."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from .segments import ContentSegment, MathSegment


_BLOCK_MARKERS = ("\\begin{", "\\left")


def resolve_display_mode(segment: MathSegment, *, force_display: bool = False) -> MathSegment:
    """Return a copy of ``segment`` with its display mode resolved.

    Grouped systems, explicit ``$$`` payloads and content carrying an
    environment or a ``\\left`` delimiter always render as blocks. Callers may
    force block layout but can never downgrade a block to inline math.
    """
    display = (
        force_display
        or segment.grouped
        or segment.display_hint
        or any(marker in segment.content for marker in _BLOCK_MARKERS)
    )
    return replace(segment, display_mode=display)


def resolve_display_modes(
    segments: Sequence[ContentSegment], *, force_display: bool = False
) -> list[ContentSegment]:
    """Resolve the display mode of every math segment in ``segments``."""
    return [
        resolve_display_mode(segment, force_display=force_display)
        if isinstance(segment, MathSegment)
        else segment
        for segment in segments
    ]


__all__ = ["resolve_display_mode", "resolve_display_modes"]
