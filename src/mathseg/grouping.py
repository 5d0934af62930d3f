"""Merge independent equations found in one string into an aligned system."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from .detection import MathSpan
from .diagnostics import DiagnosticEmitter, NullEmitter
from .segments import ContentSegment, MathSegment, TextSegment


logger = logging.getLogger(__name__)

ALIGNMENT_ANCHOR = "&="
ROW_SEPARATOR = " \\\\ "
SYSTEM_OPENING = "\\left\\{\\begin{aligned} "
SYSTEM_CLOSING = " \\end{aligned}\\right."


def build_aligned_system(chunks: Sequence[str]) -> str:
    """Stack ``chunks`` as rows aligned on their first ``=`` sign."""
    rows = [chunk.strip().replace("=", ALIGNMENT_ANCHOR, 1) for chunk in chunks]
    return SYSTEM_OPENING + ROW_SEPARATOR.join(rows) + SYSTEM_CLOSING


def _joined_text(spans: Sequence[MathSpan]) -> str:
    return "".join(span.text for span in spans).strip()


def group_equations(
    spans: Sequence[MathSpan],
    source: str | None = None,
    *,
    emitter: DiagnosticEmitter | None = None,
) -> list[ContentSegment]:
    """Turn detector spans into text and math segments.

    Two or more delimited math candidates collapse into a single display
    ``MathSegment`` holding an aligned system; text before the first and after
    the last candidate is kept, text in between is dropped. A single
    candidate is emitted in place with its surrounding text. Without any
    candidate the trimmed ``source`` (or the joined spans) becomes one text
    segment.
    """
    emitter = emitter or NullEmitter()
    math_positions = [index for index, span in enumerate(spans) if span.is_math]

    if not math_positions:
        text = source.strip() if source is not None else _joined_text(spans)
        return [TextSegment(text)] if text else []

    delimited = [spans[index] for index in math_positions if spans[index].delimited]
    if len(delimited) >= 2:
        first, last = math_positions[0], math_positions[-1]
        for span in spans[first:last]:
            if not span.is_math and span.text.strip():
                logger.debug("Dropping text between grouped equations: %r", span.text)
                emitter.event("dropped_text", {"text": span.text.strip()})

        segments: list[ContentSegment] = []
        leading = _joined_text(spans[:first])
        if leading:
            segments.append(TextSegment(leading))
        segments.append(
            MathSegment(
                build_aligned_system([span.text for span in delimited]),
                display_mode=True,
                grouped=True,
            )
        )
        trailing = _joined_text(spans[last + 1 :])
        if trailing:
            segments.append(TextSegment(trailing))
        return segments

    segments = []
    for span in spans:
        if span.is_math:
            segments.append(MathSegment(span.text.strip(), display_hint=span.display))
            continue
        text = span.text.strip()
        if text:
            segments.append(TextSegment(text))
    return segments


__all__ = [
    "ALIGNMENT_ANCHOR",
    "ROW_SEPARATOR",
    "build_aligned_system",
    "group_equations",
]
