"""Orchestrate the segmentation stages into a single pure call.

The stages run in a fixed order, each returning a new list:

``detect_math_spans`` → ``group_equations`` → ``sanitize_segments`` →
``resolve_display_modes`` → ``format_segments`` (optional) →
``normalize_spacing``.

Nothing is cached between calls, so a pipeline instance can be shared by
concurrent callers (for example a live preview re-segmenting on every
keystroke).
"""

from __future__ import annotations

import logging

from .config import SegmentationConfig
from .detection import detect_math_spans
from .diagnostics import DiagnosticEmitter, NullEmitter
from .display import resolve_display_modes
from .formatting import format_segments
from .grouping import group_equations
from .sanitizer import sanitize_segments
from .segments import ContentSegment, MathSegment
from .spacing import normalize_spacing
from .validation import lint_latex


logger = logging.getLogger(__name__)


class SegmentPipeline:
    """Turn raw content strings into ordered render instructions."""

    def __init__(
        self,
        config: SegmentationConfig | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self.config = config or SegmentationConfig()
        self.emitter = emitter or NullEmitter()

    def run(self, text: str | None, *, force_display: bool = False) -> list[ContentSegment]:
        """Segment ``text``; blank or missing input yields an empty list."""
        if not text or not text.strip():
            return []

        config = self.config
        spans = detect_math_spans(text, display_delimiters=config.display_delimiters)
        for span in spans:
            if span.unterminated:
                self.emitter.event("unbalanced_delimiters", {"remainder": span.text.strip()})

        segments = group_equations(spans, text, emitter=self.emitter)
        segments = sanitize_segments(segments, unicode_symbols=config.convert_unicode_symbols)
        segments = resolve_display_modes(
            segments, force_display=force_display or config.force_display
        )
        if config.format_markdown:
            segments = format_segments(segments)
        if config.lint:
            self._lint(segments)
        segments = normalize_spacing(segments)

        logger.debug("Segmented %d characters into %d segments", len(text), len(segments))
        return segments

    def _lint(self, segments: list[ContentSegment]) -> None:
        for segment in segments:
            if not isinstance(segment, MathSegment):
                continue
            for issue in lint_latex(segment.content):
                self.emitter.event(
                    "latex_issue",
                    {"code": issue.code, "message": issue.message, "content": segment.content},
                )


def segment_content(
    text: str | None,
    config: SegmentationConfig | None = None,
    *,
    force_display: bool = False,
    emitter: DiagnosticEmitter | None = None,
) -> list[ContentSegment]:
    """Segment ``text`` with a one-off :class:`SegmentPipeline`."""
    return SegmentPipeline(config, emitter=emitter).run(text, force_display=force_display)


__all__ = ["SegmentPipeline", "segment_content"]
