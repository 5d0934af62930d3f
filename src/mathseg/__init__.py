"""Segment mixed prose and LaTeX into typed render instructions."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from mathseg.config import SegmentationConfig, load_config
from mathseg.detection import TRIGGER_TOKENS, MathSpan, detect_math_spans, find_trigger
from mathseg.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from mathseg.display import resolve_display_mode, resolve_display_modes
from mathseg.exceptions import ConfigurationError, MathsegError, TypesettingError
from mathseg.formatting import format_segments, split_emphasis
from mathseg.grouping import build_aligned_system, group_equations
from mathseg.narration import normalize_narration
from mathseg.pipeline import SegmentPipeline, segment_content
from mathseg.render import HtmlRenderAdapter, RenderAdapter, RenderedNode, render_segments
from mathseg.sanitizer import sanitize_latex, sanitize_segments
from mathseg.segments import (
    SEPARATOR,
    ContentSegment,
    FormattedSegment,
    MathSegment,
    SegmentKind,
    TextSegment,
)
from mathseg.spacing import normalize_spacing
from mathseg.symbols import convert_unicode_symbols
from mathseg.validation import LatexIssue, lint_latex


try:
    __version__ = _pkg_version("mathseg")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "SEPARATOR",
    "TRIGGER_TOKENS",
    "ConfigurationError",
    "ContentSegment",
    "DiagnosticEmitter",
    "FormattedSegment",
    "HtmlRenderAdapter",
    "LatexIssue",
    "LoggingEmitter",
    "MathSegment",
    "MathSpan",
    "MathsegError",
    "NullEmitter",
    "RenderAdapter",
    "RenderedNode",
    "SegmentKind",
    "SegmentPipeline",
    "SegmentationConfig",
    "TextSegment",
    "TypesettingError",
    "__version__",
    "build_aligned_system",
    "convert_unicode_symbols",
    "detect_math_spans",
    "find_trigger",
    "format_segments",
    "group_equations",
    "lint_latex",
    "load_config",
    "normalize_narration",
    "normalize_spacing",
    "render_segments",
    "resolve_display_mode",
    "resolve_display_modes",
    "sanitize_latex",
    "sanitize_segments",
    "segment_content",
    "split_emphasis",
]
