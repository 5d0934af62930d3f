"""Render adapters materialising segment lists for a concrete surface.

The segmentation core only emits declarative segments. An adapter turns each
segment into a :class:`RenderedNode` and must never raise: when the math
typesetter rejects a payload, the raw LaTeX is shown in a distinct italic
style instead of leaving a hole in the page.

:class:`HtmlRenderAdapter` is the reference implementation. It typesets math
to MathML with ``latex2mathml`` unless another typesetter is injected.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from html import escape
import logging
from typing import Protocol, assert_never, runtime_checkable

from latex2mathml.converter import convert as latex2mathml_convert

from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import TypesettingError, exception_hint
from .segments import ContentSegment, FormattedSegment, MathSegment, SegmentKind, TextSegment


logger = logging.getLogger(__name__)

Typesetter = Callable[[str, bool], str]


@dataclass(frozen=True, slots=True)
class RenderedNode:
    """Markup produced for a single segment."""

    kind: SegmentKind
    markup: str
    block: bool = False
    fallback: bool = False


@runtime_checkable
class RenderAdapter(Protocol):
    """Contract every rendering surface implements."""

    def render(self, segment: ContentSegment) -> RenderedNode: ...


def mathml_typesetter(latex: str, display: bool) -> str:
    """Typeset ``latex`` to MathML."""
    return latex2mathml_convert(latex, display="block" if display else "inline")


class HtmlRenderAdapter:
    """Render segments to HTML snippets with MathML for the math."""

    def __init__(
        self,
        typesetter: Typesetter | None = None,
        *,
        emitter: DiagnosticEmitter | None = None,
    ) -> None:
        self._typesetter = typesetter or mathml_typesetter
        self._emitter = emitter or NullEmitter()

    def render(self, segment: ContentSegment) -> RenderedNode:
        match segment:
            case TextSegment(content=content):
                return RenderedNode(SegmentKind.TEXT, f"<span>{escape(content)}</span>")
            case FormattedSegment(html=html):
                return RenderedNode(
                    SegmentKind.FORMATTED, f'<span class="formatted">{html}</span>'
                )
            case MathSegment():
                return self._render_math(segment)
            case _:
                assert_never(segment)

    def _typeset(self, segment: MathSegment) -> str:
        try:
            return self._typesetter(segment.content, segment.display_mode)
        except Exception as exc:
            raise TypesettingError(
                f"Typesetter rejected {segment.content!r}: {exc}"
            ) from exc

    def _render_math(self, segment: MathSegment) -> RenderedNode:
        tag = "div" if segment.display_mode else "span"
        try:
            markup = self._typeset(segment)
        except TypesettingError as exc:
            logger.debug("Falling back to raw LaTeX", exc_info=exc)
            self._emitter.event(
                "render_fallback",
                {"content": segment.content, "reason": exception_hint(exc)},
            )
            return RenderedNode(
                SegmentKind.MATH,
                f'<{tag} class="math-fallback" style="font-style: italic">'
                f"{escape(segment.content)}</{tag}>",
                block=segment.display_mode,
                fallback=True,
            )

        css_class = "math math-display" if segment.display_mode else "math math-inline"
        return RenderedNode(
            SegmentKind.MATH,
            f'<{tag} class="{css_class}">{markup}</{tag}>',
            block=segment.display_mode,
        )


def render_segments(
    segments: Iterable[ContentSegment],
    adapter: RenderAdapter | None = None,
) -> str:
    """Render ``segments`` in order and join their markup."""
    active = adapter or HtmlRenderAdapter()
    return "".join(active.render(segment).markup for segment in segments)


__all__ = [
    "HtmlRenderAdapter",
    "RenderAdapter",
    "RenderedNode",
    "Typesetter",
    "mathml_typesetter",
    "render_segments",
]
