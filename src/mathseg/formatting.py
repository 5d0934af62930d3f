"""Markdown emphasis support for text segments.

Theory prose mixes LaTeX with light markdown: ``**bold**`` and ``*italic*``.
Plain text segments containing such emphasis are split into alternating
pieces; the emphasis pieces become :class:`~mathseg.segments.FormattedSegment`
instances whose HTML comes from Python-Markdown. Only asterisk emphasis is
recognised so that subscripts such as ``a_1`` never turn into italics.
"""

from __future__ import annotations

from collections.abc import Sequence
from html import escape
import logging
import re

from bs4 import BeautifulSoup
import markdown

from .exceptions import MathsegError
from .segments import ContentSegment, FormattedSegment, TextSegment


logger = logging.getLogger(__name__)

_EMPHASIS_PATTERN = re.compile(r"\*\*[^*]+\*\*|(?<!\*)\*[^*\s][^*]*\*(?!\*)")
# Tags Python-Markdown may legitimately produce for an emphasis piece.
_ALLOWED_TAGS = frozenset({"p", "strong", "em", "code"})


class MarkdownFormattingError(MathsegError):
    """Raised when Python-Markdown cannot render an emphasis piece."""


def has_emphasis(text: str) -> bool:
    """Return whether ``text`` contains asterisk emphasis."""
    return bool(text) and _EMPHASIS_PATTERN.search(text) is not None


def _escape_emphasis(source: str) -> str:
    marker = "**" if source.startswith("**") and source.endswith("**") else "*"
    inner = source[len(marker) : -len(marker)]
    return f"{marker}{escape(inner, quote=False)}{marker}"


def render_emphasis(source: str) -> str:
    """Render a markdown emphasis piece to inline HTML (without the ``<p>`` wrapper).

    Markup between the asterisks is escaped before conversion, and any tag
    other than plain emphasis produced by Markdown syntax (links, images) is
    unwrapped, so the result is always safe to embed verbatim.
    """
    try:
        html = markdown.markdown(_escape_emphasis(source))
    except Exception as exc:  # pragma: no cover - library-controlled
        raise MarkdownFormattingError(f"Failed to convert emphasis {source!r}: {exc}") from exc

    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(True):
        if tag.name in _ALLOWED_TAGS:
            tag.attrs = {}
        else:
            tag.unwrap()
    paragraph = soup.find("p")
    if paragraph is None:
        return html.strip()
    return paragraph.decode_contents().strip()


def split_emphasis(text: str) -> list[ContentSegment]:
    """Split ``text`` into plain and formatted pieces, preserving whitespace."""
    pieces: list[ContentSegment] = []
    cursor = 0
    for match in _EMPHASIS_PATTERN.finditer(text):
        if match.start() > cursor:
            pieces.append(TextSegment(text[cursor : match.start()]))
        source = match.group(0)
        pieces.append(FormattedSegment(source, render_emphasis(source)))
        cursor = match.end()
    if cursor < len(text):
        pieces.append(TextSegment(text[cursor:]))
    return pieces


def format_segments(segments: Sequence[ContentSegment]) -> list[ContentSegment]:
    """Expand text segments carrying markdown emphasis into formatted pieces."""
    formatted: list[ContentSegment] = []
    for segment in segments:
        if isinstance(segment, TextSegment) and not segment.separator and has_emphasis(
            segment.content
        ):
            try:
                formatted.extend(split_emphasis(segment.content))
            except MarkdownFormattingError as exc:
                logger.warning("Keeping emphasis as plain text: %s", exc)
                formatted.append(segment)
            continue
        formatted.append(segment)
    return formatted


__all__ = [
    "MarkdownFormattingError",
    "format_segments",
    "has_emphasis",
    "render_emphasis",
    "split_emphasis",
]
