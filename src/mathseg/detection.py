"""Locate math-bearing substrings inside raw content strings.

Two strategies are applied, in order:

1. Explicit delimiters. The string is scanned left to right for ``$...$``
   pairs (and ``$$...$$`` pairs when display delimiters are enabled). Content
   between a pair is a math candidate, everything else is text. An unmatched
   opener turns the rest of the string into a final text span.

2. Trigger tokens. Only when no delimiter pair exists, the string is searched
   for the first raw LaTeX trigger (``\\frac``, ``\\left``...). Prose before
   the trigger is text, everything from the trigger onwards is math.

Both scans are pure functions of their input; the module-level patterns are
only used through stateless ``re`` calls.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import re


logger = logging.getLogger(__name__)

TRIGGER_TOKENS: tuple[str, ...] = (
    "\\left",
    "\\begin{",
    "\\frac",
    "\\sqrt",
    "\\(",
    "\\[",
    "\\pm",
    "\\times",
    "\\\\",
    "$",
)

# A dollar sign preceded by a backslash is a literal currency sign.
_TRIGGER_PATTERN = re.compile(
    "|".join(
        r"(?<!\\)\$" if token == "$" else re.escape(token) for token in TRIGGER_TOKENS
    )
)


@dataclass(frozen=True, slots=True)
class MathSpan:
    """Candidate span produced by the detector."""

    is_math: bool
    text: str
    delimited: bool = False
    display: bool = False
    unterminated: bool = False


def _is_escaped(source: str, index: int) -> bool:
    backslashes = 0
    cursor = index - 1
    while cursor >= 0 and source[cursor] == "\\":
        backslashes += 1
        cursor -= 1
    return backslashes % 2 == 1


def _find_dollar(source: str, start: int, token: str = "$") -> int:
    """Return the index of the next unescaped ``token`` at or after ``start``."""
    index = source.find(token, start)
    while index != -1 and _is_escaped(source, index):
        index = source.find(token, index + 1)
    return index


def _scan_delimited(source: str, *, display_delimiters: bool) -> tuple[list[MathSpan], int]:
    spans: list[MathSpan] = []
    pairs = 0
    cursor = 0

    while True:
        opener = _find_dollar(source, cursor)
        if opener == -1:
            break

        token = "$$" if display_delimiters and source.startswith("$$", opener) else "$"
        closer = _find_dollar(source, opener + len(token), token)
        if closer == -1:
            remainder = source[cursor:]
            spans.append(MathSpan(False, remainder, unterminated=True))
            logger.debug("Unterminated %r delimiter at offset %d", token, opener)
            return spans, pairs

        if opener > cursor:
            spans.append(MathSpan(False, source[cursor:opener]))

        pairs += 1
        payload = source[opener + len(token) : closer].strip()
        if payload:
            spans.append(MathSpan(True, payload, delimited=True, display=token == "$$"))
        cursor = closer + len(token)

    if cursor < len(source):
        spans.append(MathSpan(False, source[cursor:]))
    return spans, pairs


def find_trigger(text: str) -> int:
    """Return the index of the earliest raw LaTeX trigger token, or ``-1``."""
    match = _TRIGGER_PATTERN.search(text)
    return match.start() if match else -1


def _scan_triggers(source: str) -> list[MathSpan]:
    index = find_trigger(source)
    if index == -1:
        return [MathSpan(False, source)]

    spans: list[MathSpan] = []
    leading = source[:index].strip()
    if leading:
        spans.append(MathSpan(False, leading))
    spans.append(MathSpan(True, source[index:].strip()))
    return spans


def detect_math_spans(text: str | None, *, display_delimiters: bool = True) -> list[MathSpan]:
    """Split ``text`` into ordered text and math candidate spans.

    The function is total: it never raises and never drops characters other
    than delimiter syntax and surrounding whitespace. Blank input yields an
    empty list.
    """
    if not text:
        return []
    source = text.strip()
    if not source:
        return []

    spans, pairs = _scan_delimited(source, display_delimiters=display_delimiters)
    if pairs:
        return spans
    return _scan_triggers(source)


__all__ = ["TRIGGER_TOKENS", "MathSpan", "detect_math_spans", "find_trigger"]
