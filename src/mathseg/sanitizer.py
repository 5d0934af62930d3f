"""Repair structurally fragile LaTeX before it reaches the typesetter.

The rewrite rules run in order:

1. Commands that lost their backslash or gained a stray ``\\f`` are restored:
   ``rac{`` and ``\\f\\frac`` become ``\\frac``, ``qrt{`` and ``\\f\\sqrt``
   become ``\\sqrt``, and the malformed ``\\f^1_{2}`` notation becomes
   ``\\frac{1}{2}``.
2. Nested or duplicated ``aligned`` environments collapse into one, and runs
   of four or more backslashes shrink to a single row break ``\\\\``.
3. ``\\left{`` becomes ``\\left\\{`` and ``\\right{`` becomes ``\\right\\{``
   (an unescaped brace is not a delimiter).
4. A ``\\right`` control word that is not followed by a delimiter receives a
   null one: ``\\right`` becomes ``\\right.``. Accepted delimiters are ``.``,
   ``)``, ``]``, ``}``, ``|`` and escaped delimiters such as ``\\}`` or
   ``\\rangle``. A row break (``\\right\\\\``) is not a delimiter.
5. Repeated alignment markers (``&&=``) collapse into a single ``&=``.

Every rule is idempotent, so ``sanitize_latex(sanitize_latex(x)) ==
sanitize_latex(x)`` for every string. A ``\\left`` without any matching
``\\right`` is *not* repaired; :mod:`mathseg.validation` reports it instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
import re

from .segments import ContentSegment, MathSegment
from .symbols import convert_unicode_symbols


_ESCAPED_DELIMITERS = (
    r"[{}|]",
    r"[lr](?:angle|vert|Vert|floor|ceil)",
    r"(?:[uU]p|[dD]own|[uU]pdown)arrow",
    r"[vV]ert",
    r"backslash",
)
_ESCAPED_DELIMITER = r"\\(?:" + "|".join(_ESCAPED_DELIMITERS) + ")"

_REWRITE_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"(?:\\f)+\\(frac|sqrt)"), r"\\\1"),
    (re.compile(r"(?:\\f)+\^(\d+)_\{([^}]+)\}"), r"\\frac{\1}{\2}"),
    (re.compile(r"(?:\\f)+\^(\d+)_([a-zA-Z0-9])"), r"\\frac{\1}{\2}"),
    (re.compile(r"(?:\\f)+_\{([^}]+)\}\^(\d+)"), r"\\frac{\2}{\1}"),
    (re.compile(r"(?:\\f)+_([a-zA-Z0-9])\^(\d+)"), r"\\frac{\2}{\1}"),
    (re.compile(r"(?<![\\A-Za-z])f?rac\{"), r"\\frac{"),
    (re.compile(r"(?<![\\A-Za-z])s?qrt([{\[])"), r"\\sqrt\1"),
    (
        re.compile(r"\\begin\{aligned\}(?:\s*\\begin\{aligned(?:at\}\{[^}]*)?\})+"),
        r"\\begin{aligned}",
    ),
    (re.compile(r"(?:\\end\{aligned(?:at)?\}\s*)+\\end\{aligned\}"), r"\\end{aligned}"),
    (re.compile(r"\\{4,}"), r"\\\\"),
    (re.compile(r"\\(left|right)\{"), r"\\\1\\{"),
    # ``\right`` followed by a letter is another control word (``\rightarrow``).
    (
        re.compile(r"\\right(?![A-Za-z.)\]}|])(?!" + _ESCAPED_DELIMITER + ")"),
        r"\\right.",
    ),
    (re.compile(r"&{2,}="), "&="),
)


def sanitize_latex(latex: str | None) -> str:
    """Return ``latex`` with every rewrite rule applied."""
    if not latex:
        return ""
    result = latex
    for pattern, replacement in _REWRITE_RULES:
        result = pattern.sub(replacement, result)
    return result


def sanitize_segments(
    segments: Sequence[ContentSegment],
    *,
    unicode_symbols: bool = False,
) -> list[ContentSegment]:
    """Return a new list where every math payload has been sanitised."""
    sanitized: list[ContentSegment] = []
    for segment in segments:
        if isinstance(segment, MathSegment):
            content = segment.content
            if unicode_symbols:
                content = convert_unicode_symbols(content)
            segment = replace(segment, content=sanitize_latex(content))
        sanitized.append(segment)
    return sanitized


__all__ = ["sanitize_latex", "sanitize_segments"]
