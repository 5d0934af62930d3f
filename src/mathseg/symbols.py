"""Map Unicode math glyphs onto their LaTeX commands."""

from __future__ import annotations

import re


_SYMBOL_MAP = {
    "±": "\\pm ",
    "×": "\\times ",
    "÷": "\\div ",
    "√": "\\sqrt ",
    "∞": "\\infty ",
    "≤": "\\leq ",
    "≥": "\\geq ",
    "≠": "\\neq ",
    "≈": "\\approx ",
    "→": "\\rightarrow ",
    "←": "\\leftarrow ",
    "⇒": "\\Rightarrow ",
    "∈": "\\in ",
    "∉": "\\notin ",
    "∪": "\\cup ",
    "∩": "\\cap ",
    "⊂": "\\subset ",
    "⊆": "\\subseteq ",
    "·": "\\cdot ",
    "α": "\\alpha ",
    "β": "\\beta ",
    "γ": "\\gamma ",
    "δ": "\\delta ",
    "θ": "\\theta ",
    "λ": "\\lambda ",
    "μ": "\\mu ",
    "π": "\\pi ",
    "σ": "\\sigma ",
    "Σ": "\\Sigma ",
    "φ": "\\phi ",
    "ω": "\\omega ",
    "Δ": "\\Delta ",
}

_SUPERSCRIPT_DIGITS = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
}

_SUBSCRIPT_DIGITS = {
    "₀": "0",
    "₁": "1",
    "₂": "2",
    "₃": "3",
    "₄": "4",
    "₅": "5",
    "₆": "6",
    "₇": "7",
    "₈": "8",
    "₉": "9",
}

_SYMBOL_PATTERN = re.compile("|".join(re.escape(symbol) for symbol in _SYMBOL_MAP))
_SUPERSCRIPT_PATTERN = re.compile(f"[{''.join(_SUPERSCRIPT_DIGITS)}]+")
_SUBSCRIPT_PATTERN = re.compile(f"[{''.join(_SUBSCRIPT_DIGITS)}]+")


def _script(marker: str, digits: str) -> str:
    return f"{marker}{digits}" if len(digits) == 1 else f"{marker}{{{digits}}}"


def convert_unicode_symbols(text: str) -> str:
    """Replace Unicode operators, Greek letters and script digits with LaTeX.

    Runs of script digits are grouped, so ``x²³`` becomes ``x^{23}``. The
    output never contains a mapped glyph, which makes the conversion
    idempotent.
    """
    if not text:
        return ""
    result = _SYMBOL_PATTERN.sub(lambda match: _SYMBOL_MAP[match.group(0)], text)
    result = _SUPERSCRIPT_PATTERN.sub(
        lambda match: _script("^", "".join(_SUPERSCRIPT_DIGITS[c] for c in match.group(0))),
        result,
    )
    return _SUBSCRIPT_PATTERN.sub(
        lambda match: _script("_", "".join(_SUBSCRIPT_DIGITS[c] for c in match.group(0))),
        result,
    )


__all__ = ["convert_unicode_symbols"]
