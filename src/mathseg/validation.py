"""Static checks that flag LaTeX likely to trip the typesetter.

The checks only report; they never rewrite content. They cover the failure
modes the sanitizer deliberately leaves alone, such as a ``\\left`` with no
``\\right`` at all.
"""

from __future__ import annotations

from dataclasses import dataclass
import re


_DISPLAY_DOLLARS = re.compile(r"(?<!\\)\$\$")
_SINGLE_DOLLAR = re.compile(r"(?<![\\$])\$(?!\$)")
_FRAC_PATTERN = re.compile(r"\\frac(?![A-Za-z])(?!\s*\{)")
_SQRT_PATTERN = re.compile(r"\\sqrt(?![A-Za-z])(?!\s*[{\[])")
_LEFT_PATTERN = re.compile(r"\\left(?![A-Za-z])")
_RIGHT_PATTERN = re.compile(r"\\right(?![A-Za-z])")
_OPEN_BRACE = re.compile(r"(?<!\\)\{")
_CLOSE_BRACE = re.compile(r"(?<!\\)\}")


@dataclass(frozen=True, slots=True)
class LatexIssue:
    """A single diagnostic raised by :func:`lint_latex`."""

    code: str
    message: str


def count_unescaped_dollars(text: str) -> int:
    """Return the number of single ``$`` characters that are not escaped."""
    return len(_SINGLE_DOLLAR.findall(text or ""))


def lint_latex(text: str | None) -> list[LatexIssue]:
    """Return the structural issues found in ``text``."""
    if not text:
        return []

    issues: list[LatexIssue] = []
    if count_unescaped_dollars(text) % 2:
        issues.append(
            LatexIssue("unbalanced_inline_dollars", "Unbalanced inline math delimiters ($)")
        )
    if len(_DISPLAY_DOLLARS.findall(text)) % 2:
        issues.append(
            LatexIssue("unbalanced_display_dollars", "Unbalanced display math delimiters ($$)")
        )
    if _FRAC_PATTERN.search(text):
        issues.append(
            LatexIssue(
                "frac_without_braces", "\\frac should be followed by {numerator}{denominator}"
            )
        )
    if _SQRT_PATTERN.search(text):
        issues.append(
            LatexIssue("sqrt_without_argument", "\\sqrt should be followed by {content} or [n]")
        )

    opened = len(_OPEN_BRACE.findall(text))
    closed = len(_CLOSE_BRACE.findall(text))
    if opened != closed:
        issues.append(
            LatexIssue("unbalanced_braces", f"{opened} opening vs {closed} closing braces")
        )

    lefts = len(_LEFT_PATTERN.findall(text))
    rights = len(_RIGHT_PATTERN.findall(text))
    if lefts != rights:
        issues.append(
            LatexIssue("left_right_mismatch", f"{lefts} \\left vs {rights} \\right delimiters")
        )
    return issues


__all__ = ["LatexIssue", "count_unescaped_dollars", "lint_latex"]
