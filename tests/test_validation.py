from __future__ import annotations

import pytest

from mathseg.validation import LatexIssue, count_unescaped_dollars, lint_latex


def _codes(text: str) -> list[str]:
    return [issue.code for issue in lint_latex(text)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "x^2 = 4",
        "\\frac{1}{2}",
        "\\frac {1}{2}",
        "\\sqrt{2} + \\sqrt[3]{x}",
        "\\left( x \\right)",
        "\\leftarrow \\rightarrow",
        "\\{a",
        "$x$ and $$y$$",
    ],
)
def test_clean_latex_has_no_issues(text: str) -> None:
    assert lint_latex(text) == []


@pytest.mark.parametrize(
    ("text", "code"),
    [
        ("$x", "unbalanced_inline_dollars"),
        ("$$x", "unbalanced_display_dollars"),
        ("\\frac12", "frac_without_braces"),
        ("\\sqrt2", "sqrt_without_argument"),
        ("{a", "unbalanced_braces"),
        ("\\left( x", "left_right_mismatch"),
    ],
)
def test_lint_reports_each_failure_mode(text: str, code: str) -> None:
    assert _codes(text) == [code]


def test_issue_messages_carry_counts() -> None:
    (issue,) = lint_latex("{{a}")

    assert issue == LatexIssue("unbalanced_braces", "2 opening vs 1 closing braces")


def test_escaped_dollars_are_not_counted() -> None:
    assert count_unescaped_dollars("\\$5 and $x$") == 2
    assert count_unescaped_dollars("$$x$$") == 0
