"""Rich presenters for segment lists and LaTeX diagnostics."""

from __future__ import annotations

from collections.abc import Sequence
import json

from rich import box
from rich.table import Table
from rich.text import Text

from mathseg.segments import ContentSegment, MathSegment, SegmentKind, segment_to_dict
from mathseg.validation import LatexIssue

from .state import CLIState


_KIND_STYLES = {
    SegmentKind.TEXT: "white",
    SegmentKind.MATH: "cyan",
    SegmentKind.FORMATTED: "magenta",
}


def segments_to_json(segments: Sequence[ContentSegment]) -> str:
    """Serialise ``segments`` to an indented JSON array."""
    return json.dumps([segment_to_dict(segment) for segment in segments], indent=2)


def present_segments(state: CLIState, segments: Sequence[ContentSegment]) -> None:
    """Print ``segments`` as a table on the stdout console."""
    if not segments:
        state.console.print(Text("No segments.", style="dim"))
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Kind", no_wrap=True)
    table.add_column("Display", no_wrap=True)
    table.add_column("Content", overflow="fold")

    for index, segment in enumerate(segments, start=1):
        display = ""
        if isinstance(segment, MathSegment):
            display = "block" if segment.display_mode else "inline"
        content = repr(segment.content) if segment.content.isspace() else segment.content
        table.add_row(
            str(index),
            Text(segment.kind.value, style=_KIND_STYLES[segment.kind]),
            display,
            Text(content),
        )
    state.console.print(table)


def present_issues(state: CLIState, issues: Sequence[LatexIssue]) -> None:
    """Print LaTeX diagnostics, or a confirmation when there are none."""
    if not issues:
        state.console.print(Text("No LaTeX issues found.", style="green"))
        return

    table = Table(box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Code", style="bold red", no_wrap=True)
    table.add_column("Message", style="yellow")
    for issue in issues:
        table.add_row(issue.code, issue.message)
    state.console.print(table)


__all__ = ["present_issues", "present_segments", "segments_to_json"]
