"""Route pipeline diagnostics to the terminal.

Informational events (such as text dropped while grouping equations) are shown
as they happen, and only with ``--verbose``. Problems with the content itself
(LaTeX issues, unterminated delimiters, render fallbacks) are held back until
the command has printed its result, then reported as warnings so they never
interleave with a table or JSON document.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mathseg.diagnostics import DiagnosticEmitter, format_event_message

from .state import CLIState, emit_error, emit_warning, get_cli_state, render_message


DEFERRED_EVENTS: tuple[str, ...] = ("unbalanced_delimiters", "latex_issue", "render_fallback")


class CliEmitter(DiagnosticEmitter):
    """Record pipeline events on the CLI state and surface them with rich."""

    def __init__(self, state: CLIState | None = None) -> None:
        self._state = state or get_cli_state()
        self.debug_enabled = self._state.show_tracebacks

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        emit_warning(message, exception=exc)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        emit_error(message, exception=exc)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        data = dict(payload)
        self._state.record_event(name, data)
        if name in DEFERRED_EVENTS:
            return
        message = format_event_message(name, data)
        if message:
            render_message("info", message)


def flush_diagnostics(state: CLIState | None = None) -> int:
    """Print held-back events as warnings and return how many were shown.

    Identical messages (the same issue found twice in one input) are reported
    once.
    """
    state = state or get_cli_state()
    seen: set[str] = set()
    for name in DEFERRED_EVENTS:
        for payload in state.consume_events(name):
            message = format_event_message(name, payload)
            if message and message not in seen:
                seen.add(message)
                emit_warning(message)
    return len(seen)


__all__ = ["DEFERRED_EVENTS", "CliEmitter", "flush_diagnostics"]
