"""Diagnostic abstractions shared across the segmentation pipeline."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Protocol, runtime_checkable


logger = logging.getLogger(__name__)

_PREVIEW_LENGTH = 40


@runtime_checkable
class DiagnosticEmitter(Protocol):
    """Interface used to surface warnings, errors, and structured events."""

    debug_enabled: bool

    def warning(self, message: str, exc: BaseException | None = None) -> None: ...

    def error(self, message: str, exc: BaseException | None = None) -> None: ...

    def event(self, name: str, payload: Mapping[str, Any]) -> None: ...


class NullEmitter:
    """Emitter that ignores every diagnostic."""

    debug_enabled: bool = False

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        return

    def error(self, message: str, exc: BaseException | None = None) -> None:
        return

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        return


class LoggingEmitter:
    """Emitter that forwards diagnostics to the standard logging module."""

    def __init__(
        self, *, logger_obj: logging.Logger | None = None, debug_enabled: bool = False
    ) -> None:
        self._logger = logger_obj or logger
        self.debug_enabled = debug_enabled

    def warning(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.warning(message, exc_info=exc)
        else:
            self._logger.warning(message)

    def error(self, message: str, exc: BaseException | None = None) -> None:
        if exc is not None:
            self._logger.error(message, exc_info=exc)
        else:
            self._logger.error(message)

    def event(self, name: str, payload: Mapping[str, Any]) -> None:
        message = format_event_message(name, payload)
        if message:
            self._logger.info(message)
            return
        self._logger.debug("diagnostic event %s: %s", name, dict(payload))


def _preview(value: object) -> str:
    text = " ".join(str(value).split())
    if len(text) > _PREVIEW_LENGTH:
        return text[: _PREVIEW_LENGTH - 1] + "…"
    return text


def format_event_message(name: str, payload: Mapping[str, Any]) -> str | None:
    """Return a human-friendly summary for selected diagnostic events."""
    data = dict(payload)

    if name == "dropped_text":
        text = data.get("text") or ""
        return f"Dropped text between grouped equations: '{_preview(text)}'"

    if name == "unbalanced_delimiters":
        remainder = data.get("remainder") or ""
        return f"Unterminated math delimiter, kept as text: '{_preview(remainder)}'"

    if name == "latex_issue":
        code = data.get("code") or "unknown"
        message = data.get("message") or ""
        return f"LaTeX issue [{code}]: {message}" if message else f"LaTeX issue [{code}]"

    if name == "render_fallback":
        content = data.get("content") or "<empty>"
        reason = data.get("reason")
        suffix = f" ({reason})" if reason else ""
        return f"Rendered math as plain text: '{_preview(content)}'{suffix}"

    return None


__all__ = [
    "DiagnosticEmitter",
    "LoggingEmitter",
    "NullEmitter",
    "format_event_message",
]
