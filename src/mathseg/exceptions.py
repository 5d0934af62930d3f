"""Exception hierarchy for the segmentation and rendering layers."""

from __future__ import annotations


class MathsegError(RuntimeError):
    """Base exception for mathseg failures."""


class TypesettingError(MathsegError):
    """Raised when the math typesetter rejects a segment.

    The render adapter always catches it and falls back to the raw content.
    """


class ConfigurationError(MathsegError):
    """Raised when a configuration file cannot be loaded or validated."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigurationError",
    "MathsegError",
    "TypesettingError",
    "exception_hint",
    "exception_messages",
]
