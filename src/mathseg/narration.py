"""Spacing repair for text destined for speech synthesis.

Narration scripts generated for audio and video playback often lose the
spaces around punctuation and between sentences (``"first.Then"``). A speech
engine reads such runs as one word, so the text is normalised before it is
sent out. The rules apply in a fixed order and the result is stable: running
:func:`normalize_narration` on its own output changes nothing.
"""

from __future__ import annotations

import re


_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"([a-z])([A-Z])"), r"\1 \2"),
    (re.compile(r"([.,!?:;])([a-zA-Z])"), r"\1 \2"),
    (re.compile(r"([a-zA-Z])\("), r"\1 ("),
    (re.compile(r"\)([a-zA-Z])"), r") \1"),
    (re.compile(r"\s+"), " "),
)


def normalize_narration(text: str | None) -> str:
    """Return ``text`` with missing word spacing restored for narration."""
    if not text:
        return ""
    result = text
    for pattern, replacement in _RULES:
        result = pattern.sub(replacement, result)
    return result.strip()


__all__ = ["normalize_narration"]
