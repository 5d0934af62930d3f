"""Configuration model for the segmentation pipeline.

SegmentationConfig

`force_display` (`bool`)
: Render every math segment as a centred block. Useful for layouts that never
  mix math into a line of prose. It can only promote segments to display
  mode, never demote them.

`format_markdown` (`bool`)
: Split text segments carrying ``**bold**`` or ``*italic*`` emphasis into
  formatted segments with pre-rendered HTML.

`convert_unicode_symbols` (`bool`)
: Replace Unicode math glyphs (``±``, ``≤``, ``²``...) inside math segments
  with their LaTeX commands before sanitisation.

`display_delimiters` (`bool`)
: Recognise ``$$...$$`` as explicit display math. When disabled, every ``$``
  is treated as a single inline delimiter.

`lint` (`bool`)
: Run the LaTeX diagnostics on every finished math segment and forward the
  issues to the diagnostic emitter.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
import yaml

from .exceptions import ConfigurationError


class SegmentationConfig(BaseModel):
    """Options controlling a segmentation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    force_display: bool = False
    format_markdown: bool = False
    convert_unicode_symbols: bool = False
    display_delimiters: bool = True
    lint: bool = True


def load_config(path: str | Path) -> SegmentationConfig:
    """Load a :class:`SegmentationConfig` from a YAML mapping on disk."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file '{config_path}'.") from exc

    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in configuration file '{config_path}'.") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping, "
            f"got {type(data).__name__}."
        )

    try:
        return SegmentationConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in '{config_path}'.") from exc


__all__ = ["SegmentationConfig", "load_config"]
