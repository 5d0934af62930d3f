from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from mathseg.config import SegmentationConfig, load_config
from mathseg.exceptions import ConfigurationError


def test_defaults() -> None:
    config = SegmentationConfig()

    assert config.force_display is False
    assert config.format_markdown is False
    assert config.convert_unicode_symbols is False
    assert config.display_delimiters is True
    assert config.lint is True


def test_config_is_frozen() -> None:
    config = SegmentationConfig()

    with pytest.raises(ValidationError):
        config.force_display = True  # type: ignore[misc]


def test_load_config_reads_yaml_mapping(tmp_path: Path) -> None:
    path = tmp_path / "mathseg.yml"
    path.write_text("force_display: true\nformat_markdown: yes\n", encoding="utf-8")

    config = load_config(path)

    assert config.force_display is True
    assert config.format_markdown is True
    assert config.lint is True


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == SegmentationConfig()


@pytest.mark.parametrize(
    ("payload", "fragment"),
    [
        ("unknown_option: 1\n", "Invalid configuration"),
        ("- a\n- b\n", "must contain a mapping"),
        ("force_display: [unclosed\n", "Invalid YAML"),
    ],
)
def test_invalid_files_raise_configuration_error(
    tmp_path: Path, payload: str, fragment: str
) -> None:
    path = tmp_path / "bad.yml"
    path.write_text(payload, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=fragment):
        load_config(path)


def test_missing_file_raises_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Unable to read"):
        load_config(tmp_path / "absent.yml")
