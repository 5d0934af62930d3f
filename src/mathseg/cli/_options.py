"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer


INPUT_PANEL = "Input"
PIPELINE_PANEL = "Pipeline"
OUTPUT_PANEL = "Output"

TextArgument = Annotated[
    str,
    typer.Argument(
        metavar="TEXT",
        help="Raw content string, or '-' to read it from standard input.",
        rich_help_panel=INPUT_PANEL,
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="YAML file holding segmentation options.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=INPUT_PANEL,
    ),
]

ForceDisplayOption = Annotated[
    bool,
    typer.Option(
        "--force-display",
        help="Render every math segment as a centred block.",
        rich_help_panel=PIPELINE_PANEL,
    ),
]

MarkdownOption = Annotated[
    bool,
    typer.Option(
        "--markdown",
        help="Split **bold** and *italic* emphasis into formatted segments.",
        rich_help_panel=PIPELINE_PANEL,
    ),
]

UnicodeSymbolsOption = Annotated[
    bool,
    typer.Option(
        "--unicode-symbols",
        help="Convert Unicode math glyphs (±, ≤, ²...) to LaTeX commands.",
        rich_help_panel=PIPELINE_PANEL,
    ),
]

JsonOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Print the segments as a JSON array instead of a table.",
        rich_help_panel=OUTPUT_PANEL,
    ),
]
