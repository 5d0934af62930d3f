"""Typer application wiring for the mathseg CLI."""

from __future__ import annotations

from pathlib import Path
import sys

import typer

from mathseg.config import SegmentationConfig, load_config
from mathseg.exceptions import ConfigurationError
from mathseg.narration import normalize_narration
from mathseg.pipeline import SegmentPipeline
from mathseg.render import HtmlRenderAdapter, render_segments
from mathseg.segments import ContentSegment
from mathseg.validation import lint_latex

from ._options import (
    ConfigOption,
    ForceDisplayOption,
    JsonOption,
    MarkdownOption,
    TextArgument,
    UnicodeSymbolsOption,
)
from .diagnostics import CliEmitter, flush_diagnostics
from .presenter import present_issues, present_segments, segments_to_json
from .state import debug_enabled, emit_error, get_cli_state, reset_cli_state, set_cli_state


app = typer.Typer(
    help="Segment mixed prose and LaTeX into typed render instructions.",
    context_settings={"help_option_names": ["--help"]},
    no_args_is_help=True,
)


@app.callback()
def _app_root(
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug/--no-debug",
        help="Show full tracebacks when an unexpected error occurs.",
    ),
) -> None:
    reset_cli_state()
    set_cli_state(verbosity=verbose, debug=debug)


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read()
    return text


def _resolve_config(
    config_path: Path | None,
    *,
    markdown: bool,
    unicode_symbols: bool,
) -> SegmentationConfig:
    config = SegmentationConfig()
    if config_path is not None:
        try:
            config = load_config(config_path)
        except ConfigurationError as exc:
            emit_error(str(exc), exception=exc)
            raise typer.Exit(code=1) from exc

    overrides: dict[str, bool] = {}
    if markdown:
        overrides["format_markdown"] = True
    if unicode_symbols:
        overrides["convert_unicode_symbols"] = True
    return config.model_copy(update=overrides) if overrides else config


def _segment(
    text: str,
    config_path: Path | None,
    *,
    force_display: bool,
    markdown: bool,
    unicode_symbols: bool,
) -> list[ContentSegment]:
    config = _resolve_config(config_path, markdown=markdown, unicode_symbols=unicode_symbols)
    pipeline = SegmentPipeline(config, emitter=CliEmitter())
    return pipeline.run(_read_text(text), force_display=force_display)


@app.command()
def segment(
    text: TextArgument,
    config_path: ConfigOption = None,
    force_display: ForceDisplayOption = False,
    markdown: MarkdownOption = False,
    unicode_symbols: UnicodeSymbolsOption = False,
    as_json: JsonOption = False,
) -> None:
    """Split TEXT into text, math and formatted segments."""
    segments = _segment(
        text,
        config_path,
        force_display=force_display,
        markdown=markdown,
        unicode_symbols=unicode_symbols,
    )
    state = get_cli_state()
    if as_json:
        typer.echo(segments_to_json(segments))
    else:
        present_segments(state, segments)
    flush_diagnostics(state)


@app.command()
def render(
    text: TextArgument,
    config_path: ConfigOption = None,
    force_display: ForceDisplayOption = False,
    markdown: MarkdownOption = False,
    unicode_symbols: UnicodeSymbolsOption = False,
) -> None:
    """Segment TEXT and print the HTML produced by the reference adapter."""
    segments = _segment(
        text,
        config_path,
        force_display=force_display,
        markdown=markdown,
        unicode_symbols=unicode_symbols,
    )
    adapter = HtmlRenderAdapter(emitter=CliEmitter())
    typer.echo(render_segments(segments, adapter))
    flush_diagnostics()


@app.command()
def narrate(text: TextArgument) -> None:
    """Restore missing word spacing in TEXT for speech synthesis."""
    typer.echo(normalize_narration(_read_text(text)))


@app.command()
def lint(text: TextArgument) -> None:
    """Report structural LaTeX issues in TEXT."""
    issues = lint_latex(_read_text(text))
    present_issues(get_cli_state(), issues)
    if issues:
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point compatible with console scripts."""
    try:
        app()
    except typer.Exit:
        raise
    except KeyboardInterrupt as exc:
        if debug_enabled():
            raise
        emit_error("Operation cancelled by user.", exception=exc)
        raise typer.Exit(code=1) from exc
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - defensive catch-all
        state = get_cli_state()
        if state.show_tracebacks:
            from rich.traceback import Traceback

            tb = Traceback.from_exception(
                type(exc),
                exc,
                exc.__traceback__,
                show_locals=state.verbosity >= 2,
            )
            state.err_console.print(tb)
        else:
            emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc


__all__ = ["app", "main"]
