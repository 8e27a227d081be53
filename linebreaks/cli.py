"""Command-line interface for linebreaks.

Responsibilities:
- Expose user-facing commands for transforming text and inspecting word lists.
- Convert CLI arguments into `LineBreaksConfig` and run the engine.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_report_summary, echo_word_lists, exit_with_command_error
from .config import ConfigLoader, LineBreaksConfig, LineBreaksConfigBuilder
from .engine import LineBreaks
from .errors import StageError
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="linebreaks",
    no_args_is_help=True,
    help="Insert non-breaking spaces where lines should not break.",
)


def _load_config_builder(config_path: Path | None) -> LineBreaksConfigBuilder:
    """Load a YAML config builder when requested and map failures to stage errors."""

    if config_path is None:
        return ConfigLoader.builder_from_env()

    try:
        return ConfigLoader.builder_from_yaml(config_path)
    except FileNotFoundError as exc:
        raise StageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise StageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_config(
    config_path: Path | None, lang: str | None, nbsp: str | None
) -> LineBreaksConfig:
    """Resolve effective config from YAML or environment plus explicit CLI overrides."""

    builder = _load_config_builder(config_path)
    if lang is not None:
        builder.with_language(lang)
    if nbsp is not None:
        builder.with_nbsp(nbsp)
    try:
        return builder.build()
    except ValueError as exc:
        raise StageError(
            stage="config",
            detail=str(exc),
            hint="Check `--lang` and `--nbsp` values.",
        ) from exc


def _read_input(input_path: Path | None) -> str:
    """Read source text from a file, or from stdin when no path or `-` is given."""

    if input_path is None or str(input_path) == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StageError(
            stage="input",
            detail=f"Failed to read input `{input_path}`: {exc}",
            hint="Provide an existing UTF-8 text file or pipe text via stdin.",
        ) from exc


def _write_output(out_path: Path | None, text: str) -> None:
    """Write transformed text to a file, or to stdout when no path is given."""

    if out_path is None:
        typer.echo(text, nl=False)
        return
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise StageError(
            stage="output",
            detail=f"Failed to write output `{out_path}`: {exc}",
            hint="Verify the output directory is writable.",
        ) from exc


@app.command("transform")
def transform_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="UTF-8 text file to transform; omit or use `-` for stdin."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write transformed text to this file instead of stdout."),
    ] = None,
    lang: Annotated[
        str | None,
        typer.Option("--lang", help="Language code selecting weak words and shortcuts."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with word lists."),
    ] = None,
    nbsp: Annotated[
        str | None,
        typer.Option(
            "--nbsp",
            help="Marker to insert: `entity` (&nbsp;), `unicode` (U+00A0), or literal text.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log each pass and print replacement counts to stderr."),
    ] = False,
) -> None:
    """Insert non-breaking-space markers into text."""

    run_logger = RunLogger() if verbose else None
    try:
        config = _resolve_config(config_file, lang, nbsp)
        text = _read_input(input_path)
        report = LineBreaks(config, run_logger=run_logger).transform_with_report(text)
        _write_output(out, report.text)
    except Exception as exc:
        if run_logger is not None:
            stage = exc.stage if isinstance(exc, StageError) else "transform"
            run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("transform", exc)

    if verbose:
        echo_report_summary(report)


@app.command("lists")
def lists_command(
    lang: Annotated[
        str | None,
        typer.Option("--lang", help="Language code to resolve word lists for."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with word lists."),
    ] = None,
    nbsp: Annotated[
        str | None,
        typer.Option("--nbsp", help="Marker used when showing built-in shortcuts."),
    ] = None,
) -> None:
    """Show the weak words, units, and shortcuts resolved for a language."""

    try:
        config = _resolve_config(config_file, lang, nbsp)
    except Exception as exc:
        exit_with_command_error("lists", exc)

    resolved_lang = config.resolve_language(None)
    echo_word_lists(
        resolved_lang,
        config.resolve_weak_words(resolved_lang),
        config.resolve_units(),
        config.resolve_shortcuts(resolved_lang),
    )


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
