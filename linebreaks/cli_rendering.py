"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
transform summaries, and resolved word-list listings.
"""

from __future__ import annotations

from typing import Mapping, NoReturn

import typer

from .engine import LineBreaksReport
from .errors import StageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, StageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_report_summary(report: LineBreaksReport) -> None:
    """Print per-pass replacement counts to stderr."""

    typer.echo(f"Language: {report.language}", err=True)
    typer.echo(f"Whitespace collapses: {report.whitespace_collapses}", err=True)
    typer.echo(f"Weak words: {report.weak_word_replacements}", err=True)
    typer.echo(f"Units: {report.unit_replacements}", err=True)
    typer.echo(f"Shortcuts: {report.shortcut_replacements}", err=True)
    typer.echo(f"Digit groups: {report.digit_group_replacements}", err=True)
    typer.echo(f"Total rewrites: {report.total_markers}", err=True)


def echo_word_lists(
    language: str,
    weak_words: tuple[str, ...],
    units: tuple[str, ...],
    shortcuts: Mapping[str, str],
) -> None:
    """Print resolved word lists for one language in a stable order."""

    typer.echo(f"Language: {language}")
    typer.echo(f"Weak words: {', '.join(weak_words) if weak_words else '(none)'}")
    typer.echo(f"Units: {', '.join(units) if units else '(none)'}")
    if not shortcuts:
        typer.echo("Shortcuts: (none)")
        return
    typer.echo("Shortcuts:")
    for phrase in sorted(shortcuts):
        typer.echo(f"  {phrase} -> {shortcuts[phrase]}")
