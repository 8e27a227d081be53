"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from linebreaks.cli_rendering import echo_report_summary, echo_word_lists, exit_with_command_error
from linebreaks.engine import LineBreaksReport
from linebreaks.errors import StageError


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = StageError(
        stage="config",
        detail="Config file not found: `missing.yml`.",
        hint="Provide an existing path via `--config <path.yaml>`.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("transform", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "transform failed at stage `config`" in captured.err
    assert "Hint: Provide an existing path via `--config <path.yaml>`." in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("lists", RuntimeError("unexpected failure"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "lists failed: unexpected failure" in captured.err


def test_echo_report_summary_writes_counts_to_stderr(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Summary should keep stdout free for transformed text."""

    echo_report_summary(
        LineBreaksReport(text="x", language="cs", weak_word_replacements=2, unit_replacements=1)
    )

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Language: cs" in captured.err
    assert "Weak words: 2" in captured.err
    assert "Total rewrites: 3" in captured.err


def test_echo_word_lists_sorts_shortcuts(capsys: pytest.CaptureFixture[str]) -> None:
    """Listing should print every list, with shortcuts in stable order."""

    echo_word_lists("cs", ("a", "i"), (), {"b. c.": "b.~c.", "a. s.": "a.~s."})

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Language: cs",
        "Weak words: a, i",
        "Units: (none)",
        "Shortcuts:",
        "  a. s. -> a.~s.",
        "  b. c. -> b.~c.",
    ]
