"""Shared pytest fixtures for the full linebreaks test suite."""

from __future__ import annotations

import os

import pytest

from linebreaks.engine import LineBreaks


@pytest.fixture(autouse=True)
def _isolate_linebreaks_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `LINEBREAKS_*` variables from leaking into CLI tests."""

    for key in list(os.environ):
        if key.startswith("LINEBREAKS_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def engine() -> LineBreaks:
    """Provide an engine with built-in word lists and the `&nbsp;` marker."""

    return LineBreaks()
