"""Transform engine inserting non-breaking-space markers into text.

Responsibilities:
- Resolve word lists for a language from an immutable `LineBreaksConfig`.
- Run the rewrite passes in their fixed order and report replacement counts.

Key types:
- `LineBreaks`: the engine; safe to share because it keeps no per-call state.
- `LineBreaksReport`: transformed text plus per-pass diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import LineBreaksConfig
from .telemetry.logger import RunLogger
from .text.rules import (
    CollapseSpaces,
    CollapseTabs,
    DigitGroupSpacing,
    RewriteRule,
    ShortcutCollapsing,
    UnitSpacing,
    WeakWordSpacing,
)


@dataclass(frozen=True, slots=True)
class LineBreaksReport:
    """Structured output of one transform call.

    Attributes:
        text: Transformed text.
        language: Language code the word lists were resolved for.
        whitespace_collapses: Tab and multi-space runs collapsed to one space.
        weak_word_replacements: Markers inserted after weak words.
        unit_replacements: Markers inserted between a digit and a unit.
        shortcut_replacements: Shortcut phrases collapsed.
        digit_group_replacements: Markers inserted between digit groups.
    """

    text: str
    language: str
    whitespace_collapses: int = 0
    weak_word_replacements: int = 0
    unit_replacements: int = 0
    shortcut_replacements: int = 0
    digit_group_replacements: int = 0

    @property
    def total_markers(self) -> int:
        """Number of marker-inserting rewrites; a collapsed shortcut counts once."""

        return (
            self.weak_word_replacements
            + self.unit_replacements
            + self.shortcut_replacements
            + self.digit_group_replacements
        )


class LineBreaks:
    """Keep lines from breaking after weak words, inside shortcuts, and in numbers."""

    def __init__(
        self,
        config: LineBreaksConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with a validated config and an optional pass logger."""

        self.config = config if config is not None else LineBreaksConfig()
        self.config.validate()
        self._run_logger = run_logger

    def rules_for(self, lang: str) -> list[tuple[str, RewriteRule]]:
        """Return `(stage, rule)` pairs for a language in processing order."""

        nbsp = self.config.nbsp
        return [
            ("collapse_tabs", CollapseTabs()),
            ("collapse_spaces", CollapseSpaces()),
            ("weak_words", WeakWordSpacing(self.config.resolve_weak_words(lang), nbsp)),
            ("units", UnitSpacing(self.config.resolve_units(), nbsp)),
            ("shortcuts", ShortcutCollapsing(self.config.resolve_shortcuts(lang))),
            ("digit_groups", DigitGroupSpacing(nbsp)),
        ]

    def transform_with_report(self, text: str, lang: str | None = None) -> LineBreaksReport:
        """Transform text and return it with per-pass replacement counts."""

        resolved_lang = self.config.resolve_language(lang)
        counts: dict[str, int] = {}
        current = text
        for stage, rule in self.rules_for(resolved_lang):
            if self._run_logger is not None:
                self._run_logger.log_stage_start(stage, lang=resolved_lang)
            current, counts[stage] = rule.apply_with_count(current)
            if self._run_logger is not None:
                self._run_logger.log_stage_complete(stage, replacements=counts[stage])

        return LineBreaksReport(
            text=current,
            language=resolved_lang,
            whitespace_collapses=counts["collapse_tabs"] + counts["collapse_spaces"],
            weak_word_replacements=counts["weak_words"],
            unit_replacements=counts["units"],
            shortcut_replacements=counts["shortcuts"],
            digit_group_replacements=counts["digit_groups"],
        )

    def transform(self, text: str, lang: str | None = None) -> str:
        """Return `text` with non-breaking-space markers inserted.

        A blank `lang` falls back to the configured default language.
        """

        return self.transform_with_report(text, lang).text

    def line_breaks(self, text: str, lang: str | None = None) -> str:
        """Alias of `transform`."""

        return self.transform(text, lang)
