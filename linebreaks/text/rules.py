"""Deterministic rewrite passes that insert non-breaking-space markers.

Responsibilities:
- Provide composable rules applied in a fixed order by `LineBreaks`.
- Report how many replacements each rule performed, without keeping state.

Every rule only ever turns an ordinary space into the marker (or collapses
whitespace runs), so visible characters are never removed or reordered.
"""

from __future__ import annotations

import re
from typing import Iterable, Mapping, Protocol


class RewriteRule(Protocol):
    """Protocol for text rewrite rules."""

    def apply_with_count(self, text: str) -> tuple[str, int]:
        """Apply the rule and return rewritten text with its replacement count."""


class _CountingRule:
    """Shared `apply` shortcut for rules that implement `apply_with_count`."""

    def apply_with_count(self, text: str) -> tuple[str, int]:
        raise NotImplementedError

    def apply(self, text: str) -> str:
        """Apply the rule and return rewritten text only."""

        return self.apply_with_count(text)[0]


class CollapseTabs(_CountingRule):
    """Replace every run of horizontal tabs with a single space."""

    _TABS_RE = re.compile(r"\t+")

    def apply_with_count(self, text: str) -> tuple[str, int]:
        return self._TABS_RE.subn(" ", text)


class CollapseSpaces(_CountingRule):
    """Replace every run of two or more ordinary spaces with one space."""

    _SPACES_RE = re.compile(r"[ ]{2,}")

    def apply_with_count(self, text: str) -> tuple[str, int]:
        return self._SPACES_RE.subn(" ", text)


def process_weak_word(text: str, word: str, nbsp: str) -> tuple[str, int]:
    """Replace the space after each standalone occurrence of `word` with `nbsp`.

    The text is padded with one boundary space on each side so a word at the
    very start can match. A match whose trailing space is the end padding gets
    no marker, so the padding never reaches the output. Offsets
    are `str` indices, i.e. code points, so multi-byte characters are never
    split.

    Args:
        text: Text to scan.
        word: Exact, case-sensitive word to look for.
        nbsp: Marker that replaces the space after the word.

    Returns:
        Rewritten text and the number of inserted markers.
    """

    if not word:
        return text, 0

    padded = f" {text} "
    needle = f" {word} "
    last_space = len(padded) - 1
    position = 0
    count = 0
    while True:
        index = padded.find(needle, position)
        if index < 0:
            break
        space_index = index + 1 + len(word)
        if space_index == last_space:
            break
        padded = padded[:space_index] + nbsp + padded[space_index + 1 :]
        last_space += len(nbsp) - 1
        # position only grows
        position = space_index + len(nbsp)
        count += 1
    return padded[1:-1], count


def capitalize_first(word: str) -> str:
    """Upper-case only the first character, as at the start of a sentence."""

    return word[:1].upper() + word[1:]


class WeakWordSpacing(_CountingRule):
    """Glue each weak word to the following word.

    Every word is processed as given and again with its first character
    upper-cased.
    """

    def __init__(self, words: Iterable[str], nbsp: str) -> None:
        self.words = tuple(words)
        self.nbsp = nbsp

    def _variants(self, word: str) -> tuple[str, ...]:
        capitalized = capitalize_first(word)
        if capitalized == word:
            return (word,)
        return (word, capitalized)

    def apply_with_count(self, text: str) -> tuple[str, int]:
        total = 0
        for word in self.words:
            for variant in self._variants(word):
                text, count = process_weak_word(text, variant, self.nbsp)
                total += count
        return text, total


class UnitSpacing(_CountingRule):
    """Glue units to the digit right before them (`10 km` -> `10<nbsp>km`).

    Unit tokens are matched literally, so `°C` or `m²` never act as patterns.
    """

    def __init__(self, units: Iterable[str], nbsp: str) -> None:
        self.units = tuple(units)
        self.nbsp = nbsp
        self._patterns = [
            re.compile(f"([0-9]) ({re.escape(unit)})") for unit in self.units if unit
        ]

    def _replace(self, match: re.Match[str]) -> str:
        return f"{match.group(1)}{self.nbsp}{match.group(2)}"

    def apply_with_count(self, text: str) -> tuple[str, int]:
        total = 0
        for pattern in self._patterns:
            text, count = pattern.subn(self._replace, text)
            total += count
        return text, total


class ShortcutCollapsing(_CountingRule):
    """Replace literal shortcut phrases with their non-breaking form.

    Matching is plain, case-sensitive substring replacement.
    """

    def __init__(self, shortcuts: Mapping[str, str]) -> None:
        self.shortcuts = dict(shortcuts)

    def apply_with_count(self, text: str) -> tuple[str, int]:
        total = 0
        for phrase, replacement in self.shortcuts.items():
            if not phrase or phrase == replacement:
                continue
            count = text.count(phrase)
            if count:
                text = text.replace(phrase, replacement)
                total += count
        return text, total


class DigitGroupSpacing(_CountingRule):
    """Join digit groups of large numbers (`9 999 999` -> `9<nbsp>999<nbsp>999`)."""

    _DIGIT_GROUP_RE = re.compile(r"([0-9]) ([0-9])")

    def __init__(self, nbsp: str) -> None:
        self.nbsp = nbsp

    def _replace(self, match: re.Match[str]) -> str:
        return f"{match.group(1)}{self.nbsp}{match.group(2)}"

    def apply_with_count(self, text: str) -> tuple[str, int]:
        return self._DIGIT_GROUP_RE.subn(self._replace, text)
