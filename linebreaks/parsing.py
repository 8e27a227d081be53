"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations

from typing import Iterable, Mapping


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def split_word_list(value: str | Iterable[str]) -> tuple[str, ...]:
    """Split a comma-delimited string or copy a sequence of words.

    Tokens are not trimmed, so surrounding whitespace stays significant.
    Empty tokens (``"a,,b"`` or a trailing comma) are dropped: an empty unit
    would otherwise match every digit followed by a space.

    Raises:
        ValueError: If a sequence item is not a string.
    """

    if isinstance(value, str):
        tokens: Iterable[object] = value.split(",")
    else:
        tokens = value

    words: list[str] = []
    for token in tokens:
        if not isinstance(token, str):
            raise ValueError(f"Word list items must be strings, got `{token!r}`.")
        if token:
            words.append(token)
    return tuple(words)


def build_shortcut_map(phrases: Iterable[str], nbsp: str) -> dict[str, str]:
    """Map each phrase to itself with every ordinary space replaced by `nbsp`."""

    return {phrase: phrase.replace(" ", nbsp) for phrase in split_word_list(phrases)}


def copy_shortcut_map(shortcuts: Mapping[object, object]) -> dict[str, str]:
    """Copy an explicit phrase mapping, validating string keys and values.

    Raises:
        ValueError: If a phrase or replacement is not a non-empty string.
    """

    copied: dict[str, str] = {}
    for phrase, replacement in shortcuts.items():
        if not isinstance(phrase, str) or not phrase:
            raise ValueError(f"Shortcut phrases must be non-empty strings, got `{phrase!r}`.")
        if not isinstance(replacement, str):
            raise ValueError(
                f"Shortcut replacement for `{phrase}` must be a string, got `{replacement!r}`."
            )
        copied[phrase] = replacement
    return copied
