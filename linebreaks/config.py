"""Configuration model and loaders for line-break processing.

Responsibilities:
- Hold per-language weak words and shortcuts plus the shared unit list.
- Resolve each list with deterministic precedence: explicit > built-in > empty.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `LineBreaksConfig`: immutable settings shared by every transform call.
- `LineBreaksConfigBuilder`: chainable setters producing a `LineBreaksConfig`.
- `ConfigLoader`: static construction helpers for YAML and environment input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import yaml

from .defaults import (
    DEFAULT_LANGUAGE,
    NBSP_ENTITY,
    default_shortcut_phrases,
    default_units,
    default_weak_words,
    resolve_nbsp_alias,
)
from .parsing import (
    build_shortcut_map,
    copy_shortcut_map,
    normalize_optional_string,
    split_word_list,
)


_EMPTY_SHORTCUTS: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class LineBreaksConfig:
    """Immutable word lists and defaults for one `LineBreaks` engine.

    Attributes:
        language: Language code used when a call does not pass one.
        nbsp: Non-breaking-space marker inserted into text.
        weak_words: Explicit weak words keyed by language code.
        shortcuts: Explicit phrase -> replacement maps keyed by language code.
        units: Explicit unit list, or `None` to use built-in units.
    """

    language: str = DEFAULT_LANGUAGE
    nbsp: str = NBSP_ENTITY
    weak_words: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    shortcuts: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    units: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        """Freeze nested collections so the config is safe to share."""

        object.__setattr__(
            self,
            "weak_words",
            MappingProxyType(
                {lang: split_word_list(words) for lang, words in self.weak_words.items()}
            ),
        )
        object.__setattr__(
            self,
            "shortcuts",
            MappingProxyType(
                {
                    lang: MappingProxyType(copy_shortcut_map(phrases))
                    for lang, phrases in self.shortcuts.items()
                }
            ),
        )
        if self.units is not None:
            object.__setattr__(self, "units", split_word_list(self.units))

    def validate(self) -> None:
        """Validate language and marker values before processing text."""

        if not isinstance(self.language, str) or not self.language.strip():
            raise ValueError("`language` must be a non-empty string.")
        if not isinstance(self.nbsp, str) or not self.nbsp:
            raise ValueError("`nbsp` must be a non-empty string.")
        if " " in self.nbsp or "\t" in self.nbsp:
            raise ValueError("`nbsp` must not contain ordinary spaces or tabs.")

    def resolve_language(self, lang: str | None) -> str:
        """Return `lang`, or the configured default language when blank."""

        if lang is None or normalize_optional_string(lang) is None:
            return self.language
        return lang

    def resolve_weak_words(self, lang: str) -> tuple[str, ...]:
        """Return explicit weak words for `lang`, else built-in ones, else empty."""

        if lang in self.weak_words:
            return self.weak_words[lang]
        return default_weak_words(lang)

    def resolve_units(self) -> tuple[str, ...]:
        """Return the explicit unit list, else the built-in one."""

        if self.units is not None:
            return self.units
        return default_units()

    def resolve_shortcuts(self, lang: str) -> Mapping[str, str]:
        """Return explicit shortcuts for `lang`, else built-in ones, else empty.

        Explicit replacements are returned untouched. Built-in phrases get
        every ordinary space replaced by the configured marker.
        """

        if lang in self.shortcuts:
            return self.shortcuts[lang]
        phrases = default_shortcut_phrases(lang)
        if not phrases:
            return _EMPTY_SHORTCUTS
        return MappingProxyType(build_shortcut_map(phrases, self.nbsp))


class LineBreaksConfigBuilder:
    """Chainable setters collecting explicit word lists before `build()`.

    Setters without a language use the builder's current default language.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, nbsp: str = NBSP_ENTITY) -> None:
        self._language = language
        self._nbsp = resolve_nbsp_alias(nbsp)
        self._weak_words: dict[str, tuple[str, ...]] = {}
        self._shortcut_maps: dict[str, dict[str, str]] = {}
        self._shortcut_phrases: dict[str, tuple[str, ...]] = {}
        self._units: tuple[str, ...] | None = None

    def _language_or_default(self, lang: str | None) -> str:
        return normalize_optional_string(lang) or self._language

    def with_language(self, language: str) -> LineBreaksConfigBuilder:
        """Set the default language for later setters and transform calls."""

        self._language = language
        return self

    def with_nbsp(self, nbsp: str) -> LineBreaksConfigBuilder:
        """Set the marker; `entity` and `unicode` are accepted as aliases."""

        self._nbsp = resolve_nbsp_alias(nbsp)
        return self

    def configure_weak_words(
        self, words: str | Iterable[str], lang: str | None = None
    ) -> LineBreaksConfigBuilder:
        """Set weak words from a list or a comma-delimited string."""

        self._weak_words[self._language_or_default(lang)] = split_word_list(words)
        return self

    def configure_shortcuts(
        self, shortcuts: Mapping[str, str] | Iterable[str], lang: str | None = None
    ) -> LineBreaksConfigBuilder:
        """Set shortcuts for a language.

        A mapping is used as-is: its values must already contain the desired
        markers. A plain list of phrases is converted like the built-in ones.
        """

        resolved_lang = self._language_or_default(lang)
        self._shortcut_maps.pop(resolved_lang, None)
        self._shortcut_phrases.pop(resolved_lang, None)
        if isinstance(shortcuts, Mapping):
            self._shortcut_maps[resolved_lang] = copy_shortcut_map(shortcuts)
        else:
            self._shortcut_phrases[resolved_lang] = split_word_list(shortcuts)
        return self

    def configure_units(self, units: str | Iterable[str]) -> LineBreaksConfigBuilder:
        """Set units from a list or a comma-delimited string."""

        self._units = split_word_list(units)
        return self

    def build(self) -> LineBreaksConfig:
        """Create a validated immutable config."""

        shortcuts: dict[str, dict[str, str]] = dict(self._shortcut_maps)
        for lang, phrases in self._shortcut_phrases.items():
            shortcuts[lang] = build_shortcut_map(phrases, self._nbsp)
        config = LineBreaksConfig(
            language=self._language,
            nbsp=self._nbsp,
            weak_words=dict(self._weak_words),
            shortcuts=shortcuts,
            units=self._units,
        )
        config.validate()
        return config


class ConfigLoader:
    """Factory methods for creating `LineBreaksConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"language", "nbsp", "weak_words", "shortcuts", "units"})
    _WEAK_WORDS_ENV_PREFIX = "LINEBREAKS_WEAK_WORDS_"

    @staticmethod
    def from_yaml(path: Path) -> LineBreaksConfig:
        """Create a validated config from a YAML file."""

        return ConfigLoader.builder_from_yaml(path).build()

    @staticmethod
    def builder_from_yaml(path: Path) -> LineBreaksConfigBuilder:
        """Create a builder pre-filled from a YAML file, for further overrides."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._builder_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> LineBreaksConfig:
        """Create a validated config from environment variables."""

        return ConfigLoader.builder_from_env(env).build()

    @staticmethod
    def builder_from_env(env: Mapping[str, str] | None = None) -> LineBreaksConfigBuilder:
        """Create a builder pre-filled from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        builder = LineBreaksConfigBuilder(
            language=ConfigLoader._optional_env_string(env_map, "LINEBREAKS_LANGUAGE")
            or DEFAULT_LANGUAGE,
        )
        # not stripped: U+00A0 is itself whitespace
        nbsp = env_map.get("LINEBREAKS_NBSP")
        if nbsp:
            builder.with_nbsp(nbsp)
        units = ConfigLoader._optional_env_string(env_map, "LINEBREAKS_UNITS")
        if units is not None:
            builder.configure_units(units)
        for key in sorted(env_map):
            if not key.startswith(ConfigLoader._WEAK_WORDS_ENV_PREFIX):
                continue
            lang = key[len(ConfigLoader._WEAK_WORDS_ENV_PREFIX) :].lower()
            words = ConfigLoader._optional_env_string(env_map, key)
            if not lang or words is None:
                continue
            builder.configure_weak_words(words, lang)
        return builder

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _builder_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> LineBreaksConfigBuilder:
        """Build a config builder from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        language = (
            ConfigLoader._optional_non_empty_string(payload, "language") or DEFAULT_LANGUAGE
        )
        builder = LineBreaksConfigBuilder(language=language)
        nbsp = payload.get("nbsp")
        if nbsp is not None:
            if not isinstance(nbsp, str) or not nbsp:
                raise ValueError(f"{source_label} field `nbsp` must be a non-empty string.")
            builder.with_nbsp(nbsp)

        if payload.get("units") is not None:
            builder.configure_units(
                ConfigLoader._word_list(payload["units"], "units", source_label)
            )

        for lang, words in ConfigLoader._language_map(
            payload, "weak_words", source_label
        ).items():
            builder.configure_weak_words(
                ConfigLoader._word_list(words, f"weak_words.{lang}", source_label), lang
            )

        for lang, shortcuts in ConfigLoader._language_map(
            payload, "shortcuts", source_label
        ).items():
            if isinstance(shortcuts, Mapping):
                builder.configure_shortcuts(
                    ConfigLoader._string_map(shortcuts, f"shortcuts.{lang}", source_label),
                    lang,
                )
            else:
                builder.configure_shortcuts(
                    ConfigLoader._word_list(shortcuts, f"shortcuts.{lang}", source_label),
                    lang,
                )
        return builder

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject YAML keys the loader does not understand."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _language_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, Any]:
        """Read an optional mapping keyed by non-blank language codes."""

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping of languages.")

        normalized: dict[str, Any] = {}
        for raw_lang, value in raw.items():
            lang = normalize_optional_string(raw_lang)
            if lang is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank language.")
            normalized[lang] = value
        return normalized

    @staticmethod
    def _word_list(value: Any, field_name: str, source_label: str) -> tuple[str, ...]:
        """Read a comma-delimited string or a list of strings."""

        if isinstance(value, str):
            return split_word_list(value)
        if isinstance(value, list) and all(isinstance(item, str) for item in value):
            return split_word_list(value)
        raise ValueError(
            f"{source_label} field `{field_name}` must be a comma-separated string "
            "or a list of strings."
        )

    @staticmethod
    def _string_map(
        value: Mapping[Any, Any], field_name: str, source_label: str
    ) -> dict[str, str]:
        """Read a phrase -> replacement mapping with string keys and values."""

        try:
            return copy_shortcut_map(value)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{field_name}`: {exc}") from exc

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))
