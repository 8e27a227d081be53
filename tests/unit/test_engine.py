"""Unit tests for the `LineBreaks` transform pipeline."""

from __future__ import annotations

import io

import pytest

from linebreaks.config import LineBreaksConfig, LineBreaksConfigBuilder
from linebreaks.engine import LineBreaks
from linebreaks.telemetry.logger import RunLogger


def test_weak_word_gets_marker_after_it(engine: LineBreaks) -> None:
    """English article should be glued to the following word."""

    assert engine.transform("I saw a dog", "en") == "I saw a&nbsp;dog"


def test_capitalized_weak_word_at_sentence_start(engine: LineBreaks) -> None:
    """Sentence-initial capitalized weak word should be glued as well."""

    assert engine.transform("A dog ran", "en") == "A&nbsp;dog ran"


def test_consecutive_weak_words_are_all_glued(engine: LineBreaks) -> None:
    """Each weak word in a run should get its own marker."""

    assert engine.transform("go to a shop", "en") == "go to&nbsp;a&nbsp;shop"


def test_units_attach_to_preceding_number(engine: LineBreaks) -> None:
    """Default units should stay with the number before them."""

    assert engine.transform("10 km", "en") == "10&nbsp;km"
    assert engine.transform("100km", "en") == "100km"
    assert engine.transform("It was 20 °C", "en") == "It was 20&nbsp;°C"


def test_digit_groups_are_joined(engine: LineBreaks) -> None:
    """Grouped digits of a large number should not break."""

    assert engine.transform("9 999 999", "en") == "9&nbsp;999&nbsp;999"


def test_czech_shortcut_is_collapsed(engine: LineBreaks) -> None:
    """Internal shortcut spaces become markers while surrounding spaces stay."""

    assert engine.transform("to je s. r. o. firma", "cs") == "to je s.&nbsp;r.&nbsp;o. firma"


def test_whitespace_is_collapsed_before_weak_words(engine: LineBreaks) -> None:
    """Tabs should become a single space before weak-word matching runs."""

    assert engine.transform("a\t\tb", "en") == "a&nbsp;b"
    assert engine.transform("I  saw \t a   dog", "en") == "I saw a&nbsp;dog"


def test_czech_text_with_multibyte_characters(engine: LineBreaks) -> None:
    """Markers should be placed without corrupting neighbouring characters."""

    result = engine.transform("Přišel s kamarádem a řekl že ano", "cs")

    assert result == "Přišel s&nbsp;kamarádem a&nbsp;řekl že&nbsp;ano"


def test_plain_text_is_unchanged(engine: LineBreaks) -> None:
    """Text without anything to rewrite should pass through untouched."""

    text = "Hello world.\nNothing here, really!"

    assert engine.transform(text, "en") == text


@pytest.mark.parametrize(
    ("text", "lang"),
    [
        ("I saw a dog", "en"),
        ("The price is 9 999 999 km", "en"),
        ("to je s. r. o. firma", "cs"),
        ("Přišel s kamarádem a řekl že ano", "cs"),
        ("Der Hund und die Katze", "de"),
    ],
)
def test_transform_is_stable_when_run_twice(engine: LineBreaks, text: str, lang: str) -> None:
    """Already-marked text should not receive duplicate markers."""

    once = engine.transform(text, lang)

    assert engine.transform(once, lang) == once


def test_unknown_language_still_applies_units_and_digit_groups(engine: LineBreaks) -> None:
    """Missing language configuration should degrade to no-op word passes."""

    result = engine.transform("a 10 km walk of 1 000 m", "xx")

    assert result == "a 10&nbsp;km walk of 1&nbsp;000&nbsp;m"


def test_blank_language_falls_back_to_configured_default() -> None:
    """Blank `lang` should use the config default language."""

    engine = LineBreaks(LineBreaksConfigBuilder(language="cs").build())

    assert engine.transform("pes a kočka") == "pes a&nbsp;kočka"
    assert engine.transform("pes a kočka", "") == "pes a&nbsp;kočka"
    assert engine.transform("the dog", "") == "the dog"


def test_unicode_marker_is_inserted() -> None:
    """The `unicode` alias should insert U+00A0."""

    engine = LineBreaks(LineBreaksConfigBuilder(nbsp="unicode").build())

    assert engine.transform("I saw a dog 9 999") == "I saw a\u00a0dog 9\u00a0999"


def test_explicit_configuration_replaces_defaults() -> None:
    """Explicit weak words, units, and shortcuts should replace built-in ones."""

    config = (
        LineBreaksConfigBuilder(language="en", nbsp="~")
        .configure_weak_words("dog")
        .configure_units(["px"])
        .configure_shortcuts({"e. g.": "e.~g."})
        .build()
    )
    engine = LineBreaks(config)

    assert engine.transform("a dog ran e. g. 10 km or 10 px") == "a dog~ran e.~g. 10 km or 10~px"


def test_report_counts_each_pass(engine: LineBreaks) -> None:
    """Report should expose per-pass counts and the resolved language."""

    report = engine.transform_with_report("A  dog ran 10 km\tfor 1 000 s. r. o.", "cs")

    assert report.language == "cs"
    assert report.whitespace_collapses == 2
    assert report.unit_replacements == 1
    assert report.shortcut_replacements == 1
    assert report.digit_group_replacements == 1
    assert report.weak_word_replacements == 1
    assert report.total_markers == 4
    assert report.text == "A&nbsp;dog ran 10&nbsp;km for 1&nbsp;000 s.&nbsp;r.&nbsp;o."


def test_run_logger_receives_pass_events() -> None:
    """Injected logger should see start/complete events for every pass."""

    sink = io.StringIO()
    engine = LineBreaks(run_logger=RunLogger(sink=sink))

    engine.transform("10 km", "en")

    output = sink.getvalue()
    assert "[phase] level=INFO stage=collapse_tabs event=start lang=en" in output
    assert "stage=units event=complete replacements=1" in output
    assert "stage=digit_groups event=complete replacements=0" in output


def test_engine_rejects_invalid_config() -> None:
    """Engine should validate configs it did not build itself."""

    with pytest.raises(ValueError, match="ordinary spaces"):
        LineBreaks(LineBreaksConfig(nbsp=" "))
