"""Built-in word lists used when a language has no explicit configuration.

Responsibilities:
- Ship default weak words, shortcut phrases, and units.
- Split the comma-delimited defaults once and memoize the immutable result.
"""

from __future__ import annotations

from functools import lru_cache

from .parsing import split_word_list


NBSP_ENTITY = "&nbsp;"
NBSP_UNICODE = "\u00a0"

NBSP_ALIASES = {
    "entity": NBSP_ENTITY,
    "unicode": NBSP_UNICODE,
}

DEFAULT_LANGUAGE = "en"

# Single syllable conjunctions and articles, keyed by language code.
WEAK_WORDS_DEFAULT: dict[str, str] = {
    "en": "a,an,the,for,and,nor,but,or,yet,so,if,than,then,as,once,till,when,shy,who,how,of,in,to,with",
    "de": "der,die,das,ein,an,in,am,zu,und,doch,als,ob,bis,da,daß",
    "cs": "a,ač,aj,ak,ať,ba,co,či,do,i,k,ke,ku,o,od,pro,při,s,sa,se,si,sú,v,ve,z,za,ze,že",
}

SHORTCUTS_DEFAULT: dict[str, tuple[str, ...]] = {
    "cs": ("př. kr.", "př. n. l.", "s. r. o.", "a. s.", "v. o. s.", "o. s. ř."),
}

# Units are shared by all languages.
UNITS_DEFAULT = (
    "%,‰,px,pt,in,ft,yd,mi,mm,cm,dm,m,km,g,dkg,kg,t,ar,ha,ml,dcl,l,"
    "cm²,m²,km²,cm³,m³,°C,°F,K"
)


def resolve_nbsp_alias(value: str) -> str:
    """Map `entity`/`unicode` aliases to their marker, keeping other values literal."""

    return NBSP_ALIASES.get(value.strip().lower(), value)


@lru_cache(maxsize=None)
def default_weak_words(lang: str) -> tuple[str, ...]:
    """Return built-in weak words for a language, or an empty tuple."""

    raw = WEAK_WORDS_DEFAULT.get(lang)
    if raw is None:
        return ()
    return split_word_list(raw)


def default_shortcut_phrases(lang: str) -> tuple[str, ...]:
    """Return built-in shortcut phrases for a language, or an empty tuple."""

    return SHORTCUTS_DEFAULT.get(lang, ())


@lru_cache(maxsize=1)
def default_units() -> tuple[str, ...]:
    """Return the built-in language independent unit list."""

    return split_word_list(UNITS_DEFAULT)
