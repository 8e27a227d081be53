"""Text rewrite passes.

This package provides the deterministic rules `LineBreaks` chains together.
"""

from .rules import (
    CollapseSpaces,
    CollapseTabs,
    DigitGroupSpacing,
    RewriteRule,
    ShortcutCollapsing,
    UnitSpacing,
    WeakWordSpacing,
    process_weak_word,
)

__all__ = [
    "RewriteRule",
    "CollapseTabs",
    "CollapseSpaces",
    "WeakWordSpacing",
    "UnitSpacing",
    "ShortcutCollapsing",
    "DigitGroupSpacing",
    "process_weak_word",
]
