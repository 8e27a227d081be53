"""Top-level package for linebreaks.

This package inserts non-breaking-space markers into natural-language text so
lines never break after weak words, inside shortcuts, between a number and its
unit, or between digit groups. The main entry point is `LineBreaks`.
"""

from .config import ConfigLoader, LineBreaksConfig, LineBreaksConfigBuilder
from .engine import LineBreaks, LineBreaksReport

__all__ = [
    "LineBreaks",
    "LineBreaksReport",
    "LineBreaksConfig",
    "LineBreaksConfigBuilder",
    "ConfigLoader",
    "__version__",
]

__version__ = "0.1.0"
