# src/keyword_parser/parsing/prefixes.py

"""
prefixes.py.

Does: Define the immutable separator/marker configuration used by the parser
      and the exception types raised when it is inconsistent.
Returns: Prefixes, KeywordParserError, ConfigurationConflict.
Used by: Parser construction, the CLI, and product matching.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

__all__ = [
    "DEFAULT_SEPARATOR",
    "DEFAULT_POSITIVE",
    "DEFAULT_NEGATIVE",
    "Prefixes",
    "KeywordParserError",
    "ConfigurationConflict",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Defaults ─────────────────────────────────────────────────────────────────
DEFAULT_SEPARATOR = ","
DEFAULT_POSITIVE = "+"
DEFAULT_NEGATIVE = "-"

# ── ENV names (read only by Prefixes.from_env) ───────────────────────────────
ENV_SEPARATOR = "KWP_SEPARATOR"
ENV_POSITIVE = "KWP_POSITIVE_PREFIX"
ENV_NEGATIVE = "KWP_NEGATIVE_PREFIX"


# ── Exceptions ───────────────────────────────────────────────────────────────
class KeywordParserError(Exception):
    """Base class for errors raised by keyword_parser."""


class ConfigurationConflict(KeywordParserError, ValueError):
    """Raise when separator and markers cannot classify input unambiguously."""


# ── Configuration ────────────────────────────────────────────────────────────
@dataclass(frozen=True, kw_only=True)
class Prefixes:
    """
    Does: Hold the separator and the positive/negative markers.
    Invariants: the separator is non-empty, markers are non-blank, the markers differ,
                neither marker starts with the other, and neither contains
                the separator.
    """

    positive: str = DEFAULT_POSITIVE
    negative: str = DEFAULT_NEGATIVE
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        for name in ("positive", "negative", "separator"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be str, got {type(value).__name__}")
            if name == "separator":
                # whitespace separators are fine, segments are trimmed afterwards
                if not value:
                    raise ConfigurationConflict("separator must not be empty")
                continue
            if not value.strip():
                raise ConfigurationConflict(f"{name} marker must be non-blank, got {value!r}")
            if value != value.strip():
                raise ConfigurationConflict(
                    f"{name} marker {value!r} has surrounding whitespace and could never match"
                )

        pos, neg, sep = self.positive, self.negative, self.separator
        if pos == neg:
            raise ConfigurationConflict(f"positive and negative markers are both {pos!r}")
        if pos.startswith(neg) or neg.startswith(pos):
            raise ConfigurationConflict(
                f"markers {pos!r} and {neg!r} overlap; one is a prefix of the other"
            )
        for name, marker in (("positive", pos), ("negative", neg)):
            if sep in marker or marker in sep:
                raise ConfigurationConflict(
                    f"{name} marker {marker!r} collides with separator {sep!r}"
                )
        log.debug("Prefixes ok: sep=%r pos=%r neg=%r", sep, pos, neg)

    @classmethod
    def from_env(cls, **overrides: str | None) -> Prefixes:
        """
        Does: Build Prefixes from KWP_* env vars, then apply non-None overrides.
        Returns: Validated Prefixes (raises ConfigurationConflict otherwise).
        """
        values = {
            "separator": os.getenv(ENV_SEPARATOR) or DEFAULT_SEPARATOR,
            "positive": os.getenv(ENV_POSITIVE) or DEFAULT_POSITIVE,
            "negative": os.getenv(ENV_NEGATIVE) or DEFAULT_NEGATIVE,
        }
        for key, value in overrides.items():
            if key not in values:
                raise TypeError(f"unknown Prefixes field: {key}")
            if value is not None:
                values[key] = value
        return cls(**values)
