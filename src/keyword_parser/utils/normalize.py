# keyword_parser/utils/normalize.py
"""
normalize.

Does: Case-insensitive text folding for keyword/product comparison with light
      Unicode hygiene (NFKC, fancy hyphens and quotes mapped to ASCII).
Returns: fold_text().
Used by: Product matching.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = ["fold_text"]

# Common “fancy” Unicode punctuation we want to normalize early
_FANCY_HYPHENS = {"\u2010", "\u2011", "\u2012", "\u2013", "\u2014", "\u2212"}  # ‐ - ‒ – — −
_FANCY_QUOTES = {"\u2018", "\u2019", "\u201b", "\u2032", "\u02bc"}  # ‘ ’ ‛ ′ ʼ

_SPACES_RE = re.compile(r"\s+")


def _unicode_hygiene(s: str) -> str:
    """
    Does: Apply light Unicode normalization:
          - NFKC fold
          - map fancy hyphens to ASCII '-'
          - map curly quotes to ASCII "'"
    Returns: Cleaned string.
    """
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


def fold_text(text: str) -> str:
    """
    Does: Hygiene + casefold + trim + collapse internal whitespace.
    Returns: Comparison key for `text` ("" for non-str input).
    """
    if not isinstance(text, str):
        return ""
    s = _unicode_hygiene(text).casefold().strip()
    return _SPACES_RE.sub(" ", s)
