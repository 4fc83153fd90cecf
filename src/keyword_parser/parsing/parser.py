# src/keyword_parser/parsing/parser.py
# ──────────────────────────────────────────────────────────────
# Positive / negative keyword classification
# ──────────────────────────────────────────────────────────────
"""
parser.

Does: Split a keyword filter string (e.g. "+foo,-bar,baz") on the separator,
      trim each segment and route it to the positive, negative or other bucket
      according to its leading marker.
Returns: Parser, Keywords, parse_keywords().
Used by: The CLI and product matching.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple

from keyword_parser.parsing.prefixes import Prefixes

__all__ = [
    "Keywords",
    "Parser",
    "parse_keywords",
]

log = logging.getLogger(__name__)


class Keywords(NamedTuple):
    """Classified keywords, each bucket in input order."""

    positive: tuple[str, ...]
    negative: tuple[str, ...]
    other: tuple[str, ...]


class Parser:
    """
    Does: Bind an input string to a Prefixes configuration and classify it.
    Returns: Keywords from parse() / classify().
    """

    def __init__(
        self,
        input: str,
        prefixes: Prefixes | None = None,
        *,
        retain_prefix: bool = False,
    ) -> None:
        if not isinstance(input, str):
            raise TypeError(f"input must be str, got {type(input).__name__}")
        if prefixes is not None and not isinstance(prefixes, Prefixes):
            raise TypeError(f"prefixes must be Prefixes, got {type(prefixes).__name__}")
        self._input = input
        self._prefixes = prefixes if prefixes is not None else Prefixes()
        self._retain_prefix = bool(retain_prefix)

    def __repr__(self) -> str:
        return (
            f"Parser(input={self._input!r}, prefixes={self._prefixes!r}, "
            f"retain_prefix={self._retain_prefix})"
        )

    @property
    def input(self) -> str:
        return self._input

    @property
    def prefixes(self) -> Prefixes:
        return self._prefixes

    @property
    def retain_prefix(self) -> bool:
        return self._retain_prefix

    def should_retain_prefix(self, flag: bool) -> bool:
        """
        Does: Toggle whether markers stay on positive/negative tokens.
        Returns: The flag that was set.
        """
        self._retain_prefix = bool(flag)
        return self._retain_prefix

    # ── Splitting ─────────────────────────────────────────────────────────────
    def _segments(self) -> list[str]:
        return self._input.split(self._prefixes.separator)

    def segment_count(self) -> int:
        """Number of raw segments the separator split yields (empty ones included)."""
        return len(self._segments())

    def _strip_marker(self, segment: str, marker: str) -> str | None:
        rest = segment[len(marker) :].strip()
        if not rest:
            return None
        return marker + rest if self._retain_prefix else rest

    # ── Classification ────────────────────────────────────────────────────────
    def parse_with_stats(self) -> tuple[Keywords, int]:
        """
        Does: Classify every segment in order; blank segments and bare markers
              are dropped and counted.
        Returns: (Keywords, discarded_count).
        """
        pos_marker = self._prefixes.positive
        neg_marker = self._prefixes.negative

        positive: list[str] = []
        negative: list[str] = []
        other: list[str] = []
        discarded = 0

        for raw in self._segments():
            segment = raw.strip()
            if not segment:
                discarded += 1
                continue

            if segment.startswith(pos_marker):
                bucket, token = positive, self._strip_marker(segment, pos_marker)
            elif segment.startswith(neg_marker):
                bucket, token = negative, self._strip_marker(segment, neg_marker)
            else:
                bucket, token = other, segment

            if token is None:
                discarded += 1
                continue
            bucket.append(token)

        result = Keywords(tuple(positive), tuple(negative), tuple(other))
        log.debug(
            "Parsed %r -> +%d -%d other=%d discarded=%d",
            self._input,
            len(positive),
            len(negative),
            len(other),
            discarded,
        )
        return result, discarded

    def parse(self) -> Keywords:
        """Classify the bound input. Pure: repeated calls return equal results."""
        keywords, _ = self.parse_with_stats()
        return keywords

    classify = parse

    def match_products(
        self,
        products: Iterable[str],
        keywords: Keywords | None = None,
        *,
        fuzzy_threshold: float | None = None,
    ) -> list[str]:
        """
        Does: Filter products with `keywords`. When omitted they are parsed from the
              bound input with markers stripped, whatever retain_prefix says.
        Returns: Matching products in input order.
        """
        from keyword_parser.matching import match_products

        if keywords is None:
            keywords = parse_keywords(self._input, self._prefixes)
        return match_products(products, keywords, fuzzy_threshold=fuzzy_threshold)


def parse_keywords(
    input: str,
    prefixes: Prefixes | None = None,
    *,
    retain_prefix: bool = False,
) -> Keywords:
    """Shorthand for Parser(input, prefixes, retain_prefix=...).parse()."""
    return Parser(input, prefixes, retain_prefix=retain_prefix).parse()
