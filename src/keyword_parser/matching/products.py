# src/keyword_parser/matching/products.py
from __future__ import annotations

"""
products.py

Does: Filter product names with classified keywords: keep a product when some
      positive keyword occurs in it and no negative keyword does. Case-insensitive,
      with optional rapidfuzz partial matching.
Returns: match_products(), keyword_in_text().
Used by: Parser.match_products and the CLI --product option.
"""

import logging
from collections.abc import Iterable

from rapidfuzz import fuzz as rf_fuzz

from keyword_parser.parsing.parser import Keywords
from keyword_parser.utils import debug, fold_text

__all__ = [
    "keyword_in_text",
    "match_products",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


def _check_threshold(fuzzy_threshold: float | None) -> None:
    if fuzzy_threshold is None:
        return
    if not 0 <= fuzzy_threshold <= 100:
        raise ValueError(f"fuzzy_threshold must be within [0, 100], got {fuzzy_threshold}")


def keyword_in_text(
    keyword: str,
    text: str,
    *,
    fuzzy_threshold: float | None = None,
) -> bool:
    """
    Does: Folded substring test; with a threshold, fall back to partial_ratio ≥ threshold.
    Returns: Boolean. Empty keywords never match.
    """
    _check_threshold(fuzzy_threshold)
    k = fold_text(keyword)
    t = fold_text(text)
    if not k or not t:
        return False
    if k in t:
        return True
    if fuzzy_threshold is None:
        return False
    return rf_fuzz.partial_ratio(k, t) >= fuzzy_threshold


def match_products(
    products: Iterable[str],
    keywords: Keywords,
    *,
    fuzzy_threshold: float | None = None,
) -> list[str]:
    """
    Does: Keep products containing ≥1 positive keyword and no negative keyword.
          `keywords.other` is ignored. Input order and casing are preserved.
    Returns: List of matching products.
    """
    _check_threshold(fuzzy_threshold)

    found: list[str] = []
    for product in products:
        has_positive = any(
            keyword_in_text(k, product, fuzzy_threshold=fuzzy_threshold)
            for k in keywords.positive
        )
        if not has_positive:
            continue
        blocked = [
            k
            for k in keywords.negative
            if keyword_in_text(k, product, fuzzy_threshold=fuzzy_threshold)
        ]
        if blocked:
            debug(f"drop {product!r}: negative {blocked}", topic="matching")
            continue
        found.append(product)

    log.debug("Matched %d product(s)", len(found))
    return found
