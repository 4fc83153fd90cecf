"""
keyword_parser
==============

Does: Parse positive and negative keyword input (e.g. "+foo,-bar,+baz") into
      positive, negative and other buckets, and filter products with the result.
Returns: Parser, Prefixes, Keywords, parse_keywords, match_products and the error types.
Used by: Search/CLI front-ends accepting free-form keyword filters.
"""

from __future__ import annotations

from .matching import match_products
from .parsing import (
    ConfigurationConflict,
    KeywordParserError,
    Keywords,
    Parser,
    Prefixes,
    parse_keywords,
)

__all__ = [
    "Parser",
    "Prefixes",
    "Keywords",
    "parse_keywords",
    "match_products",
    "KeywordParserError",
    "ConfigurationConflict",
]
__version__ = "0.1.0"
__docformat__ = "google"
