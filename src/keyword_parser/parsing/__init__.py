# keyword_parser/parsing/__init__.py
"""
parsing.
=======

Does: Expose the keyword classifier and its configuration.
Exports: Parser, Keywords, parse_keywords, Prefixes, KeywordParserError, ConfigurationConflict
"""

from __future__ import annotations

from .parser import (
    Keywords,
    Parser,
    parse_keywords,
)
from .prefixes import (
    ConfigurationConflict,
    KeywordParserError,
    Prefixes,
)

__all__ = [
    # parser
    "Parser",
    "Keywords",
    "parse_keywords",
    # configuration
    "Prefixes",
    "KeywordParserError",
    "ConfigurationConflict",
]
