"""
matching.

Does: Facade for filtering product names with classified keywords.
Used by: Parser.match_products and the CLI.
"""

from __future__ import annotations

from .products import (
    keyword_in_text,
    match_products,
)

__all__ = [
    "keyword_in_text",
    "match_products",
]

__docformat__ = "google"
