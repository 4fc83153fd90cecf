# keyword_parser/utils/__init__.py
"""

Does: Provide debug logging and text folding helpers for the keyword parser.
Returns: Public API via debug/reload_topics/enable_topics and fold_text.
Used by: Product matching, the CLI, and tests.
"""

from __future__ import annotations

from .log import (
    debug,
    enable_topics,
    is_enabled,
    reload_topics,
)
from .normalize import fold_text

__all__ = [
    # Logging helpers
    "debug",
    "enable_topics",
    "is_enabled",
    "reload_topics",
    # Text
    "fold_text",
]
