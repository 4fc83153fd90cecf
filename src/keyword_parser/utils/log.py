"""
log.py.

Does: Lightweight topic logger controlled by KWP_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Silent while no topic is set.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_topics", "is_enabled"]

ENV_TOPICS = "KWP_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_TOPICS, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable KWP_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Add topics at runtime (the CLI's --debug passes 'all')."""
    _DEBUG_TOPICS.update(t.strip().lower() for t in topics if t.strip())


def is_enabled(topic: str) -> bool:
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "parser",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via KWP_DEBUG_TOPICS.
    """
    if not is_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
