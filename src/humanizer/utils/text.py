"""Text counters shown next to the input box."""

from __future__ import annotations


def char_count(text: str) -> int:
    return len(text)


def word_count(text: str) -> int:
    """Whitespace-separated, non-empty tokens."""
    return len(text.split())
