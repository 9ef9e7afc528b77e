"""Text matching shared by the search methods."""

from typing import Optional


def contains(text: str, query: Optional[str]) -> bool:
    """Case-insensitive substring test."""
    return (query or "").lower() in text.lower()
