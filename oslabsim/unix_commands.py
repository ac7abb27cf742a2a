"""Simplified grep and ls over in-memory data."""

from __future__ import annotations

from typing import Iterable

MAX_LINES = 50
MAX_FILES = 20


def grep(lines: Iterable[str], pattern: str) -> list[str]:
    """Lines containing ``pattern`` as a substring, in their original order."""
    text = list(lines)
    if not 1 <= len(text) <= MAX_LINES:
        raise ValueError(f"number of lines must be 1 to {MAX_LINES}")
    return [line for line in text if pattern in line]


def ls(names: Iterable[str]) -> list[str]:
    """List file names in the order they were given."""
    listing = list(names)
    if not 1 <= len(listing) <= MAX_FILES:
        raise ValueError(f"number of files must be 1 to {MAX_FILES}")
    return listing