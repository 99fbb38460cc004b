"""Group key normalization for asset identifiers."""

from typing import Optional


def normalize_key(identifier: str) -> str:
    """
    Derive a grouping key from a raw identifier.

    Leading/trailing whitespace is removed and the result is case-folded,
    so " aaa", "AAA" and "Aaa " share one key.
    """
    return identifier.strip().casefold()


def is_valid_key(key: Optional[str]) -> bool:
    """A key is usable only when it is non-empty after normalization."""
    return bool(key)
