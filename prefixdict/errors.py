"""Errors raised by the trie core."""

from __future__ import annotations


class EmptyKeyError(ValueError):
    """Raised when inserting the empty string as a key."""

    def __init__(self, message: str = "cannot insert an empty key"):
        super().__init__(message)
