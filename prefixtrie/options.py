"""Construction options for a prefix trie."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TrieOptions:
    """Options fixed for the lifetime of a trie.

    ``is_append`` controls what ``insert`` does with a key that is already
    stored: overwrite its value (True) or reject the insert (False).
    """

    is_append: bool = False
