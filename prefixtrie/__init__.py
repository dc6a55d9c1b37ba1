"""Prefix trie -- string keys mapped to optional values."""

from prefixtrie.options import TrieOptions
from prefixtrie.trie import FindResult, TraverseItem, Trie, TrieNode, create_trie

__all__ = [
    "FindResult",
    "TraverseItem",
    "Trie",
    "TrieNode",
    "TrieOptions",
    "create_trie",
]
