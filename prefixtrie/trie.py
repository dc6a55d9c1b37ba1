"""Prefix trie mapping string keys to optional values."""

from __future__ import annotations

import logging
from typing import Any, Generic, NamedTuple, TypeVar

from prefixtrie.options import TrieOptions

log = logging.getLogger("prefixtrie")

T = TypeVar("T")


class FindResult(NamedTuple):
    """Outcome of a key lookup."""

    exists: bool
    data: Any = None


class TraverseItem(NamedTuple):
    """One stored key and its value, as yielded by ``Trie.traverse``."""

    key: str
    data: Any = None


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal", "value")

    def __init__(self, is_terminal: bool = False, value: Any = None):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = is_terminal
        self.value = value  # only meaningful while is_terminal


class Trie(Generic[T]):
    """Prefix trie with per-key values and a fixed overwrite policy.

    Each edge is labelled by one character of a key.  Children are kept in a
    plain dict, so ``traverse`` visits them in the order their edges were
    first created.
    """

    def __init__(self, is_append: bool = False):
        self.root = TrieNode()
        self._is_append = is_append
        self._size = 0

    @property
    def is_append(self) -> bool:
        return self._is_append

    # public API

    def insert(self, key: str, value: T | None = None) -> bool:
        """Store ``value`` under ``key``.

        Returns False for an empty key, or when the key is already stored and
        the trie was not built in append mode.  Returns True otherwise.
        """
        if not key:
            log.debug("Rejected insert of empty key")
            return False

        node = self.root
        for ch in key[:-1]:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode()
                node.children[ch] = child
            node = child

        ch = key[-1]
        child = node.children.get(ch)
        if child is None:
            node.children[ch] = TrieNode(True, value)
            self._size += 1
            return True
        if child.is_terminal and not self._is_append:
            log.debug("Rejected insert of existing key %r (append mode off)", key)
            return False
        if not child.is_terminal:
            self._size += 1
        child.is_terminal = True
        child.value = value
        return True

    def find(self, key: str) -> FindResult:
        """Look up ``key``; ``exists`` is False for prefixes and misses."""
        node = self._walk(key) if key else None
        if node is None or not node.is_terminal:
            return FindResult(False)
        return FindResult(True, node.value)

    def delete(self, key: str) -> bool:
        """Remove ``key``.  True iff it was a stored key before the call.

        A childless target node is detached from its parent; a target node
        with descendants is kept and only loses its terminal flag and value.
        Ancestors are never pruned, even when this leaves them childless.
        """
        if not key:
            return False

        parent = self.root
        for ch in key[:-1]:
            parent = parent.children.get(ch)
            if parent is None:
                log.debug("Delete miss for %r", key)
                return False

        ch = key[-1]
        node = parent.children.get(ch)
        if node is None:
            log.debug("Delete miss for %r", key)
            return False

        was_terminal = node.is_terminal
        if not node.children:
            del parent.children[ch]
        else:
            node.is_terminal = False
            node.value = None

        if was_terminal:
            self._size -= 1
        return was_terminal

    def traverse(self) -> list[TraverseItem]:
        """Every stored key with its value, depth-first pre-order."""
        result: list[TraverseItem] = []
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                result.append(TraverseItem(word, node.value))
            # reversed so the first-created edge is popped first
            for ch in reversed(node.children):
                stack.append((node.children[ch], word + ch))
        return result

    def is_prefix(self, prefix: str) -> bool:
        """True if some path in the tree spells ``prefix``."""
        return self._walk(prefix) is not None

    def clear(self) -> None:
        """Drop every key, keeping the append policy."""
        self.root = TrieNode()
        self._size = 0

    def node_count(self) -> int:
        """Number of nodes below the root."""
        count = 0
        stack = list(self.root.children.values())
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.find(key).exists

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"Trie(is_append={self._is_append}, keys={self._size})"

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node


def create_trie(options: TrieOptions | None = None) -> Trie[Any]:
    """Build an empty trie configured by ``options``."""
    if options is None:
        options = TrieOptions()
    return Trie(is_append=options.is_append)
