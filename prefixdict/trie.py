"""Prefix trie with optional per-key payloads."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from prefixdict.constants import DEFAULT_SEP
from prefixdict.errors import EmptyKeyError
from prefixdict.export import write_keys

T = TypeVar("T")


class TrieNode(Generic[T]):
    """Single node in the prefix trie."""

    __slots__ = ("label", "children", "is_terminal", "data")

    def __init__(self, label: str = ""):
        self.label = label
        # insertion-ordered; traversal order follows it
        self.children: dict[str, TrieNode[T]] = {}
        self.is_terminal: bool = False
        self.data: T | None = None

    def __repr__(self) -> str:
        mark = "*" if self.is_terminal else ""
        return f"TrieNode({self.label!r}{mark}, children={list(self.children)})"


class Entry(Generic[T]):
    """One stored key and its payload, as produced by traversal."""

    __slots__ = ("key", "data")

    def __init__(self, key: str, data: T | None = None):
        self.key = key
        self.data = data  # None when the key was inserted without a payload

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.key == other.key and self.data == other.data

    def __hash__(self) -> int:
        # raises TypeError when data itself is unhashable
        return hash((self.key, self.data))

    def __repr__(self) -> str:
        if self.data is None:
            return f"Entry({self.key!r})"
        return f"Entry({self.key!r}, data={self.data!r})"


class Trie(Generic[T]):
    """Prefix trie mapping string keys to optional payloads.

    Children are kept in first-insertion order, so ``traverse()`` output is
    reproducible for a given sequence of inserts.
    """

    def __init__(self, sep: str = DEFAULT_SEP):
        self.root: TrieNode[T] = TrieNode()
        self.sep = sep
        self._size = 0

    # mutation

    def insert(self, key: str, data: T | None = None) -> None:
        """Store ``key`` with ``data``, replacing any earlier payload for it."""
        if not key:
            raise EmptyKeyError()
        node = self.root
        for ch in key:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
        node.data = data

    # lookup

    def contains(self, key: str) -> bool:
        if not key:
            return False
        node = self._walk(key)
        return node is not None and node.is_terminal

    def get(self, key: str, default: T | None = None) -> T | None:
        """Payload stored for ``key``, or ``default`` if it is not a member."""
        node = self._walk(key) if key else None
        if node is None or not node.is_terminal:
            return default
        return node.data

    def is_prefix(self, prefix: str) -> bool:
        """True if at least one stored key starts with ``prefix``."""
        if not prefix:
            return self._size > 0
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> TrieNode[T] | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # traversal

    def traverse(self) -> list[Entry[T]]:
        """All stored entries in depth-first pre-order."""
        return self._collect(self.root, "")

    def complete(self, prefix: str) -> list[Entry[T]]:
        """Stored entries whose key starts with ``prefix``, in traversal order."""
        if not prefix:
            return self.traverse()
        node = self._walk(prefix)
        if node is None:
            return []
        return self._collect(node, prefix)

    def out(self, out_file: str | None = None, sep: str | None = None) -> list[Entry[T]]:
        """Dump the trie; optionally write the keys to ``out_file``.

        Keys are joined with ``sep``, or the trie's own separator when
        ``sep`` is not given. Write errors propagate as ``OSError``.
        """
        entries = self.traverse()
        if out_file:
            write_keys(entries, out_file, sep if sep is not None else self.sep)
        return entries

    @staticmethod
    def _collect(start: TrieNode[T], path: str) -> list[Entry[T]]:
        out: list[Entry[T]] = []
        # (node, key spelled by the path ending at node)
        stack: list[tuple[TrieNode[T], str]] = [(start, path)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                out.append(Entry(word, node.data))
            # reversed so the first-inserted child is popped first
            for child in reversed(list(node.children.values())):
                stack.append((child, word + child.label))
        return out

    # container protocol

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return (entry.key for entry in self.traverse())

    def __repr__(self) -> str:
        return f"Trie({self._size} keys)"
