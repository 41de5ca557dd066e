"""prefixdict -- string-keyed prefix trie with optional payloads."""

from prefixdict.constants import DEFAULT_SEP
from prefixdict.errors import EmptyKeyError
from prefixdict.trie import Entry, Trie, TrieNode
from prefixdict.dictionary import build_dictionary, read_keys
from prefixdict.export import write_keys

__all__ = [
    "DEFAULT_SEP",
    "EmptyKeyError",
    "Entry",
    "Trie",
    "TrieNode",
    "build_dictionary",
    "read_keys",
    "write_keys",
]
