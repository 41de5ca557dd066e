"""Bulk construction of a trie from key lists, payload collections or text files."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import TypeVar

from prefixdict.constants import DEFAULT_SEP, ENCODING
from prefixdict.trie import Trie

log = logging.getLogger("prefixdict")

T = TypeVar("T")


def read_keys(path: str, sep: str = DEFAULT_SEP) -> list[str]:
    """Read the whole of ``path`` and split it on ``sep``.

    Line endings are left untranslated so ``sep`` matches the bytes on disk.
    An empty ``sep`` splits the text into single characters.
    """
    with open(path, "r", encoding=ENCODING, newline="") as f:
        text = f.read()
    if not sep:
        return list(text)
    return text.split(sep)


def build_dictionary(
    keys: Iterable[str] | None = None,
    data: Sequence[T] | Mapping[str, T] | None = None,
    sep: str = DEFAULT_SEP,
    inp_file: str | None = None,
    data_handler: Callable[[str], T] | None = None,
    key_handler: Callable[[str], str] | None = None,
) -> Trie[T]:
    """Build a trie from ``keys`` or from the contents of ``inp_file``.

    Parameters
    ----------
    keys : iterable of str, optional
        Keys to insert, in order. Ignored when ``inp_file`` is given.
    data : sequence or mapping, optional
        Payloads. A sequence is indexed by key position, a mapping by the
        raw key. Missing entries leave the key without a payload.
    sep : str
        Separator for splitting ``inp_file``; also becomes the trie's
        default separator for ``Trie.out``.
    inp_file : str, optional
        Text file holding ``sep``-separated keys.
    data_handler : callable, optional
        ``raw_key -> payload``; consulted only when ``data`` is not given.
    key_handler : callable, optional
        ``raw_key -> key`` applied before insertion.

    Returns
    -------
    Trie
        The populated trie.
    """
    trie: Trie[T] = Trie(sep=sep)

    raw_keys: Iterable[str] = keys or []
    if inp_file:
        raw_keys = read_keys(inp_file, sep)

    skipped = 0
    for index, raw in enumerate(raw_keys):
        key = key_handler(raw) if key_handler else raw
        if not key:
            skipped += 1
            continue
        trie.insert(key, _resolve_payload(raw, index, data, data_handler))

    if skipped:
        log.debug("Skipped %d empty keys", skipped)
    if inp_file:
        log.info("Loaded %s keys from %s", f"{len(trie):,}", inp_file)
    return trie


def _resolve_payload(
    raw: str,
    index: int,
    data: Sequence[T] | Mapping[str, T] | None,
    data_handler: Callable[[str], T] | None,
) -> T | None:
    if data is not None:
        if isinstance(data, Mapping):
            return data.get(raw)
        # out-of-range positions have no payload
        return data[index] if index < len(data) else None
    if data_handler:
        return data_handler(raw)
    return None
