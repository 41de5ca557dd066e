"""Write trie keys to a plain text file."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from prefixdict.constants import DEFAULT_SEP, ENCODING

if TYPE_CHECKING:
    from prefixdict.trie import Entry

log = logging.getLogger("prefixdict")


def write_keys(entries: Iterable[Entry], path: str, sep: str = DEFAULT_SEP) -> int:
    """Join the keys of ``entries`` with ``sep`` and write them to ``path``.

    Payloads are not written. Any existing file is overwritten and no
    trailing separator is added. Returns the number of keys written.
    """
    keys = [entry.key for entry in entries]
    with open(path, "w", encoding=ENCODING, newline="") as f:
        f.write(sep.join(keys))
    log.info("Wrote %s keys to %s", f"{len(keys):,}", path)
    return len(keys)
