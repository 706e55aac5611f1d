"""
Ordering of collected entries.

Each entry is given a :py:class:`SortKey`. Directories always come before
files. After that, entries are ordered by whichever of the size and
modification time keys are enabled (size first, recency as a tie-break) with
the reverse flag flipping only that second part of the comparison. Entries
which compare equal keep the order they were collected in.
"""

from typing import NamedTuple, Optional, Any

import time

from functools import cmp_to_key

from lspy.config import Config
from lspy.entries import Entry, FileKind

# Largest value of an unsigned 64 bit file size
MAX_U64 = (1 << 64) - 1


class SortKey(NamedTuple):
    kind: FileKind
    # MAX_U64 - size, so that ascending order lists the largest first. None when
    # not sorting by size.
    size: Optional[int]
    # Seconds since modification, so ascending order lists the newest first.
    # None when not sorting by time.
    age: Optional[float]

    @property
    def ordering(self) -> tuple[Optional[int], Optional[float]]:
        """The (reversible) part of the key, excluding the kind."""
        return (self.size, self.age)


def sort_key(entry: Entry, config: Config, now: float) -> SortKey:
    return SortKey(
        kind=entry.kind,
        size=MAX_U64 - entry.metadata.size if config.sort_by_size else None,
        age=now - entry.metadata.mtime if config.sort_by_modified_time else None,
    )


def cmp(a: Any, b: Any) -> int:
    # NB: Disabled sub-keys are None in every key so only ever get compared for
    # equality.
    return (a > b) - (a < b)


def compare_keys(a: SortKey, b: SortKey, reverse: bool = False) -> int:
    """
    Compare two keys, returning a negative, zero or positive value in the
    style of an old-fashioned cmp function.
    """
    ordering = cmp(a.ordering, b.ordering)
    if reverse:
        ordering = -ordering

    return cmp(a.kind, b.kind) or ordering


def sort_entries(entries: list[Entry], config: Config) -> None:
    """Sort a list of entries (in place)."""
    now = time.time()
    keyed = [(sort_key(entry, config, now), entry) for entry in entries]

    def compare(a: tuple[SortKey, Entry], b: tuple[SortKey, Entry]) -> int:
        return compare_keys(a[0], b[0], config.reverse_sort)

    keyed.sort(key=cmp_to_key(compare))
    entries[:] = [entry for _key, entry in keyed]
