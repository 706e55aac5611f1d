"""
Gathering of the entries to be listed from the filesystem.
"""

from typing import NamedTuple, Optional

import os
import sys

from enum import IntEnum

from lspy.config import Config
from lspy.metadata import Metadata


class FileKind(IntEnum):
    # NB: Order matters: directories are always listed before files.
    directory = 0
    file = 1

    @classmethod
    def from_dir_entry(cls, entry: "os.DirEntry[bytes]") -> "FileKind":
        if entry.is_dir(follow_symlinks=False):
            return cls.directory
        else:
            return cls.file

    def is_dir(self) -> bool:
        return self == FileKind.directory


class Entry(NamedTuple):
    """
    A single file or directory to be listed.

    The name is kept as raw bytes since filenames need not be valid in any
    particular encoding.
    """

    name: bytes
    kind: FileKind
    metadata: Metadata

    @property
    def display_name(self) -> str:
        return os.fsdecode(self.name)


def is_hidden(name: bytes) -> bool:
    """True if a (raw) filename starts with a '.'."""
    return name[:1] == b"."


def collect_single(path: bytes) -> Entry:
    """
    Produce the entry for an explicitly named, non-directory path. If its
    metadata cannot be read, prints an error and exits.
    """
    try:
        st = os.stat(path)
    except OSError as exc:
        print(
            f"error: could not retrieve metadata: {os.fsdecode(path)}: {exc}",
            file=sys.stderr,
        )
        sys.exit(1)

    return Entry(
        name=os.path.basename(path),
        kind=FileKind.file,
        metadata=Metadata.from_stat(st),
    )


def collect_directory(path: bytes, config: Config) -> list[Entry]:
    """
    Enumerate the contents of a directory in whatever order the OS provides
    them.

    Entries whose type or metadata cannot be read are reported on stderr and
    skipped. An error part way through reading the directory is reported and
    the entries read so far are returned. Failure to open the directory itself
    raises an OSError.
    """
    entries: list[Entry] = []
    with os.scandir(path) as it:
        while True:
            # NB: The scandir iterator is closed after a read error so nothing
            # more can be read from it.
            try:
                dir_entry = next(it)
            except StopIteration:
                break
            except OSError as exc:
                print(f"warning: could not access entry: {exc}", file=sys.stderr)
                break

            name = dir_entry.name
            if not config.show_hidden and is_hidden(name):
                continue

            try:
                kind = FileKind.from_dir_entry(dir_entry)
            except OSError as exc:
                print(f"warning: could not get file type: {exc}", file=sys.stderr)
                continue

            try:
                st = dir_entry.stat(follow_symlinks=False)
            except OSError as exc:
                print(f"warning: could not retrieve metadata: {exc}", file=sys.stderr)
                continue

            entries.append(Entry(name, kind, Metadata.from_stat(st)))

    return entries


def collect(path: Optional[str], config: Config) -> list[Entry]:
    """
    Collect the entries to list for a given path (or the current directory
    when None).

    * A path which doesn't exist produces an empty list.
    * A path which isn't a directory produces a list containing just that
      entry.
    * Otherwise, the (possibly filtered) directory contents are returned.
    """
    if path is None:
        return collect_directory(b".", config)

    raw_path = os.fsencode(path)
    if not os.path.exists(raw_path):
        return []
    if not os.path.isdir(raw_path):
        return [collect_single(raw_path)]

    return collect_directory(raw_path, config)
