"""
Conversion of raw OS metadata (as returned by :py:func:`os.stat` and friends)
into the handful of fields needed to list an entry: size, link count, owner,
group, modification time and permission bits.

Nothing in here raises for missing users, groups or odd timestamps: lookups
which can fail return None and it is up to the caller to pick a fallback.
"""

from typing import NamedTuple, Callable, Optional

import os
import pwd
import grp
import stat
import time


class Metadata(NamedTuple):
    size: int
    links: int
    uid: int
    gid: int
    mtime: float
    mode: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "Metadata":
        return cls(
            size=st.st_size,
            links=st.st_nlink,
            uid=st.st_uid,
            gid=st.st_gid,
            mtime=st.st_mtime,
            mode=st.st_mode,
        )


def triplet(mode: int, read: int, write: int, execute: int) -> str:
    """
    Render one rwx triplet, e.g. 'r-x'. Each bit is tested independently.
    """
    return "".join(
        char if mode & bit else "-"
        for char, bit in [("r", read), ("w", write), ("x", execute)]
    )


def permissions_string(mode: int) -> str:
    """
    Produce the 9 character permissions string (e.g. 'rw-r-----') for the
    user, group and other bits of a mode.
    """
    return (
        triplet(mode, stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR) +
        triplet(mode, stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP) +
        triplet(mode, stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH)
    )


def lookup_user(uid: int) -> Optional[str]:
    """Return the login name for a uid, or None if it has no passwd entry."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return None


def lookup_group(gid: int) -> Optional[str]:
    """Return the name of a gid, or None if it has no group entry."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return None


def owner_and_group(
    metadata: Metadata,
    user_lookup: Callable[[int], Optional[str]] = lookup_user,
    group_lookup: Callable[[int], Optional[str]] = lookup_group,
) -> tuple[str, str]:
    """
    Resolve the owner and group names of an entry, falling back on the decimal
    uid/gid where a name isn't known.
    """
    owner = user_lookup(metadata.uid)
    if owner is None:
        owner = str(metadata.uid)

    group = group_lookup(metadata.gid)
    if group is None:
        group = str(metadata.gid)

    return (owner, group)


def format_modified_time(mtime: float) -> str:
    """
    Format a modification timestamp in local time, e.g. 'Sep 10 14:23'.
    """
    try:
        return time.strftime("%b %d %H:%M", time.localtime(mtime))
    except (OverflowError, OSError, ValueError) as exc:
        return f"Error: {exc}"
