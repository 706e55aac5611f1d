"""
The (immutable) set of options controlling a listing.
"""

from typing import NamedTuple, Optional

from argparse import Namespace


class Config(NamedTuple):
    show_hidden: bool = False
    show_size: bool = False
    human: bool = False
    reverse_sort: bool = False
    sort_by_size: bool = False
    sort_by_modified_time: bool = False
    long_listing: bool = False
    stream_output: bool = False
    path: Optional[str] = None

    @classmethod
    def from_args(cls, args: Namespace) -> "Config":
        return cls(**{field: getattr(args, field) for field in cls._fields})
