"""
List directory contents.
"""

from typing import Optional

import sys

from argparse import ArgumentParser, Namespace

from lspy.config import Config
from lspy.entries import collect
from lspy.sorting import sort_entries
from lspy.display import print_entries


def add_arguments(parser: ArgumentParser) -> None:
    parser.add_argument(
        "--help",
        action="help",
        help="""
            show this help message
        """,
    )
    parser.add_argument(
        "-a",
        "--all",
        dest="show_hidden",
        action="store_true",
        help="""
            do not ignore entries starting with `.`
        """,
    )
    parser.add_argument(
        "-s",
        "--sizes",
        dest="show_size",
        action="store_true",
        help="""
            show sizes of files; use -h for human-readable units
        """,
    )
    parser.add_argument(
        "-h",
        "--human",
        dest="human",
        action="store_true",
        help="""
            print sizes in human-readable units
        """,
    )
    parser.add_argument(
        "-r",
        "--reverse",
        dest="reverse_sort",
        action="store_true",
        help="""
            reverse order when sorting (-S, -t)
        """,
    )
    parser.add_argument(
        "-S",
        "--sort-size",
        dest="sort_by_size",
        action="store_true",
        help="""
            sort by file size, largest first (specify -r for smallest first)
        """,
    )
    parser.add_argument(
        "-l",
        "--long-listing",
        dest="long_listing",
        action="store_true",
        help="""
            long listing (-l)
        """,
    )
    parser.add_argument(
        "-t",
        "--sort-mtime",
        dest="sort_by_modified_time",
        action="store_true",
        help="""
            sort by time modified, newest first (specify -r for oldest first)
        """,
    )
    parser.add_argument(
        "-m",
        "--stream-output",
        dest="stream_output",
        action="store_true",
        help="""
            list files separated by `, `
        """,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="""
            path to list entries from
        """,
    )


def make_parser(prog: str = "lspy") -> ArgumentParser:
    # NB: The automatic -h is disabled because -h means 'human-readable'
    parser = ArgumentParser(
        prog=prog,
        description=f"{prog} - list directory contents",
        add_help=False,
    )
    add_arguments(parser)
    return parser


def ls(args: Namespace) -> None:
    config = Config.from_args(args)

    try:
        entries = collect(config.path, config)
    except OSError as exc:
        print(f"error: could not list entries: {exc}", file=sys.stderr)
        sys.exit(1)

    sort_entries(entries, config)

    try:
        print_entries(entries, config, sys.stdout, color=sys.stdout.isatty())
    except OSError as exc:
        print(f"error: could not print entries: {exc}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[list[str]] = None) -> None:
    args = make_parser().parse_args(argv)
    ls(args)


if __name__ == "__main__":
    main()
