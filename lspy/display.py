"""
Rendering of (sorted) entries as text.
"""

from typing import NamedTuple, TextIO, Iterable

import os
import sys
import mimetypes

from lspy.config import Config
from lspy.entries import Entry
from lspy.metadata import (
    permissions_string,
    owner_and_group,
    format_modified_time,
)

# ANSI escape sequences used for colouring names
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[36m"
RESET = "\033[0m"

DIRECTORY_STYLE = BOLD + RED

# Colour used for files, by the top-level part of their MIME type
CATEGORY_COLORS = {
    "image": BLUE,
    "text": YELLOW,
    "application": GREEN,
    "video": CYAN,
}
OTHER_COLOR = MAGENTA

UNITS = ["B", "K", "M", "G", "T"]

# Column widths used when there are no entries to measure
DEFAULT_SIZE_WIDTH = 6
DEFAULT_LINKS_WIDTH = 2


def bytes_to_human(num_bytes: int) -> str:
    """
    Format a size using binary units, e.g. '500B', '1.5K' or '2.0M'.
    """
    if num_bytes == 0:
        return "0B"

    # NB: bit_length gives an exact integer log (no float rounding at unit
    # boundaries)
    index = min((num_bytes.bit_length() - 1) // 10, len(UNITS) - 1)
    if index == 0:
        return f"{num_bytes}{UNITS[index]}"
    else:
        return f"{num_bytes / 1024**index:.1f}{UNITS[index]}"


def format_size(num_bytes: int, human: bool) -> str:
    if human:
        return bytes_to_human(num_bytes)
    else:
        return str(num_bytes)


def file_color(name: str) -> str:
    """
    Pick the colour for a file name based on the MIME type guessed from its
    extension.
    """
    # NB: guess_type parses its argument as a URL so only the extension is
    # passed (otherwise e.g. "data:x.png" is taken to be a data URL).
    extension = os.path.splitext(name)[1]
    mime_type, _encoding = mimetypes.guess_type(f"f{extension}", strict=False)
    if mime_type is None:
        return OTHER_COLOR
    category = mime_type.partition("/")[0]
    return CATEGORY_COLORS.get(category, OTHER_COLOR)


def style(text: str, ansi: str, color: bool) -> str:
    if color:
        return f"{ansi}{text}{RESET}"
    else:
        return text


class FormatWidths(NamedTuple):
    size: int = DEFAULT_SIZE_WIDTH
    links: int = DEFAULT_LINKS_WIDTH

    @classmethod
    def measure(cls, entries: Iterable[Entry], human: bool) -> "FormatWidths":
        """
        Find the widest size and link count amongst a set of entries.
        """
        measured = list(entries)
        if not measured:
            return cls()
        return cls(
            size=max(
                len(format_size(entry.metadata.size, human)) for entry in measured
            ),
            links=max(len(str(entry.metadata.links)) for entry in measured),
        )


def format_entry(
    entry: Entry,
    config: Config,
    widths: FormatWidths,
    color: bool = False,
) -> str:
    """
    Format a single entry according to the config (without any separator or
    newline).
    """
    name = entry.display_name

    if config.stream_output:
        return name

    out = ""

    if config.long_listing:
        owner, group = owner_and_group(entry.metadata)
        size = format_size(entry.metadata.size, config.human)
        out += f"{permissions_string(entry.metadata.mode)} "
        out += f"{str(entry.metadata.links).ljust(widths.links)} "
        out += f"{owner} {group} "
        out += f"{size.ljust(widths.size)} "
        out += f"{format_modified_time(entry.metadata.mtime)} "

    if entry.kind.is_dir():
        # NB: Sizes are never shown on directories (outside the long listing)
        return out + style(name, DIRECTORY_STYLE, color) + "/"

    if config.show_size and not config.long_listing:
        out += f"{format_size(entry.metadata.size, config.human)}\t"

    return out + style(name, file_color(name), color)


def print_entries(
    entries: list[Entry],
    config: Config,
    stdout: TextIO = sys.stdout,
    color: bool = False,
) -> None:
    """
    Write out a full listing.

    In stream mode, entries are separated by ', ' with no trailing newline and
    the output is flushed after every entry. Otherwise each entry is written
    on its own line.
    """
    widths = FormatWidths.measure(entries, config.human)

    for index, entry in enumerate(entries):
        if config.stream_output:
            if index != 0:
                stdout.write(", ")
            stdout.write(format_entry(entry, config, widths, color))
            stdout.flush()
        else:
            stdout.write(format_entry(entry, config, widths, color))
            stdout.write("\n")
