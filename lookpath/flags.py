"""Command-line flags and the usage text built from them."""

from __future__ import annotations

from enum import Enum
from typing import TextIO


class Flag(Enum):
    """A recognised command-line flag with its help text."""

    DISPLAY_PATHS = ("-p", "lists the matched filenames as full paths", False)
    DISPLAY_TREE = ("-t", "prints the matched filenames as trees", True)
    SEARCH_LOOK = ("-l", "search by the substring prefix of filenames", True)
    SEARCH_REGEX = ("-E", "enables searching by regex", False)
    SHOW_HELP = ("-h", "show this help", False)

    def __init__(self, short: str, description: str, is_default: bool) -> None:
        self.short = short
        self.description = description
        self.is_default = is_default

    def matches(self, arg: str) -> bool:
        """Return True if ``arg`` is exactly this flag."""
        return arg == self.short


def usage(stream: TextIO, progname: str) -> None:
    """Write the usage text for ``progname`` to ``stream``."""
    stream.write(f"{progname} [PATTERN]\n")
    stream.write(f"{'':2}searches the directories in $PATH for [PATTERN]\n")
    for flag in Flag:
        default = "(default)" if flag.is_default else ""
        stream.write(f"{'':4}{flag.short:<8}: {flag.description} {default}\n")