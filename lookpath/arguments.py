"""Turning the command line into a search pattern and settings."""

from __future__ import annotations

import re

from lookpath.flags import Flag
from lookpath.search import Pattern, PatternError, SearchMethod
from lookpath.settings import Settings

DEFAULT_PROGNAME = "lookpath"


class ArgumentError(ValueError):
    """Raised when the command line cannot be used.

    ``show_usage`` tells whether the usage text should follow the message.
    """

    def __init__(self, message: str, show_usage: bool = True) -> None:
        super().__init__(message)
        self.show_usage = show_usage


def _apply_flag(flag: Flag, pattern: Pattern, settings: Settings) -> bool:
    """Apply ``flag`` and return True if it asked for a regex search."""
    if flag is Flag.DISPLAY_TREE:
        settings.use_tree()
    elif flag is Flag.DISPLAY_PATHS:
        settings.use_path_list()
    elif flag is Flag.SHOW_HELP:
        settings.request_usage()
    elif flag is Flag.SEARCH_LOOK:
        pattern.method = SearchMethod.LOOK
    elif flag is Flag.SEARCH_REGEX:
        pattern.method = SearchMethod.REGEX
        return True
    return False


def parse_arguments(argv: list[str]) -> tuple[Pattern, Settings]:
    """Parse ``argv`` (program name first) into a pattern and settings.

    When help is requested the settings are returned with ``put_usage`` set
    and any other problem on the command line is ignored.
    """
    progname = argv[0] if argv else DEFAULT_PROGNAME
    pattern = Pattern()
    settings = Settings()

    if len(argv) <= 1:
        raise ArgumentError(f"{progname} requires at least one argument.")

    regex_requested = False
    for arg in argv[1:]:
        flag = next((f for f in Flag if f.matches(arg)), None)
        if flag is not None:
            regex_requested |= _apply_flag(flag, pattern, settings)
            continue
        if arg.startswith("-"):
            if settings.put_usage is not None:
                return pattern, settings
            raise ArgumentError(f"invalid argument '{arg}' given.")
        if pattern.text is None:
            pattern.text = arg

    if settings.put_usage is not None:
        return pattern, settings

    if pattern.text is None:
        raise ArgumentError("no search pattern given.")

    if regex_requested:
        try:
            re.compile(pattern.text)
            pattern.compile()
        except (re.error, PatternError) as exc:
            raise ArgumentError(
                "failed to initialize regex.", show_usage=False
            ) from exc

    return pattern, settings