"""Searching the directories of a PATH-style variable."""

from __future__ import annotations

import os

from lookpath.labels import PATH_MAX, LabelStack
from lookpath.search import Pattern


def look_directory(stack: LabelStack, pattern: Pattern, path: str) -> int:
    """Push the matching, non-hidden entries of ``path`` and return how many.

    Raises OSError when the directory cannot be read.
    """
    count = 0
    for name in os.listdir(path):
        if name.startswith("."):
            continue
        if not pattern.find(name):
            continue
        stack.push_item(name)
        count += 1
    return count


def _directories(path_var: str) -> list[str]:
    """Split ``path_var`` on colons, ignoring a single trailing separator."""
    parts = path_var.split(":")
    if parts[-1] == "":
        parts.pop()
    return parts


def look_path(stack: LabelStack, pattern: Pattern, path_var: str) -> int:
    """Search every directory in ``path_var`` and label the matches found.

    Returns the number of directories that were unusable or had no match.
    """
    failures = 0
    for directory in _directories(path_var):
        start = len(stack.items)
        if len(os.fsencode(directory)) >= PATH_MAX:
            failures += 1
            continue
        try:
            matches = look_directory(stack, pattern, directory)
        except OSError:
            failures += 1
            continue
        if matches < 1:
            failures += 1
            continue
        stack.push_label(directory, start, matches)
    return failures