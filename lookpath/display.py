"""Output formats for the matched filenames."""

from __future__ import annotations

from typing import TextIO

from lookpath.labels import LabelStack

TREE_LAST = "└─ "
TREE_REST = "├─ "


def display_tree(stream: TextIO, stack: LabelStack) -> None:
    """Write each directory followed by its matches drawn as a tree."""
    for label, items in stack.groups():
        stream.write(f"{label.name}:\n")
        *rest, last = items
        for item in rest:
            stream.write(f"{TREE_REST}{item}\n")
        stream.write(f"{TREE_LAST}{last}\n")


def display_paths(stream: TextIO, stack: LabelStack) -> None:
    """Write each match as a full path, one per line."""
    for label, items in stack.groups():
        for item in items:
            stream.write(f"{label.name}/{item}\n")