"""Directory labels and the filenames grouped under them."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterator
from dataclasses import dataclass, field

PATH_MAX = 4096


@dataclass(frozen=True)
class Label:
    """A directory name covering a run of items in a LabelStack."""

    name: str
    start: int
    count: int


@dataclass
class LabelStack:
    """Filenames found so far, grouped under the directories they came from."""

    labels: list[Label] = field(default_factory=list)
    items: list[str] = field(default_factory=list)

    def push_item(self, entry: str) -> int:
        """Append a filename and return its index."""
        self.items.append(entry)
        return len(self.items) - 1

    def push_label(self, name: str, start: int, count: int) -> Label:
        """Label ``count`` items from ``start`` with the directory ``name``."""
        if len(os.fsencode(name)) >= PATH_MAX:
            raise ValueError(f"label too long: {name!r}")
        if count < 1 or start < 0 or start + count > len(self.items):
            raise ValueError(
                f"label range {start}+{count} outside {len(self.items)} items"
            )
        label = Label(name, start, count)
        self.labels.append(label)
        return label

    def groups(self) -> Iterator[tuple[Label, list[str]]]:
        """Yield each label with the items it covers."""
        for label in self.labels:
            yield label, self.items[label.start:label.start + label.count]


def link_info(path: str | os.PathLike[str]) -> str:
    """Return ``" -> target"`` for a symbolic link, or ``""`` for anything else."""
    try:
        target = os.readlink(path)
    except OSError as exc:
        if exc.errno == errno.EINVAL:
            return ""
        raise
    return f" -> {target}"