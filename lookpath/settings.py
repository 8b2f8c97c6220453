"""Run-time settings chosen by the command-line flags."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from lookpath.display import display_tree, display_paths
from lookpath.labels import LabelStack

Display = Callable[[TextIO, LabelStack], None]


@dataclass
class Settings:
    """Where usage goes, if anywhere, and how matches are displayed."""

    put_usage: TextIO | None = None
    display: Display = display_tree

    def use_tree(self) -> None:
        """Display matches as trees."""
        self.display = display_tree

    def use_path_list(self) -> None:
        """Display matches as full paths."""
        self.display = display_paths

    def request_usage(self) -> None:
        """Ask for the usage text on standard output."""
        self.put_usage = sys.stdout