"""Search patterns that decide which filenames match."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum


class SearchMethod(Enum):
    """How a pattern is compared with a filename."""

    LOOK = "look"
    REGEX = "regex"


class PatternError(ValueError):
    """Raised when a pattern is missing or cannot be compiled."""


def look_match(pattern: str, text: str) -> bool:
    """Return True if ``text`` begins with ``pattern``."""
    return text.startswith(pattern)


def regex_match(regex: re.Pattern[str], text: str) -> bool:
    """Return True if ``regex`` matches anywhere in ``text``."""
    return regex.search(text) is not None


@dataclass
class Pattern:
    """A search string together with the method used to apply it."""

    text: str | None = None
    method: SearchMethod = SearchMethod.LOOK
    _regex: re.Pattern[str] | None = field(default=None, init=False, repr=False)

    def compile(self) -> None:
        """Prepare the pattern for searching, compiling it when it is a regex."""
        if self.text is None:
            raise PatternError("no search pattern given")
        if self.method is SearchMethod.REGEX:
            try:
                self._regex = re.compile(self.text)
            except re.error as exc:
                raise PatternError(f"failed to initialize regex: {exc}") from exc

    def find(self, text: str) -> bool:
        """Return True if ``text`` matches this pattern."""
        if self.text is None:
            raise PatternError("no search pattern given")
        if self.method is SearchMethod.REGEX:
            if self._regex is None or self._regex.pattern != self.text:
                self.compile()
            assert self._regex is not None
            return regex_match(self._regex, text)
        return look_match(self.text, text)