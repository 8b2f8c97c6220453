"""Command-line entry point: search $PATH for matching filenames."""

from __future__ import annotations

import os
import sys

from lookpath.arguments import DEFAULT_PROGNAME, ArgumentError, parse_arguments
from lookpath.flags import usage
from lookpath.labels import LabelStack
from lookpath.lookup import look_path


def _progname() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return DEFAULT_PROGNAME


def main(argv: list[str] | None = None) -> int:
    """Run the search over $PATH and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    progname = _progname()

    env_path = os.environ.get("PATH", "")
    if not env_path:
        print("$PATH isn't defined!!!", file=sys.stderr)
        usage(sys.stderr, progname)
        return 1

    try:
        pattern, settings = parse_arguments([progname, *argv])
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        if exc.show_usage:
            usage(sys.stderr, progname)
        return 1

    if settings.put_usage is not None:
        usage(settings.put_usage, progname)
        return 0

    stack = LabelStack()
    try:
        look_path(stack, pattern, env_path)
    except MemoryError:
        print("could not finish searching paths", file=sys.stderr)
        return 1

    settings.display(sys.stdout, stack)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())