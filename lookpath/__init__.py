"""Search the directories in $PATH for file names matching a pattern."""

__version__ = "0.1.0"
__all__ = ["__version__"]