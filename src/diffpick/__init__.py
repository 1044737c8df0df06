"""Pick changed files from a git diff and open them in an editor."""

__version__ = "0.1.0"
