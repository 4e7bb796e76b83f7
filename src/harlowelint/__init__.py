"""Harlowe Linter: validate Harlowe macros in Twee story files."""

__version__ = "1.0.0"
