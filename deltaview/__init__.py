"""Diff-viewing building blocks: token alignment, tokenization, ANSI handling and colors."""

__version__ = "0.1.0"

__all__ = [
    "align",
    "ansi",
    "ansi_iterator",
    "colors",
    "env",
    "tokens",
]