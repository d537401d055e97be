"""Shell-style word splitting."""

from .lexer import split, split_with_comments

__all__ = ["split", "split_with_comments"]

__version__ = "1.0"
