"""Utility helpers used across graphwalk.

This package contains small, self-contained utilities that do not depend on
project internals. Keep modules minimal and focused.
"""

from graphwalk.utils.streams import generate, while_not_empty

__all__ = [
    "generate",
    "while_not_empty",
]
