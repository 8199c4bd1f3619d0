"""Data model package.

Defines the immutable :class:`Path` records produced by the shortest-path
engines and the per-search :class:`PathArena` that stores them.
"""

from graphwalk.model.path import Path, PathArena

__all__ = [
    "Path",
    "PathArena",
]
