"""Shared typing constructs for graphwalk.

This package defines the public type aliases used to describe nodes,
successor functions and trackers, plus the traversal order enum. It contains
no traversal logic.
"""

from graphwalk.types.base import (
    Distance,
    Node,
    SuccessorFunction,
    Tracker,
    TraversalOrder,
    WeightedSuccessorFunction,
)

__all__ = [
    # Enums
    "TraversalOrder",
    # Type aliases
    "Node",
    "Distance",
    "SuccessorFunction",
    "WeightedSuccessorFunction",
    "Tracker",
]
