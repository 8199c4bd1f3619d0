"""Exception types raised by graphwalk.

Errors raised by caller-supplied successor functions and trackers are never
wrapped; they reach the consumer unchanged from the ``next()`` call that
triggered them.
"""

from __future__ import annotations


class GraphWalkError(Exception):
    """Base class for errors raised by graphwalk itself."""


class UsageError(GraphWalkError, ValueError):
    """An argument or reported node violates the API contract.

    Raised for ``None`` start nodes, non-callable successor functions or
    trackers, ``None`` nodes reported to the shortest-path engines and unknown
    traversal order names.
    """


class InvalidEdgeWeightError(GraphWalkError, ValueError):
    """A weighted successor function reported a negative distance."""

    def __init__(self, distance: float) -> None:
        super().__init__(f"distance cannot be negative: {distance}")
        self.distance = distance
