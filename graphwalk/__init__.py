"""graphwalk: lazy traversal and shortest paths over implicit graphs.

A graph is described only by a function mapping a node to its successors.
Every traversal and search is a generator producing one element per ``next()``
call, so infinite graphs can be explored and consumers can stop at any time.

Primary API:
    Walker - pre-order, post-order and breadth-first traversal
    detect_cycle_from() - find a cycle reachable from a node
    shortest_paths_from() - incremental Dijkstra over weighted successors
    unweighted_shortest_paths_from() - breadth-first shortest paths
    unweighted_shortest_cycles_from() - shortest cycles through a node
    Path - immutable route with cumulative distance

Example:
    from graphwalk import Walker, shortest_paths_from

    edges = {"foo": ["bar"], "bar": ["baz"]}
    walker = Walker.in_graph(edges.get)
    list(walker.post_order_from("foo"))  # ['baz', 'bar', 'foo']

    roads = {"A": {"B": 1, "C": 4}, "B": {"C": 1}}
    for path in shortest_paths_from("A", roads.get):
        print(path, path.distance)  # A 0, A->B 1, A->B->C 2
"""

from __future__ import annotations

from graphwalk import logging
from graphwalk._version import __version__
from graphwalk.algorithms.bfs import (
    unweighted_shortest_cycles_from,
    unweighted_shortest_paths_from,
)
from graphwalk.algorithms.cycles import detect_cycle_from, has_cycle_from
from graphwalk.algorithms.spf import shortest_path, shortest_paths_from
from graphwalk.algorithms.trackers import (
    AcceptAllTracker,
    SetTracker,
    ThreadSafeTracker,
    tracker_from_set,
)
from graphwalk.algorithms.traversal import (
    Walker,
    breadth_first,
    post_order,
    pre_order,
)
from graphwalk.config import WALK_CONFIG, WalkConfig
from graphwalk.exceptions import GraphWalkError, InvalidEdgeWeightError, UsageError
from graphwalk.model.path import Path
from graphwalk.types.base import TraversalOrder

__all__ = [
    # Version
    "__version__",
    # Traversal
    "Walker",
    "TraversalOrder",
    "pre_order",
    "post_order",
    "breadth_first",
    # Trackers
    "SetTracker",
    "AcceptAllTracker",
    "ThreadSafeTracker",
    "tracker_from_set",
    # Cycles
    "detect_cycle_from",
    "has_cycle_from",
    # Shortest paths
    "shortest_paths_from",
    "shortest_path",
    "unweighted_shortest_paths_from",
    "unweighted_shortest_cycles_from",
    "Path",
    # Errors
    "GraphWalkError",
    "UsageError",
    "InvalidEdgeWeightError",
    # Configuration
    "WalkConfig",
    "WALK_CONFIG",
    # Utilities
    "logging",
]
