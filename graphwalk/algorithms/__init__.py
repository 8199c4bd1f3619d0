"""Traversal, cycle detection and shortest-path engines."""

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

__all__ = [
    # Traversal
    "Walker",
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
]
