"""Visitation trackers for the traversal engine.

A tracker is any callable ``tracker(node) -> bool`` that returns True exactly
when the node should be visited and records the visit as a side effect. The
traversal engine only ever calls it; swapping the tracker swaps the
visitation policy.
"""

from __future__ import annotations

import threading
from typing import Any, Iterator, MutableSet, Optional

from graphwalk.types.base import Node, Tracker


class SetTracker:
    """Track visited nodes in a hash set. This is the default tracker.

    Args:
        seen: Optional set to record into. Any object with ``add`` and
            ``__contains__`` works, e.g. a set keyed by a custom equivalence.
    """

    def __init__(self, seen: Optional[MutableSet[Node]] = None) -> None:
        self.seen: MutableSet[Node] = set() if seen is None else seen

    def __call__(self, node: Node) -> bool:
        if node in self.seen:
            return False
        self.seen.add(node)
        return True

    def __contains__(self, node: Any) -> bool:
        return node in self.seen

    def __len__(self) -> int:
        return len(self.seen)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.seen)


class AcceptAllTracker:
    """Accept every node. Used for trees, where no node is reachable twice."""

    def __call__(self, node: Node) -> bool:
        return True


class ThreadSafeTracker(SetTracker):
    """Lock-guarded :class:`SetTracker` shared by collaborating traversals.

    Several traversals running on different threads may share one instance to
    split a single walk between them: each node is accepted by exactly one
    tracker call process-wide, whichever thread claims it first.
    """

    def __init__(self, seen: Optional[MutableSet[Node]] = None) -> None:
        super().__init__(seen)
        self._lock = threading.Lock()

    def __call__(self, node: Node) -> bool:
        with self._lock:
            return super().__call__(node)


def tracker_from_set(seen: MutableSet[Node]) -> Tracker:
    """Adapt a caller-owned set into a tracker that records into it.

    Args:
        seen: Set to record visited nodes into. Nodes already present are
            treated as visited.

    Returns:
        A tracker backed by ``seen``.
    """
    return SetTracker(seen)
