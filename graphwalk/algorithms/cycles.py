"""Cycle detection on top of the post-order traversal."""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from graphwalk.algorithms.common import check_search_arguments
from graphwalk.algorithms.traversal import Walker
from graphwalk.logging import get_logger
from graphwalk.types.base import Node, SuccessorFunction

logger = get_logger(__name__)


class _OpenRouteTracker:
    """Tracker that also remembers which nodes are still being explored.

    ``open_nodes`` is insertion ordered and, during a post-order walk, always
    spells out the depth-first route from the start node to the node whose
    successors are being drawn. Meeting a visited node that is still open
    means the route has an edge back into itself.
    """

    def __init__(self) -> None:
        self.seen: Set[Node] = set()
        self.open_nodes: Dict[Node, None] = {}
        self.cycle: Optional[List[Node]] = None

    def __call__(self, node: Node) -> bool:
        if node not in self.seen:
            self.seen.add(node)
            self.open_nodes[node] = None
            return True
        # First back edge wins; later ones are ignored.
        if self.cycle is None and node in self.open_nodes:
            self.cycle = [*self.open_nodes, node]
        return False

    def close(self, node: Node) -> None:
        self.open_nodes.pop(node, None)


def detect_cycle_from(start_node: Node, find_successors: SuccessorFunction) -> List[Node]:
    """Find a cycle reachable from ``start_node``.

    Walks the graph in post-order and records the first edge leading back
    into the route currently being explored. The walk stops at the next
    post-order emission after that. Only one cycle is reported, and it is
    not necessarily the shortest.

    Hangs if the graph is infinite and acyclic (e.g. the natural numbers), or
    if no node is emitted after the back edge because the walk descends into
    an infinite branch first.

    Args:
        start_node: Node to start walking from.
        find_successors: Function returning the successors of a node.

    Returns:
        The route from ``start_node`` into the cycle, ending with the node
        that closes it. For ``A -> B -> A`` the result is ``[A, B, A]``; for
        ``A -> B -> C -> B`` it is ``[A, B, C, B]``. Empty if no cycle is
        reachable.

    Raises:
        UsageError: If ``start_node`` is None or ``find_successors`` is not
            callable.
    """
    check_search_arguments(start_node, find_successors)
    tracker = _OpenRouteTracker()
    walker = Walker.in_graph(find_successors, tracker)
    for node in walker.post_order_from(start_node):
        if tracker.cycle is not None:
            logger.debug(
                "Cycle detected from %r: %d nodes", start_node, len(tracker.cycle)
            )
            return tracker.cycle
        tracker.close(node)
    logger.debug("No cycle reachable from %r", start_node)
    return []


def has_cycle_from(start_node: Node, find_successors: SuccessorFunction) -> bool:
    """Return True if a cycle is reachable from ``start_node``."""
    return bool(detect_cycle_from(start_node, find_successors))
