"""Unweighted shortest paths and shortest cycles over implicit graphs.

Breadth-first expansion already yields paths in non-decreasing edge count, so
no priority queue is needed. A node is marked seen when it is discovered, not
when it is emitted, which guarantees each node is expanded at most once.
"""

from __future__ import annotations

from typing import Iterator, Optional, Set

from graphwalk.algorithms.common import check_search_arguments
from graphwalk.exceptions import UsageError
from graphwalk.logging import get_logger, log_progress
from graphwalk.model.path import Path, PathArena
from graphwalk.types.base import Node, SuccessorFunction
from graphwalk.utils.streams import generate

logger = get_logger(__name__)


def unweighted_shortest_paths_from(
    start_node: Node, find_successors: SuccessorFunction
) -> Iterator[Path]:
    """Return a lazy iterator of unweighted shortest paths from ``start_node``.

    The first path is ``start_node`` alone at distance 0, followed by its
    successors at distance 1, and so on. Distances count edges.

    Args:
        start_node: Node to start from. Must be hashable.
        find_successors: Function returning the successors of a node.
            ``None`` means no successors.

    Raises:
        UsageError: Eagerly, if ``start_node`` is None or ``find_successors``
            is not callable; lazily, if a successor is None.
    """
    check_search_arguments(start_node, find_successors)
    seen: Set[Node] = {start_node}

    def discover(node: Node) -> bool:
        if node is None:
            raise UsageError("successor function reported a None node")
        if node in seen:
            return False
        seen.add(node)
        return True

    def expand(path: Path) -> Optional[Iterator[Path]]:
        successors = find_successors(path.to)
        if successors is None:
            return None
        return (path.extend_to(node, 1) for node in successors if discover(node))

    paths = generate(PathArena().root(start_node), expand)
    return log_progress(paths, logger, f"BFS from {start_node!r}", "paths")


def unweighted_shortest_cycles_from(
    start_node: Node, find_successors: SuccessorFunction
) -> Iterator[Path]:
    """Return a lazy iterator of cycles starting and ending at ``start_node``.

    Cycles come in ascending length. For a graph with the two cycles
    ``A -> B -> A`` and ``A -> B -> C -> A``, the iterator yields both, in
    that order. Nothing is yielded if no cycle passes through ``start_node``.

    ``find_successors`` is expected to be deterministic; it is called again on
    each path's last node to test for an edge back to ``start_node``.

    Raises:
        UsageError: Eagerly, if ``start_node`` is None or ``find_successors``
            is not callable.
    """
    paths = unweighted_shortest_paths_from(start_node, find_successors)
    return _closing_paths(paths, start_node, find_successors)


def _closing_paths(
    paths: Iterator[Path], start_node: Node, find_successors: SuccessorFunction
) -> Iterator[Path]:
    for path in paths:
        successors = find_successors(path.to)
        if successors is not None and start_node in successors:
            yield path.extend_to(start_node, 1)
