"""Incremental shortest-path-first (SPF) over implicit weighted graphs.

Implements Dijkstra's algorithm as a generator. The graph is described only by
a weighted successor function, and each ``next()`` call settles exactly one
more node, so consumers can stop as soon as they have what they need without
exploring the rest of the graph.

Example:
    Find the three closest nodes matching a predicate without a full search::

        nearest = []
        for path in shortest_paths_from(here, neighbors_with_distances):
            if is_interesting(path.to):
                nearest.append(path)
                if len(nearest) == 3:
                    break

Notes:
    - Paths are produced in non-decreasing distance order, one per reachable
      node, starting with the start node at distance 0.
    - Ties in distance are broken by discovery order; callers should not rely
      on the order of equidistant nodes.
    - The heap may hold stale entries for nodes already settled; they are
      discarded within the same ``next()`` call.
    - A single iterator must not be advanced from several threads at once.
"""

from __future__ import annotations

from collections.abc import Mapping
from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple, Union

from graphwalk.algorithms.common import check_search_arguments
from graphwalk.exceptions import InvalidEdgeWeightError, UsageError
from graphwalk.logging import get_logger, log_progress
from graphwalk.model.path import Path, PathArena
from graphwalk.types.base import Distance, Node, WeightedSuccessorFunction
from graphwalk.utils.streams import while_not_empty

logger = get_logger(__name__)


def shortest_paths_from(
    start_node: Node, find_successors: WeightedSuccessorFunction
) -> Iterator[Path]:
    """Return a lazy iterator of shortest paths from ``start_node``.

    ``find_successors`` is called once per settled node, when that node is
    emitted, and must report the node's direct neighbors with their edge
    distances, either as ``(neighbor, distance)`` pairs or as a mapping.

    Args:
        start_node: Node to start from. Must be hashable.
        find_successors: Weighted successor function. ``None`` means no
            successors.

    Returns:
        Iterator of :class:`Path`, one per reachable node, in non-decreasing
        order of :attr:`Path.distance`.

    Raises:
        UsageError: Eagerly, if ``start_node`` is None or ``find_successors``
            is not callable; lazily, from the ``next()`` call that settles a
            node whose successors include None.
        InvalidEdgeWeightError: From the ``next()`` call that settles a node
            with a negative outgoing distance. Paths emitted earlier remain
            valid.
    """
    check_search_arguments(start_node, find_successors)
    paths = _dijkstra(start_node, find_successors)
    return log_progress(paths, logger, f"SPF from {start_node!r}", "paths")


def shortest_path(
    start_node: Node, end_node: Node, find_successors: WeightedSuccessorFunction
) -> Optional[Path]:
    """Return the shortest path from ``start_node`` to ``end_node``.

    The search stops as soon as ``end_node`` is settled.

    Returns:
        The shortest path, or None if ``end_node`` is unreachable.
    """
    if end_node is None:
        raise UsageError("end node is None")
    for path in shortest_paths_from(start_node, find_successors):
        if path.to == end_node:
            return path
    return None


def _dijkstra(
    start_node: Node, find_successors: WeightedSuccessorFunction
) -> Iterator[Path]:
    arena = PathArena()
    start = arena.root(start_node)
    # Entries are (distance, tie_breaker, record index); the tie breaker keeps
    # heap comparisons away from nodes, which need not be orderable.
    tie_breaker = count()
    min_pq: List[Tuple[Distance, int, int]] = [(0, next(tie_breaker), start.index)]
    seen: Dict[Node, Distance] = {}
    done: Set[Node] = set()

    for _, _, index in while_not_empty(min_pq, heappop):
        path = Path(arena, index)
        node = path.to
        if node in done:
            continue
        done.add(node)

        for neighbor, distance in _weighted_edges(find_successors(node)):
            if neighbor is None:
                raise UsageError(f"successor function reported a None node for {node!r}")
            if distance < 0:
                raise InvalidEdgeWeightError(distance)
            if neighbor in done:
                continue
            new_cost = path.distance + distance
            if neighbor not in seen or new_cost < seen[neighbor]:
                seen[neighbor] = new_cost
                shorter = path.extend_to(neighbor, distance)
                heappush(min_pq, (new_cost, next(tie_breaker), shorter.index))

        yield path

    logger.debug(
        "SPF from %r settled %d nodes (%d path records)",
        start_node,
        len(done),
        len(arena),
    )


def _weighted_edges(
    successors: Optional[
        Union[Iterable[Tuple[Node, Distance]], Mapping[Node, Distance]]
    ],
) -> Iterable[Tuple[Node, Distance]]:
    if successors is None:
        return ()
    if isinstance(successors, Mapping):
        return successors.items()
    return successors
