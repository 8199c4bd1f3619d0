"""Lazy pre-order, post-order and breadth-first graph traversal.

Graphs are never materialized: a traversal only knows a successor function
``find_successors(node) -> Iterable | None`` and a tracker deciding whether a
node is visited. Every traversal is a generator that computes exactly one node
per ``next()`` call, so infinite graphs can be walked and consumers can stop at
any time without any further work being done.

Notes:
    Traversal state is an explicit frontier ("horizon") of successor
    iterators held in a deque rather than the Python call stack, so arbitrarily
    deep graphs cannot hit the recursion limit. Depth-first orders use the
    deque as a stack of batches, breadth-first uses it as a queue.

    A single traversal iterator must not be advanced from more than one thread
    at a time. Independent iterators created from the same :class:`Walker` may
    run concurrently if ``find_successors`` is thread-safe.

Example:
    >>> edges = {"foo": ["bar"], "bar": ["baz"]}
    >>> walker = Walker.in_graph(lambda n: edges.get(n))
    >>> list(walker.pre_order_from("foo"))
    ['foo', 'bar', 'baz']
    >>> list(walker.post_order_from("foo"))
    ['baz', 'bar', 'foo']
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterator, List, Optional, Tuple, Union

from graphwalk.algorithms.common import check_callable, check_start_nodes
from graphwalk.algorithms.trackers import AcceptAllTracker, SetTracker
from graphwalk.exceptions import UsageError
from graphwalk.logging import get_logger, log_progress
from graphwalk.types.base import Node, SuccessorFunction, Tracker, TraversalOrder

logger = get_logger(__name__)

# Returned by _Traversal._visit_next when the front batch ran out.
_EXHAUSTED = object()


class _Traversal:
    """Mutable state of one traversal: the horizon and the tracker.

    Created fresh for every call on :class:`Walker`; owned by exactly one
    generator.
    """

    def __init__(self, find_successors: SuccessorFunction, tracker: Tracker) -> None:
        self._find_successors = find_successors
        self._tracker = tracker
        self._horizon: Deque[Iterator[Node]] = deque()

    def pre_order(self, start_nodes: Tuple[Node, ...]) -> Iterator[Node]:
        self._horizon.appendleft(iter(start_nodes))
        return self._top_down(self._horizon.appendleft)

    def breadth_first(self, start_nodes: Tuple[Node, ...]) -> Iterator[Node]:
        self._horizon.append(iter(start_nodes))
        return self._top_down(self._horizon.append)

    def post_order(self, start_nodes: Tuple[Node, ...]) -> Iterator[Node]:
        self._horizon.appendleft(iter(start_nodes))
        return self._bottom_up()

    def _top_down(self, insert: Callable[[Iterator[Node]], None]) -> Iterator[Node]:
        horizon = self._horizon
        while horizon:
            node = self._visit_next()
            if node is _EXHAUSTED:
                continue
            successors = self._find_successors(node)
            if successors is not None:
                insert(iter(successors))
            yield node

    def _bottom_up(self) -> Iterator[Node]:
        horizon = self._horizon
        # Accepted nodes whose successors are still being explored.
        roots: List[Node] = []
        while horizon:
            node = self._visit_next()
            if node is _EXHAUSTED:
                # The batch that just ran out belongs to the top root.
                if roots:
                    yield roots.pop()
                continue
            successors = self._find_successors(node)
            if successors is None:
                yield node
                continue
            horizon.appendleft(iter(successors))
            roots.append(node)

    def _visit_next(self) -> object:
        """Draw from the front batch until the tracker accepts a node.

        Returns:
            The accepted node, or ``_EXHAUSTED`` after dropping the front
            batch because it has no more nodes.
        """
        top = self._horizon[0]
        for node in top:
            if node is None:
                raise UsageError("successor function reported a None node")
            if self._tracker(node):
                return node
        self._horizon.popleft()
        return _EXHAUSTED


class Walker:
    """Reusable traversal configuration over a successor function.

    A walker holds no traversal state. Every ``*_from`` call creates a fresh
    horizon and, unless a shared tracker was supplied, a fresh tracker, so one
    walker can serve any number of independent traversals.

    Use :meth:`in_graph` for structures that may contain cycles or shared
    descendants and :meth:`in_tree` for trees.
    """

    def __init__(
        self, find_successors: SuccessorFunction, new_tracker: Callable[[], Tracker]
    ) -> None:
        self._find_successors = find_successors
        self._new_tracker = new_tracker

    @classmethod
    def in_tree(cls, find_children: SuccessorFunction) -> "Walker":
        """Return a walker for tree structures (no cycles, no shared children).

        No visited set is kept, so memory stays proportional to the horizon.
        The walker loops forever if ``find_children`` turns out to be cyclic.

        Args:
            find_children: Function returning the children of a node.
                ``None`` or an empty iterable means no children.

        Raises:
            UsageError: If ``find_children`` is not callable.
        """
        check_callable(find_children, "find_children")
        return cls(find_children, AcceptAllTracker)

    @classmethod
    def in_graph(
        cls,
        find_successors: SuccessorFunction,
        tracker: Optional[Tracker] = None,
    ) -> "Walker":
        """Return a walker for graph structures, possibly with cycles.

        Args:
            find_successors: Function returning the successors of a node.
                ``None`` or an empty iterable means no successors.
            tracker: Optional test-and-mark predicate deciding whether a node
                is visited. When omitted, every traversal gets its own
                :class:`SetTracker` and memory grows linearly with the number
                of visited nodes. When given, all traversals from this walker
                share it; pass a :class:`ThreadSafeTracker` to let traversals on
                several threads split one walk between them.

        Raises:
            UsageError: If ``find_successors`` or ``tracker`` is not callable.
        """
        check_callable(find_successors, "find_successors")
        if tracker is None:
            return cls(find_successors, SetTracker)
        check_callable(tracker, "tracker")
        return cls(find_successors, lambda: tracker)

    def pre_order_from(self, *start_nodes: Node) -> Iterator[Node]:
        """Walk depth first from ``start_nodes``, emitting nodes before their successors.

        The result may be infinite if the graph has infinite depth or breadth;
        it can still be consumed partially.

        Raises:
            UsageError: If any start node is None.
        """
        return self.walk(TraversalOrder.PRE_ORDER, *start_nodes)

    def post_order_from(self, *start_nodes: Node) -> Iterator[Node]:
        """Walk depth first from ``start_nodes``, emitting nodes after their descendants.

        A node can only be emitted once its successor iterable is exhausted,
        so the traversal never gets past a node with infinitely many direct
        successors.

        Raises:
            UsageError: If any start node is None.
        """
        return self.walk(TraversalOrder.POST_ORDER, *start_nodes)

    def breadth_first_from(self, *start_nodes: Node) -> Iterator[Node]:
        """Walk level by level from ``start_nodes``.

        The result may be infinite if the graph has infinite depth or breadth;
        it can still be consumed partially.

        Raises:
            UsageError: If any start node is None.
        """
        return self.walk(TraversalOrder.BREADTH_FIRST, *start_nodes)

    def walk(
        self, order: Union[TraversalOrder, int, str], *start_nodes: Node
    ) -> Iterator[Node]:
        """Walk from ``start_nodes`` in the given order.

        Args:
            order: A :class:`TraversalOrder`, its integer value, or its
                case-insensitive name.
            *start_nodes: Nodes forming the first batch of the horizon.

        Returns:
            A lazy iterator of visited nodes.

        Raises:
            UsageError: If ``order`` is unknown or any start node is None.
        """
        order = TraversalOrder.coerce(order)
        check_start_nodes(start_nodes)
        traversal = _Traversal(self._find_successors, self._new_tracker())
        if order == TraversalOrder.PRE_ORDER:
            nodes = traversal.pre_order(start_nodes)
        elif order == TraversalOrder.POST_ORDER:
            nodes = traversal.post_order(start_nodes)
        else:
            nodes = traversal.breadth_first(start_nodes)
        logger.debug(
            "Starting %s traversal from %d start node(s)",
            order.name.lower(),
            len(start_nodes),
        )
        return log_progress(nodes, logger, f"{order.name.lower()} traversal", "nodes")


def pre_order(start_node: Node, find_successors: SuccessorFunction) -> Iterator[Node]:
    """Walk a graph depth first in pre-order from a single start node."""
    return Walker.in_graph(find_successors).pre_order_from(start_node)


def post_order(start_node: Node, find_successors: SuccessorFunction) -> Iterator[Node]:
    """Walk a graph depth first in post-order from a single start node."""
    return Walker.in_graph(find_successors).post_order_from(start_node)


def breadth_first(
    start_node: Node, find_successors: SuccessorFunction
) -> Iterator[Node]:
    """Walk a graph breadth first from a single start node."""
    return Walker.in_graph(find_successors).breadth_first_from(start_node)
