"""Immutable shortest-path records backed by a per-search arena.

Each search allocates one :class:`PathArena`. Every path discovered during the
search is a single record ``(node, parent_index, distance)`` appended to the
arena; a :class:`Path` is a lightweight handle (arena, index) onto one record.
Extending a path appends one record and never copies the chain, and walking
back to the start node follows parent indexes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, List, Optional, Tuple

from graphwalk.types.base import Distance, Node

#: Parent index of a start node's record.
NO_PARENT = -1


@dataclass
class PathArena:
    """Growable storage for path records created by one search.

    Attributes:
        nodes: Last node of each record.
        parents: Index of the predecessor record, or ``NO_PARENT``.
        distances: Cumulative distance from the start node.
    """

    nodes: List[Node] = field(default_factory=list)
    parents: List[int] = field(default_factory=list)
    distances: List[Distance] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def root(self, node: Node) -> Path:
        """Create the zero-distance path consisting of ``node`` alone."""
        return Path(self, self._append(node, NO_PARENT, 0))

    def extend(self, index: int, node: Node, distance: Distance) -> Path:
        """Append ``node`` to the path at ``index``.

        Args:
            index: Record index of the path being extended.
            node: Node reached by the new edge.
            distance: Length of the new edge; added to the cumulative distance.

        Returns:
            The extended path.
        """
        return Path(self, self._append(node, index, self.distances[index] + distance))

    def _append(self, node: Node, parent: int, distance: Distance) -> int:
        self.nodes.append(node)
        self.parents.append(parent)
        self.distances.append(distance)
        return len(self.nodes) - 1


@dataclass(frozen=True, eq=False)
class Path:
    """A route from a start node to :attr:`to`, with its cumulative distance.

    Paths are immutable. Equality and hashing consider the node sequence and
    the distance, so two paths from different searches compare equal when they
    describe the same route. Ordering (``<``) compares distances only.

    Attributes:
        arena: Storage holding this path's records.
        index: Record index of this path's last node.
    """

    arena: PathArena = field(repr=False)
    index: int

    @property
    def to(self) -> Node:
        """Return the last node of this path."""
        return self.arena.nodes[self.index]

    @property
    def distance(self) -> Distance:
        """Return the distance from the start node to :attr:`to`.

        Zero for the first path emitted by a search, in which case :attr:`to`
        is the start node.
        """
        return self.arena.distances[self.index]

    @property
    def predecessor(self) -> Optional[Path]:
        """Return this path without its last edge, or None for a start path."""
        parent = self.arena.parents[self.index]
        if parent == NO_PARENT:
            return None
        return Path(self.arena, parent)

    @property
    def start(self) -> Node:
        """Return the first node of this path."""
        return self.nodes_seq[0]

    def extend_to(self, node: Node, distance: Distance) -> Path:
        """Return a new path that continues from :attr:`to` to ``node``.

        Args:
            node: Next node.
            distance: Length of the edge from :attr:`to` to ``node``.

        Returns:
            The extended path; ``self`` is unchanged.
        """
        return self.arena.extend(self.index, node, distance)

    @cached_property
    def _chain(self) -> Tuple[int, ...]:
        indexes = []
        parents = self.arena.parents
        current = self.index
        while current != NO_PARENT:
            indexes.append(current)
            current = parents[current]
        indexes.reverse()
        return tuple(indexes)

    @cached_property
    def nodes_seq(self) -> Tuple[Node, ...]:
        """Return the nodes from the start node to :attr:`to`, in order."""
        nodes = self.arena.nodes
        return tuple(nodes[i] for i in self._chain)

    def items(self) -> Tuple[Tuple[Node, Distance], ...]:
        """Return ``(node, cumulative distance)`` for every node along the path.

        Returns:
            Pairs in order from the start node (distance 0) to :attr:`to`.
        """
        nodes = self.arena.nodes
        distances = self.arena.distances
        return tuple((nodes[i], distances[i]) for i in self._chain)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes_seq)

    def __len__(self) -> int:
        """Return the number of nodes in the path."""
        return len(self._chain)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes_seq[idx]

    def __lt__(self, other: Any) -> bool:
        """Compare two paths based on their distance.

        Returns NotImplemented if `other` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.distance < other.distance

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.nodes_seq == other.nodes_seq and self.distance == other.distance

    def __hash__(self) -> int:
        return hash((self.nodes_seq, self.distance))

    def __str__(self) -> str:
        return "->".join(str(node) for node in self.nodes_seq)

    def __repr__(self) -> str:
        return f"Path({self}, distance={self.distance})"
