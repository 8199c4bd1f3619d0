"""Successor functions backed by NetworkX graphs.

Lets an existing NetworkX graph drive the traversal and shortest-path engines
without converting it. The graph is only read through its adjacency views, so
this module does not import NetworkX at runtime.

Example:
    >>> import networkx as nx
    >>> from graphwalk import shortest_paths_from
    >>> from graphwalk.lib.nx import weighted_successors_from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=1)
    >>> G.add_edge("B", "C", cost=1)
    >>> G.add_edge("A", "C", cost=4)
    >>> [str(p) for p in shortest_paths_from("A", weighted_successors_from_networkx(G))]
    ['A', 'A->B', 'A->B->C']
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, List, Optional, Tuple, Union

from graphwalk.types.base import (
    Distance,
    Node,
    SuccessorFunction,
    WeightedSuccessorFunction,
)

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def successors_from_networkx(graph: NxGraph, sort: bool = False) -> SuccessorFunction:
    """Build a successor function over ``graph``.

    Directed graphs report out-neighbors; undirected graphs report all
    neighbors. Nodes not in the graph are leaves.

    Args:
        graph: Any NetworkX graph.
        sort: If True, successors are reported in sorted order, which makes
            traversal order independent of edge insertion order. Requires
            orderable node names.

    Returns:
        Function mapping a node to its successors.
    """
    adjacency = graph.adj

    def find_successors(node: Node) -> Optional[List[Node]]:
        if node not in adjacency:
            return None
        neighbors = list(adjacency[node])
        if sort:
            neighbors.sort()
        return neighbors

    return find_successors


def weighted_successors_from_networkx(
    graph: NxGraph, weight: str = "cost", default: Distance = 1
) -> WeightedSuccessorFunction:
    """Build a weighted successor function over ``graph``.

    For multigraphs the minimal weight among parallel edges is used, since
    only the cheapest edge can lie on a shortest path.

    Args:
        graph: Any NetworkX graph.
        weight: Edge attribute holding the distance.
        default: Distance for edges without the ``weight`` attribute.

    Returns:
        Function mapping a node to ``(neighbor, distance)`` pairs.
    """
    adjacency = graph.adj
    multigraph = graph.is_multigraph()

    def edge_distance(attrs: dict) -> Distance:
        return attrs.get(weight, default)

    def find_successors(node: Node) -> Iterator[Tuple[Node, Distance]]:
        if node not in adjacency:
            return
        for neighbor, attrs in adjacency[node].items():
            if multigraph:
                yield neighbor, min(edge_distance(a) for a in attrs.values())
            else:
                yield neighbor, edge_distance(attrs)

    return find_successors
