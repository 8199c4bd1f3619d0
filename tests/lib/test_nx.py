"""Tests for graphwalk.lib.nx NetworkX successor functions."""

import networkx as nx

from graphwalk import Walker, shortest_paths_from
from graphwalk.lib.nx import successors_from_networkx, weighted_successors_from_networkx


class TestSuccessorsFromNetworkx:
    def test_directed_reports_out_neighbors(self):
        g = nx.DiGraph([("A", "B"), ("C", "A")])
        find = successors_from_networkx(g)
        assert find("A") == ["B"]
        assert find("B") == []

    def test_undirected_reports_all_neighbors(self):
        g = nx.Graph([("A", "B"), ("C", "A")])
        find = successors_from_networkx(g, sort=True)
        assert find("A") == ["B", "C"]

    def test_unknown_node_is_leaf(self):
        find = successors_from_networkx(nx.DiGraph([("A", "B")]))
        assert find("Z") is None

    def test_sort_is_independent_of_insertion_order(self):
        g = nx.DiGraph([("A", "C"), ("A", "B")])
        assert successors_from_networkx(g)("A") == ["C", "B"]
        assert successors_from_networkx(g, sort=True)("A") == ["B", "C"]

    def test_multigraph_neighbors_reported_once(self):
        g = nx.MultiDiGraph([("A", "B"), ("A", "B")])
        assert successors_from_networkx(g)("A") == ["B"]

    def test_drives_walker(self):
        g = nx.balanced_tree(2, 3, create_using=nx.DiGraph)
        nodes = list(Walker.in_tree(successors_from_networkx(g)).breadth_first_from(0))
        assert nodes == list(range(15))


class TestWeightedSuccessorsFromNetworkx:
    def test_weights_from_attribute(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", cost=3)
        g.add_edge("A", "C", cost=1)
        find = weighted_successors_from_networkx(g)
        assert sorted(find("A")) == [("B", 3), ("C", 1)]

    def test_custom_attribute_and_default(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", latency=7)
        g.add_edge("A", "C")
        find = weighted_successors_from_networkx(g, weight="latency", default=2)
        assert sorted(find("A")) == [("B", 7), ("C", 2)]

    def test_multigraph_uses_min_parallel_edge(self):
        g = nx.MultiDiGraph()
        g.add_edge("A", "B", cost=5)
        g.add_edge("A", "B", cost=2)
        g.add_edge("A", "B", cost=9)
        find = weighted_successors_from_networkx(g)
        assert list(find("A")) == [("B", 2)]

    def test_unknown_node_has_no_successors(self):
        find = weighted_successors_from_networkx(nx.DiGraph([("A", "B")]))
        assert list(find("Z")) == []

    def test_drives_shortest_paths(self):
        g = nx.MultiDiGraph()
        g.add_edge("A", "B", cost=1)
        g.add_edge("A", "B", cost=10)
        g.add_edge("B", "C", cost=1)
        g.add_edge("A", "C", cost=4)
        paths = list(shortest_paths_from("A", weighted_successors_from_networkx(g)))
        assert [(str(p), p.distance) for p in paths] == [
            ("A", 0),
            ("A->B", 1),
            ("A->B->C", 2),
        ]
