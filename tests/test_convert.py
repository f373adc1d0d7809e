"""
Tests for NetworkX interop (from_networkx / to_networkx).
"""

import networkx as nx
import pytest

from tri_graph.store import (
    AdjacencyGraph,
    InvalidArgumentError,
    StoreConfig,
    from_networkx,
    to_networkx,
)


class TestFromNetworkX:
    """Tests for building a store from networkx graphs."""

    def test_keeps_edges_and_isolated_nodes(self):
        G = nx.path_graph(4)
        G.add_node(10)

        graph = from_networkx(G)

        assert sorted(graph.vertices()) == [0, 1, 2, 3, 10]
        assert graph.number_of_edges() == 3
        assert graph.is_adjacent(2, 1)
        assert graph.degree(10) == 0

    def test_directed_arcs_become_undirected(self):
        D = nx.DiGraph([(1, 2), (2, 1), (2, 3)])
        graph = from_networkx(D)
        assert graph.number_of_edges() == 2
        assert graph.is_adjacent(3, 2)

    def test_self_loops_rejected(self):
        G = nx.Graph([(1, 2), (2, 2)])
        with pytest.raises(InvalidArgumentError, match="self-loop"):
            from_networkx(G)

    def test_non_integer_nodes_rejected(self):
        G = nx.Graph([("a", "b")])
        with pytest.raises(InvalidArgumentError):
            from_networkx(G)

    def test_config_is_applied(self):
        config = StoreConfig(auto_create_vertices=False)
        graph = from_networkx(nx.complete_graph(3), config=config)
        assert graph.config is config
        assert graph.number_of_edges() == 3


class TestToNetworkX:
    """Tests for exporting a store to networkx."""

    def test_round_trip(self):
        G = nx.gnp_random_graph(40, 0.1, seed=7)
        G.add_node(99)

        H = to_networkx(from_networkx(G))

        assert set(H.nodes) == set(G.nodes)
        assert {frozenset(e) for e in H.edges} == {frozenset(e) for e in G.edges}

    def test_export_matches_store(self):
        graph = AdjacencyGraph.from_edges([(1, 2), (2, 3), (3, 1)])
        graph.add_vertex(-4)

        G = to_networkx(graph)

        assert isinstance(G, nx.Graph)
        assert not G.is_directed()
        assert G.number_of_nodes() == 4
        assert G.number_of_edges() == 3
        assert sum(nx.triangles(G).values()) // 3 == 1
