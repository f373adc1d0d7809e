"""
NetworkX interop for the adjacency store.

Lets callers build an AdjacencyGraph from any networkx graph (generators,
readers, fixtures) and hand a store back to networkx for analysis the
estimator does not cover.
"""

import networkx as nx

from .adjacency import AdjacencyGraph
from .base import InvalidArgumentError, StoreConfig


def from_networkx(G: nx.Graph, config: StoreConfig | None = None) -> AdjacencyGraph:
    """
    Build an AdjacencyGraph from a networkx graph.

    Isolated nodes are kept. Edge attributes and direction are dropped;
    a directed graph contributes each arc as an undirected edge.

    Args:
        G: Source networkx graph with integer node ids
        config: Store configuration for the new graph

    Returns:
        Populated AdjacencyGraph

    Raises:
        InvalidArgumentError: If G contains a self-loop or a non-integer node
    """
    if nx.number_of_selfloops(G):
        raise InvalidArgumentError(
            f"Source graph has {nx.number_of_selfloops(G)} self-loop(s); "
            "remove them with G.remove_edges_from(nx.selfloop_edges(G))"
        )

    graph = AdjacencyGraph(config)
    for node in G.nodes:
        graph.add_vertex(node)
    for u, v in G.edges():
        graph.add_edge(u, v)
    return graph


def to_networkx(graph: AdjacencyGraph) -> nx.Graph:
    """Export an AdjacencyGraph as an undirected networkx Graph."""
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    for u in graph.vertices():
        G.add_edges_from((u, v) for v in graph.neighbors(u) if u < v)
    return G
