"""
Adjacency-set graph store.

Holds an undirected, unweighted graph as a mapping from vertex id to the set
of its neighbors. Every edge mutation updates both endpoints so the mapping
stays symmetric at all times.
"""

import logging
import warnings
from collections.abc import Iterable, Iterator

from .base import (
    CapacityExceededWarning,
    InvalidArgumentError,
    NotFoundError,
    StoreConfig,
    VertexId,
    check_vertex_id,
)

logger = logging.getLogger(__name__)


class AdjacencyGraph:
    """
    In-memory undirected graph backed by neighbor sets.

    Vertices are created explicitly with add_vertex() or implicitly by
    add_edge() when StoreConfig.auto_create_vertices is enabled (default).
    Queries on an absent vertex raise NotFoundError rather than returning
    an empty result.

    Usage:
        graph = AdjacencyGraph()
        graph.add_edge(1, 2)
        graph.add_edge(2, 3)

        graph.is_adjacent(2, 1)   # True
        graph.degree(2)           # 2
        sorted(graph.neighbors(2))  # [1, 3]
    """

    def __init__(self, config: StoreConfig | None = None):
        self.config = config or StoreConfig()
        self._adjacency: dict[VertexId, set[VertexId]] = {}
        self._capacity_warned = False

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[VertexId, VertexId]],
        config: StoreConfig | None = None,
    ) -> "AdjacencyGraph":
        """
        Build a graph from an iterable of (u, v) pairs.

        Endpoints follow the add_edge() creation policy of the config.
        """
        graph = cls(config)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    # === MUTATIONS ===

    def add_vertex(self, v: VertexId) -> None:
        """Create v with no neighbors; no-op if it already exists."""
        if check_vertex_id(v) in self._adjacency:
            return
        self._adjacency[v] = set()
        self._check_capacity()

    def remove_vertex(self, v: VertexId) -> None:
        """
        Remove v and detach it from every other vertex.

        Every remaining neighbor set is visited, so the cost grows with the
        vertex count rather than with v's degree.

        Raises:
            NotFoundError: If v is not in the graph
        """
        if check_vertex_id(v) not in self._adjacency:
            raise NotFoundError(v)

        del self._adjacency[v]
        for neighbors in self._adjacency.values():
            neighbors.discard(v)
        logger.debug("Removed vertex %s (%d vertices left)", v, len(self._adjacency))

    def add_edge(self, u: VertexId, v: VertexId) -> None:
        """
        Connect u and v in both directions.

        Unknown endpoints are created first when auto_create_vertices is
        set. Adding an existing edge changes nothing.

        Raises:
            InvalidArgumentError: If u == v (self-loops are not stored)
            NotFoundError: If an endpoint is absent and auto-creation is off
        """
        check_vertex_id(u)
        check_vertex_id(v)
        if u == v:
            raise InvalidArgumentError(f"Self-loop on vertex {u} is not allowed")

        missing = [w for w in (u, v) if w not in self._adjacency]
        if missing and not self.config.auto_create_vertices:
            raise NotFoundError(missing[0])

        for endpoint in missing:
            self._adjacency[endpoint] = set()
        self._adjacency[u].add(v)
        self._adjacency[v].add(u)

        # Warn only once the graph is consistent again
        if missing:
            self._check_capacity()

    def remove_edge(self, u: VertexId, v: VertexId) -> None:
        """
        Disconnect u and v; silently does nothing if they were not connected.

        Raises:
            NotFoundError: If either endpoint is not in the graph
        """
        check_vertex_id(u)
        check_vertex_id(v)
        for endpoint in (u, v):
            if endpoint not in self._adjacency:
                raise NotFoundError(endpoint)

        self._adjacency[u].discard(v)
        self._adjacency[v].discard(u)

    # === QUERIES ===

    def is_adjacent(self, u: VertexId, v: VertexId) -> bool:
        """
        Check whether v is a neighbor of u.

        An absent v simply is not a neighbor; an absent u is an error.

        Raises:
            NotFoundError: If u is not in the graph
        """
        neighbors = self._neighbor_set(u)
        return check_vertex_id(v) in neighbors

    def has_vertex(self, v: VertexId) -> bool:
        return v in self._adjacency

    def vertices(self) -> Iterator[VertexId]:
        """Iterate over all vertex ids; each call starts a fresh pass."""
        return iter(self._adjacency)

    def neighbors(self, v: VertexId) -> Iterator[VertexId]:
        """
        Iterate over the neighbors of v.

        Raises:
            NotFoundError: If v is not in the graph
        """
        return iter(self._neighbor_set(v))

    def degree(self, v: VertexId) -> int:
        """
        Number of neighbors of v.

        Raises:
            NotFoundError: If v is not in the graph
        """
        return len(self._neighbor_set(v))

    def number_of_edges(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values()) // 2

    def copy(self) -> "AdjacencyGraph":
        """
        Return an independent snapshot of this graph.

        Estimating on a copy keeps the scan safe from concurrent mutation
        of the original.
        """
        clone = AdjacencyGraph(self.config)
        clone._adjacency = {v: set(nbrs) for v, nbrs in self._adjacency.items()}
        clone._capacity_warned = self._capacity_warned
        return clone

    def __contains__(self, v: object) -> bool:
        return v in self._adjacency

    def __iter__(self) -> Iterator[VertexId]:
        return self.vertices()

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={len(self)}, "
            f"edges={self.number_of_edges()})"
        )

    # === INTERNALS ===

    def _neighbor_set(self, v: VertexId) -> set[VertexId]:
        check_vertex_id(v)
        try:
            return self._adjacency[v]
        except KeyError:
            raise NotFoundError(v) from None

    def _check_capacity(self) -> None:
        """Warn once when the vertex count first exceeds the capacity hint."""
        if self._capacity_warned or len(self._adjacency) <= self.config.initial_capacity:
            return
        self._capacity_warned = True
        warnings.warn(
            f"Graph holds {len(self._adjacency):,} vertices, more than the "
            f"initial_capacity hint of {self.config.initial_capacity:,}. "
            "The store keeps working; raise initial_capacity to silence this.",
            CapacityExceededWarning,
            stacklevel=3,
        )
