"""
Degree ordering for compact-forward triangle counting.

Vertices are sorted once by degree descending; a vertex's index in that
order is its rank (lower rank = higher degree). The ranking also keeps each
vertex's neighbors as an ascending list of ranks so the estimator can merge
two neighborhoods with plain cursors.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass

from ..store.adjacency import AdjacencyGraph
from ..store.base import VertexId
from .models import EstimationConfig

logger = logging.getLogger(__name__)


@dataclass
class VertexRanking:
    """Per-call degree ordering of a graph."""

    order: list[VertexId]  # rank -> vertex
    rank: dict[VertexId, int]  # vertex -> rank, built once after sorting
    neighbor_ranks: list[list[int]]  # rank -> ascending neighbor ranks

    def __len__(self) -> int:
        return len(self.order)

    def first_neighbor_rank(self, r: int) -> int:
        """
        Smallest neighbor rank of the vertex at rank r.

        Returns len(self) when the vertex has no neighbors, which is past
        every valid rank.
        """
        ranks = self.neighbor_ranks[r]
        return ranks[0] if ranks else len(self.order)

    def next_neighbor_rank(self, r: int, after: int) -> int:
        """
        Smallest neighbor rank of the vertex at rank r strictly above `after`.

        Returns len(self) when there is none.
        """
        ranks = self.neighbor_ranks[r]
        pos = bisect_right(ranks, after)
        return ranks[pos] if pos < len(ranks) else len(self.order)


def build_ranking(
    graph: AdjacencyGraph, config: EstimationConfig | None = None
) -> VertexRanking:
    """
    Rank every vertex of the graph by degree, highest first.

    Args:
        graph: Graph to rank (read only)
        config: Estimation configuration (tie-break policy)

    Returns:
        VertexRanking for this graph state

    Raises:
        NotFoundError: If a vertex disappears while ranking
    """
    config = config or EstimationConfig()

    degrees = {v: graph.degree(v) for v in graph.vertices()}
    if config.tie_break == "vertex_id":
        order = sorted(degrees, key=lambda v: (-degrees[v], v))
    else:
        # sorted() is stable, so equal degrees keep store order
        order = sorted(degrees, key=lambda v: -degrees[v])

    rank = {v: r for r, v in enumerate(order)}
    neighbor_ranks = [sorted(rank[u] for u in graph.neighbors(v)) for v in order]

    logger.debug(
        "Ranked %d vertices (tie_break=%s, max degree %d)",
        len(order),
        config.tie_break,
        degrees[order[0]] if order else 0,
    )
    return VertexRanking(order=order, rank=rank, neighbor_ranks=neighbor_ranks)
