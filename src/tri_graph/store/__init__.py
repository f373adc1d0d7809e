"""
Graph store package.

This package provides the adjacency-set storage every computation reads:
- adjacency: AdjacencyGraph with vertex/edge mutations and queries
- base: vertex ids, StoreConfig and the package's error types
- convert: NetworkX interop (from_networkx / to_networkx)
"""

from .adjacency import AdjacencyGraph
from .base import (
    DEFAULT_INITIAL_CAPACITY,
    CapacityExceededWarning,
    GraphError,
    InvalidArgumentError,
    NotFoundError,
    StoreConfig,
    VertexId,
)
from .convert import from_networkx, to_networkx

__all__ = [
    # Store
    "AdjacencyGraph",
    "StoreConfig",
    "VertexId",
    "DEFAULT_INITIAL_CAPACITY",
    # Errors
    "GraphError",
    "NotFoundError",
    "InvalidArgumentError",
    "CapacityExceededWarning",
    # Interop
    "from_networkx",
    "to_networkx",
]
