"""
tri_graph - Partition-weighted triangle estimation over in-memory graphs.

This package holds an undirected graph as adjacency sets and estimates its
triangle count with a degree-ordered compact-forward scan, weighting
triangles that fall inside a single vertex partition by 1 / (p - 1).
"""

from .config import Settings, load_config
from .estimator import (
    EstimationConfig,
    TriangleEstimate,
    estimate_triangles,
    estimate_triangles_detailed,
)
from .store import (
    AdjacencyGraph,
    CapacityExceededWarning,
    GraphError,
    InvalidArgumentError,
    NotFoundError,
    StoreConfig,
    VertexId,
)

__version__ = "0.1.0"

__all__ = [
    # Store
    "AdjacencyGraph",
    "StoreConfig",
    "VertexId",
    # Errors
    "GraphError",
    "NotFoundError",
    "InvalidArgumentError",
    "CapacityExceededWarning",
    # Estimator
    "estimate_triangles",
    "estimate_triangles_detailed",
    "EstimationConfig",
    "TriangleEstimate",
    # Settings
    "load_config",
    "Settings",
]
