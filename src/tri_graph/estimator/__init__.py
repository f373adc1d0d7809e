"""
Triangle estimator module.

This module provides:
- Degree ranking with an explicit tie-break policy
- Partition assignment (vertex id mod p) and same-partition weighting
- Partition-weighted compact-forward triangle estimation
"""

from .compact_forward import estimate_triangles, estimate_triangles_detailed
from .models import EstimationConfig, TriangleEstimate
from .partition import check_partitions, partition_of
from .ranking import VertexRanking, build_ranking

__all__ = [
    # Estimation
    "estimate_triangles",
    "estimate_triangles_detailed",
    # Models
    "EstimationConfig",
    "TriangleEstimate",
    # Partitioning
    "check_partitions",
    "partition_of",
    # Ranking
    "build_ranking",
    "VertexRanking",
]
