"""
Configuration and result models for triangle estimation.
"""

from dataclasses import dataclass
from typing import Literal

from ..store.base import InvalidArgumentError
from .partition import same_partition_weight

TieBreak = Literal["vertex_id", "insertion"]

TIE_BREAKS: tuple[str, ...] = ("vertex_id", "insertion")


@dataclass
class EstimationConfig:
    """Configuration for estimation behavior."""

    # How equal-degree vertices are ordered when ranking:
    # "vertex_id" sorts them by ascending id (reproducible across runs),
    # "insertion" keeps the store's iteration order (stable sort)
    tie_break: TieBreak = "vertex_id"

    def __post_init__(self):
        if self.tie_break not in TIE_BREAKS:
            raise InvalidArgumentError(
                f"Unknown tie_break {self.tie_break!r}, expected one of {TIE_BREAKS}"
            )


@dataclass(frozen=True)
class TriangleEstimate:
    """Weighted triangle total with the counts it was built from."""

    total: float  # Weighted sum returned by estimate_triangles()
    partitions: int  # p used for weighting

    triangles: int  # Triangle witnesses found (exact triangle count)
    same_partition: int  # Witnesses with all three vertices in one partition
    cross_partition: int  # Witnesses spanning partitions

    vertices: int
    edges: int

    @property
    def same_partition_weight(self) -> float:
        """Weight added for each same-partition triangle: 1 / (p - 1)."""
        return same_partition_weight(self.partitions)
