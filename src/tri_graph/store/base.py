"""
Core store infrastructure: vertex ids, configuration and errors.

This module provides the foundation shared by the graph store and the
triangle estimator:
- Vertex id type alias and validation (signed 64-bit integers)
- StoreConfig with the initial-capacity hint and auto-creation flag
- The exception hierarchy raised across the package
"""

from dataclasses import dataclass

# Vertex ids are opaque signed 64-bit integers
VertexId = int

VERTEX_ID_MIN = -(2**63)
VERTEX_ID_MAX = 2**63 - 1

# === CAPACITY HINT (soft, not a ceiling) ===
DEFAULT_INITIAL_CAPACITY = 4_000_000


class GraphError(Exception):
    """Base class for all tri_graph errors."""

    pass


class NotFoundError(GraphError, KeyError):
    """Raised when an operation references a vertex absent from the store."""

    def __init__(self, vertex: VertexId, message: str | None = None):
        self.vertex = vertex
        super().__init__(message or f"Vertex {vertex} does not exist")

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class InvalidArgumentError(GraphError, ValueError):
    """Raised for invalid partition counts, vertex ids or settings."""

    pass


class CapacityExceededWarning(UserWarning):
    """Emitted once when a graph grows past its initial-capacity hint."""

    pass


@dataclass
class StoreConfig:
    """Configuration for AdjacencyGraph behavior."""

    # Expected vertex count; exceeding it warns but never fails
    initial_capacity: int = DEFAULT_INITIAL_CAPACITY

    # add_edge creates unknown endpoints instead of raising NotFoundError
    auto_create_vertices: bool = True

    def __post_init__(self):
        if isinstance(self.initial_capacity, bool) or not isinstance(
            self.initial_capacity, int
        ):
            raise InvalidArgumentError(
                f"initial_capacity must be an integer, got {self.initial_capacity!r}"
            )
        if self.initial_capacity <= 0:
            raise InvalidArgumentError(
                f"initial_capacity must be positive, got {self.initial_capacity}"
            )
        if not isinstance(self.auto_create_vertices, bool):
            raise InvalidArgumentError(
                "auto_create_vertices must be a boolean, "
                f"got {self.auto_create_vertices!r}"
            )


def check_vertex_id(v: VertexId) -> VertexId:
    """
    Validate a vertex id before it enters the store.

    Args:
        v: Candidate vertex id

    Returns:
        The id unchanged

    Raises:
        InvalidArgumentError: If v is not an integer in the signed 64-bit range
    """
    if isinstance(v, bool) or not isinstance(v, int):
        raise InvalidArgumentError(f"Vertex id must be an integer, got {v!r}")
    if not VERTEX_ID_MIN <= v <= VERTEX_ID_MAX:
        raise InvalidArgumentError(f"Vertex id {v} is outside the 64-bit range")
    return v
