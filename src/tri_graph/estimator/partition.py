"""
Partition assignment and triangle weighting.

A vertex's partition is a pure function of its id, so no assignment table
is stored. Triangles whose three vertices share a partition are
down-weighted to 1 / (p - 1); all others count 1.0.
"""

from ..store.base import InvalidArgumentError, VertexId

CROSS_PARTITION_WEIGHT = 1.0


def check_partitions(p: int) -> int:
    """
    Validate a partition count.

    Raises:
        InvalidArgumentError: If p is not an integer greater than 1
    """
    if isinstance(p, bool) or not isinstance(p, int):
        raise InvalidArgumentError(f"Partition count must be an integer, got {p!r}")
    if p <= 1:
        raise InvalidArgumentError(f"Partition count must be more than 1, got {p}")
    return p


def partition_of(v: VertexId, p: int) -> int:
    """
    Partition of vertex v as a truncated remainder.

    The sign follows v, so negative ids map into (-p, 0] and the
    partitions of -1 and p - 1 differ.
    """
    r = abs(v) % p
    return -r if v < 0 else r


def same_partition(a: VertexId, b: VertexId, c: VertexId, p: int) -> bool:
    """True if all three vertices fall in the same partition."""
    return partition_of(a, p) == partition_of(b, p) == partition_of(c, p)


def same_partition_weight(p: int) -> float:
    return 1.0 / (p - 1)
