"""Error types raised by graph construction and queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from spgraph.types import Edge


class GraphError(ValueError):
    """Base class for all spgraph errors."""


class ConflictingEdgeError(GraphError):
    """Two edges share an ordered endpoint pair but differ in weight.

    Attributes:
        existing: The edge recorded first for the pair.
        conflicting: The later edge that disagrees with it.
    """

    def __init__(self, existing: Edge, conflicting: Edge) -> None:
        self.existing = existing
        self.conflicting = conflicting
        super().__init__(
            f"Conflicting parallel edge weights for "
            f"{existing.source} -> {existing.destination}: "
            f"{existing.weight} != {conflicting.weight}"
        )


class UnknownVertexError(GraphError):
    """A vertex argument is not a member of the graph's vertex set.

    Attributes:
        vertex: The offending vertex.
    """

    def __init__(self, vertex: Any, message: str | None = None) -> None:
        self.vertex = vertex
        super().__init__(message or f"Vertex '{vertex}' does not exist in the graph.")
