"""Value types consumed by the graph: vertices, edges and endpoint pairs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, NamedTuple

#: Edge weight / path cost. Always a non-negative integer.
Cost = int

#: Returned by ``Graph.edge_cost`` when no edge connects the two vertices.
NO_EDGE: Cost = -1


@dataclass(frozen=True, eq=False)
class Vertex:
    """An opaque vertex identity with structural equality.

    Equality and hashing cover the label's type as well as its value, so
    ``Vertex(True)``, ``Vertex(1)`` and ``Vertex(1.0)`` are distinct.

    Attributes:
        label: Any hashable value naming the vertex.
    """

    label: Hashable

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return type(self.label) is type(other.label) and self.label == other.label

    def __hash__(self) -> int:
        return hash((type(self.label), self.label))

    def __str__(self) -> str:
        return str(self.label)


@dataclass(frozen=True)
class Edge:
    """A directed, weighted edge.

    Attributes:
        source: Vertex the edge leaves.
        destination: Vertex the edge enters.
        weight: Non-negative integer cost of traversing the edge.
    """

    source: Vertex
    destination: Vertex
    weight: Cost

    def __post_init__(self) -> None:
        """Validate the weight."""
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            raise ValueError(
                f"Edge weight must be an integer, got {type(self.weight).__name__}"
            )
        if self.weight < 0:
            raise ValueError(f"Edge weight must be non-negative, got {self.weight}")

    @property
    def pair(self) -> VertexPair:
        """Return the ordered (source, destination) key of this edge."""
        return VertexPair(self.source, self.destination)


class VertexPair(NamedTuple):
    """Ordered (source, destination) key used to look up edges."""

    source: Vertex
    destination: Vertex
