"""Result type of a shortest-path query.

``Path`` stores the ordered vertices from source to destination (inclusive)
and the total cost. Helpers expose the endpoints, the traversed vertex pairs,
and ordering by cost.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterator, Tuple

from spgraph.types import Cost, Vertex, VertexPair


@dataclass(frozen=True)
class Path:
    """A path through the graph.

    Attributes:
        vertices: Vertices in order from source to destination, both included.
        cost: Sum of the weights of the traversed edges.
    """

    vertices: Tuple[Vertex, ...]
    cost: Cost

    def __post_init__(self) -> None:
        if not self.vertices:
            raise ValueError("A path must contain at least one vertex.")
        if self.cost < 0:
            raise ValueError(f"Path cost must be non-negative, got {self.cost}")

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost.

        Returns:
            True if this path is cheaper than ``other``; NotImplemented if
            ``other`` is not a Path.
        """
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def source(self) -> Vertex:
        """Return the first vertex of the path."""
        return self.vertices[0]

    @property
    def destination(self) -> Vertex:
        """Return the last vertex of the path."""
        return self.vertices[-1]

    @cached_property
    def pairs(self) -> Tuple[VertexPair, ...]:
        """Return the (source, destination) pair of every traversed edge.

        Returns:
            One pair per hop; empty for a single-vertex path.
        """
        return tuple(
            VertexPair(u, v) for u, v in zip(self.vertices, self.vertices[1:])
        )

    @property
    def hops(self) -> int:
        """Return the number of edges along the path."""
        return len(self.vertices) - 1

    def __str__(self) -> str:
        return f"{' -> '.join(str(v) for v in self.vertices)} (cost {self.cost})"
