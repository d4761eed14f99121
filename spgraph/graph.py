"""Immutable weighted directed graph.

`Graph` is built once from a vertex collection and an edge collection. The
constructor validates the input and builds three indices that back every
query:

- ``vertex_index``: vertex to dense integer in ``[0, n)``, in order of first
  encounter.
- ``adjacency``: per vertex index, the destinations of its outgoing edges in
  insertion order (an edge supplied twice appears twice).
- ``edge_by_pair``: ``VertexPair(source, destination)`` to its ``Edge``.

Nothing is mutated after the constructor returns, so concurrent read-only
queries need no locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from spgraph.algorithms.spf import resolve_path, spf
from spgraph.config import DEFAULT_GRAPH_CONFIG, GraphConfig
from spgraph.errors import ConflictingEdgeError, UnknownVertexError
from spgraph.logging import get_logger
from spgraph.path import Path
from spgraph.types import NO_EDGE, Cost, Edge, Vertex, VertexPair

logger = get_logger(__name__)


class Graph:
    """A finite directed graph with non-negative integer edge weights.

    Example:
        >>> a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
        >>> g = Graph([a, b, c], [Edge(a, b, 2), Edge(b, c, 3), Edge(a, c, 10)])
        >>> g.shortest_path(a, c).cost
        5
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        edges: Iterable[Edge],
        config: Optional[GraphConfig] = None,
    ) -> None:
        """Build and validate the graph.

        Args:
            vertices: Vertex collection; duplicates are merged by equality.
            edges: Edge collection. Identical edges are accepted more than once.
            config: Construction options. Defaults to ``DEFAULT_GRAPH_CONFIG``.

        Raises:
            ConflictingEdgeError: Two edges share an ordered endpoint pair but
                differ in weight.
            UnknownVertexError: An edge endpoint is not in ``vertices`` and
                ``config.implicit_vertices`` is off.
        """
        config = config or DEFAULT_GRAPH_CONFIG

        vertex_index: Dict[Vertex, int] = {}
        adjacency: List[List[Vertex]] = []
        edge_by_pair: Dict[VertexPair, Edge] = {}

        def add_vertex(vertex: Vertex) -> None:
            if vertex not in vertex_index:
                vertex_index[vertex] = len(adjacency)
                adjacency.append([])

        for vertex in vertices:
            add_vertex(vertex)

        for edge in edges:
            for endpoint in (edge.source, edge.destination):
                if endpoint in vertex_index:
                    continue
                if not config.implicit_vertices:
                    raise UnknownVertexError(
                        endpoint,
                        f"Edge {edge.source} -> {edge.destination} references "
                        f"vertex '{endpoint}' which is not in the vertex collection.",
                    )
                add_vertex(endpoint)

            pair = edge.pair
            existing = edge_by_pair.get(pair)
            if existing is not None and existing.weight != edge.weight:
                raise ConflictingEdgeError(existing, edge)
            edge_by_pair[pair] = edge
            adjacency[vertex_index[edge.source]].append(edge.destination)

        self._vertex_index: Mapping[Vertex, int] = MappingProxyType(vertex_index)
        self._adjacency: Tuple[Tuple[Vertex, ...], ...] = tuple(
            tuple(neighbors) for neighbors in adjacency
        )
        self._edge_by_pair: Mapping[VertexPair, Edge] = MappingProxyType(
            edge_by_pair
        )
        self._vertices: FrozenSet[Vertex] = frozenset(vertex_index)
        self._edges: FrozenSet[Edge] = frozenset(edge_by_pair.values())

        logger.debug(
            "Built graph with %d vertices and %d edges",
            len(self._vertices),
            len(self._edges),
        )

    #
    # Index views
    #
    @property
    def vertex_index(self) -> Mapping[Vertex, int]:
        """Read-only mapping of vertex to dense index."""
        return self._vertex_index

    @property
    def adjacency(self) -> Tuple[Tuple[Vertex, ...], ...]:
        """Outgoing destinations per vertex index."""
        return self._adjacency

    @property
    def edge_by_pair(self) -> Mapping[VertexPair, Edge]:
        """Read-only mapping of ordered endpoint pair to edge."""
        return self._edge_by_pair

    #
    # Queries
    #
    def vertices(self) -> Set[Vertex]:
        """Return a copy of the vertex set."""
        return set(self._vertices)

    def edges(self) -> Set[Edge]:
        """Return a copy of the edge set."""
        return set(self._edges)

    def adjacent_vertices(self, v: Vertex) -> List[Vertex]:
        """Return every vertex ``w`` such that an edge ``v -> w`` exists.

        Args:
            v: A vertex of the graph.

        Returns:
            A new list, empty when ``v`` has no outgoing edges.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        return list(self._adjacency[self.index_of(v)])

    def edge_cost(self, a: Vertex, b: Vertex) -> Cost:
        """Return the weight of the edge ``a -> b``.

        Weights are never negative, so ``NO_EDGE`` (-1) cannot be mistaken
        for a real weight.

        Args:
            a: Source vertex.
            b: Destination vertex.

        Returns:
            The edge weight, or ``NO_EDGE`` if there is no such edge.

        Raises:
            UnknownVertexError: If ``a`` or ``b`` is not in the graph.
        """
        edge = self.edge(a, b)
        return NO_EDGE if edge is None else edge.weight

    def edge(self, a: Vertex, b: Vertex) -> Optional[Edge]:
        """Return the edge ``a -> b`` or None.

        Raises:
            UnknownVertexError: If ``a`` or ``b`` is not in the graph.
        """
        self._check_vertex(a)
        self._check_vertex(b)
        return self._edge_by_pair.get(VertexPair(a, b))

    def index_of(self, v: Vertex) -> int:
        """Return the dense index of ``v``.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        try:
            return self._vertex_index[v]
        except (KeyError, TypeError):
            raise UnknownVertexError(v) from None

    def num_edges(self) -> int:
        """Return the number of distinct edges."""
        return len(self._edges)

    def shortest_path(self, a: Vertex, b: Vertex) -> Optional[Path]:
        """Return the cheapest path from ``a`` to ``b`` using Dijkstra.

        Args:
            a: Start vertex.
            b: Destination vertex.

        Returns:
            The path including both endpoints and its total cost, or None
            when ``b`` is unreachable from ``a``.

        Raises:
            UnknownVertexError: If ``a`` or ``b`` is not in the graph.
        """
        self._check_vertex(a)
        self._check_vertex(b)

        if a == b:
            return Path((a,), 0)

        costs, pred = spf(self, a, dst=b)
        path = resolve_path(a, b, costs, pred)
        if path is None:
            logger.debug("No path from %s to %s", a, b)
        return path

    def _check_vertex(self, v: Vertex) -> None:
        if v not in self:
            raise UnknownVertexError(v)

    def __contains__(self, v: object) -> bool:
        try:
            return v in self._vertices
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
