"""Shortest-path-first (SPF) computation using Dijkstra's algorithm.

Notes:
    The priority queue is a binary heap (``heapq``). A cost decrease pushes a
    fresh entry instead of updating the old one in place; stale entries are
    discarded when popped. Each edge pushes at most one entry, so a search
    runs in O((V + E) log V).

    Heap entries are ``(cost, vertex_index, vertex)``. Ties on cost are broken
    by the vertex's dense index, which keeps results deterministic and never
    compares vertices directly.

    When a destination is given, the search stops as soon as the destination
    is popped; its cost is final at that point and it is not expanded.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import TYPE_CHECKING, Dict, List, Optional, Set, Tuple

from spgraph.errors import UnknownVertexError
from spgraph.logging import get_logger
from spgraph.path import Path
from spgraph.types import Cost, Vertex, VertexPair

if TYPE_CHECKING:
    from spgraph.graph import Graph

logger = get_logger(__name__)


def spf(
    graph: Graph,
    src: Vertex,
    dst: Optional[Vertex] = None,
) -> Tuple[Dict[Vertex, Cost], Dict[Vertex, Vertex]]:
    """Compute shortest-path costs and predecessors from ``src``.

    Args:
        graph: The graph to search.
        src: Source vertex.
        dst: Optional destination. If provided, the search terminates once
            ``dst`` is extracted from the queue.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached vertex to its cost from ``src``. Costs of
            settled vertices (and of ``dst`` when it was reached) are final;
            vertices still queued at early termination keep tentative costs.
          - pred: Maps each reached vertex except ``src`` to its predecessor
            on the shortest path.

    Raises:
        UnknownVertexError: If ``src`` or ``dst`` is not in the graph.
    """
    if src not in graph:
        raise UnknownVertexError(src)
    if dst is not None and dst not in graph:
        raise UnknownVertexError(dst)

    vertex_index = graph.vertex_index
    adjacency = graph.adjacency
    edge_by_pair = graph.edge_by_pair

    costs: Dict[Vertex, Cost] = {src: 0}
    pred: Dict[Vertex, Vertex] = {}
    settled: Set[Vertex] = set()
    min_pq: List[Tuple[Cost, int, Vertex]] = [(0, vertex_index[src], src)]

    while min_pq:
        current_cost, _, vertex = heappop(min_pq)
        if current_cost > costs[vertex]:
            continue

        if vertex == dst:
            break

        settled.add(vertex)

        for neighbor in adjacency[vertex_index[vertex]]:
            if neighbor in settled:
                continue

            new_cost = current_cost + edge_by_pair[VertexPair(vertex, neighbor)].weight
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                pred[neighbor] = vertex
                heappush(min_pq, (new_cost, vertex_index[neighbor], neighbor))

    logger.debug(
        "SPF from %s settled %d of %d vertices", src, len(settled), len(graph)
    )
    return costs, pred


def resolve_path(
    src: Vertex,
    dst: Vertex,
    costs: Dict[Vertex, Cost],
    pred: Dict[Vertex, Vertex],
) -> Optional[Path]:
    """Rebuild the path from ``src`` to ``dst`` out of an SPF result.

    Args:
        src: Source vertex the SPF was run from.
        dst: Destination vertex.
        costs: Costs returned by ``spf``.
        pred: Predecessors returned by ``spf``.

    Returns:
        The path with ``costs[dst]`` as its cost, or None if ``dst`` was
        never reached.
    """
    if dst == src:
        return Path((src,), 0)
    if dst not in pred:
        return None

    vertices = [dst]
    current = dst
    while current != src:
        current = pred[current]
        vertices.append(current)
    vertices.reverse()
    return Path(tuple(vertices), costs[dst])
