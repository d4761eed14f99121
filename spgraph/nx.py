"""NetworkX interoperability.

``to_networkx`` exports a `Graph` as a ``networkx.DiGraph`` whose nodes are
the vertex labels and whose edges carry the weight attribute.
``from_networkx`` builds a `Graph` from any NetworkX graph.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2)
    >>> graph = from_networkx(G)
    >>> graph.edge_cost(Vertex("A"), Vertex("B"))
    2
"""

from __future__ import annotations

from typing import List

import networkx as nx

from spgraph.graph import Graph
from spgraph.types import Edge, Vertex


def to_networkx(graph: Graph, *, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert ``graph`` to a ``networkx.DiGraph``.

    Nodes are added in vertex index order and labelled with ``Vertex.label``.

    Args:
        graph: Graph to convert.
        weight_attr: Edge attribute name that receives the weight.

    Returns:
        A new DiGraph.
    """
    G = nx.DiGraph()
    index = graph.vertex_index
    G.add_nodes_from(v.label for v in sorted(index, key=index.__getitem__))
    for edge in graph.edges():
        G.add_edge(
            edge.source.label,
            edge.destination.label,
            **{weight_attr: edge.weight},
        )
    return G


def from_networkx(
    G: nx.Graph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Undirected graphs contribute one edge per direction. Parallel edges of a
    multigraph must agree on weight.

    Args:
        G: Any NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        The converted graph.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        ValueError: If a weight is not a non-negative integer.
        ConflictingEdgeError: If parallel edges disagree on weight.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")

    vertices = [Vertex(node) for node in G.nodes()]
    edges: List[Edge] = []
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        edges.append(Edge(Vertex(u), Vertex(v), weight))
        if not G.is_directed() and u != v:
            edges.append(Edge(Vertex(v), Vertex(u), weight))
    return Graph(vertices, edges)
