"""spgraph: immutable weighted directed graphs with shortest-path queries.

Primary API:
    Graph - Built once from vertices and edges; answers adjacency, cost and
        shortest-path queries
    Vertex, Edge - Value types the graph is built from
    Path - Result of ``Graph.shortest_path``
    load_graph_file() - Build a graph from a YAML/JSON description
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from spgraph import Edge, Graph, Vertex

    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    graph = Graph([a, b, c], [Edge(a, b, 2), Edge(b, c, 3), Edge(a, c, 10)])

    path = graph.shortest_path(a, c)
    path.vertices  # (Vertex("A"), Vertex("B"), Vertex("C"))
    path.cost      # 5
"""

from __future__ import annotations

from spgraph import logging
from spgraph.algorithms.spf import resolve_path, spf
from spgraph.config import DEFAULT_GRAPH_CONFIG, GraphConfig
from spgraph.errors import ConflictingEdgeError, GraphError, UnknownVertexError
from spgraph.graph import Graph
from spgraph.io import (
    dump_graph_yaml,
    graph_from_dict,
    graph_to_dict,
    load_graph_file,
    load_graph_yaml,
)
from spgraph.nx import from_networkx, to_networkx
from spgraph.path import Path
from spgraph.types import NO_EDGE, Cost, Edge, Vertex, VertexPair

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Graph",
    "Vertex",
    "Edge",
    "VertexPair",
    "Path",
    "Cost",
    "NO_EDGE",
    # Configuration
    "GraphConfig",
    "DEFAULT_GRAPH_CONFIG",
    # Errors
    "GraphError",
    "ConflictingEdgeError",
    "UnknownVertexError",
    # Algorithms
    "spf",
    "resolve_path",
    # Description I/O
    "graph_from_dict",
    "graph_to_dict",
    "load_graph_yaml",
    "load_graph_file",
    "dump_graph_yaml",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
