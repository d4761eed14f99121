"""Configuration classes for spgraph components."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GraphConfig:
    """Options applied while a ``Graph`` is constructed."""

    # When True, edge endpoints missing from the vertex collection are added
    # to the vertex set. When False, construction fails on such an edge.
    implicit_vertices: bool = False


# Global default instance
DEFAULT_GRAPH_CONFIG = GraphConfig()
