"""Graph algorithms operating on `spgraph.graph.Graph`."""

from spgraph.algorithms.spf import resolve_path, spf

__all__ = ["resolve_path", "spf"]
