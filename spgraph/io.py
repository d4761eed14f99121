"""Load and dump graph descriptions.

A description is a mapping with two keys::

    vertices: [A, B, C]
    edges:
      - [A, B, 2]
      - {source: B, destination: C, weight: 3}

``vertices`` may be omitted when ``GraphConfig.implicit_vertices`` is on.
Edges are either ``[source, destination, weight]`` sequences or mappings with
``source``, ``destination`` and ``weight`` keys. YAML and JSON text are both
accepted since JSON parses as YAML.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from spgraph.config import GraphConfig
from spgraph.graph import Graph
from spgraph.logging import get_logger
from spgraph.types import Edge, Vertex

logger = get_logger(__name__)

_EDGE_KEYS = ("source", "destination", "weight")


def _parse_edge(entry: Any, position: int) -> Edge:
    if isinstance(entry, dict):
        missing = [k for k in _EDGE_KEYS if k not in entry]
        if missing:
            raise ValueError(
                f"Edge #{position} is missing key(s): {', '.join(missing)}"
            )
        extra = set(entry) - set(_EDGE_KEYS)
        if extra:
            raise ValueError(
                f"Unrecognized key(s) in edge #{position}: {', '.join(sorted(map(str, extra)))}"
            )
        source, destination, weight = (entry[k] for k in _EDGE_KEYS)
    elif isinstance(entry, (list, tuple)):
        if len(entry) != 3:
            raise ValueError(
                f"Edge #{position} must have exactly 3 items "
                f"(source, destination, weight), got {len(entry)}"
            )
        source, destination, weight = entry
    else:
        raise ValueError(
            f"Edge #{position} must be a list or a mapping, got {type(entry).__name__}"
        )

    for name, label in (("source", source), ("destination", destination)):
        if isinstance(label, (dict, list)):
            raise ValueError(
                f"Edge #{position} {name} must be a scalar label, got {label!r}"
            )

    try:
        return Edge(Vertex(source), Vertex(destination), weight)
    except ValueError as exc:
        raise ValueError(f"Invalid edge #{position}: {exc}") from exc


def graph_from_dict(
    data: Dict[str, Any], config: Optional[GraphConfig] = None
) -> Graph:
    """Build a graph from a description mapping.

    Args:
        data: Mapping with ``vertices`` and ``edges`` keys.
        config: Construction options forwarded to ``Graph``.

    Returns:
        The constructed graph.

    Raises:
        ValueError: If the description is malformed.
        ConflictingEdgeError: If two edges conflict.
        UnknownVertexError: If an edge references an unlisted vertex.
    """
    if not isinstance(data, dict):
        raise ValueError("A graph description must be a mapping at top-level.")

    extra = set(data) - {"vertices", "edges"}
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are ['edges', 'vertices']"
        )

    raw_vertices = data.get("vertices", [])
    raw_edges = data.get("edges", [])
    # An empty YAML value ("vertices:") loads as None
    if raw_vertices is None:
        raw_vertices = []
    if raw_edges is None:
        raw_edges = []
    if not isinstance(raw_vertices, list):
        raise ValueError("'vertices' must be a list")
    if not isinstance(raw_edges, list):
        raise ValueError("'edges' must be a list")

    for label in raw_vertices:
        if isinstance(label, (dict, list)):
            raise ValueError(f"Vertex labels must be scalars, got {label!r}")

    vertices = [Vertex(label) for label in raw_vertices]
    edges = [_parse_edge(entry, i) for i, entry in enumerate(raw_edges)]
    return Graph(vertices, edges, config)


def graph_to_dict(graph: Graph) -> Dict[str, List[Any]]:
    """Return the description mapping of ``graph``.

    Vertices are listed in index order and edges sorted by the indices of
    their endpoints, so the output is stable for a given graph.
    """
    index = graph.vertex_index
    ordered = sorted(index, key=index.__getitem__)
    edges = sorted(
        graph.edges(), key=lambda e: (index[e.source], index[e.destination])
    )
    return {
        "vertices": [v.label for v in ordered],
        "edges": [[e.source.label, e.destination.label, e.weight] for e in edges],
    }


def load_graph_yaml(text: str, config: Optional[GraphConfig] = None) -> Graph:
    """Parse YAML (or JSON) text into a graph.

    Raises:
        ValueError: If the text is not a valid description.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid graph description: {exc}") from exc
    if data is None:
        data = {}
    return graph_from_dict(data, config)


def load_graph_file(
    path: Union[str, Path], config: Optional[GraphConfig] = None
) -> Graph:
    """Read a graph description file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a valid description.
    """
    path = Path(path)
    logger.debug("Loading graph description from %s", path)
    return load_graph_yaml(path.read_text(encoding="utf-8"), config)


def dump_graph_yaml(graph: Graph) -> str:
    """Serialize ``graph`` as a YAML description."""
    return yaml.safe_dump(graph_to_dict(graph), sort_keys=False)
