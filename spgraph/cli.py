"""Command-line interface for spgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from spgraph.config import GraphConfig
from spgraph.graph import Graph
from spgraph.io import load_graph_file
from spgraph.logging import get_logger, set_global_log_level
from spgraph.types import Vertex

logger = get_logger(__name__)

#: Number of vertices in the sample graph built by ``spgraph demo``.
DEMO_SIZE = 7


def _format_table(headers: List[str], rows: List[List[Any]], min_width: int = 6) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string, empty when there are no rows.
    """
    if not rows:
        return ""

    all_data = [headers] + [[str(item) for item in row] for row in rows]
    col_widths = [
        max(max(len(row[i]) for row in all_data), min_width)
        for i in range(len(headers))
    ]

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{item:<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(all_data[0])]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    lines.extend(format_row(row) for row in all_data[1:])
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise duration string, e.g. "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _demo_graph() -> Graph:
    """Build the sample graph: vertices "0", "01", ... with no edges."""
    labels: List[str] = []
    label = ""
    for i in range(DEMO_SIZE):
        label += str(i)
        labels.append(label)
    return Graph([Vertex(label) for label in labels], [])


def _resolve_vertex(graph: Graph, name: str) -> Vertex:
    """Map a command-line name onto a vertex of ``graph``.

    YAML may load unquoted labels as numbers, so a name also matches a vertex
    whose label renders to the same string.
    """
    candidate = Vertex(name)
    if candidate in graph:
        return candidate
    for vertex in graph.vertex_index:
        if str(vertex.label) == name:
            return vertex
    return candidate


def _print_summary(graph: Graph, title: str) -> None:
    index = graph.vertex_index
    ordered = sorted(index, key=index.__getitem__)

    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    print(f"Vertices: {len(graph)}")
    print(f"Edges: {graph.num_edges()}")

    rows = []
    for vertex in ordered:
        neighbors = graph.adjacent_vertices(vertex)
        rows.append(
            [
                index[vertex],
                vertex,
                len(neighbors),
                ", ".join(
                    f"{n} ({graph.edge_cost(vertex, n)})" for n in neighbors
                )
                or "-",
            ]
        )
    table = _format_table(["Index", "Vertex", "Out", "Neighbors (cost)"], rows)
    if table:
        print("\nAdjacency:")
        print(table)


def _run_demo() -> None:
    graph = _demo_graph()
    logger.debug("Demo graph built: %r", graph)
    _print_summary(graph, "SPGRAPH DEMO")


def _inspect_graph(path: Path, config: GraphConfig) -> None:
    """Load a graph description and print its summary.

    Args:
        path: Graph description file (YAML or JSON).
        config: Construction options.
    """
    logger.info("Inspecting graph from: %s", path)
    start = perf_counter()
    graph = load_graph_file(path, config)
    _print_summary(graph, f"GRAPH INSPECTION: {path.name}")
    logger.info("Inspection completed in %s", _format_duration(perf_counter() - start))


def _query_path(
    path: Path, source: str, destination: str, as_json: bool, config: GraphConfig
) -> None:
    """Print the shortest path between two vertices of a graph file.

    Args:
        path: Graph description file (YAML or JSON).
        source: Start vertex label.
        destination: Destination vertex label.
        as_json: Print a JSON document instead of a text line.
        config: Construction options.
    """
    graph = load_graph_file(path, config)
    src = _resolve_vertex(graph, source)
    dst = _resolve_vertex(graph, destination)

    start = perf_counter()
    result = graph.shortest_path(src, dst)
    logger.debug("Shortest path computed in %s", _format_duration(perf_counter() - start))

    if as_json:
        payload = {
            "source": source,
            "destination": destination,
            "reachable": result is not None,
            "vertices": [v.label for v in result] if result is not None else [],
            "cost": result.cost if result is not None else None,
        }
        print(json.dumps(payload, indent=2))
    elif result is None:
        print(f"unreachable: no path from {src} to {dst}")
    else:
        print(result)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``spgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="spgraph",
        description="Inspect weighted directed graphs and query shortest paths.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{demo,inspect,path}",
        help="Available commands",
    )

    subparsers.add_parser("demo", help="Build and summarize the sample graph")

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate and summarize a graph file"
    )
    inspect_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")

    path_parser = subparsers.add_parser(
        "path", help="Compute the shortest path between two vertices"
    )
    path_parser.add_argument("graph", type=Path, help="Path to graph YAML/JSON")
    path_parser.add_argument("source", help="Start vertex label")
    path_parser.add_argument("destination", help="Destination vertex label")
    path_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    for p in (inspect_parser, path_parser):
        p.add_argument(
            "--implicit-vertices",
            action="store_true",
            help="Add edge endpoints missing from the vertex list instead of failing",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    try:
        if args.command == "demo":
            _run_demo()
            return

        config = GraphConfig(implicit_vertices=args.implicit_vertices)
        if args.command == "inspect":
            _inspect_graph(args.graph, config)
        elif args.command == "path":
            _query_path(
                args.graph, args.source, args.destination, args.json, config
            )
    except FileNotFoundError:
        logger.error("Graph file not found: %s", args.graph)
        print(f"ERROR: Graph file not found: {args.graph}")
        sys.exit(1)
    except (ValueError, OSError) as e:
        logger.error("Command %s failed: %s: %s", args.command, type(e).__name__, e)
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
