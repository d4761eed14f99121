"""Tests for spgraph.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from spgraph.errors import ConflictingEdgeError
from spgraph.graph import Graph
from spgraph.nx import from_networkx, to_networkx
from spgraph.types import Edge, Vertex

A, B, C = Vertex("A"), Vertex("B"), Vertex("C")


class TestToNetworkx:
    def test_nodes_and_weights(self, triangle1):
        G = to_networkx(triangle1)
        assert isinstance(G, nx.DiGraph)
        assert list(G.nodes()) == ["A", "B", "C"]
        assert G["A"]["B"]["weight"] == 2
        assert G["B"]["C"]["weight"] == 3
        assert G["A"]["C"]["weight"] == 10
        assert G.number_of_edges() == 3

    def test_custom_weight_attr(self, triangle1):
        G = to_networkx(triangle1, weight_attr="cost")
        assert G["A"]["B"] == {"cost": 2}

    def test_isolated_vertices_kept(self):
        G = to_networkx(Graph([A, B], []))
        assert set(G.nodes()) == {"A", "B"}
        assert G.number_of_edges() == 0

    def test_networkx_agrees_on_cost(self, graph1):
        G = to_networkx(graph1)
        path = graph1.shortest_path(Vertex("A"), Vertex("D"))
        assert path.cost == nx.dijkstra_path_length(G, "A", "D")


class TestFromNetworkx:
    def test_digraph(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=2)
        G.add_edge("B", "C")
        g = from_networkx(G)
        assert g.vertices() == {A, B, C}
        assert g.edge_cost(A, B) == 2
        assert g.edge_cost(B, C) == 1
        assert g.edge_cost(B, A) == -1

    def test_undirected_graph_adds_both_directions(self):
        G = nx.Graph()
        G.add_edge("A", "B", weight=4)
        G.add_edge("C", "C", weight=1)
        g = from_networkx(G)
        assert g.edge_cost(A, B) == 4
        assert g.edge_cost(B, A) == 4
        assert g.edges() >= {Edge(C, C, 1)}
        assert g.num_edges() == 3

    def test_custom_attr_and_default(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", cost=7)
        G.add_edge("B", "C")
        g = from_networkx(G, weight_attr="cost", default_weight=3)
        assert g.edge_cost(A, B) == 7
        assert g.edge_cost(B, C) == 3

    def test_multigraph_conflict(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", weight=1)
        G.add_edge("A", "B", weight=2)
        with pytest.raises(ConflictingEdgeError):
            from_networkx(G)

    def test_multigraph_identical_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("A", "B", weight=1)
        G.add_edge("A", "B", weight=1)
        g = from_networkx(G)
        assert g.adjacent_vertices(A) == [B, B]

    def test_round_trip(self, graph1):
        again = from_networkx(to_networkx(graph1))
        assert again.vertices() == graph1.vertices()
        assert again.edges() == graph1.edges()

    def test_negative_weight_rejected(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", weight=-1)
        with pytest.raises(ValueError):
            from_networkx(G)

    def test_not_a_graph(self):
        with pytest.raises(TypeError):
            from_networkx({"A": ["B"]})  # type: ignore[arg-type]
