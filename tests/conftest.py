"""Shared fixtures: small sample graphs used across the test suite."""

from __future__ import annotations

import pytest

from spgraph.graph import Graph
from spgraph.types import Edge, Vertex

A, B, C, D, E, F = (Vertex(label) for label in "ABCDEF")


@pytest.fixture
def triangle1() -> Graph:
    # Weight:
    #       [2]       [3]
    #   A───────►B───────►C
    #   │                 ▲
    #   └─────────────────┘
    #          [10]
    return Graph([A, B, C], [Edge(A, B, 2), Edge(B, C, 3), Edge(A, C, 10)])


@pytest.fixture
def square1() -> Graph:
    # Weight:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    return Graph(
        [A, B, C, D],
        [Edge(A, B, 1), Edge(B, C, 1), Edge(A, D, 2), Edge(D, C, 2)],
    )


@pytest.fixture
def graph1() -> Graph:
    # Six vertices, several competing routes from A to D:
    #   A->B->C->F->D = 1+1+1+1 = 4
    #   A->E->C->D    = 1+1+2   = 4
    #   A->D          = 5
    #   D->A closes a cycle back to the source.
    return Graph(
        [A, B, C, D, E, F],
        [
            Edge(A, B, 1),
            Edge(B, C, 1),
            Edge(C, D, 2),
            Edge(A, E, 1),
            Edge(E, C, 1),
            Edge(A, D, 5),
            Edge(C, F, 1),
            Edge(F, D, 1),
            Edge(D, A, 1),
        ],
    )


@pytest.fixture
def disconnected1() -> Graph:
    # A ⇄ B are linked; C only reaches A; D is isolated.
    return Graph(
        [A, B, C, D],
        [Edge(A, B, 1), Edge(B, A, 1), Edge(C, A, 4)],
    )


@pytest.fixture
def zero_weights1() -> Graph:
    # Zero-weight chain A->B->C->D next to a direct A->D of weight 1.
    return Graph(
        [A, B, C, D],
        [Edge(A, B, 0), Edge(B, C, 0), Edge(C, D, 0), Edge(A, D, 1)],
    )
