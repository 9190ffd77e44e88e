# tests/conftest.py (v1)
"""Shared test fixtures for unit tests.

Provides small edge lists, prebuilt graphs and on-disk edge files.
No network access; all file I/O goes through tmp_path.
"""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx
import pytest

from castnet.core.models import Edge
from castnet.graph.builder import build_graph


# === FIXTURES: Edge lists ===


@pytest.fixture
def two_component_edges() -> list[Edge]:
    """{A, B, C} triangle plus a separate {D, E} pair."""
    return [
        Edge(source="A", target="B", weight=2),
        Edge(source="A", target="C", weight=3),
        Edge(source="B", target="C", weight=1),
        Edge(source="D", target="E", weight=5),
    ]


@pytest.fixture
def two_clique_edges() -> list[Edge]:
    """Two 5-cliques joined by one weak bridge (A4 - B0)."""
    edges: list[Edge] = []
    for prefix in ("A", "B"):
        names = [f"{prefix}{i}" for i in range(5)]
        for i, u in enumerate(names):
            for v in names[i + 1:]:
                edges.append(Edge(source=u, target=v, weight=4))
    edges.append(Edge(source="A4", target="B0", weight=1))
    return edges


# === FIXTURES: Graphs ===


@pytest.fixture
def two_component_graph(two_component_edges: list[Edge]) -> nx.Graph:
    return build_graph(two_component_edges)


@pytest.fixture
def two_clique_graph(two_clique_edges: list[Edge]) -> nx.Graph:
    return build_graph(two_clique_edges)


# === FIXTURES: Files ===


@pytest.fixture
def edges_csv(tmp_path: Path) -> Path:
    """CSV edge list with the from/to/weight header."""
    path = tmp_path / "edges.csv"
    path.write_text(
        "from,to,weight\n"
        "Jon,Sam,12\n"
        "Jon,Ygritte,8\n"
        "Sam,Gilly,6\n"
        "Tyrion,Cersei,9\n"
        "Tyrion,Jaime,7\n"
        "Cersei,Jaime,11\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def edges_json(tmp_path: Path) -> Path:
    """JSON edge list wrapped in an ``edges`` key."""
    path = tmp_path / "edges.json"
    path.write_text(
        json.dumps({
            "edges": [
                {"from": "Arya", "to": "Sandor", "weight": 10},
                {"from": "Arya", "to": "Gendry", "weight": 4},
                {"from": "Sansa", "to": "Tyrion", "weight": 5},
            ]
        }),
        encoding="utf-8",
    )
    return path
