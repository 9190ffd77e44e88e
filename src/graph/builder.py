# src/graph/builder.py (v1)
"""Graph builder: constructs an undirected weighted NetworkX graph from edges.

Nodes are created only from retained edges, so a character whose every
interaction was filtered out does not appear in the graph at all. Self-loops
carry no interaction between two characters and are skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import networkx as nx

from castnet.core.errors import MalformedInputError
from castnet.core.models import Edge

logger = logging.getLogger(__name__)


def build_graph(
    edges: Iterable[Edge],
    exclude_nodes: Iterable[str] | None = None,
) -> nx.Graph:
    """Build an undirected graph, optionally dropping core-to-core edges.

    Repeated pairs (in either direction) collapse into one edge whose
    ``weight`` is the sum of the repeated weights.

    Args:
        edges: Validated edge records.
        exclude_nodes: Node ids forming the "core" group. An edge is dropped
            when both of its endpoints are in this set.

    Returns:
        NetworkX Graph with a ``weight`` attribute on every edge.

    Raises:
        MalformedInputError: If an edge carries no usable weight.
    """
    excluded = set(exclude_nodes or ())
    graph = nx.Graph()
    dropped = 0
    self_loops = 0

    for index, edge in enumerate(edges):
        weight = getattr(edge, "weight", None)
        if weight is None:
            raise MalformedInputError(f"Edge {index} is missing a weight")

        if edge.source == edge.target:
            self_loops += 1
            continue

        if _is_excluded(edge, excluded):
            dropped += 1
            continue

        if graph.has_edge(edge.source, edge.target):
            graph[edge.source][edge.target]["weight"] += weight
        else:
            graph.add_edge(edge.source, edge.target, weight=weight)

    logger.info(
        "Built graph: %d nodes, %d edges (%d edges excluded)",
        graph.number_of_nodes(), graph.number_of_edges(), dropped,
    )
    if self_loops:
        logger.warning("Skipped %d self-loop edge(s)", self_loops)
    return graph


def count_excluded_edges(
    edges: Iterable[Edge],
    exclude_nodes: Iterable[str] | None,
) -> int:
    """Count how many edge records the core-node filter would drop."""
    excluded = set(exclude_nodes or ())
    if not excluded:
        return 0
    return sum(
        1 for e in edges
        if e.source != e.target and _is_excluded(e, excluded)
    )


def _is_excluded(edge: Edge, excluded: set[str]) -> bool:
    return edge.source in excluded and edge.target in excluded
