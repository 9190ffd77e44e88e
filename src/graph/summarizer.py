# src/graph/summarizer.py (v1)
"""Per-community statistics over induced subgraphs.

Nodes are grouped by label in a single scan, then each group is summarized
on its own induced subgraph: order, betweenness leaders and a degree ranking.
Communities larger than ``size_threshold`` report only their top-K nodes;
smaller ones report every member.
"""

from __future__ import annotations

import logging
import math

import networkx as nx

from castnet.core.errors import MalformedInputError
from castnet.core.models import CommunityReport, CommunitySummary, RankedNode
from castnet.graph.community_detector import COMMUNITY_ATTR

logger = logging.getLogger(__name__)

DEFAULT_SIZE_THRESHOLD = 20
DEFAULT_TOP_K = 5


def group_by_community(graph: nx.Graph) -> dict[int, list[str]]:
    """Map each community label to its members, in node insertion order.

    Raises:
        MalformedInputError: If a node carries no community label.
    """
    groups: dict[int, list[str]] = {}
    for node, label in graph.nodes(data=COMMUNITY_ATTR):
        if label is None:
            raise MalformedInputError(f"Node {node!r} has no community label")
        groups.setdefault(label, []).append(node)
    return groups


def summarize_community(
    graph: nx.Graph,
    label: int,
    members: list[str],
    size_threshold: int = DEFAULT_SIZE_THRESHOLD,
    top_k: int = DEFAULT_TOP_K,
    weighted_betweenness: bool = False,
) -> CommunitySummary:
    """Summarize one community.

    Args:
        graph: Full graph.
        label: Community label (opaque).
        members: Nodes carrying ``label``; their order breaks degree ties.
        size_threshold: Communities with more members than this are "large".
        top_k: Number of ranked nodes reported for a large community.
        weighted_betweenness: Use ``1 / weight`` as path length, so strong
            interactions count as short distances.
    """
    subgraph = nx.Graph(graph.subgraph(members))
    # a self-loop is not an interaction with another member
    subgraph.remove_edges_from(list(nx.selfloop_edges(subgraph)))
    order = subgraph.number_of_nodes()

    betweenness = _betweenness(subgraph, weighted_betweenness)
    max_betweenness = max(betweenness.values(), default=0.0)
    most_important = [
        n for n in members if math.isclose(betweenness[n], max_betweenness)
    ]

    # sorted() is stable: equal degrees keep member order
    by_degree = sorted(members, key=lambda n: -subgraph.degree(n))
    is_large = order > size_threshold
    if is_large:
        by_degree = by_degree[:top_k]

    ranking = [
        RankedNode(
            community=label,
            rank=rank,
            node=node,
            degree=subgraph.degree(node),
            degree_centrality=_degree_centrality(subgraph, node),
        )
        for rank, node in enumerate(by_degree, start=1)
    ]

    logger.debug(
        "Community %s: %d nodes, leaders=%s", label, order, most_important,
    )
    return CommunitySummary(
        community=label,
        node_count=order,
        edge_count=subgraph.number_of_edges(),
        most_important=most_important,
        max_betweenness=max_betweenness,
        is_large=is_large,
        ranking=ranking,
    )


def summarize_communities(
    graph: nx.Graph,
    size_threshold: int = DEFAULT_SIZE_THRESHOLD,
    top_k: int = DEFAULT_TOP_K,
    weighted_betweenness: bool = False,
) -> CommunityReport:
    """Summarize every community of a labelled graph.

    Summaries are ordered by descending size, then by ascending label.
    """
    groups = group_by_community(graph)
    summaries = [
        summarize_community(
            graph, label, members,
            size_threshold=size_threshold,
            top_k=top_k,
            weighted_betweenness=weighted_betweenness,
        )
        for label, members in groups.items()
    ]
    summaries.sort(key=lambda s: (-s.node_count, s.community))

    large = sum(1 for s in summaries if s.is_large)
    logger.info(
        "Summarized %d communities (%d large, %d small; threshold=%d)",
        len(summaries), large, len(summaries) - large, size_threshold,
    )
    return CommunityReport(
        summaries=summaries, size_threshold=size_threshold, top_k=top_k,
    )


def _betweenness(subgraph: nx.Graph, weighted: bool) -> dict[str, float]:
    """Raw betweenness; a single node or an edgeless subgraph scores 0."""
    if subgraph.number_of_edges() == 0:
        return {n: 0.0 for n in subgraph.nodes}
    if not weighted:
        return nx.betweenness_centrality(subgraph, normalized=False)

    distances = nx.Graph(subgraph)
    for _, _, data in distances.edges(data=True):
        data["distance"] = 1.0 / data["weight"]
    return nx.betweenness_centrality(distances, normalized=False, weight="distance")


def _degree_centrality(subgraph: nx.Graph, node: str) -> float:
    # networkx reports 1.0 for a lone node; an isolated member has no edges
    n = subgraph.number_of_nodes()
    if n <= 1:
        return 0.0
    return subgraph.degree(node) / (n - 1)
