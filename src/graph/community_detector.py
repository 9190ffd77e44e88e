# src/graph/community_detector.py (v1)
"""Community detection via the Louvain method (python-louvain).

Pure functions: detection never modifies the input graph. Labels are
attached to a copy by ``attach_communities``.
"""

from __future__ import annotations

import logging

import community as community_louvain
import networkx as nx

from castnet.core.errors import EmptyGraphError, MalformedInputError
from castnet.core.models import CommunityDetection

logger = logging.getLogger(__name__)

COMMUNITY_ATTR = "community"


def detect_communities(
    graph: nx.Graph,
    resolution: float = 1.0,
    seed: int | None = 42,
    weight: str = "weight",
) -> CommunityDetection:
    """Partition a weighted undirected graph with Louvain.

    Nodes in different connected components never share a label, since
    Louvain only ever moves a node into a neighbouring community.

    Args:
        graph: Undirected NetworkX graph.
        resolution: Louvain resolution (lower = bigger communities).
        seed: Random state for node ordering (None = non-deterministic).
        weight: Edge attribute holding the weight.

    Returns:
        CommunityDetection with a label for every node.

    Raises:
        EmptyGraphError: If the graph has no nodes.
    """
    if graph.number_of_nodes() == 0:
        raise EmptyGraphError("Cannot detect communities in a graph with no nodes")

    partition: dict[str, int] = community_louvain.best_partition(
        graph, weight=weight, resolution=resolution, random_state=seed,
    )

    # python-louvain refuses to score a graph without links
    if graph.number_of_edges() > 0:
        modularity = community_louvain.modularity(partition, graph, weight=weight)
    else:
        modularity = 0.0

    detection = CommunityDetection(
        partition=partition,
        modularity=modularity,
        community_count=len(set(partition.values())),
        resolution=resolution,
        seed=seed,
    )
    logger.info(
        "Louvain found %d communities (modularity=%.4f)",
        detection.community_count, detection.modularity,
    )
    return detection


def attach_communities(graph: nx.Graph, partition: dict[str, int]) -> nx.Graph:
    """Return a copy of ``graph`` with a ``community`` attribute on every node.

    Raises:
        MalformedInputError: If any node of the graph has no label.
    """
    missing = [n for n in graph.nodes if n not in partition]
    if missing:
        raise MalformedInputError(
            f"{len(missing)} nodes have no community label (e.g. {missing[0]!r})"
        )

    labelled = graph.copy()
    nx.set_node_attributes(
        labelled, {n: partition[n] for n in labelled.nodes}, COMMUNITY_ATTR,
    )
    labelled.graph["community_count"] = len(set(partition[n] for n in labelled.nodes))
    return labelled
