# src/graph/layout.py (v1)
"""Node coordinates for the two standard views of a labelled graph.

Only positions and colours are produced here; drawing them is left to
whatever renderer consumes the ``layouts.json`` output.
"""

from __future__ import annotations

import colorsys
import logging

import networkx as nx
import numpy as np

from castnet.graph.community_detector import COMMUNITY_ATTR

logger = logging.getLogger(__name__)


def spherical_layout(graph: nx.Graph) -> dict[str, tuple[float, float, float]]:
    """Spread nodes over the unit sphere along a spiral.

    Nodes are visited grouped by community label so that members of one
    community sit next to each other on the sphere.
    """
    nodes = _community_order(graph)
    n = len(nodes)
    if n == 0:
        return {}
    if n == 1:
        return {nodes[0]: (0.0, 0.0, 1.0)}

    h = -1.0 + 2.0 * np.arange(n) / (n - 1)
    theta = np.arccos(np.clip(h, -1.0, 1.0))
    phi = np.zeros(n)
    for i in range(1, n - 1):
        phi[i] = (phi[i - 1] + 3.6 / np.sqrt(n * (1.0 - h[i] ** 2))) % (2 * np.pi)

    x = np.sin(theta) * np.cos(phi)
    y = np.sin(theta) * np.sin(phi)
    z = np.cos(theta)
    return {
        node: (float(x[i]), float(y[i]), float(z[i]))
        for i, node in enumerate(nodes)
    }


def force_directed_layout(
    graph: nx.Graph,
    seed: int | None = 42,
    iterations: int = 50,
    weight: str | None = "weight",
) -> dict[str, tuple[float, float]]:
    """Fruchterman-Reingold positions; heavier edges pull nodes closer."""
    if graph.number_of_nodes() == 0:
        return {}
    pos = nx.spring_layout(graph, weight=weight, seed=seed, iterations=iterations)
    return {node: (float(xy[0]), float(xy[1])) for node, xy in pos.items()}


def community_colors(partition: dict[str, int]) -> dict[int, str]:
    """Assign a stable, evenly spaced hex colour to every community label.

    Labels are sorted only to make the assignment repeatable for one
    partition; the colours carry no meaning beyond telling groups apart.
    """
    labels = sorted(set(partition.values()))
    colors: dict[int, str] = {}
    for i, label in enumerate(labels):
        r, g, b = colorsys.hsv_to_rgb(i / max(len(labels), 1), 0.65, 0.9)
        colors[label] = f"#{int(r * 255):02x}{int(g * 255):02x}{int(b * 255):02x}"
    return colors


def compute_layouts(
    graph: nx.Graph,
    seed: int | None = 42,
    iterations: int = 50,
) -> dict[str, dict[str, list[float]]]:
    """Both layouts in a JSON-friendly shape: ``{layout: {node: [coords]}}``."""
    layouts = {
        "spherical": {n: list(c) for n, c in spherical_layout(graph).items()},
        "force_directed": {
            n: list(c)
            for n, c in force_directed_layout(graph, seed=seed, iterations=iterations).items()
        },
    }
    logger.info("Computed layouts for %d nodes", graph.number_of_nodes())
    return layouts


def _community_order(graph: nx.Graph) -> list[str]:
    """Nodes grouped by first appearance of their label, else insertion order."""
    groups: dict[object, list[str]] = {}
    for node, label in graph.nodes(data=COMMUNITY_ATTR):
        groups.setdefault(label, []).append(node)
    return [node for members in groups.values() for node in members]
