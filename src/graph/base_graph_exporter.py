# src/graph/base_graph_exporter.py (v1)
"""Export interface for the community-labelled character graph.

Exporters write a decorated copy of the graph so that viewers such as Gephi
can colour and size nodes without recomputing anything:

- node ``color``: hex colour shared by every member of a community
- node ``community_size``: member count of the node's community
- graph ``community_count`` and ``node_count``
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import networkx as nx

from castnet.graph.layout import community_colors
from castnet.graph.summarizer import group_by_community

logger = logging.getLogger(__name__)


def decorate_graph(graph: nx.Graph) -> nx.Graph:
    """Copy of ``graph`` with colour and community-size attributes added.

    Raises:
        MalformedInputError: If a node carries no community label.
    """
    groups = group_by_community(graph)
    colors = community_colors(
        {node: label for label, members in groups.items() for node in members}
    )

    decorated = graph.copy()
    for label, members in groups.items():
        for node in members:
            decorated.nodes[node]["color"] = colors[label]
            decorated.nodes[node]["community_size"] = len(members)
    decorated.graph["community_count"] = len(groups)
    decorated.graph["node_count"] = decorated.number_of_nodes()
    return decorated


class BaseGraphExporter(ABC):
    """One graph file format; subclasses only serialize."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Format identifier used in GRAPH_EXPORT_FORMATS (e.g. 'graphml')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension including the dot."""

    def export(self, graph: nx.Graph, output_path: str | Path) -> str:
        """Decorate ``graph``, write it to ``output_path`` and return the path."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._write(decorate_graph(graph), path)
        logger.debug("Exported %s graph to %s", self.format_name, path)
        return str(path)

    @abstractmethod
    def _write(self, graph: nx.Graph, path: Path) -> None:
        """Serialize an already decorated graph."""
