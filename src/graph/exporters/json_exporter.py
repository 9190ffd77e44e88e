# src/graph/exporters/json_exporter.py (v1)
"""Node-link JSON, the one graph export every run writes."""

from __future__ import annotations

import json
from pathlib import Path

import networkx as nx

from castnet.graph.base_graph_exporter import BaseGraphExporter


class JsonExporter(BaseGraphExporter):
    """Nodes carry ``community``, ``color`` and ``community_size``; edges carry ``weight``."""

    @property
    def format_name(self) -> str:
        return "json"

    @property
    def file_extension(self) -> str:
        return ".json"

    def _write(self, graph: nx.Graph, path: Path) -> None:
        data = nx.node_link_data(graph, edges="edges")
        path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2, default=str),
            encoding="utf-8",
        )
