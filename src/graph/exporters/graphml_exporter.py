# src/graph/exporters/graphml_exporter.py (v1)
"""GraphML export for Gephi, Cytoscape and igraph."""

from __future__ import annotations

from pathlib import Path

import networkx as nx

from castnet.graph.base_graph_exporter import BaseGraphExporter

_SCALARS = (str, int, float, bool)


class GraphMLExporter(BaseGraphExporter):
    @property
    def format_name(self) -> str:
        return "graphml"

    @property
    def file_extension(self) -> str:
        return ".graphml"

    def _write(self, graph: nx.Graph, path: Path) -> None:
        # GraphML keys are typed scalars: drop non-scalar graph attributes,
        # stringify non-scalar node ones
        graph.graph = {k: v for k, v in graph.graph.items() if isinstance(v, _SCALARS)}
        for _, data in graph.nodes(data=True):
            for key, value in list(data.items()):
                if not isinstance(value, _SCALARS):
                    data[key] = str(value)
        nx.write_graphml(graph, str(path))
