# src/graph/exporter_factory.py (v1)
"""Factory for graph exporter instantiation.

JSON exporter is always included regardless of configuration.
"""

from __future__ import annotations

import importlib
import logging

from castnet.config.settings import Settings
from castnet.graph.base_graph_exporter import BaseGraphExporter

logger = logging.getLogger(__name__)

_EXPORTERS: dict[str, str] = {
    "json": "castnet.graph.exporters.json_exporter.JsonExporter",
    "graphml": "castnet.graph.exporters.graphml_exporter.GraphMLExporter",
}


def create_exporters(settings: Settings | None = None) -> list[BaseGraphExporter]:
    """Create all configured graph exporters.

    JSON is always included. Additional formats come from settings;
    unknown format names are logged and skipped.
    """
    formats: set[str] = {"json"}

    if settings is not None:
        formats.update(settings.graph_export_formats_list)

    exporters: list[BaseGraphExporter] = []
    for fmt in sorted(formats):
        fqcn = _EXPORTERS.get(fmt)
        if fqcn is None:
            logger.warning("Unknown graph export format %r, skipping", fmt)
            continue
        module_path, class_name = fqcn.rsplit(".", 1)
        mod = importlib.import_module(module_path)
        cls = getattr(mod, class_name)
        exporters.append(cls())

    return exporters
