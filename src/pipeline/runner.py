# src/pipeline/runner.py (v1)
"""Pipeline runner: load, build, detect, summarize, lay out, write.

Stages run once, in order, each consuming the previous stage's output.
Any error aborts the run; there is no partial result and no retry.
"""

from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path

import networkx as nx

from castnet.config.settings import Settings
from castnet.core.models import AnalysisResult
from castnet.graph.builder import build_graph, count_excluded_edges
from castnet.graph.community_detector import attach_communities, detect_communities
from castnet.graph.exporter_factory import create_exporters
from castnet.graph.layout import community_colors, compute_layouts
from castnet.graph.loader import load_edges
from castnet.graph.summarizer import summarize_communities
from castnet.logging.context import clear_context, set_run_context, set_stage_context
from castnet.report.tables import render_table, report_tables

logger = logging.getLogger(__name__)


def generate_run_id(timestamp: datetime | None = None) -> str:
    """Generate a run_id: yyyymmdd_hhmm_{uuid4_short}."""
    ts = timestamp or datetime.now(timezone.utc)
    short_uuid = uuid.uuid4().hex[:5]
    return f"{ts.strftime('%Y%m%d_%H%M')}_{short_uuid}"


def run_analysis(
    edges_path: str | Path,
    settings: Settings | None = None,
    output_dir: str | Path | None = None,
) -> AnalysisResult:
    """Run the full analysis over one edge file.

    Args:
        edges_path: CSV or JSON edge list.
        settings: Analysis parameters (defaults to ``Settings()``).
        output_dir: When given, tables, layouts and graph exports are
            written here.

    Returns:
        AnalysisResult with detection, report and layouts.
    """
    settings = settings or Settings()
    edges_path = Path(edges_path)
    run_id = generate_run_id()
    set_run_context(run_id, source=edges_path.name)

    try:
        set_stage_context("load")
        edges = load_edges(edges_path)

        set_stage_context("build")
        core = settings.core_nodes_set
        graph = build_graph(edges, exclude_nodes=core)

        set_stage_context("detect")
        detection = detect_communities(
            graph,
            resolution=settings.louvain_resolution,
            seed=settings.louvain_seed,
        )
        labelled = attach_communities(graph, detection.partition)

        set_stage_context("summarize")
        report = summarize_communities(
            labelled,
            size_threshold=settings.community_size_threshold,
            top_k=settings.community_top_k,
            weighted_betweenness=settings.betweenness_weighted,
        )

        set_stage_context("layout")
        layouts = compute_layouts(
            labelled,
            seed=settings.louvain_seed,
            iterations=settings.layout_iterations,
        )

        result = AnalysisResult(
            run_id=run_id,
            source_path=edges_path,
            edge_count_loaded=len(edges),
            edge_count_excluded=count_excluded_edges(edges, core),
            node_count=labelled.number_of_nodes(),
            edge_count=labelled.number_of_edges(),
            detection=detection,
            report=report,
            layouts=layouts,
        )

        if output_dir is not None:
            set_stage_context("write")
            result.output_files = write_outputs(result, labelled, Path(output_dir), settings)

        logger.info(
            "Run complete: %d nodes, %d communities",
            result.node_count, detection.community_count,
        )
        return result
    finally:
        clear_context()


def write_outputs(
    result: AnalysisResult,
    labelled_graph: nx.Graph,
    output_dir: Path,
    settings: Settings,
) -> list[str]:
    """Write report tables, layouts and graph exports; return written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    fmt = settings.report_format
    ext = ".html" if fmt == "html" else ".txt"
    written: list[str] = []

    for stem, df in report_tables(result.report).items():
        path = output_dir / f"{stem}{ext}"
        path.write_text(render_table(df, fmt), encoding="utf-8")
        written.append(str(path))

    layouts_path = output_dir / "layouts.json"
    payload = {
        "colors": {
            str(k): v for k, v in community_colors(result.detection.partition).items()
        },
        "communities": result.detection.partition,
        **result.layouts,
    }
    layouts_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    written.append(str(layouts_path))

    for exporter in create_exporters(settings):
        path = output_dir / f"graph{exporter.file_extension}"
        written.append(exporter.export(labelled_graph, path))

    logger.info("Wrote %d files to %s", len(written), output_dir)
    return written
