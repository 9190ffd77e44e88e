# tests/unit/pipeline/test_unit_runner.py (v1)
"""Tests for pipeline/runner.py: end-to-end run over small edge files."""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone

import pytest

from castnet.config.settings import Settings
from castnet.core.errors import EmptyGraphError, MalformedInputError
from castnet.logging.context import get_context
from castnet.pipeline.runner import generate_run_id, run_analysis


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, layout_iterations=10, **overrides)


class TestGenerateRunId:
    def test_format(self):
        ts = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
        assert re.fullmatch(r"20260301_0930_[0-9a-f]{5}", generate_run_id(ts))


class TestRunAnalysis:
    def test_csv_run(self, edges_csv):
        result = run_analysis(edges_csv, settings=_settings())
        assert result.edge_count_loaded == 6
        assert result.node_count == 7
        assert result.edge_count == 6
        assert result.detection.community_count >= 2
        assert set(result.detection.partition) == set(result.layouts["spherical"])
        assert result.output_files == []

    def test_components_separated(self, edges_csv):
        p = run_analysis(edges_csv, settings=_settings()).detection.partition
        assert p["Jon"] != p["Tyrion"]
        assert p["Cersei"] == p["Jaime"] == p["Tyrion"]

    def test_core_exclusion(self, edges_csv):
        result = run_analysis(edges_csv, settings=_settings(core_nodes="Cersei,Jaime"))
        assert result.edge_count_excluded == 1
        assert result.edge_count == 5

    def test_core_exclusion_drops_isolated_node(self, edges_csv):
        result = run_analysis(edges_csv, settings=_settings(core_nodes="Sam,Gilly"))
        assert "Gilly" not in result.detection.partition

    def test_summaries_cover_nodes(self, edges_json):
        result = run_analysis(edges_json, settings=_settings())
        assert sum(s.node_count for s in result.report.summaries) == result.node_count
        assert len(result.report.small_rankings) == result.node_count

    def test_writes_outputs(self, edges_csv, tmp_path):
        out = tmp_path / "report"
        result = run_analysis(
            edges_csv,
            settings=_settings(graph_export_formats="json,graphml"),
            output_dir=out,
        )
        names = sorted(p.rsplit("/", 1)[-1] for p in result.output_files)
        assert names == [
            "graph.graphml", "graph.json", "layouts.json",
            "sizes.txt", "small_communities.txt", "summary.txt", "top_ranked.txt",
        ]
        layouts = json.loads((out / "layouts.json").read_text(encoding="utf-8"))
        assert set(layouts) == {"colors", "communities", "spherical", "force_directed"}
        assert "Tyrion" in (out / "small_communities.txt").read_text(encoding="utf-8")

    def test_html_tables(self, edges_csv, tmp_path):
        run_analysis(edges_csv, settings=_settings(report_format="html"), output_dir=tmp_path)
        assert (tmp_path / "summary.html").read_text(encoding="utf-8").startswith("<table")

    def test_everything_excluded(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("from,to,weight\nA,B,1\n")
        with pytest.raises(EmptyGraphError):
            run_analysis(path, settings=_settings(core_nodes="A,B"))

    def test_malformed_input(self, tmp_path):
        path = tmp_path / "edges.csv"
        path.write_text("from,to,weight\nA,B,oops\n")
        with pytest.raises(MalformedInputError):
            run_analysis(path, settings=_settings())

    def test_context_cleared(self, edges_csv):
        run_analysis(edges_csv, settings=_settings())
        assert get_context().run_id is None
