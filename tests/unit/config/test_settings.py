# tests/unit/config/test_settings.py (v1)
"""Tests for config/settings.py: typed Settings and validation rules."""

from __future__ import annotations

import pytest

from castnet.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_summary_parameters(self):
        s = Settings(_env_file=None)
        assert s.community_size_threshold == 20
        assert s.community_top_k == 5

    def test_default_louvain(self):
        s = Settings(_env_file=None)
        assert s.louvain_resolution == 1.0
        assert s.louvain_seed == 42

    def test_default_output(self):
        s = Settings(_env_file=None)
        assert s.report_format == "text"
        assert s.graph_export_formats == "json"
        assert s.core_nodes == ""

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_file is None


class TestSettingsEnvironment:
    def test_prefixed_env_var(self, monkeypatch):
        monkeypatch.setenv("CASTNET_COMMUNITY_TOP_K", "8")
        monkeypatch.setenv("CASTNET_CORE_NODES", "Jon,Daenerys")
        s = Settings(_env_file=None)
        assert s.community_top_k == 8
        assert s.core_nodes_set == {"Jon", "Daenerys"}

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("CASTNET_LOUVAIN_RESOLUTION=0.5\nCASTNET_REPORT_FORMAT=html\n")
        s = Settings(_env_file=env)
        assert s.louvain_resolution == 0.5
        assert s.report_format == "html"


class TestSettingsValidation:
    def test_zero_threshold(self):
        with pytest.raises(ConfigurationError, match="COMMUNITY_SIZE_THRESHOLD"):
            Settings(_env_file=None, community_size_threshold=0)

    def test_zero_top_k(self):
        with pytest.raises(ConfigurationError, match="COMMUNITY_TOP_K"):
            Settings(_env_file=None, community_top_k=0)

    def test_non_positive_resolution(self):
        with pytest.raises(ConfigurationError, match="LOUVAIN_RESOLUTION"):
            Settings(_env_file=None, louvain_resolution=0)

    def test_errors_are_joined(self):
        with pytest.raises(ConfigurationError, match="; "):
            Settings(_env_file=None, community_top_k=0, louvain_resolution=-1)

    def test_layout_iterations(self):
        with pytest.raises(ValueError, match="layout_iterations"):
            Settings(_env_file=None, layout_iterations=0)

    def test_invalid_report_format(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, report_format="pdf")

    def test_seed_may_be_none(self):
        s = Settings(_env_file=None, louvain_seed=None)
        assert s.louvain_seed is None


class TestSettingsHelpers:
    def test_graph_export_formats_list(self):
        s = Settings(_env_file=None, graph_export_formats="graphml, json,")
        assert s.graph_export_formats_list == ["graphml", "json"]

    def test_core_nodes_set(self):
        s = Settings(_env_file=None, core_nodes=" Jon , Sansa,,Arya ")
        assert s.core_nodes_set == {"Jon", "Sansa", "Arya"}

    def test_core_nodes_empty(self):
        assert Settings(_env_file=None).core_nodes_set == set()


class TestLoadSettings:
    def test_with_overrides(self):
        s = load_settings(_env_file=None, log_level="DEBUG", community_top_k=3)
        assert s.log_level == "DEBUG"
        assert s.community_top_k == 3
