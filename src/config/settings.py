# src/config/settings.py (v1)
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for analysis parameters and logging setup. CLI flags
are applied as overrides on top of these values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CASTNET_",
        extra="ignore",
    )

    # === Graph construction ===
    # Comma-separated node ids; edges between two core nodes are dropped.
    core_nodes: str = ""

    # === Community detection ===
    louvain_resolution: float = 1.0
    louvain_seed: int | None = 42

    # === Community summaries ===
    community_size_threshold: int = 20
    community_top_k: int = 5
    betweenness_weighted: bool = False

    # === Layouts ===
    layout_iterations: int = 50

    # === Output ===
    report_format: Literal["text", "html"] = "text"
    graph_export_formats: str = "json"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("layout_iterations")
    @classmethod
    def validate_layout_iterations(cls, v: int) -> int:
        if v < 1:
            raise ValueError("layout_iterations must be >= 1")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.community_size_threshold < 1:
            errors.append("COMMUNITY_SIZE_THRESHOLD must be >= 1")

        if self.community_top_k < 1:
            errors.append("COMMUNITY_TOP_K must be >= 1")

        if self.louvain_resolution <= 0:
            errors.append("LOUVAIN_RESOLUTION must be > 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def core_nodes_set(self) -> set[str]:
        """Parse comma-separated core node ids."""
        return {n.strip() for n in self.core_nodes.split(",") if n.strip()}

    @property
    def graph_export_formats_list(self) -> list[str]:
        """Parse comma-separated graph export formats."""
        return [f.strip() for f in self.graph_export_formats.split(",") if f.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
