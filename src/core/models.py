# src/core/models.py (v1)
"""Shared Pydantic domain models used across modules.

The graph itself is a plain ``networkx.Graph``; these models describe the
pipeline's input records and its derived, read-only results.
"""

from __future__ import annotations

import math
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# === INPUT ===


class Edge(BaseModel):
    """One weighted interaction between two characters.

    Accepts the wire names ``from``/``to`` as well as ``source``/``target``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    source: str = Field(alias="from")
    target: str = Field(alias="to")
    weight: float = Field(allow_inf_nan=False)

    @field_validator("source", "target", mode="before")
    @classmethod
    def validate_endpoint(cls, v: object) -> str:
        if v is None:
            raise ValueError("endpoint is missing")
        text = str(v).strip()
        if not text:
            raise ValueError("endpoint is empty")
        return text

    @field_validator("weight", mode="before")
    @classmethod
    def reject_boolean_weight(cls, v: object) -> object:
        # bool is an int subclass, lax mode would read true as 1.0
        if isinstance(v, bool):
            raise ValueError("weight must be a number, not a boolean")
        return v

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("weight must be finite")
        if v <= 0:
            raise ValueError("weight must be > 0")
        return v


# === COMMUNITY DETECTION ===


class CommunityDetection(BaseModel):
    """Louvain partition of a graph.

    Labels are opaque tokens: only the grouping they induce is meaningful,
    never their numeric values.
    """

    partition: dict[str, int] = Field(default_factory=dict)
    modularity: float = 0.0
    community_count: int = 0
    resolution: float = 1.0
    seed: int | None = None

    @property
    def labels(self) -> set[int]:
        return set(self.partition.values())


# === SUMMARIES ===


class RankedNode(BaseModel):
    """Node ranked by degree inside its community subgraph."""

    community: int
    rank: int
    node: str
    degree: int
    degree_centrality: float = 0.0


class CommunitySummary(BaseModel):
    """Descriptive statistics for one community's induced subgraph."""

    community: int
    node_count: int
    edge_count: int = 0
    most_important: list[str] = Field(default_factory=list)
    max_betweenness: float = 0.0
    is_large: bool = False
    ranking: list[RankedNode] = Field(default_factory=list)


class CommunityReport(BaseModel):
    """All community summaries plus the large/small ranking tables."""

    summaries: list[CommunitySummary] = Field(default_factory=list)
    size_threshold: int = 20
    top_k: int = 5

    @property
    def large_rankings(self) -> list[RankedNode]:
        return [r for s in self.summaries if s.is_large for r in s.ranking]

    @property
    def small_rankings(self) -> list[RankedNode]:
        return [r for s in self.summaries if not s.is_large for r in s.ranking]


# === PIPELINE RESULT ===


class AnalysisResult(BaseModel):
    """Outcome of one end-to-end run."""

    run_id: str
    source_path: Path
    edge_count_loaded: int = 0
    edge_count_excluded: int = 0
    node_count: int = 0
    edge_count: int = 0
    detection: CommunityDetection
    report: CommunityReport
    layouts: dict[str, dict[str, list[float]]] = Field(default_factory=dict)
    output_files: list[str] = Field(default_factory=list)
