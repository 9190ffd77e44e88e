# src/report/tables.py (v1)
"""Tabular community reports as pandas DataFrames, rendered to text or HTML."""

from __future__ import annotations

from typing import Literal

import pandas as pd

from castnet.core.models import CommunityReport, RankedNode

SUMMARY_COLUMNS = ["community", "node_count", "most_important"]
RANKING_COLUMNS = ["community", "rank", "node", "degree"]
SIZE_COLUMNS = ["community", "node_count", "edge_count", "share", "is_large"]


def summary_table(report: CommunityReport) -> pd.DataFrame:
    """One row per community: label, size and betweenness leader(s)."""
    rows = [
        {
            "community": s.community,
            "node_count": s.node_count,
            "most_important": ", ".join(s.most_important),
        }
        for s in report.summaries
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def ranking_table(rankings: list[RankedNode]) -> pd.DataFrame:
    """One row per ranked node: label, rank within community, node, degree."""
    rows = [r.model_dump(include=set(RANKING_COLUMNS)) for r in rankings]
    return pd.DataFrame(rows, columns=RANKING_COLUMNS)


def size_table(report: CommunityReport) -> pd.DataFrame:
    """Community size distribution in summary order.

    ``share`` is the fraction of all nodes held by the community.
    """
    df = pd.DataFrame(
        [s.model_dump(include={"community", "node_count", "edge_count", "is_large"})
         for s in report.summaries],
        columns=["community", "node_count", "edge_count", "is_large"],
    )
    total = df["node_count"].sum()
    df["share"] = (df["node_count"] / total).round(4) if total else 0.0
    return df[SIZE_COLUMNS]


def render_table(df: pd.DataFrame, fmt: Literal["text", "html"] = "text") -> str:
    """Render a report table. Empty tables render as an explicit placeholder."""
    if fmt == "html":
        return df.to_html(index=False, border=0)
    if df.empty:
        return "(no rows)"
    return df.to_string(index=False)


def report_tables(report: CommunityReport) -> dict[str, pd.DataFrame]:
    """The standard tables keyed by output file stem."""
    return {
        "summary": summary_table(report),
        "top_ranked": ranking_table(report.large_rankings),
        "small_communities": ranking_table(report.small_rankings),
        "sizes": size_table(report),
    }
