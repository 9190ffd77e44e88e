# src/graph/loader.py (v1)
"""Edge-list loader: read (from, to, weight) records from CSV or JSON.

The loader validates every record and fails on the first malformed one.
Duplicate pairs are kept as-is; merging is the builder's job.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import pandas as pd
from pydantic import ValidationError

from castnet.core.errors import MalformedInputError, UnsupportedFormatError
from castnet.core.models import Edge

logger = logging.getLogger(__name__)

# Column name pairs accepted for the two endpoints, in order of preference.
_ENDPOINT_COLUMNS: list[tuple[str, str]] = [
    ("from", "to"),
    ("source", "target"),
]


def load_edges(path: str | Path) -> list[Edge]:
    """Load and validate an edge list from a local file.

    Args:
        path: ``.csv`` file with a header row, or ``.json`` file holding a
            list of records (optionally wrapped as ``{"edges": [...]}``).

    Returns:
        Validated edges in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnsupportedFormatError: If the extension is not ``.csv`` or ``.json``.
        MalformedInputError: If a record is missing a field or has a bad weight.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Edge file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        records = _read_csv(path)
    elif suffix == ".json":
        records = _read_json(path)
    else:
        raise UnsupportedFormatError(
            f"No edge loader for format {suffix!r}. Supported: .csv, .json"
        )

    edges = parse_edges(records)
    logger.info("Loaded %d edges from %s", len(edges), path.name)
    return edges


def parse_edges(records: Iterable[Mapping[str, Any]]) -> list[Edge]:
    """Validate in-memory edge records.

    Each record needs an endpoint pair (``from``/``to`` or
    ``source``/``target``) and a positive numeric ``weight``.
    """
    edges: list[Edge] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise MalformedInputError(
                f"Edge record {index} is not an object: {record!r}"
            )
        source_key, target_key = _endpoint_keys(record.keys(), index)
        if "weight" not in record:
            raise MalformedInputError(f"Edge record {index} has no weight")
        try:
            edges.append(
                Edge(
                    source=record[source_key],
                    target=record[target_key],
                    weight=record["weight"],
                )
            )
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise MalformedInputError(
                f"Edge record {index} is invalid ({problems})"
            ) from exc
    return edges


def _endpoint_keys(keys: Iterable[str], index: int) -> tuple[str, str]:
    """Pick the endpoint field names present in a record."""
    present = set(keys)
    for source_key, target_key in _ENDPOINT_COLUMNS:
        if source_key in present and target_key in present:
            return source_key, target_key
    raise MalformedInputError(
        f"Edge record {index} lacks endpoint fields "
        f"(expected one of {', '.join('/'.join(p) for p in _ENDPOINT_COLUMNS)})"
    )


def _read_csv(path: Path) -> list[dict[str, Any]]:
    """Read CSV rows as dicts; empty cells become None."""
    try:
        df = pd.read_csv(path, dtype=str, skipinitialspace=True, encoding="utf-8")
    except pd.errors.EmptyDataError as exc:
        raise MalformedInputError(f"Edge file {path.name} is empty") from exc
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"Edge file {path.name} is not valid UTF-8: {exc}") from exc
    df.columns = [str(c).strip().lower() for c in df.columns]
    df = df.astype(object).where(df.notna(), None)
    return df.to_dict(orient="records")


def _read_json(path: Path) -> list[dict[str, Any]]:
    """Read a JSON edge list, unwrapping an ``edges`` key if present."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"Edge file {path.name} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedInputError(f"Edge file {path.name} is not valid JSON: {exc}") from exc
    if isinstance(data, dict) and "edges" in data:
        data = data["edges"]
    if not isinstance(data, list):
        raise MalformedInputError(
            f"Edge file {path.name} must contain a list of edge records"
        )
    return data
