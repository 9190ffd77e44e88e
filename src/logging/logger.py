# src/logging/logger.py (v1)
"""Log configuration for the ``castnet`` logger tree.

Every handler installed here carries a :class:`ContextFilter`, which stamps
the current run id, input file and pipeline stage onto each record. The
formatters then only read record attributes, so a record formatted later
(or by another handler) still shows the context it was emitted in.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

from castnet.logging.context import get_context

if TYPE_CHECKING:
    from castnet.config.settings import Settings

ROOT_LOGGER = "castnet"
CONTEXT_FIELDS = ("run_id", "source", "stage")


class ContextFilter(logging.Filter):
    """Copy the active run/stage context onto each record; never drops one."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_context()
        for field in CONTEXT_FIELDS:
            if getattr(record, field, None) is None:
                setattr(record, field, getattr(ctx, field))
        return True


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    return {
        field: getattr(record, field)
        for field in CONTEXT_FIELDS
        if getattr(record, field, None) is not None
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log shipping."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = _record_context(record)
        if context:
            entry["context"] = context

        # logger.info(..., extra={"data": {...}})
        data = getattr(record, "data", None)
        if data:
            entry["data"] = data

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """``2026-01-01 12:00:00 [INFO    ] castnet.x [run] (stage): message``"""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s%(context)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        context = _record_context(record)
        tags = ""
        if "run_id" in context:
            tags += f" [{context['run_id']}]"
        if "stage" in context:
            tags += f" ({context['stage']})"
        record.context = tags
        return super().format(record)


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | Path | None = None,
    rotation: str = "10MB",
    retention: int = 5,
) -> logging.Logger:
    """(Re)configure the ``castnet`` logger and return it.

    Console output goes to stderr because reports are printed on stdout.
    Calling this again replaces the previous handlers.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()

    formatter = JsonFormatter() if log_format == "json" else TextFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from castnet.logging.handlers import create_rotating_handler

        handlers.append(
            create_rotating_handler(log_file, rotation=rotation, retention=retention)
        )

    context_filter = ContextFilter()
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        root.addHandler(handler)
    return root


def configure_from_settings(settings: Settings, verbose: bool = False) -> logging.Logger:
    """Apply the ``log_*`` settings; ``verbose`` forces DEBUG."""
    return setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
