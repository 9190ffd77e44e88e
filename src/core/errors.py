# src/core/errors.py (v1)
"""Exception hierarchy for the analysis pipeline.

Errors are surfaced immediately; nothing in the pipeline retries.
"""

from __future__ import annotations


class CastnetError(Exception):
    """Base class for all castnet errors."""


class MalformedInputError(CastnetError, ValueError):
    """Raised when edge records are missing fields or carry invalid weights."""


class EmptyGraphError(CastnetError):
    """Raised when community detection is requested on a graph with no nodes."""


class UnsupportedFormatError(CastnetError, ValueError):
    """Raised when an edge file has an extension no loader understands."""
