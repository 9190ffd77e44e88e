# src/__init__.py (v1)
"""castnet: community analysis of character-interaction networks."""

from castnet.version import __version__

__all__ = ["__version__"]
