"""HTTP API for linedelta."""

from .. import __version__

__all__ = ["__version__"]
