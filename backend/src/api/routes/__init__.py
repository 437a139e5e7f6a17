"""HTTP API route handlers."""

from . import files

__all__ = ["files"]
