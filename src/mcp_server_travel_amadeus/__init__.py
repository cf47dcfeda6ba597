"""Amadeus travel APIs exposed as Model Context Protocol tools."""

__version__ = "1.0.0"

from .server import main

__all__ = ["main", "__version__"]
