"""Inkfeed - Atom 1.0 feed serialization."""

from inkfeed.atom.writer import render, write

__version__ = "0.1.0"

__all__ = ["render", "write", "__version__"]
