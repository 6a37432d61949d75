"""Configuration for Inkfeed."""

from inkfeed.config.defaults import DEFAULT_ATOM_CONFIG
from inkfeed.config.logging import setup_logging
from inkfeed.config.schema import AtomConfig, LogLevel

__all__ = ["AtomConfig", "DEFAULT_ATOM_CONFIG", "LogLevel", "setup_logging"]
