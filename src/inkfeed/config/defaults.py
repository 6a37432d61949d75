"""Default configuration values."""

from inkfeed.config.schema import AtomConfig

DEFAULT_ATOM_CONFIG = AtomConfig()
