"""Utility functions and helpers for Inkfeed."""

from inkfeed.utils.datetime import format_iso_utc
from inkfeed.utils.errors import (
    InkfeedError,
    InvalidFeedError,
    ModelError,
    SerializationError,
    UnknownFieldError,
)

__all__ = [
    # Errors
    "InkfeedError",
    "SerializationError",
    "UnknownFieldError",
    "ModelError",
    "InvalidFeedError",
    # Timestamps
    "format_iso_utc",
]
