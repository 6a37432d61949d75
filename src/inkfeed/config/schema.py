"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel

from inkfeed.feeds.models import Generator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class AtomConfig(BaseModel):
    """Options for writing Atom documents."""

    xml_declaration: bool = True
    generator: Generator | None = None  # Used when the feed names none
