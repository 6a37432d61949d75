"""Data models for Atom feeds and entries.

This module defines Pydantic models for:
- Text constructs (plain, html or xhtml content)
- Persons, links, categories and the generator
- Entries and the feed that contains them

Models are frozen. The writer in ``inkfeed.atom`` only reads them.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TextType(str, Enum):
    """Content type of an Atom text construct."""

    PLAIN = "text"
    HTML = "html"
    XHTML = "xhtml"


class LinkRelation(str, Enum):
    """Registered link relations from RFC 4287."""

    ALTERNATE = "alternate"
    ENCLOSURE = "enclosure"
    RELATED = "related"
    SELF = "self"
    VIA = "via"


class MediaType(str, Enum):
    """Media types commonly attached to feed links."""

    ATOM = "application/atom+xml"
    RSS = "application/rss+xml"
    HTML = "text/html"
    JSON = "application/json"
    MP3 = "audio/mpeg"


class AtomModel(BaseModel):
    """Base class for feed models."""

    model_config = ConfigDict(frozen=True)


class Text(AtomModel):
    """Text construct with an explicit content type.

    A bare string stands for the same thing with type ``text``.

    Example:
        >>> Text(value="<p>summary</p>", type=TextType.HTML)
    """

    value: str
    type: TextType = TextType.PLAIN


class Person(AtomModel):
    """Author or contributor of a feed or entry."""

    name: str
    uri: str | None = None
    email: str | None = None


class Link(AtomModel):
    """Reference from a feed or entry to a web resource."""

    href: str
    rel: str | None = None
    type: str | None = None
    hreflang: str | None = None
    title: str | None = None
    length: int | None = None


class Category(AtomModel):
    """Category a feed or entry belongs to."""

    term: str
    scheme: str | None = None
    label: str | None = None


class Generator(AtomModel):
    """Software that produced the feed."""

    name: str
    uri: str | None = None
    version: str | None = None


TextField = Union[str, Text]
People = Union[Person, list[Person]]
LinkField = Union[str, Link, list[Union[str, Link]]]
Categories = Union[str, Category, list[Union[str, Category]]]


class Entry(AtomModel):
    """Single syndicated item within a feed."""

    id: str
    title: TextField
    updated: datetime | None = None
    published: datetime | None = None
    author: People | None = None
    contributor: People | None = None
    link: LinkField | None = None
    category: Categories | None = None
    rights: TextField | None = None
    content: TextField | None = None
    summary: TextField | None = None


class Feed(AtomModel):
    """Atom feed document."""

    id: str
    title: TextField
    subtitle: TextField | None = None
    updated: datetime | None = None
    rights: TextField | None = None
    author: People | None = None
    link: LinkField | None = None
    category: Categories | None = None
    generator: Generator | None = None
    entries: list[Entry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_unique_entry_ids(self) -> "Feed":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.id in seen:
                msg = f"Duplicate entry id: {entry.id}"
                raise ValueError(msg)
            seen.add(entry.id)
        return self


class Syndicator(Protocol):
    """Anything that can export itself as a feed model."""

    def export_model(self) -> Feed | Mapping[str, Any]:
        ...
