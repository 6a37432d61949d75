"""Feed data model for Inkfeed."""

from inkfeed.feeds.models import (
    Category,
    Entry,
    Feed,
    Generator,
    Link,
    LinkRelation,
    MediaType,
    Person,
    Syndicator,
    Text,
    TextType,
)

__all__ = [
    "Category",
    "Entry",
    "Feed",
    "Generator",
    "Link",
    "LinkRelation",
    "MediaType",
    "Person",
    "Syndicator",
    "Text",
    "TextType",
]
