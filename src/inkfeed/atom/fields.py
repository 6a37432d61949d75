"""Field readers for feed, entry, person and generator models.

Every entity kind exposes a closed set of readable field names. Entity tags
render a field's canonical string form; text tags additionally resolve the
``type`` attribute of an Atom text construct.
"""

from collections.abc import Callable, Mapping
from datetime import date
from enum import Enum
from typing import Any, Union

from inkfeed.atom.tags import write_tag
from inkfeed.feeds.models import Entry, Feed, Generator, Person, Text, TextType
from inkfeed.utils.datetime import format_iso_utc
from inkfeed.utils.errors import UnknownFieldError

Entity = Union[Feed, Entry, Person, Generator]
Accessor = Callable[[Any], Any]

FEED_FIELDS: dict[str, Accessor] = {
    "id": lambda feed: feed.id,
    "title": lambda feed: feed.title,
    "subtitle": lambda feed: feed.subtitle,
    "updated": lambda feed: feed.updated,
    "rights": lambda feed: feed.rights,
}

ENTRY_FIELDS: dict[str, Accessor] = {
    "id": lambda entry: entry.id,
    "title": lambda entry: entry.title,
    "updated": lambda entry: entry.updated,
    "published": lambda entry: entry.published,
    "rights": lambda entry: entry.rights,
    "content": lambda entry: entry.content,
    "summary": lambda entry: entry.summary,
}

PERSON_FIELDS: dict[str, Accessor] = {
    "name": lambda person: person.name,
    "uri": lambda person: person.uri,
    "email": lambda person: person.email,
}

GENERATOR_FIELDS: dict[str, Accessor] = {
    "generator": lambda generator: generator.name,
}

_ACCESSORS: list[tuple[type, dict[str, Accessor]]] = [
    (Feed, FEED_FIELDS),
    (Entry, ENTRY_FIELDS),
    (Person, PERSON_FIELDS),
    (Generator, GENERATOR_FIELDS),
]


def read_field(name: str, entity: Entity) -> Any:
    """Read a named field from an entity.

    Raises:
        UnknownFieldError: If the entity kind has no such field
    """
    for kind, fields in _ACCESSORS:
        if isinstance(entity, kind):
            if name not in fields:
                break
            return fields[name](entity)
    raise UnknownFieldError(name, entity)


def to_text(value: Any) -> str | None:
    """Convert a field value to its canonical string form.

    Timestamps render as ISO 8601, enum members as their value and anything
    else through ``str()``. ``None`` stays ``None``.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return format_iso_utc(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def write_entity_tag(
    name: str, entity: Entity, attributes: Mapping[str, str] | None = None
) -> str:
    """Write the named field of an entity as an element.

    Example:
        >>> write_entity_tag("name", Person(name="Person One"))
        '<name>Person One</name>'
    """
    return write_tag(name, to_text(read_field(name, entity)), attributes)


def resolve_text(content: str | Text | None) -> tuple[str | None, TextType | None]:
    """Split a text construct into its value and content type.

    A bare string is plain text. Missing content has no type.
    """
    if content is None:
        return None, None
    if isinstance(content, Text):
        return content.value, content.type
    if isinstance(content, str):
        return content, TextType.PLAIN
    return to_text(content), None


def write_text_tag(name: str, entity: Feed | Entry) -> str:
    """Write a text construct with its ``type`` attribute.

    Examples:
        <title type="text">AT&amp;T bought by SBC!</title>
        <summary type="html">&lt;p&gt;summary&lt;/p&gt;</summary>

    See https://tools.ietf.org/html/rfc4287#section-3.1
    """
    value, text_type = resolve_text(read_field(name, entity))
    attributes: dict[str, str] = {}
    if text_type is not None:
        attributes["type"] = text_type.value
    return write_tag(name, value, attributes)
