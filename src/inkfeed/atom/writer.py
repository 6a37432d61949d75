"""Atom feed document writer.

See https://tools.ietf.org/html/rfc4287
"""

import logging

from pydantic import ValidationError

from inkfeed.atom.fields import read_field, write_entity_tag, write_text_tag
from inkfeed.atom.generator import write_generator
from inkfeed.atom.links import write_category, write_link
from inkfeed.atom.people import write_person
from inkfeed.config.defaults import DEFAULT_ATOM_CONFIG
from inkfeed.config.schema import AtomConfig
from inkfeed.feeds.models import Entry, Feed, Person, Syndicator, Text
from inkfeed.utils.errors import InvalidFeedError

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
ATOM_NAMESPACE = "http://www.w3.org/2005/Atom"


def _same_author(
    feed_author: Person | list[Person] | None,
    entry_author: Person | list[Person] | None,
) -> bool:
    """Check whether an entry repeats the feed's own author objects.

    Comparison is by identity, element by element when both sides are lists.
    A single person never matches a list, even one holding that person. An
    entry author equal in value to the feed author but built separately is
    not the same.
    """
    if entry_author is feed_author:
        return True
    if isinstance(feed_author, list) and isinstance(entry_author, list):
        return len(feed_author) == len(entry_author) and all(
            a is b for a, b in zip(feed_author, entry_author)
        )
    return False


def write_entry(
    entry: Entry, feed_author: Person | list[Person] | None = None
) -> str:
    """Write a single ``<entry>`` element.

    The entry author is left out when it is the feed author itself.
    """
    if _same_author(feed_author, entry.author):
        if entry.author is not None:
            logger.debug("Entry %s shares the feed author, omitting it", entry.id)
        author = ""
    else:
        author = write_person("author", entry.author)

    return (
        "<entry>"
        + write_entity_tag("id", entry)
        + write_text_tag("title", entry)
        + write_entity_tag("updated", entry)
        + write_entity_tag("published", entry)
        + author
        + write_person("contributor", entry.contributor)
        + write_link(entry.link)
        + write_category(entry.category)
        + write_text_tag("rights", entry)
        + write_text_tag("content", entry)
        + write_text_tag("summary", entry)
        + "</entry>"
    )


def _write_feed_text(name: str, feed: Feed) -> str:
    # Bare strings keep the plain entity form, explicit Text gets a type
    if isinstance(read_field(name, feed), Text):
        return write_text_tag(name, feed)
    return write_entity_tag(name, feed)


def write(feed: Feed, config: AtomConfig | None = None) -> str:
    """Write a complete Atom feed document.

    Args:
        feed: Feed to serialize
        config: Writer options, defaults to ``DEFAULT_ATOM_CONFIG``

    Returns:
        Atom 1.0 XML text
    """
    config = config or DEFAULT_ATOM_CONFIG
    generator = feed.generator or config.generator
    logger.debug("Writing feed %s with %d entries", feed.id, len(feed.entries))

    return (
        (XML_DECLARATION if config.xml_declaration else "")
        + f'<feed xmlns="{ATOM_NAMESPACE}">'
        + write_entity_tag("id", feed)
        + _write_feed_text("title", feed)
        + _write_feed_text("subtitle", feed)
        + write_entity_tag("updated", feed)
        + _write_feed_text("rights", feed)
        + write_person("author", feed.author)
        + write_link(feed.link)
        + write_category(feed.category)
        + write_generator(generator)
        + "".join(write_entry(entry, feed.author) for entry in feed.entries)
        + "</feed>"
    )


def render(source: Syndicator, config: AtomConfig | None = None) -> str:
    """Render the feed exported by a syndication source.

    Raises:
        InvalidFeedError: If the exported data is not a valid feed
    """
    model = source.export_model()
    if not isinstance(model, Feed):
        try:
            model = Feed.model_validate(model)
        except ValidationError as e:
            raise InvalidFeedError(f"Exported feed is invalid: {e}") from e
    return write(model, config)
