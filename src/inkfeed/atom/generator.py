"""Generator element."""

from inkfeed.atom.fields import write_entity_tag
from inkfeed.feeds.models import Generator


def write_generator(generator: Generator | None) -> str:
    """Write the element naming the software that produced the feed.

    Example:
        <generator uri="http://www.example.com/" version="1.0">
          Example Toolkit
        </generator>

    See https://tools.ietf.org/html/rfc4287#section-4.2.4
    """
    if generator is None:
        return ""

    attributes = {}
    if generator.uri:
        attributes["uri"] = generator.uri
    if generator.version:
        attributes["version"] = generator.version
    return write_entity_tag("generator", generator, attributes)
