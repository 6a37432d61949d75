"""Link and category elements.

Both render as self-closing elements carrying all of their data in
attributes. Link attributes are sorted by name; category attributes follow
the order RFC 4287 lists them in.
"""

from collections.abc import Mapping
from typing import Any, Union

from inkfeed.atom.fields import to_text
from inkfeed.atom.tags import as_list, write_attributes
from inkfeed.feeds.models import Category, Link, LinkRelation

LinkLike = Union[str, Link, Mapping[str, Any]]
CategoryLike = Union[str, Category]


def _present(pairs: Mapping[str, Any]) -> dict[str, str]:
    """Keep pairs whose value renders as a non-empty string."""
    attributes = {}
    for key, value in pairs.items():
        text = to_text(value)
        if text:
            attributes[key] = text
    return attributes


def _link_descriptor(link: LinkLike) -> Mapping[str, Any]:
    if isinstance(link, str):
        return {"href": link, "rel": LinkRelation.ALTERNATE}
    if isinstance(link, Link):
        return link.model_dump()
    return link


def write_link(link: LinkLike | list[LinkLike] | None) -> str:
    """Write link elements.

    A bare string is shorthand for an ``alternate`` link to that URL.

    Example:
        >>> write_link(Link(href="http://x", rel="enclosure", type="atom+xml"))
        '<link href="http://x" rel="enclosure" type="atom+xml"/>'
    """
    elements = []
    for item in as_list(link):
        descriptor = _link_descriptor(item)
        ordered = {key: descriptor[key] for key in sorted(descriptor)}
        elements.append(f"<link{write_attributes(_present(ordered))}/>")
    return "".join(elements)


def write_category(category: CategoryLike | list[CategoryLike] | None) -> str:
    """Write category elements, one per term.

    See https://tools.ietf.org/html/rfc4287#section-4.2.2
    """
    elements = []
    for item in as_list(category):
        if isinstance(item, str):
            item = Category(term=item)
        pairs = {"term": item.term, "scheme": item.scheme, "label": item.label}
        elements.append(f"<category{write_attributes(_present(pairs))}/>")
    return "".join(elements)
