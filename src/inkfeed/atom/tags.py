"""Low-level XML element and attribute writers."""

import html
from collections.abc import Mapping
from typing import Any


def escape(value: str) -> str:
    """Replace ``&``, ``<``, ``>`` and quote characters with entities.

    Applied exactly once to every value that reaches the output.
    """
    return html.escape(value, quote=True)


def as_list(value: Any) -> list[Any]:
    """Normalize a missing, single or sequence value to a list."""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def write_attributes(attributes: Mapping[str, str] | None = None) -> str:
    """Write key-value pairs as inline XML attributes.

    Pairs are written in mapping order, each preceded by a space.

    Example:
        >>> write_attributes({"a": "1", "b": "2"})
        ' a="1" b="2"'
    """
    if attributes is None:
        return ""
    return "".join(f' {key}="{escape(value)}"' for key, value in attributes.items())


def write_tag(
    name: str, value: str | None, attributes: Mapping[str, str] | None = None
) -> str:
    """Write an XML element, or an empty string if there is no content.

    Args:
        name: Element name
        value: Text content, escaped before writing
        attributes: Optional attributes for the start tag

    Returns:
        ``<name attrs>content</name>`` or ``""`` when value is empty
    """
    if not value:
        return ""
    return f"<{name}{write_attributes(attributes)}>{escape(value)}</{name}>"
