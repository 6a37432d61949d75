"""Author and contributor elements."""

from typing import Literal

from inkfeed.atom.fields import write_entity_tag
from inkfeed.atom.tags import as_list
from inkfeed.feeds.models import Person

PersonRole = Literal["author", "contributor"]


def write_person(role: PersonRole, person: Person | list[Person] | None) -> str:
    """Write one element per person under the given role.

    Example:
        <author>
          <name>Mark Pilgrim</name>
          <uri>http://example.org/</uri>
          <email>f8dy@example.com</email>
        </author>
        <contributor>
          <name>Sam Ruby</name>
        </contributor>

    See https://tools.ietf.org/html/rfc4287#section-3.2
    """
    return "".join(
        f"<{role}>"
        + write_entity_tag("name", p)
        + write_entity_tag("uri", p)
        + write_entity_tag("email", p)
        + f"</{role}>"
        for p in as_list(person)
    )
