"""Atom 1.0 (RFC 4287) serialization."""

from inkfeed.atom.fields import write_entity_tag, write_text_tag
from inkfeed.atom.generator import write_generator
from inkfeed.atom.links import write_category, write_link
from inkfeed.atom.people import write_person
from inkfeed.atom.tags import write_attributes, write_tag
from inkfeed.atom.writer import render, write, write_entry

__all__ = [
    "render",
    "write",
    "write_attributes",
    "write_category",
    "write_entity_tag",
    "write_entry",
    "write_generator",
    "write_link",
    "write_person",
    "write_tag",
    "write_text_tag",
]
