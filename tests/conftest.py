"""Shared fixtures for Inkfeed tests."""

from datetime import datetime, timezone

import pytest

from inkfeed.feeds.models import Entry, Feed, Link, Person, Text, TextType


@pytest.fixture
def now() -> datetime:
    """Fixed UTC timestamp."""
    return datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


@pytest.fixture
def author() -> Person:
    """Sample feed author."""
    return Person(name="Bob", email="bob@test.com")


@pytest.fixture
def entry(now: datetime) -> Entry:
    """Sample entry with plain and html text constructs."""
    return Entry(
        id="id",
        title="title",
        summary=Text(value="<p>summary</p>", type=TextType.HTML),
        updated=now,
        published=now,
        contributor=None,
        content="content",
        link=Link(href="http://test.com"),
    )


@pytest.fixture
def feed(entry: Entry) -> Feed:
    """Minimal feed holding the sample entry."""
    return Feed(id="id", title="title", entries=[entry])
