"""Tests for element and attribute writers."""

import pytest

from inkfeed.atom.tags import as_list, escape, write_attributes, write_tag


class TestWriteTag:
    """Tests for write_tag."""

    def test_writes_basic_tags(self) -> None:
        """Test simple elements."""
        assert write_tag("tag", "value1") == "<tag>value1</tag>"
        assert write_tag("when", "value2") == "<when>value2</when>"

    @pytest.mark.parametrize("value", ["", None])
    def test_empty_content_is_suppressed(self, value: str | None) -> None:
        """Test that empty content drops the element and its attributes."""
        assert write_tag("tag", value) == ""
        assert write_tag("tag", value, {"type": "html"}) == ""

    def test_escapes_markup_once(self) -> None:
        """Test that markup characters are entity encoded in a single pass."""
        assert write_tag("t", "<p>&x</p>") == "<t>&lt;p&gt;&amp;x&lt;/p&gt;</t>"

    def test_existing_entities_are_treated_as_text(self) -> None:
        """Test that an entity in the input is itself escaped."""
        assert write_tag("t", "AT&amp;T") == "<t>AT&amp;amp;T</t>"

    def test_escapes_quotes(self) -> None:
        """Test that quote characters are escaped in content."""
        assert write_tag("q", 'say "hi"') == "<q>say &quot;hi&quot;</q>"

    def test_writes_attributes(self) -> None:
        """Test element with attributes."""
        result = write_tag("title", "Hello", {"type": "text"})
        assert result == '<title type="text">Hello</title>'


class TestWriteAttributes:
    """Tests for write_attributes."""

    def test_preserves_insertion_order(self) -> None:
        """Test that attributes are written in mapping order."""
        assert write_attributes({"a": "1", "b": "2"}) == ' a="1" b="2"'
        assert write_attributes({"b": "2", "a": "1"}) == ' b="2" a="1"'

    def test_key_value_pairs(self) -> None:
        """Test multiple pairs."""
        attributes = {"key1": "value1", "key2": "value2"}
        assert write_attributes(attributes) == ' key1="value1" key2="value2"'

    def test_missing_attributes(self) -> None:
        """Test that no attributes write nothing."""
        assert write_attributes(None) == ""
        assert write_attributes({}) == ""

    def test_escapes_values(self) -> None:
        """Test that quotes and ampersands cannot break the attribute."""
        result = write_attributes({"title": 'a "b" & c'})
        assert result == ' title="a &quot;b&quot; &amp; c"'


class TestHelpers:
    """Tests for escape and as_list."""

    def test_escape(self) -> None:
        """Test all escaped characters."""
        assert escape("<>&\"'") == "&lt;&gt;&amp;&quot;&#x27;"
        assert escape("plain") == "plain"

    def test_as_list(self) -> None:
        """Test normalizing single and sequence values."""
        assert as_list(None) == []
        assert as_list("a") == ["a"]
        assert as_list(["a", "b"]) == ["a", "b"]
        assert as_list(("a",)) == ["a"]
        assert as_list([]) == []
