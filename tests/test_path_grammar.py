"""Tests for the path grammar."""

import pytest
from record_mapper.paths.grammar import parse_segment, parse_path
from record_mapper.models.path import Path, PathSegment, SegmentMode


class TestParseSegment:
    """Tests for parse_segment."""

    def test_plain_segment(self):
        """Test a bare key."""
        segment = parse_segment("name")

        assert segment.key == "name"
        assert segment.mode == SegmentMode.PLAIN
        assert segment.index is None

    def test_wildcard_segment(self):
        """Test empty brackets."""
        segment = parse_segment("items[]")

        assert segment.key == "items"
        assert segment.mode == SegmentMode.WILDCARD

    def test_index_segment(self):
        """Test numeric brackets."""
        segment = parse_segment("items[12]")

        assert segment.key == "items"
        assert segment.mode == SegmentMode.INDEX
        assert segment.index == 12

    @pytest.mark.parametrize("text", ["items[x]", "[0]", "a[1][2]", "a[1]b", "a[-1]", ""])
    def test_malformed_segment_is_plain_key(self, text):
        """Test that text outside the grammar is kept whole as a plain key."""
        segment = parse_segment(text)

        assert segment.key == text
        assert segment.mode == SegmentMode.PLAIN

    def test_trailing_newline_is_not_accepted_as_grammar(self):
        """Test that the whole text must match the grammar."""
        segment = parse_segment("items[]\n")

        assert segment.key == "items[]\n"
        assert segment.mode == SegmentMode.PLAIN


class TestParsePath:
    """Tests for parse_path."""

    def test_splits_on_dots(self):
        """Test that every dotted part becomes a segment."""
        path = parse_path("a.b[].c[0]")

        assert len(path) == 3
        assert [segment.key for segment in path] == ["a", "b", "c"]
        assert [segment.mode for segment in path] == [
            SegmentMode.PLAIN, SegmentMode.WILDCARD, SegmentMode.INDEX
        ]
        assert path.has_wildcard()

    def test_equivalent_strings_parse_identically(self):
        """Test that parsing is deterministic and paths compare by value."""
        assert parse_path("list[].v") == parse_path("list[].v")
        assert str(parse_path("list[].v[3]")) == "list[].v[3]"

    def test_path_is_immutable(self):
        """Test that parsed paths cannot be modified."""
        path = parse_path("a.b")

        with pytest.raises(AttributeError):
            path.segments = ()

    def test_index_segment_requires_index(self):
        """Test segment model validation."""
        with pytest.raises(ValueError):
            PathSegment(key="a", mode=SegmentMode.INDEX)

        with pytest.raises(ValueError):
            PathSegment(key="a", mode=SegmentMode.PLAIN, index=1)

    def test_path_without_wildcard(self):
        """Test has_wildcard on plain paths."""
        assert not Path((PathSegment("a"), PathSegment("b", SegmentMode.INDEX, 0))).has_wildcard()
