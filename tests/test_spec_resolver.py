"""Tests for mapping entry classification and the spec resolver."""

import pytest
from record_mapper.engines.spec_resolver import SpecResolver
from record_mapper.models.mapping_entry import (
    Literal,
    PathRef,
    Skip,
    TransformDirective,
    classify_entry,
)
from record_mapper.types import MISSING


class TestClassifyEntry:
    """Tests for classify_entry."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_are_skipped(self, value):
        assert classify_entry(value) == Skip()

    def test_literal_wrapper(self):
        assert classify_entry({"$literal": [1]}) == Literal([1])

    @pytest.mark.parametrize("value", [True, False, 0, 1.5, [1, 2], {"x": 1}])
    def test_non_strings_are_literals(self, value):
        assert classify_entry(value) == Literal(value)

    def test_equals_prefix_is_string_literal(self):
        assert classify_entry("=GBP") == Literal("GBP")
        assert classify_entry("==lead") == Literal("=lead")
        assert classify_entry("=") == Literal("")

    def test_other_strings_are_paths(self):
        assert classify_entry("a.b[]") == PathRef("a.b[]")

    def test_transform_with_path(self):
        entry = classify_entry({"$transform": "countryFromISO", "$path": "person.nationality"})

        assert entry == TransformDirective("countryFromISO", (PathRef("person.nationality"),))

    def test_transform_with_args(self):
        entry = classify_entry({"$transform": "f", "$args": ["a", "=b", 3, {"$literal": "c"}]})

        assert entry.args == (PathRef("a"), Literal("b"), Literal(3), Literal("c"))

    def test_transform_args_take_precedence_over_path(self):
        entry = classify_entry({"$transform": "f", "$args": ["a"], "$path": "b"})

        assert entry.args == (PathRef("a"),)

    def test_non_list_args_become_single_argument(self):
        entry = classify_entry({"$transform": "f", "$args": "a.b"})

        assert entry.args == (PathRef("a.b"),)

    def test_transform_without_arguments(self):
        assert classify_entry({"$transform": "f"}).args == ()

    def test_nested_directive_argument_is_plain_object(self):
        nested = {"$transform": "g", "$path": "x"}
        entry = classify_entry({"$transform": "f", "$args": [nested]})

        assert entry.args == (Literal(nested),)

    def test_transform_recognition_can_be_disabled(self):
        value = {"$transform": "f"}

        assert classify_entry(value, allow_transform=False) == Literal(value)


class TestSpecResolver:
    """Tests for SpecResolver class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.resolver = SpecResolver()

    def test_resolves_string_as_path(self):
        assert self.resolver.resolve({"a": {"b": 5}}, "a.b") == 5

    def test_missing_path(self):
        assert self.resolver.resolve({}, "a.b") is MISSING

    def test_passes_through_non_strings(self):
        assert self.resolver.resolve({}, 123) == 123
        assert self.resolver.resolve({}, True) is True
        assert self.resolver.resolve({}, {"x": 1}) == {"x": 1}

    def test_string_literal_prefix(self):
        assert self.resolver.resolve({}, "=GBP") == "GBP"
        assert self.resolver.resolve({}, "==lead") == "=lead"

    def test_literal_wrapper(self):
        assert self.resolver.resolve({}, {"$literal": {"a": 1}}) == {"a": 1}
        assert self.resolver.resolve({}, {"$literal": None}) is None

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values_resolve_to_missing(self, value):
        assert self.resolver.resolve({"": 1}, value) is MISSING

    def test_literal_containers_are_copied(self):
        """Test that callers cannot mutate the mapping spec through a result."""
        spec = {"$literal": {"a": [1]}}
        result = self.resolver.resolve({}, spec)
        result["a"].append(2)

        assert spec == {"$literal": {"a": [1]}}

    def test_transform_object_is_returned_as_object(self):
        value = {"$transform": "countryFromISO", "$path": "x"}

        assert self.resolver.resolve({"x": "GB"}, value) == value

    def test_resolve_entry_rejects_directives(self):
        with pytest.raises(TypeError):
            self.resolver.resolve_entry({}, TransformDirective("f"))
