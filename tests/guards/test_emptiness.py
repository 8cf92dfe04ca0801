"""Tests for emptiness guards."""

from collections import OrderedDict, deque
from dataclasses import dataclass

import pytest

from guardclause.domain.exceptions import GuardValidationError
from guardclause.guards.emptiness import (
    empty_array,
    empty_object,
    null_or_empty,
    null_or_whitespace,
)


@dataclass(slots=True)
class Point:
    x: int
    y: int


class Unset:
    """Slotted class whose slot is never assigned."""

    __slots__ = ("value",)


class TestNullOrEmpty:
    """Tests for null_or_empty."""

    def test_rejects_none_with_null_message(self):
        """The null check runs before the emptiness check."""
        with pytest.raises(GuardValidationError, match="name cannot be null."):
            null_or_empty(None, "name")

    @pytest.mark.parametrize("value", ["", [], (), {}, set(), b""])
    def test_rejects_empty_values(self, value):
        with pytest.raises(GuardValidationError, match="name cannot be empty."):
            null_or_empty(value, "name")

    def test_returns_value(self):
        assert null_or_empty("ok") == "ok"

    def test_whitespace_is_not_empty(self):
        assert null_or_empty("   ") == "   "

    def test_unsized_values_pass(self):
        """Values without a length only go through the null check."""
        assert null_or_empty(5) == 5


class TestNullOrWhitespace:
    """Tests for null_or_whitespace."""

    def test_rejects_none(self):
        with pytest.raises(GuardValidationError, match="cannot be null"):
            null_or_whitespace(None)

    def test_rejects_empty_with_empty_message(self):
        with pytest.raises(GuardValidationError, match="cannot be empty"):
            null_or_whitespace("")

    @pytest.mark.parametrize("value", ["   ", "\t\n", "  "])
    def test_rejects_whitespace(self, value):
        with pytest.raises(GuardValidationError, match="title cannot be whitespace."):
            null_or_whitespace(value, "title")

    @pytest.mark.parametrize("value", ["a", " a ", [" "], (0,)])
    def test_non_blank_values_pass(self, value):
        assert null_or_whitespace(value) is value


class TestEmptyObject:
    """Tests for empty_object."""

    def test_rejects_empty_dict(self):
        with pytest.raises(GuardValidationError, match="options cannot be an empty object."):
            empty_object({}, "options")

    def test_returns_same_dict(self):
        obj = {"a": 1}
        assert empty_object(obj) is obj

    def test_accepts_other_mappings(self):
        mapping = OrderedDict(b=2)
        assert empty_object(mapping) is mapping

    def test_rejects_none_as_null(self):
        with pytest.raises(GuardValidationError, match="cannot be null"):
            empty_object(None)

    def test_object_with_attributes_passes(self, populated_record):
        assert empty_object(populated_record) is populated_record

    def test_object_without_attributes_rejected(self, bare_record):
        with pytest.raises(GuardValidationError, match="empty object"):
            empty_object(bare_record)

    @pytest.mark.parametrize("value", [5, 1.5, True])
    def test_keyless_scalars_rejected(self, value):
        with pytest.raises(GuardValidationError, match="empty object"):
            empty_object(value)

    @pytest.mark.parametrize("value", [[1, 2], (0,), "text", {1}])
    def test_sized_containers_measured_by_length(self, value):
        """Containers expose one key per element."""
        assert empty_object(value) is value

    @pytest.mark.parametrize("value", [[], "", ()])
    def test_empty_containers_rejected(self, value):
        with pytest.raises(GuardValidationError, match="empty object"):
            empty_object(value)

    def test_slotted_instance_with_set_slot_passes(self, slotted):
        assert empty_object(slotted) is slotted

    def test_slotted_dataclass_passes(self):
        point = Point(1, 2)
        assert empty_object(point) is point

    def test_slotted_instance_with_unset_slots_rejected(self):
        with pytest.raises(GuardValidationError, match="marker cannot be an empty object."):
            empty_object(Unset(), "marker")


class TestEmptyArray:
    """Tests for empty_array."""

    @pytest.mark.parametrize("value", [[], (), range(0), deque()])
    def test_rejects_empty_sequences(self, value):
        with pytest.raises(GuardValidationError, match="items cannot be an empty array."):
            empty_array(value, "items")

    def test_returns_same_list(self):
        arr = [1]
        assert empty_array(arr) is arr

    @pytest.mark.parametrize("value", [5, "", b"", {}, set(), None])
    def test_non_arrays_pass_through(self, value):
        assert empty_array(value) is value
