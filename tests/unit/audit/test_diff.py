"""Tests for change diffing."""

import pytest

from active_audit.core.audit.diff import (
    except_columns,
    pair_with_absent,
    transform_changes,
)


pytestmark = pytest.mark.unit


class TestTransformChanges:
    """Tests for transform_changes function."""

    def test_splits_old_and_new_values(self):
        """Verify old values go to original and new values to modified."""
        original, modified = transform_changes({"name": ("old", "new")})

        assert original == {"name": "old"}
        assert modified == {"name": "new"}

    def test_omits_absent_old_values(self):
        """Verify None old values never reach original."""
        original, modified = transform_changes({"a": (None, 1), "b": (None, 2)})

        assert original == {}
        assert modified == {"a": 1, "b": 2}

    def test_omits_absent_new_values(self):
        """Verify None new values never reach modified."""
        original, modified = transform_changes({"body": ("text", None)})

        assert original == {"body": "text"}
        assert modified == {}

    def test_both_absent_produces_nothing(self):
        """Verify a (None, None) pair lands in neither map."""
        original, modified = transform_changes({"ghost": (None, None)})

        assert original == {}
        assert modified == {}

    def test_falsy_values_are_kept(self):
        """Verify only None counts as absent."""
        original, modified = transform_changes(
            {"count": (0, 1), "flag": (True, False), "name": ("", "x")}
        )

        assert original == {"count": 0, "flag": True, "name": ""}
        assert modified == {"count": 1, "flag": False, "name": "x"}

    def test_keys_match_non_null_sides(self):
        """Verify each map holds exactly the keys with a non-null value."""
        changes = {
            "a": (1, 2),
            "b": (None, 3),
            "c": (4, None),
            "d": (None, None),
        }

        original, modified = transform_changes(changes)

        assert set(original) == {k for k, (o, _) in changes.items() if o is not None}
        assert set(modified) == {k for k, (_, n) in changes.items() if n is not None}

    def test_values_are_preserved_exactly(self):
        """Verify values are passed through by identity."""
        payload = {"nested": [1, 2]}

        original, modified = transform_changes({"data": (payload, payload)})

        assert original["data"] is payload
        assert modified["data"] is payload

    def test_accepts_list_pairs(self):
        """Verify two-element lists work like tuples."""
        original, modified = transform_changes({"name": ["old", "new"]})

        assert original == {"name": "old"}
        assert modified == {"name": "new"}

    def test_empty_input(self):
        """Verify an empty change map yields two empty maps."""
        assert transform_changes({}) == ({}, {})

    def test_idempotent(self):
        """Verify diffing the same input twice gives identical output."""
        changes = {"a": (1, 2), "b": (None, "x"), "c": ("y", None)}

        assert transform_changes(changes) == transform_changes(changes)

    def test_does_not_mutate_input(self):
        """Verify the input map is left untouched."""
        changes = {"a": (1, 2)}

        transform_changes(changes)

        assert changes == {"a": (1, 2)}


class TestPairWithAbsent:
    """Tests for pair_with_absent function."""

    def test_pairs_every_value_with_none(self):
        """Verify every snapshot value becomes a new value."""
        assert pair_with_absent({"a": 1, "b": None}) == {
            "a": (None, 1),
            "b": (None, None),
        }


class TestExceptColumns:
    """Tests for except_columns function."""

    def test_drops_excluded_attributes(self):
        """Verify excluded attributes are removed."""
        changes = {"a": (None, 1), "b": (None, 2)}

        assert except_columns(changes, {"b"}) == {"a": (None, 1)}

    def test_unknown_exclusions_are_ignored(self):
        """Verify excluding attributes that are not present is harmless."""
        changes = {"a": (None, 1)}

        assert except_columns(changes, ["missing"]) == changes
