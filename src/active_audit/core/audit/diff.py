"""Change diffing: split old/new pairs into original and modified maps."""

from collections.abc import Iterable, Mapping
from typing import Any


ChangePair = tuple[Any, Any]


def transform_changes(
    changes: Mapping[str, ChangePair],
) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a change map into original and modified values.

    An attribute lands in ``original`` only when its old value is not
    None, and in ``modified`` only when its new value is not None.
    Pairs where both are None produce nothing.

    Args:
        changes: Mapping of attribute name to ``(old, new)``

    Returns:
        Tuple of ``(original, modified)``
    """
    original: dict[str, Any] = {}
    modified: dict[str, Any] = {}

    for name, (old, new) in changes.items():
        if old is not None:
            original[name] = old
        if new is not None:
            modified[name] = new

    return original, modified


def pair_with_absent(snapshot: Mapping[str, Any]) -> dict[str, ChangePair]:
    """Treat every snapshot value as new, with no prior value."""
    return {name: (None, value) for name, value in snapshot.items()}


def except_columns(
    changes: Mapping[str, ChangePair],
    excluded: Iterable[str],
) -> dict[str, ChangePair]:
    """Drop excluded attributes from a change map."""
    excluded = frozenset(excluded)
    return {name: pair for name, pair in changes.items() if name not in excluded}
