"""
Collection helpers: to_array, to_dictionary, range_, is_empty.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .predicates import is_array, is_nullish, is_object, is_string


def to_array(v: Any) -> list[Any] | tuple[Any, ...]:
    """
    Wrap anything that is not already an array.

        to_array(None)       # [None]
        to_array("hello")    # ["hello"]
        to_array([1, 2, 3])  # [1, 2, 3] (the same list)
    """
    if is_array(v):
        return v
    return [v]


def _key_of(item: Any, key: str | int) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    if is_array(item) and isinstance(key, int) and not isinstance(key, bool):
        return item[key] if -len(item) <= key < len(item) else None
    if isinstance(key, str):
        return getattr(item, key, None)
    return None


def to_dictionary(sequence: Any, key: str | int) -> dict[Any, Any]:
    """
    Index a sequence of records by one of their fields.

    Records without the field (or with a falsy value in it) are indexed
    by their position instead. Later records overwrite earlier ones on
    duplicate keys. Anything that is not a list or tuple yields {}.

        arr = [{"id": 1, "name": "foo"}, {"id": 2, "name": "bar"}]
        to_dictionary(arr, "id")
        # {1: {"id": 1, "name": "foo"}, 2: {"id": 2, "name": "bar"}}
    """
    if not is_array(sequence):
        return {}
    return {(_key_of(item, key) or index): item for index, item in enumerate(sequence)}


def range_(length: int | None = None) -> list[int]:
    """Integers from 0 up to ``length`` (exclusive); None or non-positive gives []."""
    return list(range(length or 0))


def is_empty(v: Any) -> bool:
    """
    Check for None, blank strings, empty arrays and empty plain objects.

    Every other value, including 0 and False, is not empty.

        is_empty(None)  # True
        is_empty(" ")   # True
        is_empty([])    # True
        is_empty({})    # True
        is_empty(0)     # False
    """
    if is_nullish(v):
        return True
    if is_string(v):
        return not v.strip()
    if is_array(v):
        return len(v) == 0
    if is_object(v):
        return not v
    return False
