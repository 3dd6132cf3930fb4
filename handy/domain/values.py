"""
Value helpers: run, match, identity, noop.

    run(lambda v: v + 2, 1)                           # 3
    run("foo", 1)                                     # "foo"
    match("foo", {"foo": 2, "bar": 3, "default": 5})  # 2
    match("hello", {"foo": 2, "bar": 3, "default": 5})  # 5
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, TypeVar

from .predicates import is_array, is_function

T = TypeVar("T")

DEFAULT_KEY = "default"

_MISSING = object()


def run(func: Callable[..., T] | T, *args: Any, **kwargs: Any) -> T:
    """Call ``func`` with the arguments if it is callable, else return it as is."""
    if is_function(func):
        return func(*args, **kwargs)  # type: ignore[operator]
    return func  # type: ignore[return-value]


def identity(v: T) -> T:
    return v


def noop(*args: Any, **kwargs: Any) -> None:
    pass


def _lookup(value: Any, table: Mapping[Any, Any] | Sequence[Any]) -> Any:
    if is_array(table):
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < len(table):
            return table[value]
        return _MISSING
    if not isinstance(value, Hashable):
        return _MISSING
    if value in table:
        return table[value]
    # Tables read from YAML/JSON carry string keys
    key = _string_key(value)
    if key in table:
        return table[key]
    return _MISSING


def _string_key(value: Any) -> str:
    """Spell a key the way JSON object keys spell it: true, 1 (not 1.0)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def match(
    value: Any,
    table: Mapping[Any, Any] | Sequence[Any],
    *,
    default_key: str = DEFAULT_KEY,
) -> Any:
    """
    Match a value against a table instead of an if/elif chain.

    The entry for ``value`` is returned only when both the key and the
    stored entry are truthy. Falsy keys (0, "", None) and falsy entries
    (0, False, "") fall through to the ``default_key`` entry, or None when
    the table has no default.

    A list or tuple table is indexed by position and has no default entry.

    Args:
        value: Key to look up.
        table: Mapping of keys to results, or a sequence.
        default_key: Key of the fallback entry.

    Returns:
        The matched entry, the default entry, or None.
    """
    if value:
        found = _lookup(value, table)
        if found is not _MISSING and found:
            return found
    if is_array(table):
        return None
    return table.get(default_key)  # type: ignore[union-attr]
