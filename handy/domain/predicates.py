"""
Type predicates.

Every predicate classifies an arbitrary value and returns a bool.
None of them raise: unexpected shapes are simply not a match.

    is_object({"a": 1})         # True
    is_object([{"a": 1}])       # False
    is_number(".123", True)     # True
    is_integer("123.0", True)   # True
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from typing import Any, TypeAlias

Nullish: TypeAlias = None
Primitive: TypeAlias = str | int | float | complex | bool | bytes | None

# Plain decimal notation: "12", "-1.5", ".5", "5.", "1e3"
_NUMERIC_STRING = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*$")

_REAL_TYPES = (int, float, Decimal, Fraction)


def is_string(v: Any) -> bool:
    return isinstance(v, str)


def is_function(v: Any) -> bool:
    return callable(v)


def is_boolean(v: Any) -> bool:
    return isinstance(v, bool)


def is_nullish(v: Any) -> bool:
    """Check if a value is None."""
    return v is None


def is_object(v: Any) -> bool:
    """
    Check for a plain object.

    Only values whose exact type is dict qualify. Lists, dict subclasses
    and class instances are not plain objects.
    """
    return type(v) is dict


def is_array(v: Any) -> bool:
    return isinstance(v, (list, tuple))


def _field(v: Any, name: str) -> Any:
    if isinstance(v, Mapping):
        return v.get(name)
    return getattr(v, name, None)


def is_error(v: Any) -> bool:
    """
    Check for an error or an error-like value.

    Exception instances always qualify. Anything else qualifies when it
    exposes a non-empty string ``stack`` together with a string
    ``message``, either as mapping keys or as attributes.
    """
    if isinstance(v, BaseException):
        return True
    if v is None:
        return False
    stack = _field(v, "stack")
    return bool(stack) and isinstance(stack, str) and isinstance(_field(v, "message"), str)


def _to_real(v: Any, include_string: bool) -> int | float | Decimal | Fraction | None:
    if isinstance(v, bool):
        return None
    if isinstance(v, _REAL_TYPES):
        return v
    if include_string and isinstance(v, str) and _NUMERIC_STRING.match(v):
        return float(v)
    return None


def is_number(v: Any, include_string: bool = False) -> bool:
    """
    Check for a real number, optionally accepting numeric strings.

    Booleans and NaN are never numbers.

    Args:
        v: Value to classify.
        include_string: Also accept strings such as "123.2144" or ".123".
    """
    number = _to_real(v, include_string)
    if number is None:
        return False
    if isinstance(number, float):
        return not math.isnan(number)
    if isinstance(number, Decimal):
        return not number.is_nan()
    return True


def is_integer(v: Any, include_string: bool = False) -> bool:
    """
    Check for an integral number, optionally accepting numeric strings.

    123.0 and "123." (with include_string) are integers; NaN and
    infinities are not.
    """
    number = _to_real(v, include_string)
    if number is None:
        return False
    if isinstance(number, int):
        return True
    if isinstance(number, float):
        return math.isfinite(number) and number.is_integer()
    if isinstance(number, Decimal):
        return number.is_finite() and number == number.to_integral_value()
    return number.denominator == 1
