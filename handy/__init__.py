"""
handy - small generic helpers.

Type predicates, a switch-like value matcher, array and dict utilities,
class name joining and random numbers.
"""

from handy.domain import (
    DEFAULT_KEY,
    ClassName,
    Nullish,
    Primitive,
    cn,
    identity,
    is_array,
    is_boolean,
    is_empty,
    is_error,
    is_function,
    is_integer,
    is_nullish,
    is_number,
    is_object,
    is_string,
    match,
    noop,
    random,
    range_,
    run,
    stop_event_propagation,
    to_array,
    to_dictionary,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_KEY",
    "ClassName",
    "Nullish",
    "Primitive",
    "cn",
    "identity",
    "is_array",
    "is_boolean",
    "is_empty",
    "is_error",
    "is_function",
    "is_integer",
    "is_nullish",
    "is_number",
    "is_object",
    "is_string",
    "match",
    "noop",
    "random",
    "range_",
    "run",
    "stop_event_propagation",
    "to_array",
    "to_dictionary",
]
