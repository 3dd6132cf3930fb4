"""
Domain - pure helper functions.

No I/O and no configuration lookups; every helper works only on its arguments.
"""

from .containers import is_empty, range_, to_array, to_dictionary
from .predicates import (
    Nullish,
    Primitive,
    is_array,
    is_boolean,
    is_error,
    is_function,
    is_integer,
    is_nullish,
    is_number,
    is_object,
    is_string,
)
from .presentation import ClassName, cn, stop_event_propagation
from .randomness import random
from .values import DEFAULT_KEY, identity, match, noop, run

__all__ = [
    # Predicates
    "is_array",
    "is_boolean",
    "is_error",
    "is_function",
    "is_integer",
    "is_nullish",
    "is_number",
    "is_object",
    "is_string",
    # Values
    "DEFAULT_KEY",
    "identity",
    "match",
    "noop",
    "run",
    # Containers
    "is_empty",
    "range_",
    "to_array",
    "to_dictionary",
    # Presentation
    "cn",
    "stop_event_propagation",
    # Randomness
    "random",
    # Types
    "ClassName",
    "Nullish",
    "Primitive",
]
