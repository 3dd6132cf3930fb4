"""
Random numbers between two bounds.
"""

from __future__ import annotations

import math

from handy.adapters.system_random import SystemRandomSource
from handy.ports.random_source import RandomSourcePort

from .predicates import is_nullish

_default_source = SystemRandomSource()


def random(
    min: float | None = None,
    max: float | None = None,
    floating: bool = False,
    *,
    source: RandomSourcePort | None = None,
) -> float:
    """
    Return a random number, or a random number between min and max.

    Args:
        min: Lower bound. Without both bounds the result is a float in [0, 1).
        max: Upper bound, inclusive for integers, exclusive for floats.
        floating: Return a float in [min, max) instead of an integer in [min, max].
        source: Random source to draw from; the module default otherwise.

    Raises:
        ValueError: If min is greater than max.
    """
    if source is None:
        source = _default_source
    if is_nullish(min) or is_nullish(max):
        return source.random()
    if min > max:
        raise ValueError(f"min ({min}) must not exceed max ({max})")

    add = 0 if floating else 1
    rand = source.random() * (max - min + add) + min
    return rand if floating else math.floor(rand)
