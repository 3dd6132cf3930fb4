"""
Toolkit component - configured access to the helpers.

Applies the rules (default match key, class name separator, random seed)
on top of the pure domain helpers.

Invariants:
- The domain helpers stay pure; configuration is passed in explicitly
- The default entry is reported as unmatched
"""

from __future__ import annotations

import logging
from functools import lru_cache

from handy.adapters.system_random import SystemRandomSource
from handy.domain.predicates import is_array
from handy.domain.presentation import cn
from handy.domain.randomness import random
from handy.domain.values import match
from handy.rules.models import Rules

from .models import (
    ClassNamesInput,
    ClassNamesOutput,
    MatchInput,
    MatchOutput,
    RandomInput,
    RandomOutput,
)
from .ports import RandomSourcePort

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()


# --- Component Entry Points ---


def run_match(inp: MatchInput, *, rules: Rules) -> MatchOutput:
    """
    Match a value using the configured default key.

    Args:
        inp: Value and lookup table.
        rules: Rules supplying the default key.

    Returns:
        MatchOutput with the result and whether an explicit entry matched.
    """
    default_key = rules.match.default_key
    result = match(inp.value, inp.table, default_key=default_key)
    if is_array(inp.table):
        matched = result is not None
    else:
        # A sentinel default tells an explicit hit apart from the fallback
        probe = {**inp.table, default_key: _NO_DEFAULT}
        matched = match(inp.value, probe, default_key=default_key) is not _NO_DEFAULT
    if not matched:
        logger.debug("No entry for %r, using %r", inp.value, default_key)
    return MatchOutput(result=result, matched=matched)


def run_class_names(inp: ClassNamesInput, *, rules: Rules) -> ClassNamesOutput:
    """Join class names with the configured separator."""
    return ClassNamesOutput(class_name=cn(*inp.class_names, separator=rules.class_names.separator))


@lru_cache(maxsize=None)
def _seeded_source(seed: int) -> SystemRandomSource:
    return SystemRandomSource(seed=seed)


def run_random(
    inp: RandomInput,
    *,
    rules: Rules,
    source: RandomSourcePort | None = None,
) -> RandomOutput:
    """
    Draw a random number.

    Without an explicit source, a configured ``rules.random.seed`` selects
    one seeded source per seed, so repeated draws continue one sequence.
    Otherwise the shared default source is used.
    """
    if source is None and rules.random.seed is not None:
        source = _seeded_source(rules.random.seed)
    return RandomOutput(value=random(inp.min, inp.max, inp.floating, source=source))


def run(
    inp: MatchInput | ClassNamesInput | RandomInput,
    *,
    rules: Rules,
    source: RandomSourcePort | None = None,
) -> MatchOutput | ClassNamesOutput | RandomOutput:
    """
    Main entry point for the toolkit component.

    Dispatches to the appropriate handler based on input type.

    Raises:
        ValueError: For an unknown input type.
    """
    logger.debug("Dispatching %s", type(inp).__name__)
    if isinstance(inp, MatchInput):
        return run_match(inp, rules=rules)
    elif isinstance(inp, ClassNamesInput):
        return run_class_names(inp, rules=rules)
    elif isinstance(inp, RandomInput):
        return run_random(inp, rules=rules, source=source)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
