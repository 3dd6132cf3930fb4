"""
ToolkitService - the helpers bound to a set of rules.

Key behaviors:
- match uses the configured default key
- cn joins with the configured separator
- random draws from one source, seeded from the rules when a seed is set
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from handy.adapters.system_random import SystemRandomSource
from handy.domain.presentation import ClassName
from handy.rules.loader import default_rules
from handy.rules.models import Rules

from .component import run_class_names, run_match, run_random
from .models import ClassNamesInput, MatchInput, RandomInput
from .ports import RandomSourcePort

logger = logging.getLogger(__name__)


class ToolkitService:
    def __init__(self, rules: Rules, source: RandomSourcePort) -> None:
        self._rules = rules
        self._source = source

    @property
    def rules(self) -> Rules:
        return self._rules

    def match(self, value: Any, table: Mapping[Any, Any] | Sequence[Any]) -> Any:
        return run_match(MatchInput(value=value, table=table), rules=self._rules).result

    def cn(self, *class_names: ClassName) -> str:
        return run_class_names(ClassNamesInput(class_names=class_names), rules=self._rules).class_name

    def random(
        self,
        min: float | None = None,
        max: float | None = None,
        floating: bool = False,
    ) -> float:
        inp = RandomInput(min=min, max=max, floating=floating)
        return run_random(inp, rules=self._rules, source=self._source).value


def create_toolkit(
    rules: Rules | None = None,
    source: RandomSourcePort | None = None,
) -> ToolkitService:
    """
    Create a toolkit service.

    Args:
        rules: Rules to apply; built-in defaults when omitted.
        source: Random source; a SystemRandomSource seeded from
            ``rules.random.seed`` when omitted.

    Returns:
        Configured ToolkitService
    """
    rules = rules or default_rules()
    if source is None:
        source = SystemRandomSource(seed=rules.random.seed)
    logger.debug("Toolkit created for %s", rules.project.slug)
    return ToolkitService(rules, source)
