"""
Toolkit component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from handy.domain.presentation import ClassName


@dataclass(frozen=True)
class MatchInput:
    """Input for matching a value against a table."""

    value: Any
    table: Mapping[Any, Any] | Sequence[Any]


@dataclass(frozen=True)
class MatchOutput:
    """Output from matching; ``matched`` is False when the default was used."""

    result: Any
    matched: bool


@dataclass(frozen=True)
class ClassNamesInput:
    """Input for joining class names."""

    class_names: Sequence[ClassName] = field(default_factory=tuple)


@dataclass(frozen=True)
class ClassNamesOutput:
    class_name: str


@dataclass(frozen=True)
class RandomInput:
    """Input for drawing a random number."""

    min: float | None = None
    max: float | None = None
    floating: bool = False


@dataclass(frozen=True)
class RandomOutput:
    value: float
