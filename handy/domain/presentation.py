"""
Presentation helpers: cn, stop_event_propagation.
"""

from __future__ import annotations

from typing import Any, TypeAlias

from handy.ports.event import EventPort

from .predicates import is_string

ClassName: TypeAlias = str | bool | None


def cn(*class_names: ClassName, separator: str = " ") -> str:
    """
    Join class names, dropping anything that is not a non-empty string.

        cn("foo", False and "bar", None, "baz")  # "foo baz"
    """
    return separator.join(name for name in class_names if is_string(name) and name)


def stop_event_propagation(event: EventPort | None) -> Any:
    """Instead of ``lambda event: event.stop_propagation()``, tolerating None."""
    if event is None:
        return None
    stop = getattr(event, "stop_propagation", None) or getattr(event, "stopPropagation")
    return stop()
