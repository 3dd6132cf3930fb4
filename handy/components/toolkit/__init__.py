"""
Toolkit component - the helpers with rules applied.
"""

from ._impl import ToolkitService, create_toolkit
from .component import (
    run,
    run_class_names,
    run_match,
    run_random,
)
from .models import (
    ClassNamesInput,
    ClassNamesOutput,
    MatchInput,
    MatchOutput,
    RandomInput,
    RandomOutput,
)
from .ports import RandomSourcePort

__all__ = [
    # Entry points
    "run",
    "run_class_names",
    "run_match",
    "run_random",
    # Input models
    "ClassNamesInput",
    "MatchInput",
    "RandomInput",
    # Output models
    "ClassNamesOutput",
    "MatchOutput",
    "RandomOutput",
    # Ports
    "RandomSourcePort",
    # Service
    "ToolkitService",
    "create_toolkit",
]
