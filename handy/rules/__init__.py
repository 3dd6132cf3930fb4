from .loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    configure_logging,
    default_rules,
    load_rules,
    load_rules_from_env,
)
from .models import ClassNameRules, LoggingRules, MatchRules, ProjectRules, RandomRules, Rules

__all__ = [
    "DEFAULT_RULES_PATH",
    "RULES_PATH_ENV",
    "configure_logging",
    "default_rules",
    "load_rules",
    "load_rules_from_env",
    "ClassNameRules",
    "LoggingRules",
    "MatchRules",
    "ProjectRules",
    "RandomRules",
    "Rules",
]
