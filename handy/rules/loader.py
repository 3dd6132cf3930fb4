import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from handy.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "HANDY_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


def _strip_markdown_fences(content: str) -> str:
    # Only the first ```yaml block is used when the file is fenced
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    return "\n".join(yaml_lines) if found_block else content


def default_rules() -> Rules:
    """Built-in rules, used when no rules file is configured."""
    return Rules()


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    clean_content = _strip_markdown_fences(path.read_text())

    try:
        data = yaml.safe_load(clean_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data or {})
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.info("Rules loaded from %s", path)
    return rules


def load_rules_from_env() -> Rules:
    """Load the rules file named by HANDY_RULES_PATH (default: rules.yaml)."""
    return load_rules(Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH)))


def configure_logging(rules: Rules) -> logging.Logger:
    """
    Apply the logging rules to the ``handy`` logger.

    The root logger is left alone; a stream handler is attached once.
    """
    package_logger = logging.getLogger("handy")
    package_logger.setLevel(rules.logging.level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(rules.logging.format))
        package_logger.addHandler(handler)
    return package_logger
