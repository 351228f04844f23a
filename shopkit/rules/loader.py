import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from shopkit.rules.models import Rules

logger = logging.getLogger(__name__)

DEFAULT_RULES_PATH = "rules.yaml"
RULES_PATH_ENV = "SHOPKIT_RULES_PATH"


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML is malformed or the schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def resolve_rules(path: Path | str | None = None) -> Rules:
    """
    Load rules from an explicit path, the SHOPKIT_RULES_PATH env var,
    or ./rules.yaml, falling back to built-in defaults when none exist.

    An explicitly requested path that does not exist is an error.
    """
    if path is not None:
        return load_rules(Path(path))

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return load_rules(Path(env_path))

    default_path = Path(DEFAULT_RULES_PATH)
    if default_path.exists():
        return load_rules(default_path)

    logger.debug("No rules file found, using built-in defaults")
    return Rules()
