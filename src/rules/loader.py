import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def load_rules(path: str | Path) -> Rules:
    """
    Read `path` and validate it against the Rules schema.

    A missing file raises FileNotFoundError; bad YAML, a non-mapping document
    or a schema violation raise ValueError naming the file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Rules validation failed: {path.name} must be a YAML mapping")

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed for {path.name}:\n{e}") from e

    logger.debug("Loaded rules v%s from %s", rules.project.rules_version, path)
    return rules
