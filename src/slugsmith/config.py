"""Default slug options from slugsmith.yaml plus explicit overrides"""

import logging
from pathlib import Path
from typing import Any

import yaml

from slugsmith.core.models import SlugOptions
from slugsmith.errors import ConfigError


logger = logging.getLogger(__name__)

CONFIG_FILE = "slugsmith.yaml"


def load_config(path: str | Path = CONFIG_FILE, overrides: dict[str, Any] = None) -> SlugOptions:
    """Load SlugOptions from a YAML file (if present), then apply non-None overrides."""
    data: dict[str, Any] = {}
    config_path = Path(path)
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Invalid {config_path}: expected a mapping, got {type(data).__name__}")
        logger.debug("loaded slug defaults from %s", config_path)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return SlugOptions(**data)
