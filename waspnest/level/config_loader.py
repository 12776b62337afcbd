"""Load NestConfig from JSON."""

import json
import logging
import os
from typing import Optional

from waspnest.level.nest_data import NestConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(__file__), "..", "..", "config", "nest_config.json"
)


def load_nest_config(path: Optional[str] = None) -> NestConfig:
    """
    Load generation tunables from a JSON object.

    Keys missing from the file keep their defaults. A missing file yields the
    default config.

    Raises:
        ValueError: on unknown keys, a non-object document, or invalid values
    """
    path = path or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        logger.warning("Nest config not found at %s, using defaults", path)
        config = NestConfig()
        config.validate()
        return config

    with open(path, 'r') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Nest config {path} must contain a JSON object")

    config = NestConfig.from_dict(data)
    config.validate()
    logger.debug("Loaded nest config from %s: %s", path, config)
    return config
