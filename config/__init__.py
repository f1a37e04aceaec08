"""Configuration loading utilities for rate tables."""

from pathlib import Path
from typing import Any

import yaml

CONFIG_DIR = Path(__file__).parent


def available_rate_configs() -> list[str]:
    """List the YAML rate tables shipped in config/."""
    return sorted(p.name for p in CONFIG_DIR.glob("*.yaml"))


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML config file from the config/ directory.

    Raises:
        FileNotFoundError: if no such file exists, naming the ones that do.
    """
    config_path = CONFIG_DIR / filename
    if not config_path.is_file():
        raise FileNotFoundError(
            f"No config file {filename!r} in {CONFIG_DIR}. "
            f"Available: {', '.join(available_rate_configs()) or 'none'}"
        )
    with open(config_path) as f:
        return yaml.safe_load(f)
