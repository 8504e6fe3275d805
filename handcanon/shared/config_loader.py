"""
Configuration loading: YAML overrides applied to Pydantic model defaults.

Defaults live in Python (config.py). A YAML file, when given, only lists the
fields it changes, e.g.::

    hand:
      shared_sizes: [3, 4, 5]
    system:
      log_level: DEBUG
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from handcanon.shared.config import Config

PACKAGE_LOGGER = "handcanon"


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """
    Load configuration from an optional YAML file with optional keyword overrides.

    Keyword overrides win over the YAML file, which wins over the defaults.

    Args:
        path: Optional path to a YAML config file.
        **overrides: ``section__field=value`` pairs, e.g. ``system__log_level="DEBUG"``.

    Returns:
        Validated, frozen :class:`Config` instance.

    Examples:
        >>> cfg = load_config()
        >>> cfg = load_config("handcanon.yaml", system__log_level="DEBUG")
    """
    config = Config.default()

    if path is not None:
        config = config.merge(_read_yaml(Path(path)))

    if overrides:
        config = config.merge(_group_overrides(overrides))

    return config


def apply_logging_config(config: Config) -> None:
    """Set the package logger level from ``config.system.log_level``."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(config.system.log_level)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _group_overrides(flat: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Turn ``{"system__log_level": "DEBUG"}`` into ``{"system": {"log_level": "DEBUG"}}``."""
    grouped: dict[str, dict[str, Any]] = {}
    for key, value in flat.items():
        section, sep, field = key.partition("__")
        if not sep or not field:
            raise ValueError(f"Override {key!r} must look like section__field")
        grouped.setdefault(section, {})[field] = value
    return grouped
