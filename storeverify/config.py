"""Settings for the CLI and HTTP surfaces.

Resolution order, later wins:

1. built-in defaults
2. a YAML file (``--config`` or ``STOREVERIFY_CONFIG``)
3. ``STOREVERIFY_*`` environment variables
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_GENESIS_ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"

ENV_PREFIX = "STOREVERIFY_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Runtime settings."""

    genesis_admin: str = DEFAULT_GENESIS_ADMIN
    state_file: Optional[str] = None  # None keeps state in memory only
    log_level: str = "WARNING"


class ConfigError(Exception):
    """Raised when a config file cannot be used."""


def load_settings(
    config_path: Optional[str | Path] = None,
    environ: Optional[dict[str, str]] = None,
) -> Settings:
    """Build :class:`Settings` from defaults, an optional YAML file and the environment."""
    env = os.environ if environ is None else environ
    settings = Settings()

    path = config_path or env.get(f"{ENV_PREFIX}CONFIG")
    if path:
        _apply(settings, _read_yaml(Path(path)))

    overrides = {}
    for f in fields(Settings):
        value = env.get(f"{ENV_PREFIX}{f.name.upper()}")
        if value:
            overrides[f.name] = value
    _apply(settings, overrides)

    settings.log_level = (settings.log_level or "").upper()
    if settings.log_level not in LOG_LEVELS:
        raise ConfigError(
            f"Unknown log_level '{settings.log_level}', expected one of {', '.join(LOG_LEVELS)}"
        )

    return settings


def _read_yaml(path: Path) -> dict:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _apply(settings: Settings, values: dict) -> None:
    known = {f.name for f in fields(Settings)}
    for key, value in values.items():
        if key not in known:
            raise ConfigError(f"Unknown setting '{key}'")
        setattr(settings, key, None if value is None else str(value))
