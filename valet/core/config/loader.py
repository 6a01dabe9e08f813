"""
Configuration loader — reads config.yml into settings models.

Lookup order:
    --config flag  >  VALET_CONFIG env var  >  ~/.config/valet/config.yml

A missing default file is fine (built-in defaults apply). A file that
was asked for explicitly must exist and must validate.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from valet.core.models.settings import ValetConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VALET_CONFIG"
DEFAULT_CONFIG_FILE = Path("~/.config/valet/config.yml")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


def default_config_path() -> Path:
    """Config path from the environment, or the per-user default."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE.expanduser()


def load_config(path: Path | None = None) -> ValetConfig:
    """Load and validate configuration.

    Args:
        path: Explicit path to a config file. If None, uses
            ``default_config_path()`` and tolerates its absence.

    Returns:
        Validated ValetConfig.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
    if path is None:
        path = default_config_path()

    if not path.is_file():
        if explicit:
            raise ConfigError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return ValetConfig()

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ValetConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ValetConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded config from %s", path)
    return config
