"""Configuration loader for the electronic dice.

Loads settings from environment variables (.env file) and config/default.yaml,
with environment variables taking precedence over YAML defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from dice_toy.core.state_machine import DEFAULT_DICE_NUMBER


# Project root is two levels up from this file (dice_toy/core/config.py -> project root)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for the electronic dice."""

    # Dice
    dice_number: int

    # Driver
    press_count: int

    # Logging
    log_level: str


def _load_yaml_defaults(yaml_path: Path) -> dict[str, Any]:
    """Load default values from a YAML config file.

    Args:
        yaml_path: Path to the YAML configuration file.

    Returns:
        Dictionary of configuration values. Empty dict if file not found.
    """
    if not yaml_path.exists():
        return {}
    with open(yaml_path) as f:
        data = yaml.safe_load(f)
    return data if data else {}


def _get(env_key: str, yaml_defaults: dict[str, Any], yaml_key: str, default: Any = None) -> Any:
    """Get a config value with precedence: env var > yaml default > hardcoded default.

    Args:
        env_key: Environment variable name.
        yaml_defaults: Dictionary from YAML config file.
        yaml_key: Dot-separated key path in YAML (e.g., "dice.number").
        default: Fallback default value.

    Returns:
        The resolved configuration value.
    """
    env_val = os.environ.get(env_key)
    if env_val is not None and env_val != "":
        return env_val

    node = yaml_defaults
    for part in yaml_key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return default
    return node if node is not None else default


def validate_log_level(level: str) -> str:
    """Normalize a logging level name.

    Args:
        level: Level name, any case (e.g., "info").

    Returns:
        The upper-cased level name.

    Raises:
        ValueError: If logging does not know the level.
    """
    name = str(level).upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"LOG_LEVEL must be a logging level name, got '{level}'.")
    return name


def load_settings(
    env_path: Path | None = None,
    yaml_path: Path | None = None,
) -> Settings:
    """Load settings from .env and config/default.yaml.

    Environment variables take precedence over YAML defaults.

    Args:
        env_path: Path to .env file. Defaults to PROJECT_ROOT/.env.
        yaml_path: Path to YAML config. Defaults to PROJECT_ROOT/config/default.yaml.

    Returns:
        Frozen Settings dataclass with all configuration values.

    Raises:
        ValueError: If the dice number is not 1-6, the press count is negative,
            or the log level is unknown.
    """
    if env_path is None:
        env_path = PROJECT_ROOT / ".env"
    if yaml_path is None:
        yaml_path = PROJECT_ROOT / "config" / "default.yaml"

    load_dotenv(env_path, override=False)
    yaml_defaults = _load_yaml_defaults(yaml_path)

    dice_number = int(_get("DICE_NUMBER", yaml_defaults, "dice.number", DEFAULT_DICE_NUMBER))
    if not 1 <= dice_number <= 6:
        raise ValueError(f"DICE_NUMBER must be between 1 and 6, got {dice_number}.")

    press_count = int(_get("PRESS_COUNT", yaml_defaults, "driver.press_count", 3))
    if press_count < 0:
        raise ValueError(f"PRESS_COUNT must be non-negative, got {press_count}.")

    log_level = validate_log_level(_get("LOG_LEVEL", yaml_defaults, "logging.level", "INFO"))

    return Settings(
        dice_number=dice_number,
        press_count=press_count,
        log_level=log_level,
    )
