"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

The QuizConfig model is defined in quiz/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quiz.core.config import QuizConfig


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"


def _get_int(data: dict[str, Any], key: str, default: int) -> int:
    """Read an integer setting, falling back to the default when absent."""
    value = data.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{key} must be an integer, got {value!r}") from None


def load_config_from_dict(data: dict[str, Any]) -> QuizConfig:
    """Load configuration from a dictionary.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed QuizConfig object
    """
    defaults = QuizConfig()

    return QuizConfig(
        int_max=_get_int(data, "int_max", defaults.int_max),
        letter_min_code=_get_int(data, "letter_min_code", defaults.letter_min_code),
        letter_max_code=_get_int(data, "letter_max_code", defaults.letter_max_code),
        log_level=str(data.get("log_level", defaults.log_level)).upper(),
    )


def load_config(config_path: str | Path | None = None) -> QuizConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses QUIZ_CONFIG_PATH env var or default.

    Returns:
        Parsed QuizConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If the document is not a mapping or a value is not numeric
    """
    if config_path is None:
        config_path = os.environ.get("QUIZ_CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return QuizConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return QuizConfig()

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in config file {path}")

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: int_max=%d, letter window [%d, %d]",
        config.int_max,
        config.letter_min_code,
        config.letter_max_code,
    )

    return config


def load_config_from_env() -> QuizConfig:
    """Load configuration from environment variables.

    Environment variables:
        QUIZ_INT_MAX: Overflow boundary for squares
        QUIZ_LETTER_MIN_CODE: Lowest counted code point
        QUIZ_LETTER_MAX_CODE: Highest counted code point
        LOG_LEVEL: Logging level name

    Returns:
        QuizConfig object from environment
    """
    data: dict[str, Any] = {}

    env_keys = {
        "QUIZ_INT_MAX": "int_max",
        "QUIZ_LETTER_MIN_CODE": "letter_min_code",
        "QUIZ_LETTER_MAX_CODE": "letter_max_code",
        "LOG_LEVEL": "log_level",
    }
    for env_var, key in env_keys.items():
        value = os.environ.get(env_var)
        if value:
            data[key] = value.strip()

    return load_config_from_dict(data)
