"""Imperative Shell - I/O and side effects.

This module contains all code that touches the outside world:
- Configuration loading (YAML files/environment)
- Family record loading (YAML/JSON files)

Keep this layer thin and simple. All query logic should be in core.
"""

from quiz.shell.config_loader import load_config, load_config_from_env
from quiz.shell.records_loader import load_families

__all__ = [
    "load_config",
    "load_config_from_env",
    "load_families",
]
