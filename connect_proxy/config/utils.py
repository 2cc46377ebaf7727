"""
Configuration utilities for Connect Proxy.

This module provides helpers for loading configuration files and building
settings from them.
"""

import os
import json
import yaml
from typing import Dict, Any, Mapping, Optional, Union
from pathlib import Path

from ..connect.util import get_map_value_or_string
from .settings import Settings, Environment

ENVIRONMENT_VARIABLE = "CONNECT_PROXY_ENVIRONMENT"
CONFIG_DIR_VARIABLE = "CONNECT_PROXY_CONFIG_DIR"


def load_config_from_file(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a file (JSON or YAML).

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary containing configuration data

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file format is not supported or invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in ('.json', '.yml', '.yaml'):
        raise ValueError(f"Unsupported file format: {file_path.suffix}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            if suffix == '.json':
                return json.load(f)
            return yaml.safe_load(f) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid configuration file format: {e}") from e


def create_settings_from_dict(config_dict: Dict[str, Any]) -> Settings:
    """
    Create Settings instance from configuration dictionary.

    Unknown top-level keys are dropped.
    """
    known_fields = Settings.model_fields.keys()
    settings_dict = {key: value for key, value in config_dict.items() if key in known_fields}
    return Settings(**settings_dict)


def merge_configurations(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep merge two configuration dictionaries.

    Args:
        base: Base configuration
        override: Values taking precedence over ``base``

    Returns:
        New merged dictionary; the inputs are left untouched
    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configurations(result[key], value)
        else:
            result[key] = value

    return result


def resolve_environment(env: Optional[Mapping[str, str]] = None) -> Environment:
    """Determine the deployment environment from environment variables."""
    env = os.environ if env is None else env
    value = get_map_value_or_string(env, ENVIRONMENT_VARIABLE, Environment.DEVELOPMENT.value)
    try:
        return Environment(value.lower())
    except ValueError:
        raise ValueError(f"Unknown environment '{value}' in {ENVIRONMENT_VARIABLE}") from None


def get_environment_config_path(
    environment: Environment,
    env: Optional[Mapping[str, str]] = None
) -> Path:
    """
    Get the configuration file path for a specific environment.

    The directory defaults to ``config`` and can be changed through
    ``CONNECT_PROXY_CONFIG_DIR``.
    """
    env = os.environ if env is None else env
    config_dir = Path(get_map_value_or_string(env, CONFIG_DIR_VARIABLE, "config"))
    return config_dir / f"{environment.value}.yml"


def load_environment_config(
    environment: Optional[Environment] = None,
    env: Optional[Mapping[str, str]] = None
) -> Optional[Dict[str, Any]]:
    """
    Load environment-specific configuration if it exists.

    Returns:
        Configuration dictionary or None if the file doesn't exist
    """
    if environment is None:
        environment = resolve_environment(env)

    config_path = get_environment_config_path(environment, env)
    if not config_path.exists():
        return None

    return load_config_from_file(config_path)
