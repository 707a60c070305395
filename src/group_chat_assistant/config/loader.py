"""Configuration loader with YAML parsing and environment variable substitution."""

import os
import re
from pathlib import Path

import yaml

from .schema import AssistantConfig

KNOWN_DATA_SUFFIXES = (".json", ".yaml", ".yml")


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path | None = None) -> AssistantConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file, or None for defaults

    Returns:
        Validated AssistantConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing or config is invalid
        ValidationError: If config doesn't match schema
    """
    if path is None:
        config = AssistantConfig()
        validate_config(config)
        return config

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty file means all defaults
    config_dict = yaml.safe_load(yaml_with_env) or {}

    config = AssistantConfig.model_validate(config_dict)

    validate_config(config)

    return config


def validate_config(config: AssistantConfig) -> None:
    """
    Perform additional cross-field validation.

    Args:
        config: Configuration to validate

    Raises:
        ValueError: If a data file's format cannot be determined
    """
    data = config.data
    if (
        data.path is not None
        and data.format == "auto"
        and data.path.suffix.lower() not in KNOWN_DATA_SUFFIXES
    ):
        raise ValueError(
            f"Cannot detect format of data file {data.path}; "
            f"set data.format to 'json' or 'yaml'"
        )
