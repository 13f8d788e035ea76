"""Configuration loader with YAML and environment variable support."""

import os
import re
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from dotenv import load_dotenv
from loguru import logger
from pydantic import ValidationError

from swabbooker.core.config.config_models import AppConfig
from swabbooker.core.exceptions import ConfigurationError
from swabbooker.utils.masking import mask_personal_data

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def load_env_variables() -> None:
    """Load environment variables from .env file in the working directory."""
    env_path = Path.cwd() / ".env"

    if env_path.exists():
        load_dotenv(env_path)
        logger.debug(f"Loaded environment variables from {env_path}")


def substitute_env_vars(value: Any) -> Any:
    """
    Recursively substitute ${VAR} environment variables in configuration values.

    Args:
        value: Configuration value (string, dict, list, etc.)

    Returns:
        Value with environment variables substituted (missing ones become "")
    """
    if isinstance(value, str):
        for match in _ENV_VAR_PATTERN.findall(value):
            env_value = os.getenv(match)
            if env_value is None:
                logger.debug(f"Environment variable '{match}' not set, using empty string")
                env_value = ""
            value = value.replace(f"${{{match}}}", env_value)
        return value
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(item) for item in value]
    else:
        return value


def safe_config_summary(config: AppConfig) -> Dict[str, Any]:
    """
    Dump config with testee personal data masked, for logging.

    Args:
        config: Validated configuration

    Returns:
        Masked dictionary
    """
    return mask_personal_data(config.model_dump())


def load_config(config_path: Union[str, Path] = "config/config.yaml") -> AppConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If the file is missing, not valid YAML or fails validation
    """
    load_env_variables()

    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_file}. "
            "Copy config/config.example.yaml to config/config.yaml and fill it in.",
            details={"path": str(config_file)},
        )

    logger.debug(f"Loading config from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config_data: Any = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration root in {config_file} must be a mapping")

    try:
        config = AppConfig.from_dict(substitute_env_vars(config_data))
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration in {config_file}: {e}",
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(f"Configuration loaded: {safe_config_summary(config)}")
    return config
