"""Configuration package - models, CLI settings and the YAML loader."""

from swabbooker.core.config.config_loader import (
    load_config,
    load_env_variables,
    safe_config_summary,
    substitute_env_vars,
)
from swabbooker.core.config.config_models import (
    ApiConfig,
    AppConfig,
    SearchConfig,
    TesteeConfig,
)
from swabbooker.core.config.settings import CliSettings

__all__ = [
    "ApiConfig",
    "AppConfig",
    "CliSettings",
    "SearchConfig",
    "TesteeConfig",
    "load_config",
    "load_env_variables",
    "safe_config_summary",
    "substitute_env_vars",
]
