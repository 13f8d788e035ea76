"""Process settings read from the environment."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CliSettings(BaseSettings):
    """Defaults for the command line flags, overridable via SWABBOOKER_* variables."""

    config_path: str = Field(
        default="config/config.yaml", description="Path to the YAML configuration file"
    )
    debug: bool = Field(default=False, description="Echo requests and responses")
    log_file: Optional[str] = Field(default=None, description="Optional rotating log file")

    model_config = SettingsConfigDict(
        env_prefix="SWABBOOKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
