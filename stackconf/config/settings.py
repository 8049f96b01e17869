"""Runtime settings for the stackconf command line."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from stackconf.config.models.observability import LoggingConfig


class RuntimeSettings(BaseSettings):
    """Settings that control how the tool runs, not what it resolves.

    Values are read in this order (highest first):
    1. init arguments (command-line flags)
    2. STACKCONF_* environment variables
    3. model defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="STACKCONF_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    stage: str | None = Field(default=None, description="Target stage")
    config_dir: Path | None = Field(
        default=None,
        description="Directory holding common and per-stage documents",
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging settings",
    )
