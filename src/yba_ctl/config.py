"""
Configuration management for the controller.

Settings come from (highest precedence first) explicit values, ``YBA_CTL_*``
environment variables, a local ``.env`` file and the YAML controller config
written by the installer.
"""

import os
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from ff_logger import ConsoleLogger
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

ENV_PREFIX = "YBA_CTL_"
DEFAULT_CONFIG_FILE = Path("/opt/yba-ctl/yba-ctl.yml")
METADATA_FILE_NAME = "version_metadata.json"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_config_file() -> Path:
    """Return the YAML config path, honouring ``YBA_CTL_CONFIG_FILE``."""
    override = os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
    return Path(override) if override else DEFAULT_CONFIG_FILE


class CLISettings(BaseSettings):
    """Main controller configuration using Pydantic Settings."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Installation layout
    install_root: Path = Path("/opt/yugabyte")

    # Logging
    log_level: LogLevel = "INFO"
    log_colors: bool | None = None

    # Version pre-check
    skip_version_checks: bool = False

    # systemd
    systemd_user_mode: bool = False
    systemctl_timeout: int = Field(default=300, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=get_config_file()),
            file_secret_settings,
        )

    @property
    def active_dir(self) -> Path:
        """Directory of the currently active software release."""
        return self.install_root / "software" / "active"

    @property
    def metadata_file(self) -> Path:
        """Installation metadata written by the installer."""
        return self.active_dir / "yba_installer" / METADATA_FILE_NAME


@lru_cache
def get_settings() -> CLISettings:
    """Get cached settings instance."""
    return CLISettings()


def reset_settings_cache() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


def get_logger(scope: str, settings: CLISettings | None = None) -> ConsoleLogger:
    """Get a scoped logger for a specific component.

    Args:
        scope: The name/scope for the logger (e.g., "dispatcher", "systemd")
        settings: Settings to take the level from (default: cached settings)

    Returns:
        Scoped logger instance
    """
    settings = settings or get_settings()
    colors = settings.log_colors
    if colors is None:
        colors = sys.stderr.isatty()
    return ConsoleLogger(
        name=scope,
        level=settings.log_level,
        colors=colors,
        stream=sys.stderr,
        context={"app_name": "yba-ctl", "component": scope},
    )
