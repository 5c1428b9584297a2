"""
Core Configuration - Process settings for the SafeCrystals plugin
Uses Pydantic BaseSettings for type-safe configuration management

These are the settings of the plugin process itself (where the data folder
lives, how to log). The in-game settings live in the YAML backing store and
are read through ConfigurationView.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


Environment = Literal["development", "staging", "production"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Plugin settings loaded from environment variables

    Every field can be overridden with a SAFECRYSTALS_ prefixed variable,
    either in the environment or in a .env file
    """

    # Application settings
    app_name: str = Field(default="SafeCrystals", description="Plugin name")
    app_version: str = Field(default="1.0.0", description="Plugin version")
    environment: Environment = Field(default="development", description="Deployment environment")
    debug: bool = Field(default=False, description="Debug mode")

    # Backing store location
    data_folder: Path = Field(
        default=Path("plugins/SafeCrystals"),
        description="Plugin data folder holding the configuration file"
    )
    config_file_name: str = Field(
        default="config.yml",
        min_length=1,
        description="Name of the YAML configuration file inside the data folder"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        """Accept SAFECRYSTALS_ENVIRONMENT=Production and similar spellings"""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Map any spelling of a standard level name to its upper-case form"""
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}, expected one of: {', '.join(LOG_LEVELS)}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="SAFECRYSTALS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def config_path(self) -> Path:
        """Full path of the YAML configuration file"""
        return self.data_folder / self.config_file_name

    def is_production(self) -> bool:
        """Check if running in production"""
        return self.environment == "production"

    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment == "development"

    def get_log_config(self) -> dict:
        """Get logging configuration for logging.config.dictConfig"""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": self.log_format
                },
                "json": {
                    "()": "pythonjsonlogger.json.JsonFormatter",
                    "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": self.log_level,
                    "formatter": "json" if self.is_production() else "default",
                    "stream": "ext://sys.stdout"
                }
            },
            "loggers": {
                "safecrystals": {
                    "level": "DEBUG" if self.debug else self.log_level,
                    "handlers": ["console"],
                    "propagate": False
                }
            }
        }


# Process-wide settings, built on first use
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Settings read from SAFECRYSTALS_* variables and .env, cached after the first call

    Raises:
        ValueError: Naming every setting that failed validation
    """
    global _settings

    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            bad_fields = ", ".join(
                "SAFECRYSTALS_" + str(error["loc"][0]).upper() for error in e.errors() if error["loc"]
            )
            raise ValueError(f"Invalid SafeCrystals settings ({bad_fields}): {e}") from e

    return _settings


def reload_settings() -> Settings:
    """Forget the cached settings and read the environment again"""
    global _settings
    _settings = None
    return get_settings()
