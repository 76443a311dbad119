"""
Ecocide Configuration Management

This module provides configuration management for the module loader,
integrating with environment variables and providing validation.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EcocideConfig(BaseSettings):
    """
    Runtime configuration with validation and environment variable support.

    All settings can be overridden via environment variables with the
    ECOCIDE_ prefix (ECOCIDE_OPTIONS_PATH, ECOCIDE_LOG_LEVEL, ECOCIDE_ADMIN).
    """

    model_config = SettingsConfigDict(
        env_prefix="ECOCIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    options_path: Path = Field(Path("ecocide.json"), description="Path to the module options JSON file")
    log_level: str = Field("INFO", description="Logging level name")
    admin: bool = Field(False, description="Boot modules for an admin screen request")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level is a known logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level

    @classmethod
    def from_env_file(cls, env_file_path: Optional[Path] = None) -> "EcocideConfig":
        """
        Create configuration from environment file.

        Args:
            env_file_path: Optional path to .env file. Defaults to ./.env

        Returns:
            EcocideConfig: Configured instance
        """
        if env_file_path is not None and env_file_path.exists():
            return cls(_env_file=str(env_file_path))
        # Fall back to the default .env lookup and environment variables
        return cls()


# Global configuration instance
_config: Optional[EcocideConfig] = None


def get_config(env_file_path: Optional[Path] = None) -> EcocideConfig:
    """
    Get or create the global configuration instance.

    Args:
        env_file_path: Optional path to environment file

    Returns:
        EcocideConfig: Global configuration instance
    """
    global _config
    if _config is None:
        _config = EcocideConfig.from_env_file(env_file_path)
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
