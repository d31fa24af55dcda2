"""
backed-enum Configuration
=========================

This module handles configuration loading for backed-enum.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. backed_enum.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    BACKED_ENUM_FILTER_NUMERIC_KEYS -> adapters.filter_numeric_keys
    BACKED_ENUM_LOG_LEVEL           -> logging.level
    BACKED_ENUM_LOG_FORMAT          -> logging.format

Note:
    The library never installs log handlers on import. `setup_logging` is
    called by the command-line entry point only.

Example:
    from backed_enum.config import settings

    print(settings.adapters.filter_numeric_keys)
    print(settings.logging.level)
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class AdapterConfig(BaseModel):
    """Definition adapter configuration."""

    filter_numeric_keys: bool = Field(
        default=True,
        description="Drop numeric-looking keys (TypeScript reverse entries) from mappings",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: Literal["text", "json"] = Field(
        default="text",
        description="Log format: json or text",
    )


class Settings(BaseModel):
    """
    Main settings class for backed-enum.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    adapters: AdapterConfig = Field(default_factory=AdapterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

_TRUE_VALUES = {"1", "true", "yes", "on"}


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to backed_enum.yaml. If None, searches the
            working directory.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        for path in (Path("backed_enum.yaml"), Path("backed_enum.yml")):
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Adapter settings
    if env_filter := os.environ.get("BACKED_ENUM_FILTER_NUMERIC_KEYS"):
        config_data.setdefault("adapters", {})["filter_numeric_keys"] = (
            env_filter.strip().lower() in _TRUE_VALUES
        )

    # Logging settings
    if env_log := os.environ.get("BACKED_ENUM_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("BACKED_ENUM_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
