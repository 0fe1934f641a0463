"""Configuration management for toonshade."""

from toonshade.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_shade_config,
)
from toonshade.core.config.models import AppConfig, LoggingConfig, ShadeConfig

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    "load_shade_config",
    # Models
    "AppConfig",
    "LoggingConfig",
    "ShadeConfig",
]
