"""Configuration management for polyconv.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- PathConfig: SVG path interpretation settings
- ValidationConfig: Validity checking limits
- LoggingConfig: Logging settings
- PolyconvSettings: Main application settings
"""

from polyconv.config.settings import (
    LoggingConfig,
    PathConfig,
    PolyconvSettings,
    ValidationConfig,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "PathConfig",
    "PolyconvSettings",
    "ValidationConfig",
    "get_default_settings",
]
