"""Configuration settings for Polyconv."""

from pathlib import Path

from pydantic import BaseModel, Field

from polyconv.core.path import UnsupportedCommandPolicy


class PathConfig(BaseModel):
    """Configuration for SVG path interpretation."""

    unsupported_commands: UnsupportedCommandPolicy = Field(
        default=UnsupportedCommandPolicy.ERROR,
        description="Curve/arc commands: 'error' rejects the path, 'skip' drops them",
    )


class ValidationConfig(BaseModel):
    """Configuration for polygon validity checking."""

    max_segments: int = Field(
        default=100_000,
        ge=1,
        description="Largest segment count accepted for validation (check is quadratic)",
    )
    check_boolean_inputs: bool = Field(
        default=True,
        description="Refuse invalid polygons as boolean operation inputs",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PolyconvSettings(BaseModel):
    """Main application settings."""

    path: PathConfig = Field(default_factory=PathConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PolyconvSettings:
    """Get default application settings."""
    return PolyconvSettings()
