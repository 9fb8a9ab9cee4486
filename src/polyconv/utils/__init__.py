"""Utility functions for polyconv.

This module provides utility functions including:

- Logging setup and configuration
- Pipeline statistics tracking
"""

from polyconv.utils.logging import (
    PipelineLogger,
    PipelineStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "PipelineLogger",
    "PipelineStats",
    "configure_logging",
    "get_logger",
]
