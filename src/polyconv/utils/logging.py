"""Logging utilities for Polyconv."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_installed_handlers: list[logging.Handler] = []


@dataclass
class PipelineStats:
    """Counters for one pipeline instance."""

    ingested_count: int = 0
    validated_count: int = 0
    invalid_count: int = 0
    parse_error_count: int = 0
    repaired_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging over the standard library.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _installed_handlers.append(console_handler)

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("polyconv")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that stays quiet until logging is configured.

    Before configure_logging has run, events are routed to the standard
    library logger of the same name, so library callers only see them when
    they configure logging themselves.
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class PipelineLogger:
    """Logger for tracking pipeline events and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = PipelineStats()

    def log_ingested(self, source: str, geometry_type: str, ring_count: int) -> None:
        """Log a successful parse and normalization."""
        self._logger.debug(
            "Geometry ingested",
            source=source,
            geometry_type=geometry_type,
            rings=ring_count,
        )
        self._stats.ingested_count += 1

    def log_validated(self, geometry_type: str, valid: bool, findings: int) -> None:
        """Log a validity check result."""
        self._logger.debug(
            "Geometry validated",
            geometry_type=geometry_type,
            valid=valid,
            findings=findings,
        )
        self._stats.validated_count += 1
        if not valid:
            self._stats.invalid_count += 1

    def log_parse_error(self, source: str, error: Exception) -> None:
        """Log input that could not be parsed."""
        self._logger.info(
            "Parse failed",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.parse_error_count += 1
        self._stats.errors.append((source, str(error)))

    def log_boolean(self, operation: str, result_polygons: int) -> None:
        """Log a completed boolean operation."""
        self._logger.debug(
            "Boolean operation complete",
            operation=operation,
            polygons=result_polygons,
        )

    def log_repaired(self, geometry_type: str, result_type: str) -> None:
        """Log a completed repair."""
        self._logger.debug(
            "Geometry repaired",
            geometry_type=geometry_type,
            result_type=result_type,
        )
        self._stats.repaired_count += 1

    @property
    def stats(self) -> PipelineStats:
        """Get current pipeline statistics."""
        return self._stats
