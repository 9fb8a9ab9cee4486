"""Unit tests for settings and logging utilities."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from polyconv.config import PolyconvSettings, ValidationConfig, get_default_settings
from polyconv.core.path import UnsupportedCommandPolicy
from polyconv.utils import PipelineLogger, configure_logging, get_logger
from polyconv.utils import logging as polyconv_logging


@pytest.fixture
def reset_logging():
    """Undo global logging configuration after the test."""
    yield
    root = logging.getLogger()
    for handler in polyconv_logging._installed_handlers:
        root.removeHandler(handler)
        handler.close()
    polyconv_logging._installed_handlers.clear()
    structlog.reset_defaults()


class TestSettings:
    """Tests for pydantic settings."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.path.unsupported_commands == UnsupportedCommandPolicy.ERROR
        assert settings.validation.max_segments == 100_000
        assert settings.validation.check_boolean_inputs is True
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_policy_from_string(self):
        settings = PolyconvSettings.model_validate({"path": {"unsupported_commands": "skip"}})
        assert settings.path.unsupported_commands == UnsupportedCommandPolicy.SKIP

    def test_unknown_policy(self):
        with pytest.raises(ValidationError):
            PolyconvSettings.model_validate({"path": {"unsupported_commands": "approximate"}})

    def test_segment_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            ValidationConfig(max_segments=0)


class TestLogging:
    """Tests for logging setup and pipeline statistics."""

    def test_file_logging(self, tmp_path, reset_logging):  # noqa: ARG002
        log_file = tmp_path / "polyconv.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("hello", answer=42)
        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_reconfigure_replaces_handlers(self, reset_logging):  # noqa: ARG002
        configure_logging(quiet=True)
        configure_logging(quiet=True)
        assert len(polyconv_logging._installed_handlers) == 1

    def test_unconfigured_logger_routes_to_stdlib(self, caplog):
        structlog.reset_defaults()
        logger = get_logger("polyconv.test")
        with caplog.at_level(logging.DEBUG, logger="polyconv.test"):
            logger.debug("quiet event", detail=1)
        assert "quiet event" in caplog.text

    def test_pipeline_logger_counts(self):
        pipeline_logger = PipelineLogger(get_logger("polyconv.test"))
        pipeline_logger.log_ingested("wkt", "Polygon", 1)
        pipeline_logger.log_validated("Polygon", False, 3)
        pipeline_logger.log_parse_error("svg", ValueError("bad"))

        stats = pipeline_logger.stats
        assert stats.ingested_count == 1
        assert stats.validated_count == 1
        assert stats.invalid_count == 1
        assert stats.parse_error_count == 1
        assert stats.errors == [("svg", "bad")]
