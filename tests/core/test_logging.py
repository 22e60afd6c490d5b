"""Tests for structured logging."""

import json
import logging
from pathlib import Path

import structlog

from nixfns.config.models import LoggingConfig, LogOutputConfig
from nixfns.core.logging import configure_logging, get_logger


class TestLoggingConfiguration:
    """Logging configuration tests."""

    def setup_method(self) -> None:
        """Reset structlog and stdlib logging before each test."""
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_given_json_file_output_when_log_then_valid_json(self, tmp_path: Path) -> None:
        """JSON format produces valid JSON with required fields."""
        # Given
        log_file = tmp_path / "nixfns.log"
        config = LoggingConfig(
            level="INFO",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )
        configure_logging(config=config)

        # When
        get_logger("test").info("search_started", root="lib")

        # Then
        data = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert data["event"] == "search_started"
        assert data["root"] == "lib"
        assert data["level"] == "info"
        assert "timestamp" in data

    def test_given_nested_file_destination_when_configured_then_directory_created(
        self, tmp_path: Path
    ) -> None:
        """Parent directories of a log file are created."""
        # Given
        log_file = tmp_path / "logs" / "nixfns.log"
        config = LoggingConfig(outputs=[LogOutputConfig(destination=str(log_file))])

        # When
        configure_logging(config=config)
        get_logger().warning("worker_task_failed")

        # Then
        assert log_file.parent.is_dir()
        assert "worker_task_failed" in log_file.read_text()

    def test_given_repeated_configuration_then_handlers_replaced(self) -> None:
        """Reconfiguring does not stack handlers."""
        configure_logging(level="DEBUG")
        configure_logging(level="DEBUG")
        assert len(logging.getLogger().handlers) == 1

    def test_given_warning_level_when_debug_logged_then_dropped(self, tmp_path: Path) -> None:
        """Events below the configured level are filtered."""
        # Given
        log_file = tmp_path / "nixfns.log"
        config = LoggingConfig(
            level="WARNING",
            outputs=[LogOutputConfig(format="json", destination=str(log_file))],
        )
        configure_logging(config=config)
        logger = get_logger()

        # When
        logger.debug("file_searched")
        logger.warning("worker_task_failed")

        # Then
        content = log_file.read_text()
        assert "file_searched" not in content
        assert "worker_task_failed" in content

    def test_given_multi_output_config_when_configure_then_levels_per_output(
        self, tmp_path: Path
    ) -> None:
        """Multiple outputs receive logs according to their levels."""
        # Given
        debug_file = tmp_path / "debug.log"
        info_file = tmp_path / "info.log"
        config = LoggingConfig(
            level="DEBUG",
            outputs=[
                LogOutputConfig(format="json", destination=str(info_file), level="INFO"),
                LogOutputConfig(format="json", destination=str(debug_file)),
            ],
        )

        # When
        configure_logging(config=config)
        logger = get_logger()
        logger.debug("debug only")
        logger.info("info msg")

        # Then
        info_content = info_file.read_text()
        assert "info msg" in info_content
        assert "debug only" not in info_content
        debug_content = debug_file.read_text()
        assert "debug only" in debug_content
        assert "info msg" in debug_content
