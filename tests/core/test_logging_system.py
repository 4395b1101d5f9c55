"""Tests for logging setup."""

import logging
from pathlib import Path

from mastervolume.core.logging_system import (
    PACKAGE_LOGGER,
    get_logger,
    initialize_logging,
    set_debug,
)


class TestLoggingSystem:
    """Test suite for the logging helpers."""

    def test_get_logger(self) -> None:
        """Test loggers are returned by name."""
        assert get_logger("mastervolume.test").name == "mastervolume.test"

    def test_package_modules_log_under_package(self) -> None:
        """Test module loggers are children of the package logger."""
        from mastervolume.audio import volume_composer

        assert volume_composer.logger is logging.getLogger("mastervolume.audio.volume_composer")
        assert volume_composer.logger.name.startswith(f"{PACKAGE_LOGGER}.")

    def test_set_debug(self) -> None:
        """Test debug flag toggles the package level."""
        set_debug(True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        set_debug(False)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO

    def test_initialize_default(self) -> None:
        """Test default setup attaches a single console handler."""
        initialize_logging(debug=True)
        initialize_logging(debug=False)

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        stream_handlers = [
            h for h in package_logger.handlers if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1
        assert package_logger.level == logging.INFO

    def test_initialize_from_yaml(self, tmp_path: Path) -> None:
        """Test a YAML dictConfig file is applied."""
        config_path = tmp_path / "logging.yaml"
        config_path.write_text(
            "version: 1\n"
            "disable_existing_loggers: false\n"
            "loggers:\n"
            "  mastervolume.yamltest:\n"
            "    level: WARNING\n",
            encoding="utf-8",
        )

        initialize_logging(config_path, debug=True)

        assert logging.getLogger("mastervolume.yamltest").level == logging.WARNING
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        set_debug(False)
