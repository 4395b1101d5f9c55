"""Logging setup for mastervolume.

Modules log through ``get_logger(__name__)`` so every record lives
under the ``mastervolume`` logger. The host either hands over a YAML
``dictConfig`` file or gets a plain console handler. The ``debug_logs``
setting lowers the package logger to DEBUG, which is where retry chatter and
volume calculations are reported.

Typical usage:
    from mastervolume.core.logging_system import get_logger, initialize_logging

    initialize_logging(debug=settings.debug_logs)
    logger = get_logger(__name__)
"""

import logging
import logging.config
from pathlib import Path

import yaml

PACKAGE_LOGGER = "mastervolume"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_console_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        The named logger.
    """
    return logging.getLogger(name)


def set_debug(enabled: bool) -> None:
    """Switch debug logging for the package on or off.

    Args:
        enabled: True for DEBUG, False for INFO.
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if enabled else logging.INFO)


def initialize_logging(config_path: str | Path | None = None, debug: bool = False) -> None:
    """Configure logging once at start-up.

    Args:
        config_path: Optional YAML file holding a ``logging.config`` dict.
        debug: Enable DEBUG output for the package.
    """
    global _console_handler

    if config_path is not None and Path(config_path).exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
            logging.config.dictConfig(config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logging.getLogger(PACKAGE_LOGGER).error(
                "Failed to load logging config %s: %s", config_path, e
            )
        else:
            set_debug(debug)
            return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_console_handler)
    set_debug(debug)
