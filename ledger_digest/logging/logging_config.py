"""Centralized logging configuration for ledger-digest.

@public

Logging goes through Prefect's logger factory so digest diagnostics land in
the same hierarchy as the rest of a Prefect-managed process. Configuration is
either a YAML dictConfig file or a built-in default.

Usage:
    >>> from ledger_digest.logging import get_digest_logger
    >>> logger = get_digest_logger(__name__)
    >>> logger.debug("Rejected digest encoding")

Environment variables:
    LEDGER_DIGEST_LOGGING_CONFIG: Path to custom logging.yml
    LEDGER_DIGEST_LOG_LEVEL: Default log level (INFO, DEBUG, etc.)
    PREFECT_LOGGING_SETTINGS_PATH: Alternative config path
"""

import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from prefect.logging import get_logger

from ledger_digest.settings import Settings

DIGEST_LOGGER_NAMES = (
    "ledger_digest",
    "ledger_digest.codec",
    "ledger_digest.hasher",
)


class LoggingConfig:
    """Manages logging configuration for ledger-digest.

    @public

    Configuration precedence:
        1. Explicit config_path parameter
        2. LEDGER_DIGEST_LOGGING_CONFIG (via Settings)
        3. PREFECT_LOGGING_SETTINGS_PATH environment variable
        4. Default configuration

    Note:
        Configuration is lazy-loaded and cached after first access.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or self._get_default_config_path()
        self._config: Optional[Dict[str, Any]] = None

    @staticmethod
    def _get_default_config_path() -> Optional[Path]:
        """Resolve the config path from settings, then Prefect's variable."""
        if configured := Settings().logging_config:
            return Path(configured)

        if prefect_path := os.environ.get("PREFECT_LOGGING_SETTINGS_PATH"):
            return Path(prefect_path)

        return None

    def load_config(self) -> Dict[str, Any]:
        """Load logging configuration from file or defaults.

        Returns:
            Dictionary in ``logging.config.dictConfig`` format. Cached after
            the first call; create a new LoggingConfig to reload from disk.
        """
        if self._config is None:
            if self.config_path and self.config_path.exists():
                with open(self.config_path, "r") as f:
                    self._config = yaml.safe_load(f)
            else:
                self._config = self._get_default_config()
        assert self._config is not None
        return self._config

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Default configuration: one console handler, ledger_digest loggers at the configured level."""
        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s.%(msecs)03d | %(levelname)-7s | %(name)s - %(message)s",
                    "datefmt": "%H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                # get_logger() nests every name under "prefect"
                "prefect.ledger_digest": {
                    "level": Settings().log_level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
            "root": {
                "level": "WARNING",
                "handlers": ["console"],
            },
        }

    def apply(self):
        """Apply the configuration with ``logging.config.dictConfig``.

        If the configuration names a ``prefect`` logger, its level is exported
        as PREFECT_LOGGING_LEVEL unless that variable is already set.
        """
        config = self.load_config()
        logging.config.dictConfig(config)

        if "prefect" in config.get("loggers", {}):
            prefect_level = config["loggers"]["prefect"].get("level", "INFO")
            os.environ.setdefault("PREFECT_LOGGING_LEVEL", prefect_level)


_logging_config: Optional[LoggingConfig] = None


def setup_logging(config_path: Optional[Path] = None, level: Optional[str] = None):
    """Set up logging for ledger-digest.

    @public

    Args:
        config_path: Optional path to a YAML logging configuration file.
        level: Optional level override applied to every ledger_digest logger.

    Example:
        >>> setup_logging(level="DEBUG")
    """
    global _logging_config

    _logging_config = LoggingConfig(config_path)
    _logging_config.apply()

    if level:
        for logger_name in DIGEST_LOGGER_NAMES:
            logger = get_logger(logger_name)
            logger.setLevel(level)


def get_digest_logger(name: str):
    """Get a logger for a ledger_digest module.

    @public

    Initializes logging on first use.

    Args:
        name: Logger name, typically ``__name__``.
    """
    if _logging_config is None:
        setup_logging()

    return get_logger(name)
