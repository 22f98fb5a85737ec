"""Logging infrastructure for ledger-digest.

@public

Example:
    >>> from ledger_digest.logging import get_digest_logger
    >>> logger = get_digest_logger(__name__)
"""

from .logging_config import LoggingConfig, get_digest_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "get_digest_logger",
    "setup_logging",
]
