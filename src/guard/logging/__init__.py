"""Guard logging.

Usage:
    from guard.logging import build_logger, configure_logging

    configure_logging(level="DEBUG")
    logger = build_logger(options)
    logger.write("Running all specs", Severity.INFO, "Rspec")
"""

from guard.logging.config import (
    GuardLogger,
    MessageWriter,
    build_logger,
    configure_logging,
    get_logger,
)
from guard.logging.formatters import GuardRenderer

__all__ = [
    "GuardLogger",
    "GuardRenderer",
    "MessageWriter",
    "build_logger",
    "configure_logging",
    "get_logger",
]
