"""Logger construction for Guard.

Usage:
    from guard.logging import build_logger, configure_logging

    configure_logging(level="DEBUG")      # guard-ui's own diagnostics
    logger = build_logger(UIOptions())    # the console message sink
    logger.write("Guard is now watching", Severity.INFO, "Guard")
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Protocol

import structlog

from guard.config import DEFAULT_TEMPLATE, DEFAULT_TIME_FORMAT
from guard.logging.formatters import GuardRenderer
from guard.severity import Severity

if TYPE_CHECKING:
    from guard.config import UIOptions


class MessageWriter(Protocol):
    """Destination for formatted console messages."""

    def write(self, message: str, severity: Severity, plugin: str) -> None: ...


class GuardLogger:
    """Leveled logger writing rendered lines to a stream.

    Messages below the configured level are discarded by structlog's
    filtering bound logger.
    """

    def __init__(
        self,
        device: Any = None,
        *,
        level: Severity = Severity.INFO,
        template: str = DEFAULT_TEMPLATE,
        time_format: str = DEFAULT_TIME_FORMAT,
    ) -> None:
        self.device = device if device is not None else sys.stderr
        self.level = level
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=self.device),
            processors=_processors(template, time_format),
            wrapper_class=structlog.make_filtering_bound_logger(level.value),
            context_class=dict,
            cache_logger_on_first_use=False,
        )

    def write(self, message: str, severity: Severity, plugin: str) -> None:
        self._logger.log(severity.value, message, plugin=plugin)


def build_logger(options: UIOptions) -> GuardLogger:
    """Create the console logger described by `options`."""
    return GuardLogger(
        options.fetch("device", sys.stderr),
        level=options.level,
        template=options.template,
        time_format=options.time_format,
    )


def configure_logging(*, level: str = "WARNING") -> None:
    """Configure guard-ui's internal diagnostics.

    Call this once at application startup. Diagnostics go through stdlib
    loggers named after guard modules, so without this call (or the host's
    own stdlib logging setup) debug output is dropped.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_processors(":time - :severity - :message", DEFAULT_TIME_FORMAT),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configure_stdlib_logging(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger for internal diagnostics.

    The logger wraps the stdlib logger `name`, so it follows stdlib levels and
    handlers even when structlog was never configured.

    Args:
        name: Optional logger name (usually module __name__)
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _configure_stdlib_logging(level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        level=Severity.parse(level).value,
        handlers=[logging.StreamHandler()],
        force=True,
    )


def _processors(template: str, time_format: str) -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt=time_format, utc=False),
        GuardRenderer(template, time_format),
    ]
