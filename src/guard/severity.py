"""Severity levels for console messages."""

from __future__ import annotations

import logging
from enum import Enum


class Severity(Enum):
    """Log level of a message.

    The value is the stdlib numeric level, which is also what structlog's
    filtering loggers compare against.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR

    @property
    def label(self) -> str:
        """Rendered name, as it appears in the `:severity` placeholder."""
        return self.name

    @classmethod
    def parse(cls, value: str | int | Severity) -> Severity:
        """Coerce a name ("info", "warning", ...), a numeric level or a member."""
        if isinstance(value, Severity):
            return value
        if isinstance(value, int):
            return cls(value)
        name = value.strip().upper()
        return cls[_ALIASES.get(name, name)]


_ALIASES = {"WARNING": "WARN"}
