"""
guard-ui: console output for Guard and its plugins.

This package provides:
- Message pipeline with info/warning/error/debug/deprecation entry points
- only/except filtering by plugin name
- ANSI color resolution and terminal capability detection
- structlog-backed line rendering
"""

from guard._version import __version__, get_version
from guard.config import GuardSettings, UIOptions
from guard.errors import GuardError, InvalidOption, UnknownColorName
from guard.scope import Group, Plugin, Scope
from guard.severity import Severity

__all__ = [
    # Config
    "GuardSettings",
    "UIOptions",
    # Errors
    "GuardError",
    "InvalidOption",
    "UnknownColorName",
    # Scope
    "Group",
    "Plugin",
    "Scope",
    "Severity",
    # Version
    "__version__",
    "get_version",
]
