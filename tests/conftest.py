"""Pytest fixtures for guard-ui tests.

This module provides:
- RecordingLogger: in-memory MessageWriter capturing every write
- make_ui: factory for fresh UI contexts wired to a recorder and a StringIO stream
"""

from __future__ import annotations

import io
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest
import structlog

from guard.config import GuardSettings
from guard.severity import Severity
from guard.ui.pipeline import UI


@dataclass
class Write:
    """A single call to MessageWriter.write."""

    message: str
    severity: Severity
    plugin: str


@dataclass
class RecordingLogger:
    """MessageWriter keeping every write for assertions."""

    writes: list[Write] = field(default_factory=list)

    def write(self, message: str, severity: Severity, plugin: str) -> None:
        self.writes.append(Write(message, severity, plugin))

    @property
    def messages(self) -> list[str]:
        return [w.message for w in self.writes]


@dataclass
class ClearRecorder:
    """Stand-in for the clear command runner."""

    commands: list[str] = field(default_factory=list)

    def __call__(self, command: str) -> None:
        self.commands.append(command)


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def clear_recorder() -> ClearRecorder:
    return ClearRecorder()


@pytest.fixture
def make_ui(
    recorder: RecordingLogger, stream: io.StringIO, clear_recorder: ClearRecorder
) -> Callable[..., UI]:
    """Build a UI isolated from the environment.

    Keyword arguments matching GuardSettings fields are applied to the settings;
    everything else goes to the UI constructor.
    """

    def _make(options: dict[str, Any] | None = None, **kwargs: Any) -> UI:
        settings_fields = {k: kwargs.pop(k) for k in list(kwargs) if k in GuardSettings.model_fields}
        settings = GuardSettings(_env_file=None, **settings_fields)
        kwargs.setdefault("logger", recorder)
        kwargs.setdefault("stream", stream)
        kwargs.setdefault("color_enabled", True)
        kwargs.setdefault("clear_screen", clear_recorder)
        return UI(options, settings=settings, **kwargs)

    return _make


@pytest.fixture
def restore_logging():
    """Undo configure_logging(): structlog defaults, root level and its stream handler."""
    root = logging.getLogger()
    before, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler and handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
