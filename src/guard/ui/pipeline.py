"""The UI helps to format messages for the user.

Everything logged through the UI is considered either an error message or a
diagnostic message and is written to standard error. Plugins whose output is
piped into another process should write that output to stdout with `print`.
"""

from __future__ import annotations

import subprocess
import sys
import threading
from collections.abc import Callable, Mapping
from typing import Any, TextIO

from guard.config import GuardSettings, UIOptions
from guard.logging import MessageWriter, build_logger, get_logger
from guard.scope import Scope
from guard.severity import Severity
from guard.ui.attribution import DEFAULT_PLUGIN_NAME, calling_plugin_name
from guard.ui.colors import ANSI_RESET, WINDOWS_COLOR_HINT, colorize, detect_color_support
from guard.ui.filtering import should_emit

log = get_logger(__name__)

_SCOPE_NAMES = ("plugins", "groups")


def _run_clear_command(command: str) -> None:
    subprocess.run(command, shell=True, check=False)


class UI:
    """Console message pipeline and the state it carries.

    State (options, logger, color capability, clearable flag) lives on the
    instance. The logger and the color capability are created on first use,
    once, under a lock.
    """

    def __init__(
        self,
        options: UIOptions | Mapping[str, Any] | None = None,
        *,
        settings: GuardSettings | None = None,
        scope: Scope | None = None,
        logger: MessageWriter | None = None,
        stream: TextIO | None = None,
        color_enabled: bool | None = None,
        color_detector: Callable[[], bool] = detect_color_support,
        clear_screen: Callable[[str], None] = _run_clear_command,
    ) -> None:
        self._options = options if isinstance(options, UIOptions) else UIOptions.build(options)
        self.settings = settings if settings is not None else GuardSettings()
        self.scope = scope if scope is not None else Scope()
        self._logger = logger
        self._stream = stream
        self._color_enabled = color_enabled
        self._color_detector = color_detector
        self._clear_screen = clear_screen
        self._clearable = False
        self._lock = threading.RLock()

    # -------------------------------------------------------------------------
    # Options & logger
    # -------------------------------------------------------------------------

    @property
    def options(self) -> UIOptions:
        """The logger options."""
        return self._options

    @options.setter
    def options(self, options: UIOptions | Mapping[str, Any]) -> None:
        """Replace the logger options; the logger is rebuilt on next use."""
        new_options = options if isinstance(options, UIOptions) else UIOptions.build(options)
        with self._lock:
            self._options = new_options
            self._logger = None
        log.debug("UI options replaced", ui_level=new_options.level.label)

    @property
    def logger(self) -> MessageWriter:
        """The underlying logger, built from the options on first access."""
        if self._logger is None:
            with self._lock:
                if self._logger is None:
                    self._logger = build_logger(self._options)
        return self._logger

    @property
    def stream(self) -> TextIO:
        """Diagnostic stream used for line resets."""
        return self._stream if self._stream is not None else sys.stderr

    # -------------------------------------------------------------------------
    # Messages
    # -------------------------------------------------------------------------

    def info(self, message: str, *, reset: bool = False, plugin: str | None = None) -> None:
        """Show an info message.

        Args:
            message: the message to show
            reset: whether to clean the output before
            plugin: manually define the calling plugin
        """
        self._filtered_logger_message(message, Severity.INFO, None, reset=reset, plugin=plugin)

    def warning(self, message: str, *, reset: bool = False, plugin: str | None = None) -> None:
        """Show a yellow warning message."""
        self._filtered_logger_message(message, Severity.WARN, "yellow", reset=reset, plugin=plugin)

    def error(self, message: str, *, reset: bool = False, plugin: str | None = None) -> None:
        """Show a red error message."""
        self._filtered_logger_message(message, Severity.ERROR, "red", reset=reset, plugin=plugin)

    def deprecation(self, message: str, *, reset: bool = False, plugin: str | None = None) -> None:
        """Show a deprecation message, logged like a warning.

        Dropped unless `settings.show_deprecations` is on.
        """
        if not self.settings.show_deprecations:
            return
        self._filtered_logger_message(message, Severity.WARN, "yellow", reset=reset, plugin=plugin)

    def debug(self, message: str, *, reset: bool = False, plugin: str | None = None) -> None:
        """Show a yellow debug message."""
        self._filtered_logger_message(message, Severity.DEBUG, "yellow", reset=reset, plugin=plugin)

    def action_with_scopes(self, action: str, scope: Scope | Mapping[str, Any] | None = None) -> None:
        """Show a scoped action message, e.g. "Running rspec, jasmine".

        Args:
            action: the action to show
            scope: plugin and/or group selection; falls back to `self.scope`
        """
        selection = self._first_non_blank_scope(scope or {})
        description = ", ".join(item.title for item in selection) if selection else "all"
        self._filtered_logger_message(f"{action} {description}", Severity.INFO, None)

    # -------------------------------------------------------------------------
    # Terminal
    # -------------------------------------------------------------------------

    def reset_line(self) -> None:
        """Reset the current line."""
        self.stream.write(f"\r{ANSI_RESET}" if self.color_enabled() else "\r\n")
        self.stream.flush()

    def clear(self, *, force: bool = False) -> None:
        """Clear the screen if clearing is enabled and it hasn't been cleared since `clearable()`."""
        if self.settings.clear and (self._clearable or force):
            self._clearable = False
            log.debug("Clearing screen", command=self.settings.clear_command)
            self._clear_screen(self.settings.clear_command)

    def clearable(self) -> None:
        """Allow the screen to be cleared again."""
        self._clearable = True

    def color_enabled(self) -> bool:
        """Whether color output is enabled, detected once and cached."""
        if self._color_enabled is None:
            with self._lock:
                if self._color_enabled is None:
                    self._color_enabled = self._color_detector()
                    log.debug("Color support detected", enabled=self._color_enabled)
                    if not self._color_enabled:
                        self.info(WINDOWS_COLOR_HINT, plugin=DEFAULT_PLUGIN_NAME)
        return self._color_enabled

    def color(self, text: str, *tokens: object) -> str:
        """Colorize a text message, e.g. `ui.color("Hello", "red", "bright")`."""
        return colorize(text, *tokens, enabled=self.color_enabled())

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _first_non_blank_scope(self, scope: Scope | Mapping[str, Any]) -> list[Any] | None:
        """First non-empty plugin or group selection, local scope before ambient."""
        for name in _SCOPE_NAMES:
            selection = _selection(scope, name) or _selection(self.scope, name)
            if selection:
                return list(selection)
        return None

    def _filtered_logger_message(
        self,
        message: str,
        severity: Severity,
        color_name: str | None,
        *,
        reset: bool = False,
        plugin: str | None = None,
    ) -> None:
        plugin = plugin or calling_plugin_name()
        if not should_emit(plugin, self._options.only, self._options.except_):
            return

        if reset:
            self.reset_line()
        if color_name:
            message = self.color(message, color_name)
        self.logger.write(message, severity, plugin)


def _selection(scope: Scope | Mapping[str, Any], name: str) -> Any:
    if isinstance(scope, Mapping):
        return scope.get(name)
    return getattr(scope, name, None)
