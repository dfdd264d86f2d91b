"""Guard console output.

Usage:
    from guard.ui import get_ui

    ui = get_ui()
    ui.info("Guard is now watching at '/src'")
    ui.warning("No Guardfile found", plugin="Guard")
    ui.action_with_scopes("Running", {"plugins": [Plugin("rspec")]})
"""

from __future__ import annotations

import threading

from guard.ui.attribution import DEFAULT_PLUGIN_NAME, calling_plugin_name, plugin_name_from_path
from guard.ui.colors import STYLES, colorize, detect_color_support, resolve_color_code
from guard.ui.filtering import should_emit
from guard.ui.pipeline import UI

_default_ui: UI | None = None
_default_lock = threading.Lock()


def get_ui() -> UI:
    """The process-wide UI, created on first use."""
    global _default_ui
    if _default_ui is None:
        with _default_lock:
            if _default_ui is None:
                _default_ui = UI()
    return _default_ui


def set_ui(ui: UI | None) -> None:
    """Replace the process-wide UI (None resets it)."""
    global _default_ui
    with _default_lock:
        _default_ui = ui


__all__ = [
    "DEFAULT_PLUGIN_NAME",
    "STYLES",
    "UI",
    "calling_plugin_name",
    "colorize",
    "detect_color_support",
    "get_ui",
    "plugin_name_from_path",
    "resolve_color_code",
    "set_ui",
    "should_emit",
]
