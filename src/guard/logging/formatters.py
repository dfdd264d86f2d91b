"""structlog renderer for Guard console lines.

Lines are produced from a template such as `:time - :severity - :message`.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import TYPE_CHECKING

from guard.severity import Severity

if TYPE_CHECKING:
    from structlog.typing import EventDict, WrappedLogger

_PLACEHOLDER = re.compile(r":([a-z_]+)")


class GuardRenderer:
    """Custom structlog renderer expanding a line template.

    Placeholders: `:time`, `:severity`, `:message`, and `:plugin` (or
    `:progname`) for the attributed plugin. Unknown placeholders are left
    untouched. Extra event keys are appended as key=value pairs.

    Example:
        12:00:01 - WARN - Guard is not watching anything
    """

    def __init__(self, template: str, time_format: str = "%H:%M:%S") -> None:
        self.template = template
        self.time_format = time_format

    def __call__(
        self,
        logger: WrappedLogger,
        method_name: str,
        event_dict: EventDict,
    ) -> str:
        """Render a log event to a formatted string."""
        timestamp = event_dict.pop("timestamp", None) or datetime.now().strftime(self.time_format)
        level = event_dict.pop("level", method_name)
        plugin = str(event_dict.pop("plugin", ""))
        values = {
            "time": str(timestamp),
            "severity": _severity_label(level),
            "message": str(event_dict.pop("event", "")),
            "plugin": plugin,
            "progname": plugin,
        }

        line = _PLACEHOLDER.sub(lambda m: values.get(m.group(1), m.group(0)), self.template)

        kv_pairs = self._format_kv_pairs(event_dict)
        if kv_pairs:
            line += f" {kv_pairs}"
        return line

    def _format_kv_pairs(self, event_dict: EventDict) -> str:
        return " ".join(f"{key}={value}" for key, value in event_dict.items() if not key.startswith("_"))


def _severity_label(level: str) -> str:
    try:
        return Severity.parse(level).label
    except KeyError:
        return level.upper()
