"""Work out which plugin a message belongs to.

Plugins live under a `guard/` package (`guard/rspec.py`,
`guard/rspec/formatter.py`, ...). The path of the calling frame is mapped to
a CamelCase, `::` separated name. Callers that know their name should pass
`plugin=` explicitly instead of relying on this.
"""

from __future__ import annotations

import re
import sys

DEFAULT_PLUGIN_NAME = "Guard"

_PLUGIN_PATH = re.compile(
    r"(?:^|/)guard/([a-z0-9_]+)(?:/([a-z0-9_]+))?\.[a-z0-9]+$",
    re.IGNORECASE,
)
_WORD_SEPARATOR = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def _camelize(segment: str) -> str:
    return "".join(word.capitalize() for word in _WORD_SEPARATOR.split(segment))


def plugin_name_from_path(path: str | None) -> str:
    """Plugin name for a source path, or DEFAULT_PLUGIN_NAME.

    >>> plugin_name_from_path("/lib/guard/rspec/formatter.py")
    'Rspec::Formatter'
    >>> plugin_name_from_path("/lib/guard/minitest_runner.py")
    'MinitestRunner'
    """
    if not path:
        return DEFAULT_PLUGIN_NAME

    match = _PLUGIN_PATH.search(path.replace("\\", "/"))
    if match is None:
        return DEFAULT_PLUGIN_NAME

    names = [_camelize(segment) for segment in match.groups() if segment]
    # underscore-only segments camelize to ""
    if not all(names):
        return DEFAULT_PLUGIN_NAME
    return "::".join(names)


def calling_plugin_name(depth: int = 2) -> str:
    """Plugin name of the frame `depth` levels above the caller.

    With the default depth, a call from a UI helper that was itself called by
    an entry point resolves to the code that invoked the entry point.
    """
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return DEFAULT_PLUGIN_NAME
    return plugin_name_from_path(frame.f_code.co_filename)
