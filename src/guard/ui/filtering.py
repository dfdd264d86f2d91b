"""The only/except filter applied to every console message."""

from __future__ import annotations

import re

Pattern = re.Pattern[str] | str


def _matches(pattern: Pattern, plugin: str) -> bool:
    return re.search(pattern, plugin) is not None


def should_emit(plugin: str, only: Pattern | None = None, except_: Pattern | None = None) -> bool:
    """Whether a message attributed to `plugin` passes the filter.

    The three clauses are OR-ed: a plugin matching `only` is shown even when
    `except_` also matches it, and a plugin that misses `only` is still shown
    when `except_` does not exclude it.
    """
    if only is None and except_ is None:
        return True
    if only is not None and _matches(only, plugin):
        return True
    return except_ is not None and not _matches(except_, plugin)
