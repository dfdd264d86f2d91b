"""Version information for guard-ui."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as pkg_version


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the installed version string, "0.0.0" when running from a checkout."""
    try:
        return pkg_version("guard-ui")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()
