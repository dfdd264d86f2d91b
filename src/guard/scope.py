"""Plugin and group selections used to describe what an action applies to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class Titled(Protocol):
    """Anything with a human readable title."""

    @property
    def title(self) -> str: ...


@dataclass(frozen=True)
class Plugin:
    """A Guard plugin. The title defaults to the plugin name."""

    name: str
    display_title: str | None = None

    @property
    def title(self) -> str:
        return self.display_title or self.name


@dataclass(frozen=True)
class Group:
    """A named group of plugins."""

    name: str

    @property
    def title(self) -> str:
        return self.name.capitalize()


@dataclass
class Scope:
    """A selection of plugins and/or groups; empty lists mean no selection."""

    plugins: list[Titled] = field(default_factory=list)
    groups: list[Titled] = field(default_factory=list)
