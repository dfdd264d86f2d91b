"""Configuration for Guard console output.

Two layers:
- GuardSettings: process-wide switches read from the environment (GUARD_*).
- UIOptions: the logger options (level, template, filters, device).
"""

from __future__ import annotations

import re
import sys
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from guard.errors import InvalidOption
from guard.severity import Severity

DEFAULT_TEMPLATE = ":time - :severity - :message"
DEFAULT_TIME_FORMAT = "%H:%M:%S"


def _default_clear_command() -> str:
    return "cls" if sys.platform.startswith("win") else "clear"


class GuardSettings(BaseSettings):
    """Global switches consulted by deprecation gating and screen clearing."""

    model_config = SettingsConfigDict(
        env_prefix="GUARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    show_deprecations: bool = Field(
        default=False,
        description="Emit deprecation messages",
    )
    clear: bool = Field(
        default=False,
        description="Allow clearing the terminal between runs",
    )
    clear_command: str = Field(
        default_factory=_default_clear_command,
        description="Shell command used to clear the terminal",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Level for guard-ui's own internal diagnostics",
    )


class UIOptions(BaseModel):
    """Logger options, replaced wholesale through `UI.options`.

    `except` is a Python keyword, so the attribute is `except_`; the
    mapping-style accessors and the constructor also accept "except".
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    level: Severity = Severity.INFO
    template: str = DEFAULT_TEMPLATE
    time_format: str = DEFAULT_TIME_FORMAT
    only: re.Pattern[str] | None = None
    except_: re.Pattern[str] | None = Field(default=None, alias="except")
    device: Any = None

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Severity:
        try:
            return Severity.parse(value)
        except (KeyError, ValueError) as e:
            raise ValueError(f"unknown level {value!r}") from e

    @field_validator("only", "except_", mode="before")
    @classmethod
    def _compile_pattern(cls, value: Any) -> re.Pattern[str] | None:
        if value is None or isinstance(value, re.Pattern):
            return value
        try:
            return re.compile(str(value))
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e

    @classmethod
    def build(cls, options: Mapping[str, Any] | None = None, **kwargs: Any) -> UIOptions:
        """Validate options, raising InvalidOption instead of ValidationError."""
        data = {**(options or {}), **kwargs}
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise InvalidOption(
                f"Invalid UI options: {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _field(self, key: str) -> str:
        name = "except_" if key == "except" else key
        if name not in type(self).model_fields:
            raise KeyError(key)
        return name

    def __getitem__(self, key: str) -> Any:
        return getattr(self, self._field(key))

    def fetch(self, key: str, default: Any = None) -> Any:
        """Value for `key`, or `default` when the option is unset."""
        value = self[key]
        return default if value is None else value

    def merge(self, **changes: Any) -> UIOptions:
        """A copy with `changes` applied and validated."""
        current = {name: getattr(self, name) for name in type(self).model_fields}
        if "except" in changes:
            changes["except_"] = changes.pop("except")
        return type(self).build(current, **changes)
