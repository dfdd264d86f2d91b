"""Core exceptions for Guard console output."""


class GuardError(Exception):
    """Base exception for all Guard errors."""

    def __init__(self, message: str, *, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnknownColorName(GuardError):
    """Raised when a color token is neither numeric nor a known style name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color name: {name}", details={"name": name})
        self.name = name


class InvalidOption(GuardError):
    """Raised when UI options fail validation."""
