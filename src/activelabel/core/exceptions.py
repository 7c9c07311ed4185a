"""Custom exceptions for activelabel."""


class ActiveLabelError(Exception):
    """Base exception for all activelabel errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ActiveLabelError):
    """Raised when there's a configuration problem."""

    pass


class InvalidRangeError(ActiveLabelError):
    """Raised when a text range does not fit the scanned text."""

    pass
