"""Core models and exceptions for activelabel."""

from activelabel.core.exceptions import (
    ActiveLabelError,
    ConfigurationError,
    InvalidRangeError,
)
from activelabel.core.models import (
    DETECTABLE_CATEGORIES,
    ActiveEntity,
    EntityCategory,
    TextRange,
)

__all__ = [
    # Models
    "ActiveEntity",
    "EntityCategory",
    "TextRange",
    "DETECTABLE_CATEGORIES",
    # Exceptions
    "ActiveLabelError",
    "ConfigurationError",
    "InvalidRangeError",
]
