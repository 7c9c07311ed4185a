"""Utility functions for activelabel."""

from activelabel.utils.utf16 import Utf16Index, utf16_length

__all__ = [
    "Utf16Index",
    "utf16_length",
]
