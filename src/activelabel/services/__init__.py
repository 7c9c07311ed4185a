"""Service layer for activelabel."""

from activelabel.services.active_text import ActiveText

__all__ = ["ActiveText"]
