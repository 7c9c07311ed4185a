"""Configuration module for activelabel."""

from activelabel.config.logging import configure_logging, get_logger
from activelabel.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
