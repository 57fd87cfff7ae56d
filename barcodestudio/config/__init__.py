"""
Configuration management for barcodestudio.
"""

from barcodestudio.config.logging_setup import configure_logging
from barcodestudio.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
