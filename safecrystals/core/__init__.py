"""
Core package - Process settings and cross-cutting concerns
"""

from .config import Settings, get_settings, reload_settings

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings"
]
