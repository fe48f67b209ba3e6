"""
Configuration package for KidMap.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    DatabaseSettings,
    OverpassSettings,
    SecuritySettings,
    build_settings,
    settings,
    get_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "DatabaseSettings",
    "OverpassSettings",
    "SecuritySettings",
    "build_settings",
    "settings",
    "get_settings",
]
