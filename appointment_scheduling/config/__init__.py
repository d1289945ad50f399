"""
Configuration Module

Application configuration settings and utilities.
"""

from appointment_scheduling.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
