"""
Package: config
Description: Environment-driven settings and dispatch parameters.
"""

from .settings import DispatchConfig, Settings, load_settings, settings

__all__ = ["DispatchConfig", "Settings", "load_settings", "settings"]
