"""Configuration loading for msgbundle tools."""

from .settings import (
    ConfigurationError,
    ResolverSettings,
    ScanSettings,
    Settings,
    configure_logging,
    load_settings,
)

__all__ = [
    "ConfigurationError",
    "ResolverSettings",
    "ScanSettings",
    "Settings",
    "configure_logging",
    "load_settings",
]
