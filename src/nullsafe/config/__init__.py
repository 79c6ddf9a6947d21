"""Configuration for nullsafe."""

from nullsafe.config.settings import LoggingSettings, Settings

__all__ = ["LoggingSettings", "Settings"]
