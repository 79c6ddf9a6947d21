"""Utility functions and helpers."""

from nullsafe.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
