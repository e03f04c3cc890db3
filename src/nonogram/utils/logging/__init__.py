"""Logging configuration."""

from .logging_config import LOGGER_NAME, setup_logging

__all__ = ["LOGGER_NAME", "setup_logging"]
