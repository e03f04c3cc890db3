"""Configuration for the nonogram animator."""

from .timing_config import TimingConfig, create_custom_timing, get_timing_config

__all__ = ["TimingConfig", "create_custom_timing", "get_timing_config"]
