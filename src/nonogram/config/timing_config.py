"""
Animation timing configuration.

All timing values are in seconds unless otherwise specified. Defaults can be
overridden through environment variables (a ``.env`` file is honoured):

- NONOGRAM_CHARACTER_DELAY_MS: delay after each animated character
- NONOGRAM_HEARTBEAT_INTERVAL: seconds between buffered-mode spinner frames
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass
class TimingConfig:
    """
    Centralized timing configuration for the animated solver.
    """

    character_delay: float = 0.005
    """Delay after every character drawn or filled"""

    heartbeat_interval: float = 0.5
    """Time between spinner frames while rendering off-screen"""


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: negative", name, raw)
        return default
    return value


def get_timing_config() -> TimingConfig:
    """
    Get the timing configuration, applying environment overrides.
    """
    defaults = TimingConfig()
    return TimingConfig(
        character_delay=_env_float(
            "NONOGRAM_CHARACTER_DELAY_MS", defaults.character_delay * 1000
        )
        / 1000,
        heartbeat_interval=_env_float(
            "NONOGRAM_HEARTBEAT_INTERVAL", defaults.heartbeat_interval
        ),
    )


def create_custom_timing(
    delay_ms: Optional[float] = None,
    heartbeat_interval: Optional[float] = None,
) -> TimingConfig:
    """
    Create a timing configuration with overrides.

    Args:
        delay_ms: Override the per-character delay, in milliseconds
        heartbeat_interval: Override the spinner interval

    Returns:
        TimingConfig with custom values
    """
    config = get_timing_config()

    if delay_ms is not None:
        if delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {delay_ms}")
        config.character_delay = delay_ms / 1000
    if heartbeat_interval is not None:
        config.heartbeat_interval = heartbeat_interval

    return config
