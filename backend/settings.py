"""
Runtime settings for the fan control daemon.
Values come from environment variables, optionally seeded from a .env file.
"""

import logging
import math
import os
import shlex
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from errors import InvalidThresholdRange

# ──────────────────────────── Defaults ────────────────────────────
DEFAULT_GPIO_PIN = 17
DEFAULT_INTERVAL = 15           # seconds
DEFAULT_ON_THRESHOLD = 60.0     # °C
DEFAULT_OFF_THRESHOLD = 50.0    # °C
DEFAULT_MAX_CHANGE = 5.0        # °C between two overheat alerts
DEFAULT_TEMP_COMMAND = ("vcgencmd", "measure_temp")
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
    gpio_pin: int = DEFAULT_GPIO_PIN
    interval_seconds: int = DEFAULT_INTERVAL
    on_threshold: float = DEFAULT_ON_THRESHOLD
    off_threshold: float = DEFAULT_OFF_THRESHOLD
    max_change: float = DEFAULT_MAX_CHANGE
    temp_command: Tuple[str, ...] = DEFAULT_TEMP_COMMAND
    log_level: str = DEFAULT_LOG_LEVEL


# ──────────────────────────── Parsers ────────────────────────────
def _int_or(raw: Optional[str], default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _float_or(raw: Optional[str], default: float) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default


def resolve_interval(raw: Optional[str]) -> int:
    """
    Return the polling period in seconds.
    Zero, negative and unparsable values fall back to the default: the
    scheduler cannot tick on an empty period.
    """
    interval = _int_or(raw, DEFAULT_INTERVAL)
    return interval if interval > 0 else DEFAULT_INTERVAL


def resolve_command(raw: Optional[str]) -> Tuple[str, ...]:
    parts = tuple(shlex.split(raw)) if raw else ()
    return parts or DEFAULT_TEMP_COMMAND


def resolve_log_level(raw: Optional[str]) -> str:
    name = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else DEFAULT_LOG_LEVEL


def validate_thresholds(off_threshold: float, on_threshold: float) -> None:
    """Raise InvalidThresholdRange unless off_threshold < on_threshold."""
    if off_threshold >= on_threshold:
        raise InvalidThresholdRange(off_threshold, on_threshold)


# ──────────────────────────── Public Interface ────────────────────────────
def load_config(env: Optional[Mapping[str, str]] = None,
                env_file: Optional[str] = None) -> Config:
    """
    Build a validated Config.

    Parameters:
    - env: mapping to read instead of os.environ (the .env file is not
      loaded when a mapping is given)
    - env_file: path of the .env file; defaults to the nearest .env found
      from the working directory upwards

    Raises InvalidThresholdRange when OFF_THRESHOLD >= ON_THRESHOLD.
    """
    if env is None:
        load_dotenv(env_file or find_dotenv(usecwd=True))
        env = os.environ

    max_change = _float_or(env.get("MAX_CHANGE"), DEFAULT_MAX_CHANGE)
    if max_change < 0:
        max_change = DEFAULT_MAX_CHANGE

    config = Config(
        gpio_pin=_int_or(env.get("GPIO_PIN"), DEFAULT_GPIO_PIN),
        interval_seconds=resolve_interval(env.get("INTERVAL")),
        on_threshold=_float_or(env.get("ON_THRESHOLD"), DEFAULT_ON_THRESHOLD),
        off_threshold=_float_or(env.get("OFF_THRESHOLD"), DEFAULT_OFF_THRESHOLD),
        max_change=max_change,
        temp_command=resolve_command(env.get("TEMP_COMMAND")),
        log_level=resolve_log_level(env.get("LOG_LEVEL")),
    )
    validate_thresholds(config.off_threshold, config.on_threshold)
    return config
