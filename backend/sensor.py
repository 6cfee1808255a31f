"""
CPU temperature readings for the fan control daemon.
Runs `vcgencmd measure_temp` (or the configured TEMP_COMMAND) and parses
its `temp=<float>'C` output.
"""

import math
import subprocess
from typing import Sequence

from errors import CommandOutputError, ParseError
from settings import DEFAULT_TEMP_COMMAND

PREFIX = "temp="
SUFFIX = "'C\n"
COMMAND_TIMEOUT = 5  # seconds

# ──────────────────────── Parsing ────────────────────────
def parse_temperature(raw: str) -> float:
    """Convert `temp=42.8'C\\n` into 42.8, or raise ParseError(raw)."""
    if not (raw.startswith(PREFIX) and raw.endswith(SUFFIX)):
        raise ParseError(raw)

    number = raw[len(PREFIX):len(raw) - len(SUFFIX)]
    # float() tolerates whitespace and digit underscores; the sensor emits neither
    if not number or number != number.strip() or "_" in number:
        raise ParseError(raw)

    try:
        value = float(number)
    except ValueError:
        raise ParseError(raw) from None

    if not math.isfinite(value):
        raise ParseError(raw)
    return value

# ──────────────────────── Sensor Command ────────────────────────
def read_temperature_text(command: Sequence[str] = DEFAULT_TEMP_COMMAND) -> str:
    """
    Run the temperature command and return its raw stdout.
    Undecodable bytes become U+FFFD and fail later as a ParseError.
    Raises CommandOutputError if it cannot be started, times out or fails.
    """
    try:
        result = subprocess.run(
            list(command),
            capture_output=True,
            text=True,
            errors="replace",
            timeout=COMMAND_TIMEOUT,
            check=True,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        raise CommandOutputError(command, exc) from exc
    return result.stdout


def read_temperature(command: Sequence[str] = DEFAULT_TEMP_COMMAND) -> float:
    """Read and parse the current CPU temperature in °C."""
    return parse_temperature(read_temperature_text(command))
