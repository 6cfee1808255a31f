"""
GPIO fan actuator and its on/off hysteresis.
The pin's driven level is the fan state: High = on, Low = off.
"""

import logging
from typing import Optional

from gpiozero import DigitalOutputDevice, GPIOZeroError

from errors import ActuatorError

logger = logging.getLogger(__name__)

FAN_ON = "on"
FAN_OFF = "off"

# ──────────────────────── Pin Setup ────────────────────────
def open_fan(pin: int, pin_factory=None) -> DigitalOutputDevice:
    """
    Claim `pin` as an active-high output, starting Low.
    Falls back to the lgpio factory when none is given.
    Raises ActuatorError if the pin cannot be acquired.
    """
    try:
        if pin_factory is None:
            from gpiozero.pins.lgpio import LGPIOFactory
            pin_factory = LGPIOFactory()
        return DigitalOutputDevice(
            pin, active_high=True, initial_value=False, pin_factory=pin_factory
        )
    except (GPIOZeroError, OSError, ImportError) as exc:
        raise ActuatorError(pin, exc) from exc

# ──────────────────────── Hysteresis ────────────────────────
def update_fan(fan: DigitalOutputDevice, temp: float,
               on_threshold: float, off_threshold: float) -> Optional[str]:
    """
    Switch the fan when `temp` strictly crosses a threshold.

    - off and temp > on_threshold  -> drive High, return "on"
    - on  and temp < off_threshold -> drive Low,  return "off"
    - anything else (dead band, already in target state) -> no write, None
    """
    if fan.is_active:
        if temp < off_threshold:
            fan.off()
            logger.info("Fan off (%.1f°C < %.1f°C)", temp, off_threshold)
            return FAN_OFF
    elif temp > on_threshold:
        fan.on()
        logger.info("Fan on (%.1f°C > %.1f°C)", temp, on_threshold)
        return FAN_ON
    return None


def fail_safe(fan: DigitalOutputDevice) -> None:
    """Leave the fan running on shutdown so the chip keeps cooling."""
    if fan.closed:
        return
    if not fan.is_active:
        fan.on()
    logger.info("Fan left on for shutdown (%s High)", fan.pin)
