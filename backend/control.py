"""
Fan control loop.
Every INTERVAL seconds: read the CPU temperature, switch the fan through its
hysteresis band and raise a debounced overheat alert.
"""

import logging
import time
from functools import partial
from typing import Callable, Optional

import schedule
from gpiozero import DigitalOutputDevice

from errors import CommandOutputError, ParseError
from fan import update_fan
from overheat import OverheatTracker, check_overheat
from sensor import parse_temperature, read_temperature_text
from settings import Config

logger = logging.getLogger(__name__)


class ControlLoop:
    """Owns the fan, the overheat tracker and the tick schedule."""

    def __init__(self, config: Config, fan: DigitalOutputDevice,
                 read_text: Optional[Callable[[], str]] = None):
        self.config = config
        self.fan = fan
        self.read_text = read_text or partial(read_temperature_text, config.temp_command)
        self.tracker = OverheatTracker()
        self.scheduler = schedule.Scheduler()

    def tick(self) -> None:
        """
        Take one reading and act on it.
        Sensor and parse failures skip the tick: neither the fan nor the
        tracker is touched.
        """
        try:
            temp = parse_temperature(self.read_text())
        except (CommandOutputError, ParseError) as exc:
            logger.warning("Tick failed: %s", exc)
            return

        logger.debug("CPU temperature: %.1f°C", temp)
        update_fan(self.fan, temp, self.config.on_threshold, self.config.off_threshold)

        self.tracker, alert = check_overheat(
            self.tracker, temp, self.config.on_threshold, self.config.max_change
        )
        if alert:
            logger.warning("Overheat: %.1f°C (threshold %.1f°C)",
                           temp, self.config.on_threshold)

    def run(self) -> None:
        """
        Repeats until the process is stopped:
        • tick once right away
        • then tick every interval_seconds; a slow tick pushes the next one back
        """
        logger.info("Fan control loop started (interval = %ss)",
                    self.config.interval_seconds)
        self.tick()
        self.scheduler.every(self.config.interval_seconds).seconds.do(self.tick)

        while True:
            self.scheduler.run_pending()
            idle = self.scheduler.idle_seconds
            time.sleep(max(idle, 0) if idle is not None else 1)
