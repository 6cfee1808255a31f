"""
Exception types for the fan control daemon.
Startup errors (thresholds, GPIO) are fatal; sensor errors only skip a tick.
"""


class FanControlError(Exception):
    """Base class for every error raised by fancontrold."""


class InvalidThresholdRange(FanControlError, ValueError):
    def __init__(self, off_threshold: float, on_threshold: float):
        self.off_threshold = off_threshold
        self.on_threshold = on_threshold
        super().__init__(
            f"OFF_THRESHOLD ({off_threshold}) must be less than "
            f"ON_THRESHOLD ({on_threshold})"
        )


class CommandOutputError(FanControlError):
    """The temperature command could not be run or exited with an error."""

    def __init__(self, command, cause: Exception):
        self.command = list(command)
        self.cause = cause
        super().__init__(f"{' '.join(self.command)} failed: {cause}")


class ParseError(FanControlError, ValueError):
    """Sensor output was not of the form ``temp=<float>'C\\n``."""

    def __init__(self, raw_text: str):
        self.raw_text = raw_text
        super().__init__(f"Unexpected temperature output: {raw_text!r}")


class ActuatorError(FanControlError):
    def __init__(self, pin: int, cause: Exception):
        self.pin = pin
        self.cause = cause
        super().__init__(f"Cannot acquire GPIO{pin}: {cause}")
