import pytest
from gpiozero.pins.mock import MockFactory

ENV_KEYS = ("GPIO_PIN", "INTERVAL", "ON_THRESHOLD", "OFF_THRESHOLD",
            "MAX_CHANGE", "TEMP_COMMAND", "LOG_LEVEL")


class FakeFan:
    """Stand-in actuator that counts writes."""

    def __init__(self, active=False):
        self.is_active = active
        self.closed = False
        self.pin = "GPIO17"
        self.writes = []

    def on(self):
        self.is_active = True
        self.writes.append("on")

    def off(self):
        self.is_active = False
        self.writes.append("off")


class CannedSensor:
    """Returns queued readings; exceptions in the queue are raised."""

    def __init__(self, *readings):
        self.readings = list(readings)

    def __call__(self):
        item = self.readings.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def reading(temp):
    return f"temp={temp}'C\n"


@pytest.fixture
def pin_factory():
    factory = MockFactory()
    yield factory
    factory.reset()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove fan settings from os.environ and restore them afterwards."""
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch
