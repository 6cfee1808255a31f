"""
Overheat alert debouncing.
An alert fires on the first overheating reading and afterwards only when the
overheat amount has moved by more than `max_change` since the last alert.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class OverheatTracker:
    """Overheat amount (°C above ON_THRESHOLD) of the last reported alert."""
    last_overheat_amount: Optional[float] = None


def check_overheat(tracker: OverheatTracker, temp: float, on_threshold: float,
                   max_change: float) -> Tuple[OverheatTracker, bool]:
    """
    Return the updated tracker and whether an alert should be emitted.
    Dropping below on_threshold clears the tracker, so the next overheat
    always alerts.
    """
    if temp < on_threshold:
        return OverheatTracker(), False

    amount = temp - on_threshold
    last = tracker.last_overheat_amount
    if last is None or abs(last - amount) > max_change:
        return OverheatTracker(amount), True
    return tracker, False
