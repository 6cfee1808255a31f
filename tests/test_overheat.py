import pytest

from overheat import OverheatTracker, check_overheat

ON = 60.0
MAX_CHANGE = 5.0


def run(readings, tracker=None):
    tracker = tracker or OverheatTracker()
    alerts = []
    for temp in readings:
        tracker, alert = check_overheat(tracker, temp, ON, MAX_CHANGE)
        if alert:
            alerts.append(temp)
    return tracker, alerts


class TestCheckOverheat:
    def test_reference_sequence(self):
        tracker, alerts = run([61, 62, 63, 69, 58, 70])
        assert alerts == [61, 69, 70]
        assert tracker.last_overheat_amount == pytest.approx(10.0)

    def test_first_overheat_always_alerts(self):
        tracker, alert = check_overheat(OverheatTracker(), 60.0, ON, MAX_CHANGE)
        assert alert
        assert tracker.last_overheat_amount == 0.0

    def test_cooling_clears_tracker(self):
        tracker, alert = check_overheat(OverheatTracker(4.0), 59.9, ON, MAX_CHANGE)
        assert not alert
        assert tracker.last_overheat_amount is None

    def test_change_equal_to_step_is_suppressed(self):
        _, alerts = run([61, 66])
        assert alerts == [61]

    def test_falling_severity_also_alerts(self):
        _, alerts = run([75, 72, 68])
        assert alerts == [75, 68]

    def test_suppressed_reading_keeps_last_amount(self):
        tracker, _ = run([61, 65, 66])
        assert tracker.last_overheat_amount == pytest.approx(1.0)

    def test_tracker_is_not_mutated(self):
        start = OverheatTracker(2.0)
        check_overheat(start, 70.0, ON, MAX_CHANGE)
        assert start.last_overheat_amount == 2.0
