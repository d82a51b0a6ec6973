"""Unit tests for the active-file tracker state machine and controller."""
import os
import tempfile
import unittest
from unittest.mock import Mock
from filetimer.config import TICK_INTERVAL_MS
from filetimer.db import TimeStore
from filetimer.events import Event, EventBus
from filetimer.models import (
    IDLE, TrackerState, FocusChanged, Tick, ResetFile, Shutdown,
    StartTimer, StopTimer, PersistTotal, RefreshViews, ShowNotification,
)
from filetimer.services.tracker_service import TrackerController, TrackerRules, handle


def no_totals(path: str) -> int:
    return 0


class TestTrackerTransitions(unittest.TestCase):
    """Test the pure handle() transition function."""

    def test_focus_on_new_file_starts_tracking_from_stored_total(self) -> None:
        """Focus on F reads the baseline and restarts the timer."""
        state, effects = handle(IDLE, FocusChanged("/a.py"), lambda p: 42)

        self.assertEqual(state, TrackerState("/a.py", 42, 0))
        self.assertEqual(effects, [StopTimer(), StartTimer(), RefreshViews()])

    def test_focus_on_same_file_is_noop(self) -> None:
        """Redundant focus events keep the session and emit nothing."""
        state = TrackerState("/a.py", 10, 7)
        lookup = Mock(return_value=999)

        new_state, effects = handle(state, FocusChanged("/a.py"), lookup)

        self.assertIs(new_state, state)
        self.assertEqual(effects, [])
        lookup.assert_not_called()

    def test_tick_while_idle_does_nothing(self) -> None:
        state, effects = handle(IDLE, Tick(), no_totals)

        self.assertIs(state, IDLE)
        self.assertEqual(effects, [])

    def test_tick_persists_baseline_plus_session(self) -> None:
        state, effects = handle(TrackerState("/a.py", 100, 4), Tick(), no_totals)

        self.assertEqual(state.session_seconds, 5)
        self.assertEqual(effects, [PersistTotal("/a.py", 105), RefreshViews()])

    def test_blur_pauses_by_default(self) -> None:
        """FocusChanged(None) goes idle and stops the timer."""
        state, effects = handle(TrackerState("/a.py", 0, 3), FocusChanged(None), no_totals)

        self.assertIs(state, IDLE)
        self.assertEqual(effects, [StopTimer(), RefreshViews()])

    def test_blur_keeps_counting_when_pause_disabled(self) -> None:
        rules = TrackerRules(pause_on_blur=False)
        before = TrackerState("/a.py", 0, 3)

        state, effects = handle(before, FocusChanged(None), no_totals, rules)

        self.assertIs(state, before)
        self.assertEqual(effects, [])

    def test_reset_of_active_file_zeroes_in_place(self) -> None:
        """Reset keeps the path but zeroes baseline and session, no timer restart."""
        state, effects = handle(TrackerState("/a.py", 300, 20), ResetFile("/a.py"), no_totals)

        self.assertEqual(state, TrackerState("/a.py", 0, 0))
        self.assertEqual(effects, [PersistTotal("/a.py", 0), RefreshViews()])

        state, effects = handle(state, Tick(), no_totals)
        self.assertEqual(effects[0], PersistTotal("/a.py", 1))

    def test_reset_of_other_file_leaves_session(self) -> None:
        before = TrackerState("/a.py", 300, 20)

        state, effects = handle(before, ResetFile("/b.py"), no_totals)

        self.assertIs(state, before)
        self.assertEqual(effects, [PersistTotal("/b.py", 0), RefreshViews()])

    def test_break_reminder_fires_once_at_threshold(self) -> None:
        """Reminder at 1500s only, not again at 3000s."""
        state = TrackerState("/a.py", 0, 1498)
        fired_at = []
        for _ in range(1600):
            state, effects = handle(state, Tick(), no_totals)
            if any(isinstance(e, ShowNotification) for e in effects):
                fired_at.append(state.session_seconds)

        self.assertEqual(fired_at, [1500])

        state = TrackerState("/a.py", 0, 2999)
        state, effects = handle(state, Tick(), no_totals)
        self.assertFalse(any(isinstance(e, ShowNotification) for e in effects))

    def test_break_reminder_message(self) -> None:
        _, effects = handle(TrackerState("/a.py", 0, 1499), Tick(), no_totals)

        notice = effects[-1]
        assert isinstance(notice, ShowNotification)
        self.assertIn("25 minutes passed", notice.message)

    def test_break_reminder_repeats_when_configured(self) -> None:
        rules = TrackerRules(reminder_seconds=60, repeat_reminder=True)
        state = TrackerState("/a.py", 0, 0)
        fired_at = []
        for _ in range(180):
            state, effects = handle(state, Tick(), no_totals, rules)
            if any(isinstance(e, ShowNotification) for e in effects):
                fired_at.append(state.session_seconds)

        self.assertEqual(fired_at, [60, 120, 180])

    def test_shutdown_stops_timer(self) -> None:
        state, effects = handle(TrackerState("/a.py", 1, 1), Shutdown(), no_totals)

        self.assertIs(state, IDLE)
        self.assertEqual(effects, [StopTimer()])

    def test_unknown_message_raises(self) -> None:
        with self.assertRaises(TypeError):
            handle(IDLE, "focus", no_totals)  # type: ignore[arg-type]


class TestTrackerController(unittest.TestCase):
    """Test effect execution against a real store and a mock timer."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.bus = EventBus()
        self.store = TimeStore(os.path.join(self.tmpdir.name, "times.db"), bus=self.bus)
        self.timer = Mock()
        self.notify = Mock()
        self.controller = TrackerController(
            self.store, self.timer, notify=self.notify, bus=self.bus
        )

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_monotonic_accumulation(self) -> None:
        """N ticks on a fresh file store exactly N seconds."""
        self.controller.focus_changed("/a.py")
        for _ in range(37):
            self.controller.tick()

        self.assertEqual(self.store.get("/a.py"), 37)
        self.assertEqual(self.controller.state.session_seconds, 37)

    def test_focus_starts_timer_once(self) -> None:
        """Repeated focus on the same file does not restart the timer."""
        self.controller.focus_changed("/a.py")
        self.controller.tick()
        self.controller.focus_changed("/a.py")
        self.controller.focus_changed("/a.py")

        self.timer.start.assert_called_once_with(TICK_INTERVAL_MS)
        self.assertEqual(self.controller.state.session_seconds, 1)

    def test_switch_resets_session_and_keeps_previous_total(self) -> None:
        self.controller.focus_changed("/a.py")
        for _ in range(5):
            self.controller.tick()

        self.controller.focus_changed("/b.py")
        self.controller.tick()

        self.assertEqual(self.store.get("/a.py"), 5)
        self.assertEqual(self.store.get("/b.py"), 1)
        self.assertEqual(self.controller.state.session_seconds, 1)

    def test_session_resumes_from_stored_total(self) -> None:
        self.store.set("/a.py", 100)

        self.controller.focus_changed("/a.py")
        self.controller.tick()

        self.assertEqual(self.store.get("/a.py"), 101)

    def test_reset_active_file_next_tick_is_one(self) -> None:
        self.store.set("/a.py", 500)
        self.controller.focus_changed("/a.py")
        self.controller.tick()

        self.controller.reset("/a.py")
        self.assertEqual(self.store.get("/a.py"), 0)

        self.controller.tick()
        self.assertEqual(self.store.get("/a.py"), 1)

    def test_reminder_is_sent_to_notifier(self) -> None:
        self.controller.rules = TrackerRules(reminder_seconds=3)
        self.controller.focus_changed("/a.py")
        for _ in range(6):
            self.controller.tick()

        self.notify.assert_called_once()

    def test_refresh_emits_session_changed(self) -> None:
        handler = Mock()
        self.bus.subscribe(Event.SESSION_CHANGED, handler)

        self.controller.focus_changed("/a.py")
        self.controller.tick()

        self.assertEqual(handler.call_count, 2)
        ctx = handler.call_args[0][0]
        self.assertEqual(ctx.state.session_seconds, 1)

    def test_shutdown_stops_timer(self) -> None:
        self.controller.focus_changed("/a.py")
        self.timer.reset_mock()

        self.controller.shutdown()

        self.timer.stop.assert_called_once()
        self.assertFalse(self.controller.state.is_tracking)


if __name__ == "__main__":
    unittest.main()
