"""
filetimer/services/tracker_service.py

Active-file tracking state machine.

handle() is a pure transition function: it takes the current state and a
message and returns the next state plus a list of effects. TrackerController
owns the state and executes the effects against the store, the timer and the
notifier.
"""
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Union
from ..config import TICK_INTERVAL_MS, debug_log, log
from ..events import EventBus, Event, SessionChangedContext, event_bus
from ..models import (
    IDLE, TrackerState, display_name,
    FocusChanged, Tick, ResetFile, Shutdown,
    StartTimer, StopTimer, PersistTotal, RefreshViews, ShowNotification,
)

Message = Union[FocusChanged, Tick, ResetFile, Shutdown]
Effect = Union[StartTimer, StopTimer, PersistTotal, RefreshViews, ShowNotification]

BREAK_REMINDER_TITLE = "FileTimer"


@dataclass(frozen=True)
class TrackerRules:
    """Tunable tracker behavior (built from Config.tracker_rules())."""
    reminder_seconds: int = 1500
    repeat_reminder: bool = False
    pause_on_blur: bool = True


def _reminder_due(session_seconds: int, rules: TrackerRules) -> bool:
    if rules.reminder_seconds <= 0:
        return False
    if rules.repeat_reminder:
        return session_seconds % rules.reminder_seconds == 0
    return session_seconds == rules.reminder_seconds


def break_reminder_message(reminder_seconds: int) -> str:
    return f"⏰ {reminder_seconds // 60} minutes passed! Time for a break?"


def handle(state: TrackerState, message: Message,
           get_total: Callable[[str], int],
           rules: TrackerRules = TrackerRules()) -> Tuple[TrackerState, List[Effect]]:
    """
    Compute the next tracker state and the effects to run.

    Args:
        state: Current tracker state
        message: Incoming message
        get_total: Store lookup used to read the baseline on focus change
        rules: Reminder and blur behavior

    Returns:
        Tuple of (new_state, effects)
    """
    if isinstance(message, FocusChanged):
        if message.path == state.active_path:
            return state, []

        if message.path is None:
            if not rules.pause_on_blur:
                # Keep counting against the previous file
                return state, []
            return IDLE, [StopTimer(), RefreshViews()]

        new_state = TrackerState(
            active_path=message.path,
            baseline_seconds=get_total(message.path),
            session_seconds=0,
        )
        return new_state, [StopTimer(), StartTimer(), RefreshViews()]

    if isinstance(message, Tick):
        if state.active_path is None:
            return state, []

        new_state = TrackerState(
            active_path=state.active_path,
            baseline_seconds=state.baseline_seconds,
            session_seconds=state.session_seconds + 1,
        )
        effects: List[Effect] = [
            PersistTotal(new_state.active_path, new_state.total_seconds),
            RefreshViews(),
        ]
        if _reminder_due(new_state.session_seconds, rules):
            effects.append(ShowNotification(
                BREAK_REMINDER_TITLE, break_reminder_message(rules.reminder_seconds)
            ))
        return new_state, effects

    if isinstance(message, ResetFile):
        effects = [PersistTotal(message.path, 0), RefreshViews()]
        if message.path == state.active_path:
            # Zero in place; the running timer is left alone
            return TrackerState(active_path=state.active_path), effects
        return state, effects

    if isinstance(message, Shutdown):
        return IDLE, [StopTimer()]

    raise TypeError(f"Unknown tracker message: {message!r}")


class TrackerController:
    """
    Owns the TrackerState and runs effects produced by handle().

    Collaborators:
        store: TimeStore (get/set)
        timer: object with start(interval_ms) and stop(), e.g. a QTimer
        notify: callable(title, message) for user-visible toasts
    """

    def __init__(self, store: Any, timer: Any,
                 notify: Optional[Callable[[str, str], Any]] = None,
                 rules: Optional[TrackerRules] = None,
                 bus: Optional[EventBus] = None) -> None:
        self.store = store
        self.timer = timer
        self.notify = notify
        self.rules = rules if rules is not None else TrackerRules()
        self.bus = bus if bus is not None else event_bus
        self.state: TrackerState = IDLE

    def dispatch(self, message: Message) -> TrackerState:
        """Apply a message and run the resulting effects in order."""
        previous = self.state
        self.state, effects = handle(self.state, message, self.store.get, self.rules)

        if isinstance(message, FocusChanged) and self.state.active_path != previous.active_path:
            if self.state.active_path:
                log(f"tracking {self.state.active_path} (total {self.state.baseline_seconds}s)")
            else:
                log("tracking paused (no active file)")

        for effect in effects:
            self._apply(effect)
        return self.state

    # Convenience wrappers used by the host

    def focus_changed(self, path: Optional[str]) -> TrackerState:
        return self.dispatch(FocusChanged(path))

    def tick(self) -> TrackerState:
        return self.dispatch(Tick())

    def reset(self, path: str) -> TrackerState:
        return self.dispatch(ResetFile(path))

    def shutdown(self) -> TrackerState:
        return self.dispatch(Shutdown())

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, StopTimer):
            self.timer.stop()
        elif isinstance(effect, StartTimer):
            self.timer.start(TICK_INTERVAL_MS)
        elif isinstance(effect, PersistTotal):
            debug_log(f"persist {effect.path} = {effect.total_seconds}s")
            self.store.set(effect.path, effect.total_seconds)
        elif isinstance(effect, RefreshViews):
            self.bus.emit(Event.SESSION_CHANGED, SessionChangedContext(self.state))
        elif isinstance(effect, ShowNotification):
            if self.state.active_path:
                log(f"break reminder for {display_name(self.state.active_path)}")
            if self.notify:
                self.notify(effect.title, effect.message)
