"""Global event system for FileTimer."""
from enum import Enum
from typing import Callable, Any, Dict, List, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import TrackerState


class Event(Enum):
    """Application-wide events."""
    TIMES_CHANGED = "times_changed"
    SESSION_CHANGED = "session_changed"


class EventContext:
    """Base context for event handlers."""
    pass


class TimesChangedContext(EventContext):
    """Context passed to TIMES_CHANGED handlers after a store write."""
    def __init__(self, path: str, total_seconds: int) -> None:
        self.path = path
        self.total_seconds = total_seconds


class SessionChangedContext(EventContext):
    """Context passed to SESSION_CHANGED handlers after a tracker transition."""
    def __init__(self, state: 'TrackerState') -> None:
        self.state = state


ContextT = TypeVar('ContextT', bound=EventContext)


class EventBus:
    """Central event dispatcher."""

    def __init__(self) -> None:
        self._handlers: Dict[Event, List[Callable[[Any], None]]] = {}

    def subscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        """Subscribe to an event with a typed handler."""
        if event not in self._handlers:
            self._handlers[event] = []
        self._handlers[event].append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event: Event, handler: Callable[[ContextT], None]) -> None:
        if event in self._handlers:
            try:
                self._handlers[event].remove(handler)  # type: ignore[arg-type]
            except ValueError:
                pass

    def emit(self, event: Event, context: EventContext) -> None:
        """Emit an event to all subscribers."""
        for handler in self._handlers.get(event, []):
            try:
                handler(context)
            except Exception as e:
                print(f"Event handler error ({event.value}): {e}")

    def clear(self, event: Optional[Event] = None) -> None:
        if event:
            self._handlers.pop(event, None)
        else:
            self._handlers.clear()


# Global instance
event_bus = EventBus()
