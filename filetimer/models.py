"""
Data models for the application.
"""
import re
from dataclasses import dataclass
from typing import Optional

_PATH_SEPARATORS = re.compile(r"[\\/]")


def display_name(path: str) -> str:
    """Last path segment, split on either slash style."""
    return _PATH_SEPARATORS.split(path)[-1] or path


@dataclass
class TrackedFile:
    """A file with its cumulative tracked seconds."""
    path: str
    total_seconds: int = 0

    @property
    def display_name(self) -> str:
        return display_name(self.path)


@dataclass(frozen=True)
class TrackerState:
    """
    Ephemeral session state owned by the tracker controller.

    Idle when active_path is None. While tracking, the stored total for
    active_path equals baseline_seconds + session_seconds after every tick.
    """
    active_path: Optional[str] = None
    baseline_seconds: int = 0
    session_seconds: int = 0

    @property
    def is_tracking(self) -> bool:
        return self.active_path is not None

    @property
    def total_seconds(self) -> int:
        return self.baseline_seconds + self.session_seconds


IDLE = TrackerState()


# --- Messages consumed by the tracker ---

@dataclass(frozen=True)
class FocusChanged:
    """The active file changed (None = no file has focus)."""
    path: Optional[str]


@dataclass(frozen=True)
class Tick:
    """One second elapsed on the tracking timer."""
    pass


@dataclass(frozen=True)
class ResetFile:
    """User asked to zero the total for a file."""
    path: str


@dataclass(frozen=True)
class Shutdown:
    """Host is exiting."""
    pass


# --- Effects produced by the tracker ---

@dataclass(frozen=True)
class StartTimer:
    pass


@dataclass(frozen=True)
class StopTimer:
    pass


@dataclass(frozen=True)
class PersistTotal:
    path: str
    total_seconds: int


@dataclass(frozen=True)
class RefreshViews:
    pass


@dataclass(frozen=True)
class ShowNotification:
    title: str
    message: str
