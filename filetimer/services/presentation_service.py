"""Service for formatting durations and shaping panel/status views."""
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from ..models import TrackerState, display_name

STATUS_GLYPH = "⏱"


def format_duration(seconds: int) -> str:
    """
    Format seconds as MM:SS.

    Minutes are zero-padded to at least two digits and are not capped,
    so 6000 seconds is "100:00".
    """
    seconds = int(seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


@dataclass(frozen=True)
class FileRow:
    """One tracked file in the panel."""
    path: str
    seconds: int

    @property
    def label(self) -> str:
        return display_name(self.path)

    @property
    def description(self) -> str:
        return format_duration(self.seconds)

    @property
    def tooltip(self) -> str:
        return f"{self.path} – {format_duration(self.seconds)}"


@dataclass(frozen=True)
class HeaderRow:
    """Synthetic first row with the grand total and sort direction."""
    total_seconds: int
    descending: bool

    @property
    def label(self) -> str:
        arrow = "↓" if self.descending else "↑"
        return f"Total {arrow}: {format_duration(self.total_seconds)}"

    @property
    def tooltip(self) -> str:
        return "Sum of all tracked files"


def sort_rows(snapshot: Dict[str, int], descending: bool = True) -> List[FileRow]:
    """Rows ordered by total; equal totals keep enumeration order."""
    rows = [FileRow(path, seconds) for path, seconds in snapshot.items()]
    # sorted() is stable, including with reverse=True
    return sorted(rows, key=lambda r: r.seconds, reverse=descending)


class PresentationService:
    """Derived views over the time store for the status indicator and panel."""

    def __init__(self, store) -> None:
        self.store = store
        self.sort_descending = True

    def toggle_sort(self) -> bool:
        """Flip the panel sort direction, returning the new value."""
        self.sort_descending = not self.sort_descending
        return self.sort_descending

    def panel_rows(self) -> Tuple[HeaderRow, List[FileRow]]:
        snapshot = self.store.snapshot()
        rows = sort_rows(snapshot, self.sort_descending)
        header = HeaderRow(sum(snapshot.values()), self.sort_descending)
        return header, rows

    def status_text(self, state: TrackerState) -> str:
        if not state.is_tracking:
            return f"{STATUS_GLYPH} --:--"
        return f"{STATUS_GLYPH} {format_duration(state.session_seconds)}"

    def status_tooltip(self, state: TrackerState, total: Optional[int] = None) -> str:
        """File name, session time and cumulative total for the active file."""
        if state.active_path is None:
            return "FileTimer: no active file"
        if total is None:
            total = state.total_seconds
        return "\n".join([
            f"File: {display_name(state.active_path)}",
            f"Session: {format_duration(state.session_seconds)}",
            f"Total: {format_duration(total)}",
        ])
