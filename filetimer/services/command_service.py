"""
filetimer/services/command_service.py

User commands exposed to the host UI.

The host object supplies the interactive pieces:
    ask_save_path(default_name) -> Optional[str]
    notify(title, message)
    refresh_views()
    show_chart(rows)
"""
from typing import Any, List, Optional
from ..config import settings, log
from .chart_service import top_files
from .export_service import (
    export_all_payload, export_file_payload, default_export_name, write_report
)
from .presentation_service import FileRow

NOTIFY_TITLE = "FileTimer"


class CommandService:
    """Handles show/sort/reset/export/chart commands."""

    def __init__(self, controller: Any, store: Any, presenter: Any, host: Any) -> None:
        self.controller = controller
        self.store = store
        self.presenter = presenter
        self.host = host

    def show_times(self) -> None:
        """Refresh the panel."""
        self.host.refresh_views()

    def toggle_sort(self) -> None:
        """Flip panel sort direction and refresh."""
        self.presenter.toggle_sort()
        self.host.refresh_views()

    def reset_current(self) -> None:
        """Zero the total of the file being tracked. No-op when idle."""
        path = self.controller.state.active_path
        if not path:
            return
        self.controller.reset(path)
        self.host.notify(NOTIFY_TITLE, "Time reset for current file.")
        self.host.refresh_views()

    def reset_file(self, item: Any) -> None:
        """Zero the total of a panel item. Ignores anything but FileRow."""
        if not isinstance(item, FileRow):
            return
        self.controller.reset(item.path)
        self.host.notify(NOTIFY_TITLE, f"Reset time for {item.label}")
        self.host.refresh_views()

    def export_all(self) -> Optional[str]:
        """
        Write every total to a user-chosen JSON file.

        Returns:
            Destination path, or None if the user cancelled
        """
        payload = export_all_payload(self.store)
        destination = self.host.ask_save_path(default_export_name())
        if not destination:
            return None
        write_report(payload, destination)
        log(f"exported {len(payload)} file(s) to {destination}")
        self.host.notify(NOTIFY_TITLE, "Time data exported successfully.")
        return destination

    def export_file(self, item: Any) -> Optional[str]:
        """Write a single panel item's total to a user-chosen JSON file."""
        if not isinstance(item, FileRow):
            return None
        destination = self.host.ask_save_path(default_export_name(item.path))
        if not destination:
            return None
        write_report(export_file_payload(self.store, item.path), destination)
        log(f"exported {item.path} to {destination}")
        self.host.notify(NOTIFY_TITLE, f"Exported time for {item.label}")
        return destination

    def show_chart(self) -> List[FileRow]:
        """Compute the top files and hand them to the host for display."""
        rows = top_files(self.store.snapshot(), settings.chart_top_files)
        self.host.show_chart(rows)
        return rows
