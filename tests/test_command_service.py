"""Unit tests for host commands (reset, export, sort, chart)."""
import json
import os
import tempfile
import unittest
from unittest.mock import Mock, patch
from filetimer.config import settings
from filetimer.db import TimeStore
from filetimer.events import EventBus
from filetimer.services.command_service import CommandService
from filetimer.services.presentation_service import FileRow, HeaderRow, PresentationService
from filetimer.services.tracker_service import TrackerController


class TestCommandService(unittest.TestCase):
    """Test command behavior against a mock host."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        bus = EventBus()
        self.store = TimeStore(os.path.join(self.tmpdir.name, "times.db"), bus=bus)
        self.controller = TrackerController(self.store, Mock(), bus=bus)
        self.presenter = PresentationService(self.store)
        self.host = Mock()
        self.commands = CommandService(self.controller, self.store, self.presenter, self.host)

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_reset_current_without_active_file_is_silent(self) -> None:
        self.store.set("/a.py", 9)

        self.commands.reset_current()

        self.assertEqual(self.store.get("/a.py"), 9)
        self.host.notify.assert_not_called()

    def test_reset_current_zeroes_active_file(self) -> None:
        self.store.set("/a.py", 9)
        self.controller.focus_changed("/a.py")
        self.controller.tick()

        self.commands.reset_current()
        self.controller.tick()

        self.assertEqual(self.store.get("/a.py"), 1)
        self.host.notify.assert_called_once_with("FileTimer", "Time reset for current file.")
        self.host.refresh_views.assert_called()

    def test_reset_file_item(self) -> None:
        self.store.set("/p/b.py", 40)

        self.commands.reset_file(FileRow("/p/b.py", 40))

        self.assertEqual(self.store.get("/p/b.py"), 0)
        self.host.notify.assert_called_once_with("FileTimer", "Reset time for b.py")

    def test_file_commands_ignore_unknown_items(self) -> None:
        """Header rows and arbitrary objects are silently ignored."""
        self.store.set("/p/b.py", 40)

        for item in (HeaderRow(40, True), "/p/b.py", None):
            self.commands.reset_file(item)
            self.assertIsNone(self.commands.export_file(item))

        self.assertEqual(self.store.get("/p/b.py"), 40)
        self.host.ask_save_path.assert_not_called()
        self.host.notify.assert_not_called()

    def test_export_all_writes_file(self) -> None:
        self.store.set("/p/a.py", 3)
        self.store.set("/p/b.py", 4)
        destination = os.path.join(self.tmpdir.name, "all.json")
        self.host.ask_save_path.return_value = destination

        result = self.commands.export_all()

        self.assertEqual(result, destination)
        self.host.ask_save_path.assert_called_once_with("time-tracker-export.json")
        with open(destination, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"/p/a.py": 3, "/p/b.py": 4})
        self.host.notify.assert_called_once_with("FileTimer", "Time data exported successfully.")

    def test_export_cancelled_is_silent(self) -> None:
        self.store.set("/p/a.py", 3)
        self.host.ask_save_path.return_value = None

        self.assertIsNone(self.commands.export_all())
        self.assertIsNone(self.commands.export_file(FileRow("/p/a.py", 3)))

        self.host.notify.assert_not_called()
        written = [name for name in os.listdir(self.tmpdir.name) if name.endswith(".json")]
        self.assertEqual(written, [])

    def test_export_file_writes_single_entry(self) -> None:
        self.store.set("/p/a.py", 3)
        self.store.set("/p/b.py", 4)
        destination = os.path.join(self.tmpdir.name, "b.json")
        self.host.ask_save_path.return_value = destination

        self.commands.export_file(FileRow("/p/b.py", 4))

        self.host.ask_save_path.assert_called_once_with("b.py-time.json")
        with open(destination, encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"/p/b.py": 4})
        self.host.notify.assert_called_once_with("FileTimer", "Exported time for b.py")

    def test_toggle_sort_refreshes(self) -> None:
        self.commands.toggle_sort()

        self.assertFalse(self.presenter.sort_descending)
        self.host.refresh_views.assert_called_once()

    def test_show_times_refreshes(self) -> None:
        self.commands.show_times()

        self.host.refresh_views.assert_called_once()

    def test_show_chart_passes_top_rows(self) -> None:
        for n in range(1, 8):
            self.store.set(f"/f{n}", n)

        with patch.object(settings, "chart_top_files", 5):
            rows = self.commands.show_chart()

        self.assertEqual([r.seconds for r in rows], [7, 6, 5, 4, 3])
        self.host.show_chart.assert_called_once_with(rows)


if __name__ == "__main__":
    unittest.main()
