"""Unit tests for the Flask time API."""
import os
import tempfile
import unittest
from unittest.mock import patch
from filetimer.config import settings
from filetimer.db import TimeStore
from filetimer.events import EventBus
from filetimer.web.server import create_app


class TestWebRoutes(unittest.TestCase):
    """Test JSON views against a temporary store."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.store = TimeStore(os.path.join(self.tmpdir.name, "times.db"), bus=EventBus())
        for n in range(1, 8):
            self.store.set(f"/home/u/f{n}.py", n * 60)
        self.client = create_app(self.store).test_client()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_all_times(self) -> None:
        response = self.client.get("/api/times")

        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(len(data), 7)
        self.assertEqual(data["/home/u/f3.py"], 180)

    def test_single_file(self) -> None:
        response = self.client.get("/api/times/home/u/f2.py")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"/home/u/f2.py": 120})

    def test_unknown_file_is_404(self) -> None:
        response = self.client.get("/api/times/home/u/missing.py")

        self.assertEqual(response.status_code, 404)
        self.assertIn("error", response.get_json())

    def test_top_files_default_limit(self) -> None:
        with patch.object(settings, "chart_top_files", 5):
            response = self.client.get("/api/top_files")

        data = response.get_json()
        self.assertEqual([d["seconds"] for d in data], [420, 360, 300, 240, 180])
        self.assertEqual(data[0], {
            "file": "/home/u/f7.py",
            "name": "f7.py",
            "seconds": 420,
            "formatted": "07:00",
        })

    def test_top_files_limit_param(self) -> None:
        response = self.client.get("/api/top_files?limit=2")

        self.assertEqual(len(response.get_json()), 2)

    def test_top_files_bad_limit(self) -> None:
        response = self.client.get("/api/top_files?limit=abc")

        self.assertEqual(response.status_code, 400)


class TestWebWithoutDatabase(unittest.TestCase):
    """The API never creates the database on its own."""

    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.db_path = os.path.join(self.tmpdir.name, "missing", "times.db")
        store = TimeStore(self.db_path, bus=EventBus(), read_only=True)
        self.client = create_app(store).test_client()

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_missing_db_is_404(self) -> None:
        for url in ("/api/times", "/api/times/home/u/a.py", "/api/top_files"):
            response = self.client.get(url)

            self.assertEqual(response.status_code, 404, url)
            self.assertIn("error", response.get_json())

        self.assertFalse(os.path.exists(self.db_path))

    def test_default_store_is_read_only(self) -> None:
        with patch("filetimer.web.server.TimeStore") as mock_store:
            create_app()

        mock_store.assert_called_once_with(read_only=True)


if __name__ == "__main__":
    unittest.main()
