"""
JSON API routes over the time store.
"""
from flask import Flask, jsonify, request
from typing import Any
from ..config import settings
from ..models import display_name
from ..services.chart_service import top_files
from ..services.export_service import export_all_payload, export_file_payload
from ..services.presentation_service import format_duration


def register_routes(app: Flask, store: Any) -> None:
    """Register time API routes with Flask app."""

    @app.errorhandler(FileNotFoundError)
    def db_missing(e: FileNotFoundError) -> Any:  # pyright: ignore[reportUnusedFunction]
        """Nothing tracked yet: the database has not been created."""
        return jsonify({"error": str(e)}), 404

    @app.route("/api/times")
    def api_times() -> Any:  # pyright: ignore[reportUnusedFunction]
        """Every tracked file with its total seconds (export-all format)."""
        try:
            return jsonify(export_all_payload(store))
        except FileNotFoundError as e:
            return db_missing(e)
        except Exception as e:
            import traceback
            traceback.print_exc()
            return jsonify({"error": str(e)}), 500

    @app.route("/api/times/<path:file_path>")
    def api_file_time(file_path: str) -> Any:  # pyright: ignore[reportUnusedFunction]
        """Single file total (export-one format)."""
        # <path:> drops the leading slash of absolute paths
        if not file_path.startswith("/"):
            file_path = "/" + file_path
        if file_path not in store.keys():
            return jsonify({"error": f"Unknown file: {file_path}"}), 404
        return jsonify(export_file_payload(store, file_path))

    @app.route("/api/top_files")
    def api_top_files() -> Any:  # pyright: ignore[reportUnusedFunction]
        """Top files by total seconds."""
        try:
            limit = int(request.args.get("limit", str(settings.chart_top_files)))
        except ValueError:
            return jsonify({"error": "Invalid limit"}), 400

        rows = top_files(store.snapshot(), limit)
        return jsonify([
            {
                "file": row.path,
                "name": display_name(row.path),
                "seconds": row.seconds,
                "formatted": format_duration(row.seconds),
            }
            for row in rows
        ])
