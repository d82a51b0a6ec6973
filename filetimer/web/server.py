"""
Flask server exposing tracked times as a read-only JSON API.

The default store is opened read-only: the server never creates the
database, and views answer 404 until the tracker has written it.
"""
import argparse
import socket
import sys
from typing import Any, Optional
from flask import Flask
from ..config import DB_PATH, WEB_DEFAULT_PORT
from ..db import TimeStore


def find_free_port(preferred: int = WEB_DEFAULT_PORT) -> int:
    """Try preferred port, fall back if unavailable."""
    for port in (preferred, 8080, 5000):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind(("127.0.0.1", port))
                return port
            except OSError:
                continue
    raise RuntimeError(f"No free port found ({preferred}/8080/5000 busy)")


def create_app(store: Optional[Any] = None) -> Flask:
    """
    Create Flask app serving the time API.

    Args:
        store: TimeStore to read from (defaults to the configured DB, read-only)
    """
    app = Flask(__name__)
    if store is None:
        store = TimeStore(read_only=True)

    from .routes import register_routes
    register_routes(app, store)

    return app


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="FileTimer web API")
    parser.add_argument("--port", type=int, default=WEB_DEFAULT_PORT,
                        help="preferred port (falls back to 8080/5000)")
    args = parser.parse_args(argv)

    print("=== FileTimer Web ===")
    print(f"Python: {sys.executable}")
    print(f"DB path: {DB_PATH}")

    port = find_free_port(args.port)
    print(f"Starting server on http://127.0.0.1:{port} ...", flush=True)
    create_app().run(host="127.0.0.1", port=port, debug=False)


if __name__ == "__main__":
    main()
