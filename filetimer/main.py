#!/usr/bin/env python3
"""
Main entrypoint for the FileTimer tray application.
"""
import sys
from PyQt5.QtWidgets import QApplication
from .ui.tray import TrayApp
from .db import ensure_db_exists


def main() -> int:
    # Ensure DB schema exists before launching UI
    ensure_db_exists()

    app = QApplication(sys.argv)

    # Keep running in the tray when the panel or chart window closes
    app.setQuitOnLastWindowClosed(False)

    tray = TrayApp()
    app.aboutToQuit.connect(tray.shutdown)

    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
