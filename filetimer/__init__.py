"""FileTimer: per-file active time tracking in the system tray."""

__version__ = "1.0.0"
