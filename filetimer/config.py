import os
import json
import datetime
from typing import Any, Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from .services.tracker_service import TrackerRules

DB_PATH: str = os.path.expanduser(os.environ.get("FILETIMER_DB", "~/.local/share/filetimer.db"))
TICK_INTERVAL_MS: int = 1000
FOCUS_POLL_INTERVAL_MS: int = 1000
WEB_DEFAULT_PORT: int = 5055

# Default save-dialog names for reports
EXPORT_ALL_FILENAME: str = "time-tracker-export.json"
EXPORT_FILE_SUFFIX: str = "-time.json"

# User configuration file path
USER_CONFIG_PATH: str = os.path.expanduser("~/.config/filetimer/settings.json")

# Debug mode - logs detailed tracking information
DEBUG_MODE: bool = os.environ.get("FILETIMER_DEBUG", "0") == "1"
DEBUG_LOG_PATH: str = os.path.expanduser("~/.local/share/filetimer_debug.log")


def debug_log(message: str) -> None:
    """Write debug message to log file if debug mode is enabled."""
    if DEBUG_MODE:
        timestamp = datetime.datetime.now().isoformat(timespec='milliseconds')
        with open(DEBUG_LOG_PATH, 'a') as f:
            f.write(f"[{timestamp}] {message}\n")


def log(message: str) -> None:
    """Print a timestamped lifecycle message."""
    print(f"[{datetime.datetime.now().isoformat(timespec='seconds')}] {message}")


# --- Dynamic Configuration Class ---

class Config:
    """
    Manages dynamic application settings loaded from the user's JSON file.

    This class holds settings that can be reloaded at runtime.
    """
    DEFAULT_BREAK_REMINDER_MINUTES: int = 25
    DEFAULT_REPEAT_BREAK_REMINDER: bool = False
    DEFAULT_PAUSE_ON_BLUR: bool = True
    DEFAULT_CHART_TOP_FILES: int = 5

    def __init__(self, config_path: str = USER_CONFIG_PATH):
        self.config_path = config_path
        self._user_config: Dict[str, Any] = {}

        self.break_reminder_minutes: int = self.DEFAULT_BREAK_REMINDER_MINUTES
        self.repeat_break_reminder: bool = self.DEFAULT_REPEAT_BREAK_REMINDER
        self.pause_on_blur: bool = self.DEFAULT_PAUSE_ON_BLUR
        self.chart_top_files: int = self.DEFAULT_CHART_TOP_FILES

        self.reload()

    def _load_user_config(self) -> Dict[str, Any]:
        """Load user configuration from file."""
        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                print(f"Ignoring settings file {self.config_path}: not a JSON object")
            except (json.JSONDecodeError, IOError) as e:
                print(f"Ignoring unreadable settings file {self.config_path}: {e}")
        return {}

    def reload(self) -> None:
        """
        Reload configuration from disk, updating this object's attributes.
        """
        self._user_config = self._load_user_config()

        self.break_reminder_minutes = self._int_setting(
            'break_reminder_minutes', self.DEFAULT_BREAK_REMINDER_MINUTES
        )
        self.repeat_break_reminder = self._bool_setting(
            'repeat_break_reminder', self.DEFAULT_REPEAT_BREAK_REMINDER
        )
        self.pause_on_blur = self._bool_setting(
            'pause_on_blur', self.DEFAULT_PAUSE_ON_BLUR
        )
        self.chart_top_files = self._int_setting(
            'chart_top_files', self.DEFAULT_CHART_TOP_FILES
        )

    def _int_setting(self, key: str, default: int) -> int:
        """Integer value for key, or default if missing or not a number."""
        value = self._user_config.get(key, default)
        if isinstance(value, bool):
            print(f"Ignoring setting {key}={value!r}: expected a number")
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            print(f"Ignoring setting {key}={value!r}: expected a number")
            return default

    def _bool_setting(self, key: str, default: bool) -> bool:
        """Boolean value for key; only JSON true/false are accepted."""
        value = self._user_config.get(key, default)
        if not isinstance(value, bool):
            print(f"Ignoring setting {key}={value!r}: expected true or false")
            return default
        return value

    def save(self) -> None:
        """Write the current values back to the settings file."""
        os.makedirs(os.path.dirname(self.config_path), exist_ok=True)
        with open(self.config_path, 'w') as f:
            json.dump(self.as_dict(), f, indent=2)

    def as_dict(self) -> Dict[str, Any]:
        return {
            'break_reminder_minutes': self.break_reminder_minutes,
            'repeat_break_reminder': self.repeat_break_reminder,
            'pause_on_blur': self.pause_on_blur,
            'chart_top_files': self.chart_top_files,
        }

    def tracker_rules(self) -> 'TrackerRules':
        """Build the tracker rules from the current settings."""
        from .services.tracker_service import TrackerRules
        return TrackerRules(
            reminder_seconds=self.break_reminder_minutes * 60,
            repeat_reminder=self.repeat_break_reminder,
            pause_on_blur=self.pause_on_blur,
        )


# --- Singleton Instance ---
settings = Config()
