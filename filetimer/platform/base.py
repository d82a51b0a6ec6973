"""Base platform abstraction."""
import os
import re
import subprocess
from abc import ABC, abstractmethod
from typing import Optional, Tuple, Dict, List

# Start of an absolute POSIX path or ~/ path embedded in a window title
_PATH_START = re.compile(r"(?<![\w.\-])~?/")
TITLE_SEPARATOR = " - "
_TRAILING = ".,;:)]}'\""


def extract_file_path(window_title: str) -> Optional[str]:
    """
    Find an existing file path in a window title.

    Editors commonly put the full path in the title ("main.py - /home/u/proj/main.py",
    "/etc/hosts (~) - VIM"). From each path start, the candidate is extended
    across space-separated words up to the next " - " separator, so
    directories with spaces in their names are found; the longest candidate
    that is an existing file wins. Trailing punctuation such as ':' or ')'
    is stripped.

    Returns:
        Absolute normalized path of the first existing regular file, or None
    """
    for match in _PATH_START.finditer(window_title):
        segment = window_title[match.start():].split(TITLE_SEPARATOR, 1)[0]
        words = segment.split(" ")
        found: Optional[str] = None
        for end in range(1, len(words) + 1):
            candidate = os.path.expanduser(" ".join(words[:end]).rstrip(_TRAILING))
            if candidate and os.path.isfile(candidate):
                found = candidate
        if found:
            return os.path.normpath(os.path.abspath(found))
    return None


class PlatformBase(ABC):
    """Abstract base for platform-specific window queries."""

    WINDOW_COMMANDS: Optional[Dict[str, List[str]]] = None

    @abstractmethod
    def get_active_window_info(self) -> Optional[Tuple[str, str]]:
        """Return (app_name, window_title) of the focused window."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Platform name for logging."""
        pass

    @property
    @abstractmethod
    def supports_window_tracking(self) -> bool:
        """Whether platform supports window tracking."""
        pass

    def get_active_file(self) -> Optional[str]:
        """Path of the file shown in the focused window, if any."""
        info = self.get_active_window_info()
        if info is None:
            return None
        _, window_title = info
        return extract_file_path(window_title)

    # Shared helpers
    def _check_command(self, cmd: str) -> bool:
        """Check if command exists."""
        try:
            subprocess.run(["which", cmd], capture_output=True, check=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def _xdotool_window_info(self) -> Optional[Tuple[str, str]]:
        """Query class and title of the active window via WINDOW_COMMANDS."""
        if not self.WINDOW_COMMANDS:
            return None
        try:
            window_id = subprocess.check_output(
                self.WINDOW_COMMANDS["get_id"],
                stderr=subprocess.DEVNULL
            ).decode().strip()

            app_name = subprocess.check_output(
                self.WINDOW_COMMANDS["get_class"] + [window_id],
                stderr=subprocess.DEVNULL
            ).decode().strip()

            window_title = subprocess.check_output(
                self.WINDOW_COMMANDS["get_title"] + [window_id],
                stderr=subprocess.DEVNULL
            ).decode().strip()

            return (app_name, window_title)
        except (subprocess.CalledProcessError, FileNotFoundError):
            return None

    def _is_x11(self) -> bool:
        """Check if running on X11."""
        session_type = os.environ.get("XDG_SESSION_TYPE", "").lower()
        return session_type == "x11" or os.environ.get("DISPLAY") is not None
