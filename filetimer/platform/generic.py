"""Generic X11 fallback implementation."""
from typing import Optional, Tuple
from .base import PlatformBase


class GenericPlatform(PlatformBase):
    """Fallback for unknown desktop environments."""

    WINDOW_COMMANDS = {
        "get_id": ["xdotool", "getactivewindow"],
        "get_class": ["xdotool", "getwindowclassname"],
        "get_title": ["xdotool", "getwindowname"]
    }

    @property
    def name(self) -> str:
        return "Generic"

    @property
    def supports_window_tracking(self) -> bool:
        return self._is_x11() and self._check_command("xdotool")

    def get_active_window_info(self) -> Optional[Tuple[str, str]]:
        """Only works with xdotool on X11."""
        if not self._is_x11():
            return None
        return self._xdotool_window_info()
