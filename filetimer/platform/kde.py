"""KDE Plasma platform implementation."""
from typing import Optional, Tuple
from .base import PlatformBase


class KDEPlatform(PlatformBase):
    """KDE Plasma-specific implementation (kdotool on Wayland, xdotool on X11)."""

    KDOTOOL_COMMANDS = {
        "get_id": ["kdotool", "getactivewindow"],
        "get_class": ["kdotool", "getwindowclassname"],
        "get_title": ["kdotool", "getwindowname"]
    }
    XDOTOOL_COMMANDS = {
        "get_id": ["xdotool", "getactivewindow"],
        "get_class": ["xdotool", "getwindowclassname"],
        "get_title": ["xdotool", "getwindowname"]
    }

    def __init__(self) -> None:
        if self._check_command("kdotool"):
            self.WINDOW_COMMANDS = self.KDOTOOL_COMMANDS
        else:
            self.WINDOW_COMMANDS = self.XDOTOOL_COMMANDS

    @property
    def name(self) -> str:
        return "KDE Plasma"

    @property
    def supports_window_tracking(self) -> bool:
        return self._check_command(self.WINDOW_COMMANDS["get_id"][0])  # pyright: ignore[reportOptionalSubscript]

    def get_active_window_info(self) -> Optional[Tuple[str, str]]:
        return self._xdotool_window_info()
