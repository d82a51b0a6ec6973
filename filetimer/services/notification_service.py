"""Desktop notification service."""
from typing import Callable, Optional

ICON_INFO = "dialog-information"


class NotificationService:
    """Sends freedesktop notifications, falling back to a host callback."""

    def __init__(self, fallback: Optional[Callable[[str, str], None]] = None) -> None:
        self.fallback = fallback

    def notify(self, title: str, message: str, icon: str = ICON_INFO,
               timeout: int = 5000) -> bool:
        """
        Send desktop notification.

        Args:
            title: Notification title
            message: Notification message
            icon: Icon name (theme icon)
            timeout: Timeout in ms (0 = no timeout)

        Returns:
            True if DBus notification succeeded, False otherwise
        """
        if self._notify_dbus(title, message, icon, timeout):
            return True
        if self.fallback:
            self.fallback(title, message)
        return False

    def _notify_dbus(self, title: str, message: str, icon: str, timeout: int) -> bool:
        try:
            import dbus  # type: ignore[import-untyped]

            bus = dbus.SessionBus()  # type: ignore[reportUnknownMemberType]
            obj = bus.get_object("org.freedesktop.Notifications",  # type: ignore[reportUnknownMemberType]
                                 "/org/freedesktop/Notifications")
            interface = dbus.Interface(obj, "org.freedesktop.Notifications")  # type: ignore[reportUnknownMemberType]
            interface.Notify("FileTimer", 0, icon, title, message,  # type: ignore[reportUnknownMemberType]
                             [], {}, timeout)
            return True
        except Exception as e:
            print(f"DBus notification failed: {e}")
            return False
