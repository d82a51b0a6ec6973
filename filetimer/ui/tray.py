"""Main system tray application: status indicator and command menu."""
from typing import List, Optional
from PyQt5.QtWidgets import QSystemTrayIcon, QMenu, QAction, QApplication, QFileDialog
from PyQt5.QtGui import QIcon, QPainter, QColor, QPixmap, QCursor
from PyQt5.QtCore import QTimer, Qt, QRect
from .panel import TimesPanel
from .chart import TopFilesChart
from . import config_dialog
from ..config import FOCUS_POLL_INTERVAL_MS, settings, log, debug_log
from ..db import TimeStore
from ..events import Event, EventContext, SessionChangedContext, event_bus
from ..platform import get_platform
from ..services.command_service import CommandService
from ..services.notification_service import NotificationService
from ..services.presentation_service import FileRow, PresentationService
from ..services.tracker_service import TrackerController

ICON_NORMAL = "chronometer"
STATUS_COLOR = "#ffc107"


def create_colored_icon(icon_name: str, color: QColor) -> QIcon:
    """Creates a colored version of a theme icon."""
    pixmap = QPixmap(16, 16)
    pixmap.fill(Qt.transparent)

    original_icon = QIcon.fromTheme(icon_name)
    painter = QPainter(pixmap)
    original_icon.paint(painter, QRect(0, 0, 16, 16))

    painter.setCompositionMode(QPainter.CompositionMode_SourceIn)
    painter.fillRect(pixmap.rect(), color)
    painter.end()

    return QIcon(pixmap)


class TrayApp:
    """
    Main system tray application.

    Hosts the tracker: a 1 Hz QTimer drives ticks, a second QTimer polls
    the focused window for a file path, and the tray menu exposes the
    panel, sort, reset, export and chart commands.
    """

    def __init__(self, store: Optional[TimeStore] = None) -> None:
        self.store = store if store is not None else TimeStore()
        self.presenter = PresentationService(self.store)
        self.platform = get_platform()

        self.tray_icon = QSystemTrayIcon()
        self.icon_tracking = create_colored_icon(ICON_NORMAL, QColor(STATUS_COLOR))
        self.icon_idle = create_colored_icon(ICON_NORMAL, QColor("gray"))
        self.tray_icon.setIcon(self.icon_idle)
        self.tray_icon.setToolTip("FileTimer")

        self.notifications = NotificationService(fallback=self._show_balloon)

        self.tick_timer = QTimer()
        self.controller = TrackerController(
            self.store, self.tick_timer,
            notify=self.notify,
            rules=settings.tracker_rules(),
        )
        self.tick_timer.timeout.connect(self.controller.tick)  # pyright: ignore[reportGeneralTypeIssues]

        self.commands = CommandService(self.controller, self.store, self.presenter, self)
        self.panel = TimesPanel(self.presenter, self.commands)
        self.chart = TopFilesChart()

        self.create_context_menu()
        self.tray_icon.activated.connect(self.on_tray_activated)  # pyright: ignore[reportGeneralTypeIssues]

        event_bus.subscribe(Event.SESSION_CHANGED, self._on_session_changed)

        if not self.platform.supports_window_tracking:
            print(f"Warning: window tracking unavailable on {self.platform.name}")

        self.focus_timer = QTimer()
        self.focus_timer.timeout.connect(self.poll_focus)  # pyright: ignore[reportGeneralTypeIssues]
        self.focus_timer.start(FOCUS_POLL_INTERVAL_MS)

        self.poll_focus()
        self.update_status()
        self.tray_icon.show()
        log("filetimer_start")

    def create_context_menu(self) -> None:
        """Create the tray menu with a status line and the commands."""
        self.menu = QMenu()

        self.status_action: QAction = self.menu.addAction("")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        self.status_action.setEnabled(False)
        self.menu.addSeparator()

        show_action: QAction = self.menu.addAction("Show Times")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        show_action.triggered.connect(self.show_panel)
        sort_action: QAction = self.menu.addAction("Toggle Sort Order")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        sort_action.triggered.connect(self.commands.toggle_sort)
        chart_action: QAction = self.menu.addAction("Top Files Chart")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        chart_action.triggered.connect(self.commands.show_chart)
        self.menu.addSeparator()

        reset_action: QAction = self.menu.addAction("Reset Current File")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        reset_action.triggered.connect(self.commands.reset_current)
        export_action: QAction = self.menu.addAction("Export Times...")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        export_action.triggered.connect(self.commands.export_all)
        self.menu.addSeparator()

        settings_action: QAction = self.menu.addAction("Settings...")  # pyright: ignore[reportUnknownMemberType, reportAssignmentType]
        settings_action.triggered.connect(self.open_settings)

        exit_action: QAction = self.menu.addAction("Exit")  # type: ignore[reportUnknownMemberType, reportAssignmentType]
        exit_action.triggered.connect(self.quit_app)

        self.tray_icon.setContextMenu(self.menu)

    # --- Focus and status ---

    def poll_focus(self) -> None:
        """Translate the focused window into a FocusChanged message."""
        path = self.platform.get_active_file()
        debug_log(f"focus poll: {path}")
        self.controller.focus_changed(path)

    def _on_session_changed(self, ctx: EventContext) -> None:
        if isinstance(ctx, SessionChangedContext):
            self.update_status()

    def update_status(self) -> None:
        """Update tray icon, tooltip and status line from tracker state."""
        state = self.controller.state
        text = self.presenter.status_text(state)
        self.status_action.setText(text)
        self.tray_icon.setIcon(self.icon_tracking if state.is_tracking else self.icon_idle)
        self.tray_icon.setToolTip(f"{text}\n{self.presenter.status_tooltip(state)}")

    # --- Host interface used by CommandService ---

    def ask_save_path(self, default_name: str) -> Optional[str]:
        """Native save dialog filtered to JSON; None when cancelled."""
        path, _ = QFileDialog.getSaveFileName(None, "Export Times", default_name, "JSON (*.json)")
        return path or None

    def notify(self, title: str, message: str) -> None:
        self.notifications.notify(title, message)

    def _show_balloon(self, title: str, message: str) -> None:
        self.tray_icon.showMessage(title, message, self.icon_tracking, 5000)

    def refresh_views(self) -> None:
        if self.panel.isVisible():
            self.panel.refresh()
        self.update_status()

    def show_chart(self, rows: List[FileRow]) -> None:
        self.chart.set_rows(rows)
        self.chart.show()
        self.chart.activateWindow()

    # --- Window handling ---

    def show_panel(self) -> None:
        self.commands.show_times()
        self.panel.show()
        self.panel.activateWindow()

    def on_tray_activated(self, reason: QSystemTrayIcon.ActivationReason) -> None:
        """Handle tray icon activation."""
        if reason == QSystemTrayIcon.ActivationReason.Trigger:
            if self.panel.isVisible():
                self.panel.hide()
            else:
                self.show_panel()
        elif reason == QSystemTrayIcon.ActivationReason.Context:
            self.menu.popup(QCursor.pos())

    def open_settings(self) -> None:
        """Open settings dialog and apply the new tracker rules."""
        dialog = config_dialog.ConfigDialog()
        if dialog.exec_():
            settings.reload()
            self.controller.rules = settings.tracker_rules()

    def shutdown(self) -> None:
        """Stop timers; every tick is already persisted."""
        self.focus_timer.stop()
        self.controller.shutdown()
        log("filetimer_stop")

    def quit_app(self) -> None:
        """Quit the application (shutdown runs from aboutToQuit)."""
        self.tray_icon.hide()
        app_instance = QApplication.instance()
        if app_instance:
            app_instance.quit()
