"""Tracked files panel window."""
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QTreeWidget, QTreeWidgetItem, QMenu
)
from PyQt5.QtGui import QFont, QShowEvent
from PyQt5.QtCore import Qt, QPoint
from typing import Any, Optional
from ..events import Event, EventContext, event_bus


class TimesPanel(QWidget):
    """
    Sortable list of tracked files.

    The first row is the grand total with the sort direction arrow; the
    remaining rows come from PresentationService.panel_rows(). Each tree
    item carries its FileRow/HeaderRow under Qt.UserRole so context-menu
    commands receive the row object.
    """

    def __init__(self, presenter: Any, commands: Any) -> None:
        super().__init__()
        self.presenter = presenter
        self.commands = commands

        self.setWindowTitle("FileTimer")
        self.setMinimumWidth(420)
        self.setMinimumHeight(320)

        self.main_layout = QVBoxLayout()
        self.main_layout.setContentsMargins(8, 8, 8, 8)
        self.setLayout(self.main_layout)

        self.tree = QTreeWidget()
        self.tree.setColumnCount(2)
        self.tree.setHeaderLabels(["File", "Time"])
        self.tree.setRootIsDecorated(False)
        self.tree.setContextMenuPolicy(Qt.CustomContextMenu)
        self.tree.customContextMenuRequested.connect(self.show_item_menu)
        self.main_layout.addWidget(self.tree)

        buttons = QHBoxLayout()
        refresh_button = QPushButton("Refresh")
        refresh_button.clicked.connect(self.commands.show_times)
        sort_button = QPushButton("Toggle Sort")
        sort_button.clicked.connect(self.commands.toggle_sort)
        export_button = QPushButton("Export All...")
        export_button.clicked.connect(self.commands.export_all)
        chart_button = QPushButton("Top 5 Chart")
        chart_button.clicked.connect(self.commands.show_chart)
        for button in (refresh_button, sort_button, export_button, chart_button):
            buttons.addWidget(button)
        self.main_layout.addLayout(buttons)

        event_bus.subscribe(Event.TIMES_CHANGED, self._on_times_changed)

    def _on_times_changed(self, ctx: EventContext) -> None:
        if self.isVisible():
            self.refresh()

    def refresh(self) -> None:
        """Rebuild rows from a fresh store snapshot."""
        header, rows = self.presenter.panel_rows()

        self.tree.clear()

        header_item = QTreeWidgetItem([header.label, ""])
        header_item.setToolTip(0, header.tooltip)
        font = QFont()
        font.setBold(True)
        header_item.setFont(0, font)
        header_item.setData(0, Qt.UserRole, header)
        self.tree.addTopLevelItem(header_item)

        for row in rows:
            item = QTreeWidgetItem([row.label, row.description])
            item.setToolTip(0, row.tooltip)
            item.setToolTip(1, row.tooltip)
            item.setData(0, Qt.UserRole, row)
            self.tree.addTopLevelItem(item)

        self.tree.resizeColumnToContents(0)

    def _row_at(self, pos: QPoint) -> Optional[Any]:
        item = self.tree.itemAt(pos)
        if item is None:
            return None
        return item.data(0, Qt.UserRole)

    def show_item_menu(self, pos: QPoint) -> None:
        """Reset/export actions for the row under the cursor."""
        row = self._row_at(pos)
        if row is None:
            return

        menu = QMenu(self)
        reset_action = menu.addAction("Reset Time")
        export_action = menu.addAction("Export Time...")
        chosen = menu.exec_(self.tree.viewport().mapToGlobal(pos))

        # Header rows fall through the commands' FileRow guard
        if chosen is reset_action:
            self.commands.reset_file(row)
        elif chosen is export_action:
            self.commands.export_file(row)

    def showEvent(self, a0: QShowEvent | None) -> None:
        self.refresh()
        super().showEvent(a0)
