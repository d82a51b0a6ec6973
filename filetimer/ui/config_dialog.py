"""Configuration dialog for user settings."""
from PyQt5.QtWidgets import (
    QDialog, QVBoxLayout, QFormLayout, QSpinBox, QCheckBox,
    QDialogButtonBox, QLabel, QWidget
)
from PyQt5.QtCore import Qt
from typing import Optional
from ..config import Config, settings


class ConfigDialog(QDialog):
    """Dialog for configuring FileTimer settings."""

    def __init__(self, parent: Optional[QWidget] = None, config: Optional[Config] = None) -> None:
        super().__init__(parent)
        self.config = config if config is not None else settings
        self.setWindowTitle("FileTimer Settings")
        self.setWindowFlags(self.windowFlags() & ~Qt.WindowContextHelpButtonHint)  # pyright: ignore[reportUnknownMemberType, reportAttributeAccessIssue, reportUnknownArgumentType]
        self.setMinimumWidth(350)

        layout = QVBoxLayout()
        self.setLayout(layout)

        form = QFormLayout()

        # Break reminder
        self.reminder_spin = QSpinBox()
        self.reminder_spin.setMinimum(1)
        self.reminder_spin.setMaximum(240)
        self.reminder_spin.setSuffix(" minutes")
        self.reminder_spin.setValue(self.config.break_reminder_minutes)
        form.addRow("Break reminder after:", self.reminder_spin)

        self.repeat_check = QCheckBox("Repeat while the same file stays active")
        self.repeat_check.setChecked(self.config.repeat_break_reminder)
        form.addRow("", self.repeat_check)

        # Blur behaviour
        self.pause_check = QCheckBox("Pause when no file has focus")
        self.pause_check.setChecked(self.config.pause_on_blur)
        form.addRow("Tracking:", self.pause_check)

        pause_help = QLabel("When off, time keeps counting for the last file")
        pause_help.setStyleSheet("color: gray; font-size: 10px;")
        form.addRow("", pause_help)

        # Chart size
        self.chart_spin = QSpinBox()
        self.chart_spin.setMinimum(1)
        self.chart_spin.setMaximum(20)
        self.chart_spin.setSuffix(" files")
        self.chart_spin.setValue(self.config.chart_top_files)
        form.addRow("Chart shows:", self.chart_spin)

        layout.addLayout(form)
        layout.addSpacing(20)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel  # pyright: ignore[reportArgumentType, reportCallIssue]
        )
        buttons.accepted.connect(self.save_and_close)  # pyright: ignore[reportUnknownMemberType]
        buttons.rejected.connect(self.reject)  # pyright: ignore[reportUnknownMemberType]
        layout.addWidget(buttons)

    def save_and_close(self) -> None:
        """Save settings and close dialog."""
        self.config.break_reminder_minutes = self.reminder_spin.value()
        self.config.repeat_break_reminder = self.repeat_check.isChecked()
        self.config.pause_on_blur = self.pause_check.isChecked()
        self.config.chart_top_files = self.chart_spin.value()
        self.config.save()
        self.accept()
