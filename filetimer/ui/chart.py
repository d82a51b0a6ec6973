"""Top files bar chart widget."""
from PyQt5.QtWidgets import QWidget
from PyQt5.QtGui import QPainter, QColor, QPaintEvent
from PyQt5.QtCore import Qt, QRect
from typing import List
from ..services.presentation_service import FileRow

BAR_HEIGHT = 22
BAR_SPACING = 8
LABEL_WIDTH = 160
VALUE_WIDTH = 64
MARGIN = 10


class TopFilesChart(QWidget):
    """Horizontal bars for the files with the largest totals."""

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("FileTimer - Top Files")
        self.setMinimumWidth(420)
        self.rows: List[FileRow] = []
        self._resize_to_rows()

    def set_rows(self, rows: List[FileRow]) -> None:
        """Replace chart data and repaint."""
        self.rows = list(rows)
        self._resize_to_rows()
        self.update()

    def _resize_to_rows(self) -> None:
        count = max(1, len(self.rows))
        self.setMinimumHeight(2 * MARGIN + count * (BAR_HEIGHT + BAR_SPACING))

    def paintEvent(self, event: QPaintEvent | None = None) -> None:
        """Draw one bar per file scaled to the largest total."""
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor("white"))

        if not self.rows:
            painter.setPen(QColor("gray"))
            painter.drawText(self.rect(), Qt.AlignCenter, "No tracked files yet")
            painter.end()
            return

        largest = max(row.seconds for row in self.rows) or 1
        bar_area = max(1, self.width() - 2 * MARGIN - LABEL_WIDTH - VALUE_WIDTH)

        for index, row in enumerate(self.rows):
            y = MARGIN + index * (BAR_HEIGHT + BAR_SPACING)

            painter.setPen(QColor("black"))
            label_rect = QRect(MARGIN, y, LABEL_WIDTH - 6, BAR_HEIGHT)
            label = painter.fontMetrics().elidedText(row.label, Qt.ElideMiddle, label_rect.width())
            painter.drawText(label_rect, Qt.AlignVCenter | Qt.AlignRight, label)

            w = max(1, int((row.seconds / largest) * bar_area))
            painter.fillRect(MARGIN + LABEL_WIDTH, y, w, BAR_HEIGHT, QColor("#ffc107"))

            value_rect = QRect(MARGIN + LABEL_WIDTH + w + 4, y, VALUE_WIDTH, BAR_HEIGHT)
            painter.drawText(value_rect, Qt.AlignVCenter | Qt.AlignLeft, row.description)

        painter.end()
