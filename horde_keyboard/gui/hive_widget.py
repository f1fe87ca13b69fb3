"""
Hive Widget - paints hex tiles and feeds pointer input to the HiveEngine.

Touch input arrives as synthesized mouse events, so mouse handlers cover
both.
"""

import time

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF, pyqtSignal
from PyQt5.QtGui import QPainter, QColor, QPen, QBrush, QFont, QPolygonF

from horde_keyboard.hive.hive_engine import HiveEngine, PointerEventKind
from .theme import COLORS, FONT_FAMILY, FONT_SIZES, tile_colors


class HiveWidget(QWidget):
    """
    Canvas for the hive.

    Emits resized(width, height) so the owner can regenerate both cores
    for the new viewport.
    """

    resized = pyqtSignal(float, float)

    PATH_WIDTH = 2

    def __init__(self, engine: HiveEngine, parent=None):
        super().__init__(parent)
        self._engine = engine
        self._font = QFont(FONT_FAMILY, FONT_SIZES['tile'])
        self.setMouseTracking(False)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

    @property
    def engine(self) -> HiveEngine:
        return self._engine

    def on_frame(self, now: float) -> None:
        """Frame clock hook: drain the long-press timer and repaint."""
        self._engine.tick(now)
        self.update()

    # ─────────────────────────────────────────────────────────────────
    # Pointer Input
    # ─────────────────────────────────────────────────────────────────

    def _forward(self, kind: PointerEventKind, event) -> None:
        pos = event.pos()
        self._engine.handle_pointer_event(kind, (float(pos.x()), float(pos.y())), time.monotonic())
        self.update()
        event.accept()

    def mousePressEvent(self, event):
        if event.button() != Qt.LeftButton:
            return super().mousePressEvent(event)
        self._forward(PointerEventKind.DOWN, event)

    def mouseMoveEvent(self, event):
        if not event.buttons() & Qt.LeftButton:
            return super().mouseMoveEvent(event)
        self._forward(PointerEventKind.MOVE, event)

    def mouseReleaseEvent(self, event):
        if event.button() != Qt.LeftButton:
            return super().mouseReleaseEvent(event)
        self._forward(PointerEventKind.UP, event)

    # ─────────────────────────────────────────────────────────────────
    # Painting
    # ─────────────────────────────────────────────────────────────────

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(COLORS['background_darkest']))
        painter.setFont(self._font)

        for tile in self._engine.tiles:
            fill, stroke, text = tile_colors(tile.is_active, tile.is_seeded)
            polygon = QPolygonF([QPointF(x, y) for x, y in tile.corners()])

            painter.setBrush(QBrush(QColor(fill)))
            painter.setPen(QPen(QColor(stroke), 1))
            painter.drawPolygon(polygon)

            painter.setPen(QColor(text))
            r = tile.radius
            painter.drawText(
                int(tile.x - r), int(tile.y - r), int(2 * r), int(2 * r),
                Qt.AlignCenter, tile.char.upper(),
            )

        path = self._engine.path
        if len(path) > 1:
            painter.setBrush(Qt.NoBrush)
            painter.setPen(QPen(QColor(COLORS['selection_path']), self.PATH_WIDTH))
            points = [QPointF(tile.x, tile.y) for tile in path]
            painter.drawPolyline(QPolygonF(points))

        painter.end()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.resized.emit(float(self.width()), float(self.height()))
