"""
Horde Visualization Overlay
Draws the swarm, its trails and press rings on top of the hive.
"""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QPainter, QColor, QPen, QBrush, QPainterPath, QRadialGradient

from .theme import COLORS


class HordeOverlay(QWidget):
    """
    Transparent overlay widget that draws the horde.

    Mouse events pass through to the hive underneath. Repaints on every
    frame of the horde controller.
    """

    TRAIL_WIDTH = 0.5
    RING_WIDTH = 2
    GLOW_SCALE = 3

    MOTE_COLOR = QColor(COLORS['mote'])
    TRAIL_COLOR = QColor(COLORS['trail'])
    RING_COLOR = QColor(COLORS['press_ring'])

    def __init__(self, parent=None):
        super().__init__(parent)

        self.setAttribute(Qt.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WA_TranslucentBackground)
        self.setStyleSheet("background: transparent;")

        self._controller = None

    def set_horde_controller(self, controller) -> None:
        """Set reference to horde controller and repaint on each frame."""
        self._controller = controller
        if controller:
            controller.frame_advanced.connect(self._on_frame)

    def _on_frame(self, now: float) -> None:
        self.update()

    def paintEvent(self, event):
        """Draw trails, motes, then press rings."""
        if self._controller is None:
            return

        engine = self._controller.engine
        agents = engine.agents
        if not agents:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        # Trails first (behind motes)
        painter.setBrush(Qt.NoBrush)
        for agent in agents:
            if len(agent.trail) < 2:
                continue
            path = QPainterPath()
            points = list(agent.trail)
            path.moveTo(points[0][0], points[0][1])
            for x, y, _ in points[1:]:
                path.lineTo(x, y)

            trail_color = QColor(self.TRAIL_COLOR)
            trail_color.setAlphaF(agent.energy * 0.3)
            painter.setPen(QPen(trail_color, self.TRAIL_WIDTH))
            painter.drawPath(path)

        # Motes
        painter.setPen(Qt.NoPen)
        for agent in agents:
            alpha = 0.3 + agent.energy * 0.7
            size = agent.size * (0.8 + agent.energy * 0.4)
            center = QPointF(agent.x, agent.y)

            body = QColor(self.MOTE_COLOR)
            body.setAlphaF(alpha)
            painter.setBrush(QBrush(body))
            painter.drawEllipse(center, size, size)

            glow_radius = size * self.GLOW_SCALE
            gradient = QRadialGradient(center, glow_radius)
            inner = QColor(self.MOTE_COLOR)
            inner.setAlphaF(alpha * 0.3)
            outer = QColor(self.MOTE_COLOR)
            outer.setAlphaF(0.0)
            gradient.setColorAt(0.0, inner)
            gradient.setColorAt(1.0, outer)
            painter.setBrush(QBrush(gradient))
            painter.drawEllipse(center, glow_radius, glow_radius)

        # Press rings
        painter.setBrush(Qt.NoBrush)
        for ring in engine.press_rings():
            ring_color = QColor(self.RING_COLOR)
            ring_color.setAlphaF(max(0.0, min(1.0, ring.alpha)))
            painter.setPen(QPen(ring_color, self.RING_WIDTH))
            painter.drawEllipse(QPointF(ring.x, ring.y), ring.radius, ring.radius)

        painter.end()

    def resizeEvent(self, event):
        """Handle resize to match parent."""
        super().resizeEvent(event)
        self.update()
