"""
Horde Controller - Drives the swarm from the display frame clock

Connects:
- HordeEngine (simulation physics)
- QTimer frame clock (~60Hz)
- UI signals for redraw and status

The frame delta is wall-clock time since the previous frame; the first
frame after start() has a delta of zero.
"""

import time
from typing import Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from horde_keyboard.config import FRAME_INTERVAL_MS
from horde_keyboard.utils.logger import logger
from .horde_engine import HordeEngine


class HordeController(QObject):
    """
    Controller for the decorative swarm.

    Owns the frame timer. frame_advanced carries the monotonic timestamp
    of the frame so other frame-driven components share one clock.
    """

    frame_advanced = pyqtSignal(float)   # monotonic seconds
    agent_count_changed = pyqtSignal(int)
    chorus_mode_changed = pyqtSignal(bool)

    def __init__(self, engine: HordeEngine, parent=None):
        super().__init__(parent)

        self._engine = engine
        self._last_time: Optional[float] = None
        self._frame_count = 0

        self._timer = QTimer(self)
        self._timer.setInterval(FRAME_INTERVAL_MS)
        self._timer.timeout.connect(self._on_timer)

    @property
    def engine(self) -> HordeEngine:
        """Access to engine for visualization."""
        return self._engine

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    # === Lifecycle ===

    def start(self) -> None:
        """Start the frame clock."""
        if self._timer.isActive():
            return
        self._last_time = None
        self._timer.start()
        logger.info(f"Horde running with {self._engine.agent_count} agents", component="HORDE")

    def stop(self) -> None:
        """Stop the frame clock."""
        if not self._timer.isActive():
            return
        self._timer.stop()
        self._last_time = None
        logger.info("Horde stopped", component="HORDE")

    def _on_timer(self) -> None:
        self.advance_frame(time.monotonic())

    def advance_frame(self, now: float) -> None:
        """Run one update for the frame at monotonic time now."""
        dt = 0.0 if self._last_time is None else max(0.0, now - self._last_time)
        self._last_time = now
        self._frame_count += 1

        self._engine.update(dt)

        # Debug: periodic swarm summary (~every 10s at 60fps)
        if self._frame_count % 600 == 0:
            logger.horde(f"frame {self._frame_count}: {self._engine.agent_count} agents, "
                         f"chorus={'on' if self._engine.chorus_mode else 'off'}")

        self.frame_advanced.emit(now)

    # === Swarm operations ===

    def add_agent(self) -> None:
        self._engine.add_agent()
        logger.info(f"Agent added, total: {self._engine.agent_count}", component="HORDE")
        self.agent_count_changed.emit(self._engine.agent_count)

    def remove_agent(self) -> None:
        if self._engine.remove_agent():
            logger.info(f"Agent removed, total: {self._engine.agent_count}", component="HORDE")
            self.agent_count_changed.emit(self._engine.agent_count)
        else:
            logger.horde(f"Remove ignored at floor ({self._engine.agent_count})")

    def disperse_swarm(self) -> None:
        self._engine.disperse_swarm()
        logger.info("Swarm dispersed", component="HORDE")

    def toggle_chorus_mode(self) -> bool:
        enabled = self._engine.toggle_chorus_mode()
        logger.info(f"Chorus mode: {'on' if enabled else 'off'}", component="HORDE")
        self.chorus_mode_changed.emit(enabled)
        return enabled
