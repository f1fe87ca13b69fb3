"""
Hive Engine - gesture state machine for hex tile input

One gesture session at a time, driven by handle_pointer_event():

    IDLE --down on tile--> PRESSED
    PRESSED --hold >= threshold--> SEEDED      (tile seeded, nothing typed)
    PRESSED/SEEDED --move onto another tile--> DRAGGING
    any --up--> IDLE

On release:
- DRAGGING: the path's characters are committed as one word plus a space
- otherwise: the anchor's character is committed unless the anchor is seeded

The long-press timeout lives in a Scheduler drained by tick(now) and at
the start of every pointer event, so it fires on time whichever arrives
first.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from horde_keyboard.config import HordeConfig
from horde_keyboard.hardware.haptics import HapticKind, HapticNotifier
from horde_keyboard.output.output_buffer import OutputBuffer
from horde_keyboard.utils.logger import logger
from horde_keyboard.utils.scheduler import Scheduler
from .tessellation import HexTile, generate_tiles, tile_at


class GestureState(Enum):
    """Gesture session states."""
    IDLE = auto()
    PRESSED = auto()
    SEEDED = auto()
    DRAGGING = auto()


class PointerEventKind(Enum):
    """Pointer event types (mouse and touch share these)."""
    DOWN = auto()
    MOVE = auto()
    UP = auto()


@dataclass
class GestureSession:
    """Live press: anchor tile, visited path (anchor first), timer token."""
    anchor: HexTile
    press_start: float
    state: GestureState = GestureState.PRESSED
    path: List[HexTile] = field(default_factory=list)
    long_press_token: Optional[int] = None

    @property
    def is_selecting(self) -> bool:
        return self.state == GestureState.DRAGGING

    def held_for(self, now: float) -> float:
        """Seconds since the press began."""
        return max(0.0, now - self.press_start)


class HiveEngine:
    """
    Hex tile input engine.

    Owns the tessellation and the gesture session. Commits text to the
    output buffer and reports feedback to the haptic notifier.
    """

    def __init__(self, width: float, height: float, output: OutputBuffer,
                 haptics: Optional[HapticNotifier] = None,
                 config: Optional[HordeConfig] = None):
        self._config = config or HordeConfig()
        self._output = output
        self._haptics = haptics

        self._width = float(width)
        self._height = float(height)
        self._tiles: List[HexTile] = []

        self._session: Optional[GestureSession] = None
        self._scheduler = Scheduler()
        self._now = 0.0

        self._generate()

    # === Layout ===

    def _generate(self) -> None:
        self._tiles = generate_tiles(
            self._width,
            self._height,
            self._config.hex_radius,
            self._config.left_chars,
            self._config.right_chars,
        )

    def resize(self, width: float, height: float) -> None:
        """Regenerate the tessellation. Drops any gesture in progress."""
        self._width = float(width)
        self._height = float(height)
        self._discard_session()
        self._generate()
        logger.hive(f"layout {int(width)}x{int(height)}: {len(self._tiles)} tiles")

    def tile_at(self, x: float, y: float) -> Optional[HexTile]:
        return tile_at(self._tiles, x, y)

    # === Clock ===

    def tick(self, now: float) -> None:
        """Fire any deferred actions due at or before now."""
        self._now = max(self._now, now)
        self._scheduler.run_due(now)

    # === Pointer input ===

    def handle_pointer_event(self, kind: PointerEventKind,
                             position: Tuple[float, float], timestamp: float) -> None:
        """Single entry point for mouse/touch input."""
        self.tick(timestamp)
        x, y = position

        if kind == PointerEventKind.DOWN:
            self._on_down(x, y, timestamp)
        elif kind == PointerEventKind.MOVE:
            self._on_move(x, y)
        elif kind == PointerEventKind.UP:
            self._on_up(timestamp)

    def _on_down(self, x: float, y: float, timestamp: float) -> None:
        tile = self.tile_at(x, y)
        if tile is None:
            return

        if self._session is not None:
            self._discard_session()

        session = GestureSession(anchor=tile, press_start=timestamp, path=[tile])
        tile.is_active = True
        session.long_press_token = self._scheduler.schedule(
            session.press_start + self._config.long_press_threshold,
            lambda s=session: self._on_long_press(s),
        )
        self._session = session
        self._notify(HapticKind.TAP)

    def _on_long_press(self, session: GestureSession) -> None:
        if self._session is not session:
            return
        session.long_press_token = None

        tile = session.anchor
        if not tile.is_seeded:
            tile.is_seeded = True
            tile.seed_time = self._now
            self._notify(HapticKind.LONG_PRESS)
            logger.hive(f"seeded '{tile.char}' at ({tile.row}, {tile.col})")

        if session.state == GestureState.PRESSED:
            session.state = GestureState.SEEDED

    def _on_move(self, x: float, y: float) -> None:
        session = self._session
        if session is None:
            return

        tile = self.tile_at(x, y)
        if tile is None or tile is session.anchor:
            return

        if session.state != GestureState.DRAGGING:
            session.state = GestureState.DRAGGING
            self._notify(HapticKind.PRESS)

        if tile not in session.path:
            session.path.append(tile)
            tile.is_active = True
            self._notify(HapticKind.TAP)

    def _on_up(self, timestamp: float) -> None:
        session = self._session
        if session is None:
            return
        logger.hive(f"release after {session.held_for(timestamp):.2f}s in {session.state.name}")

        if session.is_selecting:
            word = "".join(tile.char for tile in session.path)
            self._output.append_character(word)
            self._output.append_space()
            self._notify(HapticKind.SELECT)
            logger.hive(f"committed word '{word}'")
        elif not session.anchor.is_seeded:
            self._output.append_character(session.anchor.char)
            self._notify(HapticKind.TAP)

        self._discard_session()

    def _discard_session(self) -> None:
        """Cancel the long-press timer and clear every transient active flag."""
        session = self._session
        if session is not None and session.long_press_token is not None:
            self._scheduler.cancel(session.long_press_token)
        for tile in self._tiles:
            tile.is_active = False
        self._session = None

    def _notify(self, kind: HapticKind) -> None:
        if self._haptics is not None:
            self._haptics.notify(kind)

    # === Read-out ===

    @property
    def tiles(self) -> List[HexTile]:
        return list(self._tiles)

    @property
    def state(self) -> GestureState:
        return self._session.state if self._session else GestureState.IDLE

    @property
    def path(self) -> List[HexTile]:
        return list(self._session.path) if self._session else []

    @property
    def session(self) -> Optional[GestureSession]:
        return self._session

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height
