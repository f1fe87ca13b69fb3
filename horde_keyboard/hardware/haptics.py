"""
Haptic feedback wrapper.

Maps semantic events to vibration patterns and hands them to a backend
callable. Desktop builds have no vibration motor, so the default backend
only logs the pattern; a device build passes its own vibrate function.

Patterns are in milliseconds, alternating on/off, as in HAPTIC_PATTERNS.
"""

from enum import Enum
from typing import Callable, Optional, Sequence

from horde_keyboard.config import HAPTIC_PATTERNS
from horde_keyboard.utils.logger import logger


class HapticKind(Enum):
    """Semantic feedback events."""
    TAP = 'tap'
    PRESS = 'press'
    LONG_PRESS = 'long_press'
    SELECT = 'select'
    ERROR = 'error'
    AMBIENT_ACTIVITY = 'ambient_activity'


VibrateFn = Callable[[Sequence[int]], None]


def log_vibrate(pattern: Sequence[int]) -> None:
    """Default backend: record the pattern in the debug log."""
    logger.haptic(f"vibrate {list(pattern)}")


class HapticNotifier:
    """
    Feedback capability shared by the hive and the horde.

    notify() silently does nothing while disabled.
    """

    def __init__(self, vibrate_fn: Optional[VibrateFn] = None, enabled: bool = True):
        self._vibrate = vibrate_fn or log_vibrate
        self._supported = vibrate_fn is not None
        self._enabled = enabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def supported(self) -> bool:
        """True when a real vibration backend was supplied."""
        return self._supported

    def toggle(self) -> bool:
        """Flip the enabled flag. Returns the new state."""
        self._enabled = not self._enabled
        logger.info(f"Haptics {'enabled' if self._enabled else 'disabled'}", component="HAPTIC")
        return self._enabled

    def notify(self, kind: HapticKind) -> None:
        """Play the pattern for kind."""
        if not self._enabled:
            return
        self._vibrate(pattern_for(kind))


def pattern_for(kind: HapticKind) -> tuple:
    """Vibration pattern (ms) for a feedback kind."""
    return tuple(HAPTIC_PATTERNS[kind.value])
