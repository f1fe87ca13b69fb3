"""
Application context - owns one instance of every core component.

Built once at start-up and handed to whatever runs the event loop
(the Qt main frame, or a test). Nothing here touches Qt.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from horde_keyboard.config import HordeConfig
from horde_keyboard.hardware.haptics import HapticKind, HapticNotifier, VibrateFn
from horde_keyboard.hive.hive_engine import HiveEngine
from horde_keyboard.horde.horde_engine import HordeEngine
from horde_keyboard.output.output_buffer import OutputBuffer
from horde_keyboard.utils.logger import logger
from horde_keyboard.utils.rng import generate_random_seed


@dataclass
class AppContext:
    config: HordeConfig
    seed: int
    haptics: HapticNotifier
    output: OutputBuffer
    hive: HiveEngine
    horde: HordeEngine

    @classmethod
    def build(cls, width: float, height: float,
              config: Optional[HordeConfig] = None,
              vibrate_fn: Optional[VibrateFn] = None) -> "AppContext":
        """Create and wire every component for a width x height surface."""
        config = config or HordeConfig()
        seed = config.seed if config.seed is not None else generate_random_seed()

        haptics = HapticNotifier(vibrate_fn, enabled=config.haptics_enabled)
        output = OutputBuffer()
        hive = HiveEngine(width, height, output, haptics=haptics, config=config)
        horde = HordeEngine(width, height, config=config, haptics=haptics)
        horde.initialize(seed)

        logger.info(f"Horde Keyboard initialized (seed {seed}, {len(hive.tiles)} tiles, "
                    f"{horde.agent_count} agents)", component="APP")
        return cls(config=config, seed=seed, haptics=haptics, output=output,
                   hive=hive, horde=horde)

    def resize(self, width: float, height: float) -> None:
        """Propagate a viewport change to both cores."""
        self.hive.resize(width, height)
        self.horde.resize(width, height)

    # === Control surface ===

    def toggle_haptics(self) -> bool:
        return self.haptics.toggle()

    def toggle_chorus_mode(self) -> bool:
        return self.horde.toggle_chorus_mode()

    def clear_output(self) -> None:
        self.output.clear()

    def backspace(self) -> None:
        self.output.backspace()
        self.haptics.notify(HapticKind.TAP)

    def space(self) -> None:
        self.output.append_space()
        self.haptics.notify(HapticKind.TAP)

    def new_line(self) -> None:
        self.output.new_line()
        self.haptics.notify(HapticKind.PRESS)

    def add_text(self, text: str) -> None:
        self.output.append_raw(text)

    def get_state(self) -> Dict[str, Any]:
        """Snapshot for debugging and the status bar."""
        return {
            "haptics_enabled": self.haptics.enabled,
            "chorus_mode": self.horde.chorus_mode,
            "agent_count": self.horde.agent_count,
            "current_text": self.output.get_text(),
        }
