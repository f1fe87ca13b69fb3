"""
Central Configuration
All constants, mappings, and settings in one place
"""

import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from horde_keyboard.utils.logger import logger


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


# === HORDE (SWARM) ===
HORDE_INITIAL_AGENTS = 50
HORDE_MIN_AGENTS = 10
HORDE_NEIGHBOR_RADIUS = 50.0
HORDE_MAX_SPEED = 50.0          # units per second
HORDE_TRAIL_LENGTH = 30

# Steering weights: velocity += (sep*2 + align*1 + coh*1) * dt
SEPARATION_WEIGHT = 2.0
ALIGNMENT_WEIGHT = 1.0
COHESION_WEIGHT = 1.0
COHESION_FACTOR = 0.1
JITTER_AMPLITUDE = 0.25         # per-axis velocity noise, scaled by dt
ENERGY_STEP = 0.005             # per-tick energy random walk
DISPERSE_IMPULSE = 5.0

# Initial agent ranges
AGENT_INITIAL_SPEED = 1.0       # vx, vy drawn from [-1, 1)
AGENT_SIZE_MIN = 1.0
AGENT_SIZE_MAX = 4.0

# Press activity (seconds)
PRESS_COOLDOWN_MIN = 2.0
PRESS_COOLDOWN_MAX = 5.0
PRESS_PROBABILITY = 0.005
RANDOM_ACTIVITY_PROBABILITY = 0.01
AMBIENT_HAPTIC_PROBABILITY = 0.3
PRESS_EFFECT_DURATION = 1.0
PRESS_EFFECT_MAX_RADIUS = 20.0

# Chorus mode
CHORUS_INTERVAL = 1.0
CHORUS_FRACTION = 0.3
CHORUS_STAGGER = 0.5
CHORUS_TOLERANCE = 1e-9         # float drift in summed frame deltas

# === HIVE (HEX INPUT) ===
HEX_RADIUS = 25.0
LONG_PRESS_THRESHOLD = 0.5      # seconds

# Left hive: letters
LEFT_CHARS = [
    'q', 'w', 'e', 'r', 't', 'y',
    'a', 's', 'd', 'f', 'g', 'h',
    'z', 'x', 'c', 'v', 'b', 'n',
    '1', '2', '3', '4', '5', '6',
]

# Right hive: letters and symbols
RIGHT_CHARS = [
    'u', 'i', 'o', 'p', '[', ']',
    'j', 'k', 'l', ';', "'", '\\',
    'm', ',', '.', '/', '?', '!',
    '7', '8', '9', '0', '-', '=',
]

# === HAPTICS ===
# Vibration patterns in milliseconds (on, off, on, ...)
HAPTIC_PATTERNS = {
    'tap': (50,),
    'press': (100,),
    'long_press': (100, 50, 100),
    'select': (30, 20, 30, 20, 30),
    'error': (200, 100, 200),
    'ambient_activity': (20,),
}

# === OUTPUT ===
PROMPT = "\n> "

INSTRUCTIONS = [
    "HORDE KEYBOARD ACTIVE",
    "",
    "LEFT HIVE: primary letters",
    "RIGHT HIVE: extended chars",
    "",
    "TAP: single character",
    "LONG PRESS: seed tile",
    "DRAG: select word",
    "",
    "WATCH THE SWARM",
]
INSTRUCTION_LINE_DELAY_MS = 200
INSTRUCTION_START_DELAY_MS = 1000
INSTRUCTION_PROMPT_DELAY_MS = 500

# === GUI ===
FRAME_INTERVAL_MS = 16          # ~60 fps
WINDOW_SIZE = (960, 720)

# Environment variable naming an optional JSON override file
CONFIG_ENV_VAR = "HORDE_KEYBOARD_CONFIG"


@dataclass
class HordeConfig:
    """
    Tunable settings for one session.

    Defaults mirror the module constants; a JSON file may override any
    subset of keys.
    """

    # Swarm
    initial_agents: int = HORDE_INITIAL_AGENTS
    min_agents: int = HORDE_MIN_AGENTS
    neighbor_radius: float = HORDE_NEIGHBOR_RADIUS
    max_speed: float = HORDE_MAX_SPEED
    trail_length: int = HORDE_TRAIL_LENGTH
    press_probability: float = PRESS_PROBABILITY
    random_activity_probability: float = RANDOM_ACTIVITY_PROBABILITY
    chorus_mode: bool = False

    # Hive
    hex_radius: float = HEX_RADIUS
    long_press_threshold: float = LONG_PRESS_THRESHOLD
    left_chars: List[str] = field(default_factory=lambda: list(LEFT_CHARS))
    right_chars: List[str] = field(default_factory=lambda: list(RIGHT_CHARS))

    # Haptics
    haptics_enabled: bool = True

    # Seed (None = fresh random seed each launch)
    seed: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a plain dict."""
        return {
            "initial_agents": self.initial_agents,
            "min_agents": self.min_agents,
            "neighbor_radius": self.neighbor_radius,
            "max_speed": self.max_speed,
            "trail_length": self.trail_length,
            "press_probability": self.press_probability,
            "random_activity_probability": self.random_activity_probability,
            "chorus_mode": self.chorus_mode,
            "hex_radius": self.hex_radius,
            "long_press_threshold": self.long_press_threshold,
            "left_chars": list(self.left_chars),
            "right_chars": list(self.right_chars),
            "haptics_enabled": self.haptics_enabled,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HordeConfig":
        """Build from a dict, falling back to defaults for missing keys."""
        defaults = cls()
        # Accept the older 'num_agents' key
        initial = data.get("initial_agents", data.get("num_agents", defaults.initial_agents))
        seed = data.get("seed", defaults.seed)

        config = cls(
            initial_agents=int(initial),
            min_agents=int(data.get("min_agents", defaults.min_agents)),
            neighbor_radius=float(data.get("neighbor_radius", defaults.neighbor_radius)),
            max_speed=float(data.get("max_speed", defaults.max_speed)),
            trail_length=int(data.get("trail_length", defaults.trail_length)),
            press_probability=float(data.get("press_probability", defaults.press_probability)),
            random_activity_probability=float(
                data.get("random_activity_probability", defaults.random_activity_probability)
            ),
            chorus_mode=bool(data.get("chorus_mode", defaults.chorus_mode)),
            hex_radius=float(data.get("hex_radius", defaults.hex_radius)),
            long_press_threshold=float(
                data.get("long_press_threshold", defaults.long_press_threshold)
            ),
            left_chars=[str(c) for c in data.get("left_chars", defaults.left_chars)],
            right_chars=[str(c) for c in data.get("right_chars", defaults.right_chars)],
            haptics_enabled=bool(data.get("haptics_enabled", defaults.haptics_enabled)),
            seed=None if seed is None else int(seed),
        )
        unknown = set(data) - {f.name for f in fields(cls)} - {"num_agents"}
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}", component="APP")
        return config

    def validate(self) -> "HordeConfig":
        """Raise ConfigError on out-of-range values. Returns self."""
        if self.min_agents < 0:
            raise ConfigError(f"min_agents must be >= 0, got {self.min_agents}")
        if self.initial_agents < self.min_agents:
            raise ConfigError(
                f"initial_agents ({self.initial_agents}) below min_agents ({self.min_agents})"
            )
        if self.neighbor_radius <= 0:
            raise ConfigError(f"neighbor_radius must be > 0, got {self.neighbor_radius}")
        if self.max_speed <= 0:
            raise ConfigError(f"max_speed must be > 0, got {self.max_speed}")
        if self.trail_length < 1:
            raise ConfigError(f"trail_length must be >= 1, got {self.trail_length}")
        for name in ("press_probability", "random_activity_probability"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within [0, 1], got {value}")
        if self.hex_radius <= 0:
            raise ConfigError(f"hex_radius must be > 0, got {self.hex_radius}")
        if self.long_press_threshold < 0:
            raise ConfigError(
                f"long_press_threshold must be >= 0, got {self.long_press_threshold}"
            )
        if not self.left_chars or not self.right_chars:
            raise ConfigError("left_chars and right_chars must be non-empty")
        return self


def load_config(path: Optional[str] = None) -> HordeConfig:
    """
    Load settings from a JSON file.

    path defaults to the HORDE_KEYBOARD_CONFIG environment variable.
    A missing file, or an unreadable one, yields defaults. Out-of-range
    values raise ConfigError.
    """
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if not path:
        return HordeConfig()

    if not os.path.exists(path):
        logger.info(f"No config at {path}, using defaults", component="APP")
        return HordeConfig()

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning(f"Failed to load config {path}, using defaults", component="APP",
                       details=str(e))
        return HordeConfig()

    if not isinstance(data, dict):
        logger.warning(f"Config {path} is not a JSON object, using defaults", component="APP")
        return HordeConfig()

    config = HordeConfig.from_dict(data).validate()
    logger.info(f"Loaded config from {path}", component="APP")
    return config
