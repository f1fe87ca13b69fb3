"""
Horde Engine - Flocking Simulation for the Decorative Swarm

Motes drift over the keyboard with classic boid steering and
occasionally "press" the surface, leaving an expanding ring.

Key behaviors:
- Configurable agent count with a removal floor
- Classic flocking: separation, alignment, cohesion
- Edge wrap (not bounce)
- Bounded trail history per agent
- Random press activity with per-agent cooldown
- Chorus mode: periodic staggered bursts across a random subset

Time is simulation time in seconds, advanced by update(dt).
"""

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, NamedTuple, Optional, Tuple

from horde_keyboard.config import (
    HordeConfig,
    SEPARATION_WEIGHT,
    ALIGNMENT_WEIGHT,
    COHESION_WEIGHT,
    COHESION_FACTOR,
    JITTER_AMPLITUDE,
    ENERGY_STEP,
    DISPERSE_IMPULSE,
    AGENT_INITIAL_SPEED,
    AGENT_SIZE_MIN,
    AGENT_SIZE_MAX,
    PRESS_COOLDOWN_MIN,
    PRESS_COOLDOWN_MAX,
    AMBIENT_HAPTIC_PROBABILITY,
    PRESS_EFFECT_DURATION,
    PRESS_EFFECT_MAX_RADIUS,
    CHORUS_INTERVAL,
    CHORUS_FRACTION,
    CHORUS_STAGGER,
    CHORUS_TOLERANCE,
)
from horde_keyboard.hardware.haptics import HapticKind, HapticNotifier
from horde_keyboard.utils.rng import XorShift32
from horde_keyboard.utils.scheduler import Scheduler


@dataclass
class PressEffect:
    """Transient ring left where an agent pressed."""
    x: float
    y: float
    intensity: float
    start_time: float


@dataclass(eq=False)
class Agent:
    """Single mote. Compared by identity so removed agents can be detected."""
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    size: float = 1.0
    energy: float = 0.5
    trail: Deque[Tuple[float, float, float]] = field(default_factory=deque)
    last_press: Optional[float] = None
    press_effect: Optional[PressEffect] = None

    @property
    def speed(self) -> float:
        return math.sqrt(self.vx * self.vx + self.vy * self.vy)


class PressRing(NamedTuple):
    """Drawable state of a live press effect."""
    x: float
    y: float
    radius: float
    alpha: float


class HordeEngine:
    """
    Boid flocking simulation for the decorative swarm.

    Call initialize(seed) before update(); an uninitialized engine ignores
    update() and the public swarm operations.
    """

    def __init__(self, width: float = 800.0, height: float = 600.0,
                 config: Optional[HordeConfig] = None,
                 haptics: Optional[HapticNotifier] = None):
        self._config = config or HordeConfig()
        self._width = float(width)
        self._height = float(height)
        self._haptics = haptics

        self._agents: List[Agent] = []
        self._chorus_mode = self._config.chorus_mode
        self._chorus_activity = 0.0
        self._chorus_bursts = 0

        self._now = 0.0
        self._scheduler = Scheduler()

        self._rng: Optional[XorShift32] = None
        self._initialized = False

    def initialize(self, seed: int) -> None:
        """(Re)build the swarm from seed."""
        self._rng = XorShift32(seed)
        self._scheduler.clear()
        self._now = 0.0
        self._chorus_activity = 0.0
        self._chorus_bursts = 0
        self._agents = [self._spawn_agent() for _ in range(self._config.initial_agents)]
        self._initialized = True

    def _spawn_agent(self) -> Agent:
        rng = self._rng
        return Agent(
            x=rng.next_float() * self._width,
            y=rng.next_float() * self._height,
            vx=rng.next_float_range(-AGENT_INITIAL_SPEED, AGENT_INITIAL_SPEED),
            vy=rng.next_float_range(-AGENT_INITIAL_SPEED, AGENT_INITIAL_SPEED),
            size=rng.next_float_range(AGENT_SIZE_MIN, AGENT_SIZE_MAX),
            energy=rng.next_float(),
            trail=deque(maxlen=self._config.trail_length),
        )

    def resize(self, width: float, height: float) -> None:
        """Change the wrap bounds. Agents outside wrap on the next update."""
        self._width = float(width)
        self._height = float(height)

    # === Simulation ===

    def update(self, dt: float) -> None:
        """Advance the swarm by dt seconds."""
        if not self._initialized:
            return
        dt = max(0.0, dt)
        self._now += dt

        # Chorus presses that came due since the last frame
        self._scheduler.run_due(self._now)

        for agent in self._agents:
            self._update_agent(agent, dt)

        if self._chorus_mode:
            self._update_chorus(dt)

        if self._agents and self._rng.chance(self._config.random_activity_probability):
            self.trigger_press(self._rng.choice(self._agents))

        self._expire_press_effects()

    def _update_agent(self, agent: Agent, dt: float) -> None:
        """Apply flocking rules, integrate, and roll for press activity."""
        rng = self._rng
        neighbors = self._neighbors(agent)

        sep_x, sep_y = self._separation(agent, neighbors)
        align_x, align_y = self._alignment(agent, neighbors)
        coh_x, coh_y = self._cohesion(agent, neighbors)

        agent.vx += (sep_x * SEPARATION_WEIGHT + align_x * ALIGNMENT_WEIGHT
                     + coh_x * COHESION_WEIGHT) * dt
        agent.vy += (sep_y * SEPARATION_WEIGHT + align_y * ALIGNMENT_WEIGHT
                     + coh_y * COHESION_WEIGHT) * dt

        agent.vx += rng.next_float_range(-JITTER_AMPLITUDE, JITTER_AMPLITUDE) * dt
        agent.vy += rng.next_float_range(-JITTER_AMPLITUDE, JITTER_AMPLITUDE) * dt

        # Limit speed
        max_speed = self._config.max_speed
        speed = agent.speed
        if speed > max_speed:
            agent.vx = agent.vx / speed * max_speed
            agent.vy = agent.vy / speed * max_speed

        agent.x += agent.vx * dt
        agent.y += agent.vy * dt

        # Wrap around edges
        if agent.x < 0:
            agent.x = self._width
        elif agent.x > self._width:
            agent.x = 0.0
        if agent.y < 0:
            agent.y = self._height
        elif agent.y > self._height:
            agent.y = 0.0

        agent.trail.append((agent.x, agent.y, self._now))

        agent.energy += rng.next_float_range(-ENERGY_STEP, ENERGY_STEP)
        agent.energy = max(0.0, min(1.0, agent.energy))

        # Cooldown is redrawn on every check
        cooldown = rng.next_float_range(PRESS_COOLDOWN_MIN, PRESS_COOLDOWN_MAX)
        if agent.last_press is None or self._now - agent.last_press > cooldown:
            if rng.chance(self._config.press_probability):
                self.trigger_press(agent)

    def _neighbors(self, agent: Agent) -> List[Agent]:
        radius = self._config.neighbor_radius
        result = []
        for other in self._agents:
            if other is agent:
                continue
            dx = other.x - agent.x
            dy = other.y - agent.y
            if math.sqrt(dx * dx + dy * dy) < radius:
                result.append(other)
        return result

    @staticmethod
    def _separation(agent: Agent, neighbors: List[Agent]) -> Tuple[float, float]:
        if not neighbors:
            return 0.0, 0.0
        total_x, total_y = 0.0, 0.0
        for other in neighbors:
            dx = agent.x - other.x
            dy = agent.y - other.y
            dist = math.sqrt(dx * dx + dy * dy)
            if dist > 0:
                total_x += dx / dist
                total_y += dy / dist
        return total_x / len(neighbors), total_y / len(neighbors)

    @staticmethod
    def _alignment(agent: Agent, neighbors: List[Agent]) -> Tuple[float, float]:
        if not neighbors:
            return 0.0, 0.0
        avg_vx = sum(o.vx for o in neighbors) / len(neighbors)
        avg_vy = sum(o.vy for o in neighbors) / len(neighbors)
        return avg_vx - agent.vx, avg_vy - agent.vy

    @staticmethod
    def _cohesion(agent: Agent, neighbors: List[Agent]) -> Tuple[float, float]:
        if not neighbors:
            return 0.0, 0.0
        center_x = sum(o.x for o in neighbors) / len(neighbors)
        center_y = sum(o.y for o in neighbors) / len(neighbors)
        return (center_x - agent.x) * COHESION_FACTOR, (center_y - agent.y) * COHESION_FACTOR

    # === Press activity ===

    def trigger_press(self, agent: Agent) -> None:
        """Start a press effect at the agent's position, replacing any current one."""
        if not self._initialized:
            return
        agent.last_press = self._now
        agent.press_effect = PressEffect(
            x=agent.x,
            y=agent.y,
            intensity=agent.energy,
            start_time=self._now,
        )
        if self._rng.chance(AMBIENT_HAPTIC_PROBABILITY) and self._haptics is not None:
            self._haptics.notify(HapticKind.AMBIENT_ACTIVITY)

    def _update_chorus(self, dt: float) -> None:
        self._chorus_activity += dt
        if self._chorus_activity < CHORUS_INTERVAL - CHORUS_TOLERANCE:
            return
        self._chorus_activity = 0.0
        self._chorus_bursts += 1

        chorus_size = int(len(self._agents) * CHORUS_FRACTION)
        for agent in self._rng.sample(self._agents, chorus_size):
            delay = self._rng.next_float_range(0.0, CHORUS_STAGGER)
            self._scheduler.schedule(self._now + delay,
                                     lambda a=agent: self._chorus_press(a))

    def _chorus_press(self, agent: Agent) -> None:
        # The agent may have been removed while the press was pending
        if agent in self._agents:
            self.trigger_press(agent)

    def _expire_press_effects(self) -> None:
        for agent in self._agents:
            effect = agent.press_effect
            if effect and self._now - effect.start_time > PRESS_EFFECT_DURATION:
                agent.press_effect = None

    def press_rings(self) -> List[PressRing]:
        """
        Drawable rings for live press effects.

        Radius grows linearly 0 -> 20 and alpha fades intensity -> 0 over
        the effect lifetime. Expired effects are cleared.
        """
        rings = []
        for agent in self._agents:
            effect = agent.press_effect
            if effect is None:
                continue
            elapsed = self._now - effect.start_time
            if elapsed > PRESS_EFFECT_DURATION:
                agent.press_effect = None
                continue
            progress = elapsed / PRESS_EFFECT_DURATION
            rings.append(PressRing(
                x=effect.x,
                y=effect.y,
                radius=progress * PRESS_EFFECT_MAX_RADIUS,
                alpha=(1.0 - progress) * effect.intensity,
            ))
        return rings

    # === Public swarm operations ===

    def add_agent(self) -> None:
        """Append one agent with randomized initial state."""
        if not self._initialized:
            return
        self._agents.append(self._spawn_agent())

    def remove_agent(self) -> bool:
        """Drop the newest agent unless at the floor. Returns True if removed."""
        if len(self._agents) <= self._config.min_agents:
            return False
        self._agents.pop()
        return True

    def disperse_swarm(self) -> None:
        """Kick every agent with a random velocity impulse."""
        if not self._initialized:
            return
        for agent in self._agents:
            agent.vx += self._rng.next_float_range(-DISPERSE_IMPULSE, DISPERSE_IMPULSE)
            agent.vy += self._rng.next_float_range(-DISPERSE_IMPULSE, DISPERSE_IMPULSE)

    def toggle_chorus_mode(self) -> bool:
        """Flip chorus mode and reset its timer. Returns the new state."""
        self._chorus_mode = not self._chorus_mode
        self._chorus_activity = 0.0
        return self._chorus_mode

    # === Read-out ===

    @property
    def agents(self) -> List[Agent]:
        return list(self._agents)

    @property
    def agent_count(self) -> int:
        return len(self._agents)

    @property
    def chorus_mode(self) -> bool:
        return self._chorus_mode

    @property
    def chorus_bursts(self) -> int:
        """Number of chorus bursts since initialize()."""
        return self._chorus_bursts

    @property
    def pending_presses(self) -> int:
        """Chorus presses scheduled but not yet fired."""
        return self._scheduler.pending

    @property
    def now(self) -> float:
        return self._now

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def initialized(self) -> bool:
        return self._initialized
