"""
Horde - Decorative Flocking Swarm

Motes drift over the keyboard with boid steering, leave trails,
and occasionally flash a press ring. Chorus mode adds staggered bursts.
"""

from .horde_engine import HordeEngine, Agent, PressEffect, PressRing

__all__ = [
    'HordeEngine',
    'Agent',
    'PressEffect',
    'PressRing',
]
