"""
Horde Keyboard

Hex-tile virtual keyboard with a decorative flocking swarm.
"""

__version__ = "0.1.0"
