"""
Hive - Hexagonal Tile Input

Two character hives on one offset hex grid. Tap types a character,
long-press seeds a tile, drag across tiles types a word.
"""

from .tessellation import HexTile, generate_tiles, tile_at
from .hive_engine import HiveEngine, GestureState, GestureSession, PointerEventKind

__all__ = [
    'HexTile',
    'generate_tiles',
    'tile_at',
    'HiveEngine',
    'GestureState',
    'GestureSession',
    'PointerEventKind',
]
