"""
Hex tessellation for the hive.

Tiles sit on an offset (brick) grid: column stride 0.75 * 2r, row stride
r * sqrt(3), odd rows shifted right by 0.375 * 2r. Tiles left of the
midline draw from the left character set, the rest from the right set.

Character assignment uses one running index over every generated tile,
not one per hive, so the right hive's first character depends on how
many tiles precede it. The resulting key order is part of the layout
and must not change.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence


@dataclass(eq=False)
class HexTile:
    """One input tile. Position and char are fixed until the next layout pass."""
    x: float
    y: float
    radius: float
    char: str
    is_left_hive: bool
    row: int
    col: int
    is_active: bool = False
    is_seeded: bool = False
    seed_time: float = 0.0

    def contains(self, x: float, y: float) -> bool:
        """Circular hit test against the tile radius."""
        return math.hypot(x - self.x, y - self.y) <= self.radius

    def corners(self) -> List[tuple]:
        """Six vertices, flat-topped, starting at angle 0."""
        return [
            (self.x + self.radius * math.cos(i * math.pi / 3),
             self.y + self.radius * math.sin(i * math.pi / 3))
            for i in range(6)
        ]


def grid_dimensions(width: float, height: float, radius: float) -> tuple:
    """(rows, cols) that fit the canvas. Either may be zero."""
    hex_width = radius * 2
    hex_height = radius * math.sqrt(3)
    cols = int(math.floor(width / (hex_width * 0.75)))
    rows = int(math.floor(height / hex_height)) - 1
    return max(0, rows), max(0, cols)


def generate_tiles(width: float, height: float, radius: float,
                   left_chars: Sequence[str], right_chars: Sequence[str]) -> List[HexTile]:
    """
    Lay out the hive for a canvas of width x height.

    Tiles are returned in generation order (row-major), which is also
    the hit-test priority order.
    """
    if radius <= 0 or not left_chars or not right_chars:
        return []

    hex_width = radius * 2
    hex_height = radius * math.sqrt(3)
    rows, cols = grid_dimensions(width, height, radius)

    start_x = (width - cols * hex_width * 0.75) / 2
    start_y = hex_height / 2

    tiles = []
    char_index = 0
    for row in range(rows):
        for col in range(cols):
            offset_x = (row % 2) * (hex_width * 0.375)
            x = start_x + col * (hex_width * 0.75) + offset_x
            y = start_y + row * hex_height

            is_left = x < width / 2
            chars = left_chars if is_left else right_chars

            tiles.append(HexTile(
                x=x,
                y=y,
                radius=radius,
                char=chars[char_index % len(chars)],
                is_left_hive=is_left,
                row=row,
                col=col,
            ))
            char_index += 1
    return tiles


def tile_at(tiles: Iterable[HexTile], x: float, y: float) -> Optional[HexTile]:
    """First tile (in generation order) whose hit circle contains (x, y)."""
    for tile in tiles:
        if tile.contains(x, y):
            return tile
    return None
