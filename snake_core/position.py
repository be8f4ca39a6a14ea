from __future__ import annotations

from enum import Enum
from typing import Dict, NamedTuple, Tuple


class Position(NamedTuple):
    """A grid cell, 0-indexed, x to the right and y downwards."""
    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)

    def in_bounds(self, grid_size: int) -> bool:
        """True if the cell lies inside a grid_size x grid_size board."""
        return 0 <= self.x < grid_size and 0 <= self.y < grid_size


class Direction(str, Enum):
    UP = 'UP'
    DOWN = 'DOWN'
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'

    @classmethod
    def parse(cls, raw: object) -> 'Direction':
        """Accepts a Direction or its name in any case."""
        if isinstance(raw, Direction):
            return raw
        text = str(raw).strip().upper()
        try:
            return cls(text)
        except ValueError as e:
            raise ValueError(f'invalid direction: {raw!r}') from e

    @property
    def vector(self) -> Tuple[int, int]:
        return VECTORS[self]

    @property
    def opposite(self) -> 'Direction':
        return OPPOSITES[self]


VECTORS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
