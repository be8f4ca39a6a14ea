from __future__ import annotations

import math
from typing import Iterable, Optional, Set

from .position import Position
from .state import RandomSource


def _check_grid_size(grid_size: int) -> None:
    if grid_size < 1:
        raise ValueError(f'grid size must be positive, got {grid_size}')


def place_food(snake: Iterable[Position], grid_size: int, random_source: RandomSource) -> Optional[Position]:
    """
    Picks a free cell for the next food item, or None if the board is full.
    Random draws are tried first (2 * grid_size**2 of them); if all of them land
    on the snake, the board is scanned row by row and the first free cell wins.
    """
    _check_grid_size(grid_size)
    segments = list(snake)
    max_cells = grid_size * grid_size
    if len(segments) >= max_cells:
        return None

    occupied: Set[Position] = set(segments)

    for _ in range(max_cells * 2):
        x = math.floor(random_source() * grid_size)
        y = math.floor(random_source() * grid_size)
        candidate = Position(x, y)
        if candidate not in occupied:
            return candidate

    for y in range(grid_size):
        for x in range(grid_size):
            candidate = Position(x, y)
            if candidate not in occupied:
                return candidate
    return None
