from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional, Tuple

from .position import Direction, Position
from .speeds import DEFAULT_SPEED_ID

Snake = Tuple[Position, ...]  # head first
RandomSource = Callable[[], float]  # uniform values in [0, 1)


class Result(str, Enum):
    PLAYING = 'playing'
    WON = 'won'
    LOST = 'lost'


@dataclass(frozen=True)
class GameState:
    """Everything a front-end needs to render and advance one game."""
    snake: Snake
    direction: Direction
    food: Optional[Position]
    score: int = 0
    running: bool = True
    game_over: bool = False
    result: Result = Result.PLAYING
    speed_id: str = DEFAULT_SPEED_ID

    @property
    def head(self) -> Position:
        return self.snake[0]

    def with_changes(self, **changes) -> 'GameState':
        return replace(self, **changes)


@dataclass(frozen=True)
class MoveOutcome:
    """Result of a single tick, merged into the GameState by the driver."""
    snake: Snake
    food: Optional[Position]
    did_eat: bool
    game_over: bool
    result: Result
