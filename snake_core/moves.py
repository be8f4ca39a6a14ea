from __future__ import annotations

from typing import List, Set

from .food import place_food
from .position import Direction, Position
from .speeds import DEFAULT_SPEED_ID
from .state import GameState, MoveOutcome, RandomSource, Result

INITIAL_LENGTH = 3


def create_initial_state(grid_size: int, random_source: RandomSource) -> GameState:
    """Builds a fresh game: a 3-cell snake centred on the board, heading right."""
    if grid_size < INITIAL_LENGTH:
        raise ValueError(f'grid size must be at least {INITIAL_LENGTH}, got {grid_size}')
    center = grid_size // 2
    snake = (
        Position(center + 1, center),
        Position(center, center),
        Position(center - 1, center),
    )
    return GameState(
        snake=snake,
        direction=Direction.RIGHT,
        food=place_food(snake, grid_size, random_source),
        score=0,
        running=True,
        game_over=False,
        result=Result.PLAYING,
        speed_id=DEFAULT_SPEED_ID,
    )


def is_opposite_direction(current: Direction, candidate: Direction) -> bool:
    """True if candidate would reverse the snake onto its own neck."""
    return current.opposite == candidate


def _lost(state: GameState) -> MoveOutcome:
    return MoveOutcome(snake=state.snake, food=state.food, did_eat=False, game_over=True, result=Result.LOST)


def move_snake(state: GameState, grid_size: int, random_source: RandomSource) -> MoveOutcome:
    """
    Advances the snake one cell in its current direction.
    The tail cell only counts as body when the snake is about to grow: without
    food, the tail moves away on the same tick the head arrives.
    """
    dx, dy = state.direction.vector
    next_head = state.head.shifted(dx, dy)

    if not next_head.in_bounds(grid_size):
        return _lost(state)

    will_eat = state.food is not None and next_head == state.food

    body = state.snake if will_eat else state.snake[:-1]
    blocked: Set[Position] = set(body)
    if next_head in blocked:
        return _lost(state)

    next_snake: List[Position] = [next_head, *state.snake]
    if not will_eat:
        next_snake.pop()
    grown = tuple(next_snake)

    next_food = place_food(grown, grid_size, random_source) if will_eat else state.food

    if will_eat and next_food is None:
        return MoveOutcome(snake=grown, food=None, did_eat=True, game_over=True, result=Result.WON)

    return MoveOutcome(snake=grown, food=next_food, did_eat=will_eat, game_over=False, result=Result.PLAYING)
