from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from .moves import create_initial_state, is_opposite_direction, move_snake
from .position import Direction
from .speeds import is_known_speed
from .state import GameState, RandomSource

logger = logging.getLogger(__name__)

# Arrow keys (as terminals and browsers name them) plus WASD; space pauses.
KEY_BINDINGS: Dict[str, Direction] = {
    'arrowup': Direction.UP,
    'w': Direction.UP,
    'arrowdown': Direction.DOWN,
    's': Direction.DOWN,
    'arrowleft': Direction.LEFT,
    'a': Direction.LEFT,
    'arrowright': Direction.RIGHT,
    'd': Direction.RIGHT,
}
PAUSE_KEY = ' '


def tick(state: GameState, grid_size: int, random_source: RandomSource) -> GameState:
    """Advances a running game by one cell and folds the outcome into the state."""
    if not state.running or state.game_over:
        return state

    outcome = move_snake(state, grid_size, random_source)
    score = state.score + (1 if outcome.did_eat else 0)
    if outcome.game_over:
        logger.info('game over: %s with score %d', outcome.result.value, score)
        return state.with_changes(
            snake=outcome.snake,
            food=outcome.food,
            result=outcome.result,
            running=False,
            game_over=True,
            score=score,
        )

    if outcome.did_eat:
        logger.debug('ate food at %s, next food %s', outcome.snake[0], outcome.food)
    return state.with_changes(
        snake=outcome.snake,
        food=outcome.food,
        result=outcome.result,
        game_over=False,
        score=score,
    )


def change_direction(state: GameState, direction: Direction) -> GameState:
    """Turns the snake unless the request is a 180 degree reversal."""
    if is_opposite_direction(state.direction, direction):
        return state
    return state.with_changes(direction=direction)


def toggle_pause(state: GameState) -> GameState:
    if state.game_over:
        return state
    return state.with_changes(running=not state.running)


def restart(grid_size: int, random_source: RandomSource) -> GameState:
    logger.debug('starting new game on %dx%d grid', grid_size, grid_size)
    return create_initial_state(grid_size, random_source)


def set_speed(state: GameState, speed_id: str) -> GameState:
    if not is_known_speed(speed_id):
        raise ValueError(f'unknown speed: {speed_id!r}')
    return state.with_changes(speed_id=speed_id)


def key_to_action(key: str) -> Optional[Dict[str, Any]]:
    """Maps a key name to a reducer action, or None for unbound keys."""
    if key == PAUSE_KEY:
        return {'type': 'TOGGLE_PAUSE'}
    direction = KEY_BINDINGS.get(key.lower())
    if direction is None:
        return None
    return {'type': 'CHANGE_DIRECTION', 'direction': direction}


def dispatch(state: GameState, action: Mapping[str, Any], grid_size: int, random_source: RandomSource) -> GameState:
    """Reducer entry point; unknown action types leave the state untouched."""
    kind = action.get('type')
    if kind == 'TICK':
        return tick(state, grid_size, random_source)
    if kind == 'CHANGE_DIRECTION':
        return change_direction(state, Direction.parse(action['direction']))
    if kind == 'TOGGLE_PAUSE':
        return toggle_pause(state)
    if kind == 'RESTART':
        return restart(grid_size, random_source)
    if kind == 'SET_SPEED':
        return set_speed(state, str(action['speedId']))
    return state
