from __future__ import annotations

from typing import List

from .position import Position
from .state import GameState, Result

HEAD = 'H'
BODY = 'o'
FOOD = '*'
EMPTY = '.'


def render_ascii(state: GameState, grid_size: int) -> str:
    """Draws the board one row per line: H head, o body, * food, . empty."""
    body = set(state.snake[1:])
    lines: List[str] = []
    for y in range(grid_size):
        row: List[str] = []
        for x in range(grid_size):
            cell = Position(x, y)
            if cell == state.head:
                row.append(HEAD)
            elif cell in body:
                row.append(BODY)
            elif cell == state.food:
                row.append(FOOD)
            else:
                row.append(EMPTY)
        lines.append(''.join(row))
    return '\n'.join(lines)


def status_line(state: GameState) -> str:
    if state.game_over:
        verdict = 'You win!' if state.result == Result.WON else 'Game over.'
        return f'Score: {state.score}  {verdict}'
    if not state.running:
        return f'Score: {state.score}  (paused)'
    return f'Score: {state.score}'
