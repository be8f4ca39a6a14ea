from __future__ import annotations

import argparse
import random
from typing import Callable, Optional, Sequence

from .config import configure_logging, load_settings
from .driver import dispatch, key_to_action, restart
from .render import render_ascii, status_line
from .speeds import SPEEDS, tick_interval_ms
from .state import GameState, RandomSource

NO_INPUT = '.'


def _show(state: GameState, grid_size: int, out: Callable[[str], None]) -> None:
    out(render_ascii(state, grid_size))
    out(status_line(state))


def _apply_key(state: GameState, key: str, grid_size: int, rng: RandomSource) -> GameState:
    action = key_to_action(key)
    if action is None:
        return state
    return dispatch(state, action, grid_size, rng)


def run_script(
    state: GameState,
    keys: str,
    grid_size: int,
    rng: RandomSource,
    out: Callable[[str], None] = print,
    show_every: bool = False,
) -> GameState:
    """
    Plays one tick per character of keys. A key is applied before its tick;
    '.' means no input for that tick. Stops early on a terminal result.
    """
    for key in keys:
        if key != NO_INPUT:
            state = _apply_key(state, key, grid_size, rng)
        state = dispatch(state, {'type': 'TICK'}, grid_size, rng)
        if show_every:
            _show(state, grid_size, out)
        if state.game_over:
            break
    return state


def run_interactive(
    state: GameState,
    grid_size: int,
    rng: RandomSource,
    read: Callable[[str], str] = input,
    out: Callable[[str], None] = print,
) -> GameState:
    """Reads one line per tick: w/a/s/d to turn, p to pause, r restart, q quit."""
    _show(state, grid_size, out)
    while True:
        key = read('> ').strip().lower()[:1]
        if key == 'q':
            return state
        if key == 'r':
            state = restart(grid_size, rng)
        elif key == 'p':
            state = _apply_key(state, ' ', grid_size, rng)
        elif key:
            state = _apply_key(state, key, grid_size, rng)
        state = dispatch(state, {'type': 'TICK'}, grid_size, rng)
        _show(state, grid_size, out)
        if state.game_over:
            return state


def build_parser() -> argparse.ArgumentParser:
    settings = load_settings()
    parser = argparse.ArgumentParser(description='Terminal snake')
    parser.add_argument('--size', type=int, default=settings.grid_size, help='Grid size (NxN), at least 3')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for food placement')
    parser.add_argument('--speed', choices=[s.id for s in SPEEDS], default=settings.speed_id, help='Tick speed preset')
    parser.add_argument('--moves', default=None, help="Scripted keys, one per tick (w/a/s/d, '.' for none)")
    parser.add_argument('--play', action='store_true', help='Play interactively, one line of input per tick')
    parser.add_argument('--show-steps', action='store_true', help='Print the board after every scripted tick')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(True if args.debug else None)
    if args.size < 3:
        raise SystemExit('error: --size must be at least 3')

    rng = random.Random(args.seed).random
    state = restart(args.size, rng)
    state = dispatch(state, {'type': 'SET_SPEED', 'speedId': args.speed}, args.size, rng)

    if args.play:
        print(f'Speed: {args.speed} ({tick_interval_ms(args.speed)} ms per tick)')
        run_interactive(state, args.size, rng)
        return

    if args.moves is None:
        print('Initial board:')
        _show(state, args.size, print)
        return

    final = run_script(state, args.moves, args.size, rng, show_every=args.show_steps)
    if not args.show_steps:
        _show(final, args.size, print)
    print(f'Result: {final.result.value}')


if __name__ == '__main__':
    main()
