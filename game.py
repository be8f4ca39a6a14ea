from __future__ import annotations

# Facade module that re-exports the snake core.
# The Flask app and tests import from here; single-responsibility modules
# live under snake_core/*.

# Prefer relative imports when loaded as part of a package, then the top-level package.
try:
    from .snake_core.position import Direction, Position, VECTORS, OPPOSITES  # type: ignore
    from .snake_core.state import GameState, MoveOutcome, Result, RandomSource  # type: ignore
    from .snake_core.food import place_food  # type: ignore
    from .snake_core.moves import (  # type: ignore
        INITIAL_LENGTH,
        create_initial_state,
        is_opposite_direction,
        move_snake,
    )
    from .snake_core.speeds import SPEEDS, DEFAULT_SPEED_ID, Speed, is_known_speed, tick_interval_ms  # type: ignore
    from .snake_core.driver import (  # type: ignore
        KEY_BINDINGS,
        change_direction,
        dispatch,
        key_to_action,
        restart,
        set_speed,
        tick,
        toggle_pause,
    )
    from .snake_core.render import render_ascii, status_line  # type: ignore
except ImportError:
    from snake_core.position import Direction, Position, VECTORS, OPPOSITES  # type: ignore
    from snake_core.state import GameState, MoveOutcome, Result, RandomSource  # type: ignore
    from snake_core.food import place_food  # type: ignore
    from snake_core.moves import (  # type: ignore
        INITIAL_LENGTH,
        create_initial_state,
        is_opposite_direction,
        move_snake,
    )
    from snake_core.speeds import SPEEDS, DEFAULT_SPEED_ID, Speed, is_known_speed, tick_interval_ms  # type: ignore
    from snake_core.driver import (  # type: ignore
        KEY_BINDINGS,
        change_direction,
        dispatch,
        key_to_action,
        restart,
        set_speed,
        tick,
        toggle_pause,
    )
    from snake_core.render import render_ascii, status_line  # type: ignore


def main() -> None:
    # CLI driver delegated to snake_core.cli
    try:
        from .snake_core.cli import main as _main  # type: ignore
    except ImportError:
        from snake_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
