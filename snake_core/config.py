from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .speeds import DEFAULT_SPEED_ID, is_known_speed

DEFAULT_GRID_SIZE = 20


def _env_flag(name: str) -> bool:
    return os.getenv(name, '0').lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    grid_size: int = DEFAULT_GRID_SIZE
    speed_id: str = DEFAULT_SPEED_ID
    debug: bool = False


def load_settings() -> Settings:
    """
    Reads settings from the environment:
    SNAKE_GRID_SIZE (default 20), SNAKE_SPEED (slow/normal/fast), SNAKE_DEBUG=1.
    Unparseable values fall back to the defaults.
    """
    grid_size = DEFAULT_GRID_SIZE
    raw_size = os.getenv('SNAKE_GRID_SIZE')
    if raw_size:
        try:
            grid_size = int(raw_size)
        except ValueError:
            grid_size = DEFAULT_GRID_SIZE
        if grid_size < 3:
            grid_size = DEFAULT_GRID_SIZE
    speed_id = os.getenv('SNAKE_SPEED', DEFAULT_SPEED_ID)
    if not is_known_speed(speed_id):
        speed_id = DEFAULT_SPEED_ID
    return Settings(grid_size=grid_size, speed_id=speed_id, debug=_env_flag('SNAKE_DEBUG'))


def configure_logging(debug: Optional[bool] = None) -> None:
    if debug is None:
        debug = _env_flag('SNAKE_DEBUG')
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
