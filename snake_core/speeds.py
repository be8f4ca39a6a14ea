from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Speed:
    id: str
    label: str
    ms: int


SPEEDS: Tuple[Speed, ...] = (
    Speed('slow', 'Slow', 200),
    Speed('normal', 'Normal', 140),
    Speed('fast', 'Fast', 90),
)
DEFAULT_SPEED_ID = 'normal'

_BY_ID: Dict[str, Speed] = {s.id: s for s in SPEEDS}


def is_known_speed(speed_id: str) -> bool:
    return speed_id in _BY_ID


def tick_interval_ms(speed_id: str) -> int:
    """Tick period for a preset; unknown ids fall back to the default preset."""
    speed = _BY_ID.get(speed_id) or _BY_ID[DEFAULT_SPEED_ID]
    return speed.ms
