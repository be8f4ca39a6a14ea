from typing import Iterable, List


class ScriptedRandom:
    """Random source that replays fixed values and counts how many were drawn."""

    def __init__(self, values: Iterable[float], repeat_last: bool = False):
        self.values: List[float] = list(values)
        self.repeat_last = repeat_last
        self.calls = 0

    def __call__(self) -> float:
        if self.calls < len(self.values):
            v = self.values[self.calls]
        elif self.repeat_last and self.values:
            v = self.values[-1]
        else:
            raise AssertionError('random source exhausted')
        self.calls += 1
        return v


def cell_value(index: int, grid_size: int) -> float:
    """A draw that floors to index on a grid of grid_size."""
    return (index + 0.5) / grid_size


def no_random() -> float:
    raise AssertionError('random source should not be used')
