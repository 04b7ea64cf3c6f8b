import random

import pytest

from snake.config import RIGHT
from snake.game import GameState


class ScriptedRng(random.Random):
    """randrange() replays fixed values; falls back to a seeded stream when empty."""

    def __init__(self, values=()):
        super().__init__(0)
        self.values = list(values)

    def randrange(self, *args, **kwargs):
        if not self.values:
            return super().randrange(*args, **kwargs)
        value = self.values.pop(0)
        assert 0 <= value < args[0]
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def make_state():
    def _make(snake, food, direction=RIGHT, pending=None, grid=(5, 5), rng=None, score=0, **kwargs):
        return GameState(
            snake=list(snake),
            direction=direction,
            pending=direction if pending is None else pending,
            food=food,
            score=score,
            grid_w=grid[0],
            grid_h=grid[1],
            rng=rng if rng is not None else ScriptedRng(),
            **kwargs,
        )
    return _make
