# src/snake/__init__.py
"""Grid snake: game-state core plus a thin pygame host."""

from .game import (
    RESTART,
    FoodPlacementExhausted,
    GameState,
    advance,
    new_game_state,
    set_direction,
    spawn_food,
    update,
)

__all__ = [
    "RESTART",
    "FoodPlacementExhausted",
    "GameState",
    "advance",
    "new_game_state",
    "set_direction",
    "spawn_food",
    "update",
]
