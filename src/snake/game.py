# game.py
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging
import random

from .config import CFG, Config, DIRECTIONS, DIRECTION_NAMES, RIGHT
from .grid import Cell, free_cells, in_bounds, is_opposite, render_ascii, step_cell

logger = logging.getLogger(__name__)

# Command accepted by set_direction() alongside the four directions
RESTART = "restart"


class FoodPlacementExhausted(RuntimeError):
    """Raised when no free cell is left for food."""


# ---------- Helpers ----------
def spawn_food(
    snake: Sequence[Cell],
    grid_w: int,
    grid_h: int,
    rng: random.Random,
    max_attempts: Optional[int] = CFG.max_food_attempts,
) -> Cell:
    """
    Pick a food cell not covered by the snake.

    Draws x in [0, grid_w) and y in [0, grid_h) until a free cell comes up.
    After max_attempts misses (None = never give up) one cell is drawn
    uniformly from the remaining free cells instead.
    Raises FoodPlacementExhausted if the snake covers the whole grid.
    """
    occupied = set(snake)
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        fx = rng.randrange(grid_w)
        fy = rng.randrange(grid_h)
        if (fx, fy) not in occupied:
            return (fx, fy)

    free = free_cells(snake, grid_w, grid_h)
    if len(free) == 0:
        raise FoodPlacementExhausted(f"no free cell on a {grid_w}x{grid_h} grid")
    logger.debug("rejection sampling gave up after %d draws, %d free cells left", attempts, len(free))
    fx, fy = free[rng.randrange(len(free))]
    return (int(fx), int(fy))


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Tuple[int, int]     # committed, applied this tick
    pending: Tuple[int, int]       # queued by input, committed at the next tick
    food: Optional[Cell]           # None only once the grid is cleared
    score: int
    grid_w: int
    grid_h: int
    move_timer: float = 0.0        # seconds since the last move
    move_period: float = CFG.move_period
    over: bool = False
    cleared: bool = False          # the snake filled the grid
    max_food_attempts: Optional[int] = CFG.max_food_attempts
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

def new_game_state(
    grid_w: int,
    grid_h: int,
    cfg: Config = CFG,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Fresh session: one-cell snake at the grid center heading right."""
    if grid_w <= 0 or grid_h <= 0:
        raise ValueError(f"grid dimensions must be positive, got {grid_w}x{grid_h}")
    if cfg.move_period <= 0:
        raise ValueError(f"move_period must be positive, got {cfg.move_period}")
    if rng is None:
        rng = random.Random(cfg.seed)

    snake = [(grid_w // 2, grid_h // 2)]
    food = spawn_food(snake, grid_w, grid_h, rng, cfg.max_food_attempts)
    logger.debug("new game on %dx%d grid, food at %s", grid_w, grid_h, food)
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=food,
        score=0,
        grid_w=grid_w,
        grid_h=grid_h,
        move_period=cfg.move_period,
        max_food_attempts=cfg.max_food_attempts,
        rng=rng,
    )

def _end(state: GameState, reason: str) -> None:
    state.over = True
    logger.info("game over (%s), score=%d", reason, state.score)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("final board:\n%s", render_ascii(state))


# ---------- Input / Update ----------
def set_direction(state: GameState, command) -> GameState:
    """
    Apply one input command and return the state the caller should keep.

    - RESTART while the game is over -> a brand-new GameState (same grid).
    - A direction opposite to the committed direction is ignored; any other
      direction becomes the pending one for the next advance().
    - RESTART while playing, or anything unrecognized, is ignored.
    """
    if command == RESTART:
        if not state.over:
            return state
        logger.debug("restart after score=%d", state.score)
        cfg = Config(
            move_period=state.move_period,
            max_food_attempts=state.max_food_attempts,
        )
        return new_game_state(state.grid_w, state.grid_h, cfg, state.rng)

    if command not in DIRECTIONS:
        return state

    # Checked against the committed direction, not the queued one
    if is_opposite(command, state.direction):
        logger.debug(
            "ignored reversal %s while moving %s",
            DIRECTION_NAMES[command], DIRECTION_NAMES[state.direction],
        )
        return state

    state.pending = command
    return state

def advance(state: GameState) -> bool:
    """
    Advance the game by exactly one grid step.
    Returns True if the game is still running afterwards.
    """
    if state.over:
        return False

    # Commit direction once per tick
    state.direction = state.pending
    new_head = step_cell(state.snake[0], state.direction)

    # Wall collision
    if not in_bounds(new_head, state.grid_w, state.grid_h):
        _end(state, "wall")
        return False

    # Self collision, tail included: it has not moved out yet
    if new_head in state.snake:
        _end(state, "self")
        return False

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += 1
        try:
            state.food = spawn_food(
                state.snake, state.grid_w, state.grid_h,
                state.rng, state.max_food_attempts,
            )
        except FoodPlacementExhausted:
            state.food = None
            state.cleared = True
            _end(state, "grid cleared")
            return False
        logger.debug("ate food, score=%d, next food at %s", state.score, state.food)
    else:
        state.snake.pop()
    return True

def update(state: GameState, dt: float) -> bool:
    """
    Feed one frame's elapsed time (seconds) into the move timer.
    Moves at most once per call; returns True if a move was attempted.
    """
    state.move_timer += dt
    if state.move_timer <= state.move_period:
        return False

    # Fixed reset: surplus time beyond the period is dropped
    state.move_timer = 0.0
    advance(state)
    return True
