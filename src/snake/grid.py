# grid.py
from typing import Iterable, Optional, Tuple

import numpy as np  # type: ignore

Cell = Tuple[int, int]

# Occupancy codes used by occupancy()
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3

_ASCII = {EMPTY: ".", BODY: "o", HEAD: "H", FOOD: "*"}


# ---------- Geometry ----------
def in_bounds(cell: Cell, grid_w: int, grid_h: int) -> bool:
    x, y = cell
    return 0 <= x < grid_w and 0 <= y < grid_h

def step_cell(cell: Cell, direction: Tuple[int, int]) -> Cell:
    """Translate a cell one unit along a (dx, dy) direction."""
    return (cell[0] + direction[0], cell[1] + direction[1])

def is_opposite(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


# ---------- Board views ----------
def occupancy(
    snake: Iterable[Cell],
    grid_w: int,
    grid_h: int,
    food: Optional[Cell] = None,
) -> np.ndarray:
    """
    Return a (grid_h, grid_w) int8 board indexed as [y, x].
    Cells hold EMPTY / BODY / HEAD / FOOD. The head is the first snake cell.
    """
    board = np.zeros((grid_h, grid_w), dtype=np.int8)
    cells = list(snake)
    if cells:
        xs, ys = zip(*cells)
        board[list(ys), list(xs)] = BODY
        hx, hy = cells[0]
        board[hy, hx] = HEAD
    if food is not None:
        fx, fy = food
        board[fy, fx] = FOOD
    return board

def free_cells(snake: Iterable[Cell], grid_w: int, grid_h: int) -> np.ndarray:
    """All cells not covered by the snake, as an (n, 2) array of (x, y) rows."""
    board = occupancy(snake, grid_w, grid_h)
    ys, xs = np.nonzero(board == EMPTY)
    return np.stack([xs, ys], axis=1)

def render_ascii(state) -> str:
    """
    Text view of a game state: '.' empty, 'o' body, 'H' head, '*' food.
    One line per grid row, newline-terminated.
    """
    board = occupancy(state.snake, state.grid_w, state.grid_h, state.food)
    lines = ["".join(_ASCII[int(v)] for v in row) for row in board]
    return "\n".join(lines) + "\n"
