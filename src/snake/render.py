# render.py
from typing import Tuple
import pygame # type: ignore

from .config import BG, CELL_SIZE, DARK_GREEN, GREEN, RED, TEXT
from .game import GameState

# ---------- Helpers ----------
def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int], cell_size: int = CELL_SIZE) -> None:
    rect = pygame.Rect(gx * cell_size, gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int = CELL_SIZE) -> None:
    """Read-only: draws the board and score, never touches the state."""
    screen.fill(BG)
    # food
    if state.food is not None:
        draw_cell(screen, state.food[0], state.food[1], RED, cell_size)
    # snake, head brighter
    for x, y in state.snake[1:]:
        draw_cell(screen, x, y, DARK_GREEN, cell_size)
    hx, hy = state.snake[0]
    draw_cell(screen, hx, hy, GREEN, cell_size)
    # score
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (10, 10))

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    width, height = screen.get_size()

    # Dim with translucent overlay
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    headline = "Grid cleared!" if state.cleared else "Game Over!"
    title = font.render(headline, True, TEXT)
    sub   = font.render("Press R to Restart", True, TEXT)
    sco   = font.render(f"Score: {state.score}", True, TEXT)

    tx = title.get_rect(center=(width // 2, height // 2 - 16))
    sx = sub.get_rect(center=(width // 2, height // 2 + 16))
    cx = sco.get_rect(center=(width // 2, height // 2 + 44))

    screen.blit(title, tx)
    screen.blit(sub, sx)
    screen.blit(sco, cx)

def draw_frame(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int = CELL_SIZE) -> None:
    draw_game(screen, font, state, cell_size)
    if state.over:
        draw_game_over(screen, font, state)
    pygame.display.flip()
