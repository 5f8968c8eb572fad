# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Optional
import random

import numpy as np  # type: ignore
import pygame  # type: ignore

from .config import (
    GRID_SIZE, CELL_SIZE,
    SNAKE_COLOR, FOOD_COLOR, CANVAS_BG,
    UP, DOWN, LEFT, RIGHT,
)

Position = Tuple[int, int]
Direction = Tuple[int, int]

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


class GameStatus(Enum):
    PLAYED = "played"
    PAUSED = "paused"
    LOST = "lost"


# ---------- Helpers ----------
def spawn_food(snake: List[Position], rng: random.Random, grid_size: int = GRID_SIZE) -> Position:
    """Pick a uniformly random free cell by rejection sampling."""
    if len(set(snake)) >= grid_size * grid_size:
        raise ValueError("no free cell left for food")
    while True:
        fx = rng.randrange(grid_size)
        fy = rng.randrange(grid_size)
        if (fx, fy) not in snake:
            return (fx, fy)

def wrap_move(pos: Position, direction: Direction, grid_size: int = GRID_SIZE) -> Position:
    """One cell in `direction`; leaving an edge re-enters on the opposite side."""
    return ((pos[0] + direction[0]) % grid_size, (pos[1] + direction[1]) % grid_size)

def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)

# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Direction
    food: Position
    score: int
    status: GameStatus
    grid_size: int = GRID_SIZE

    @property
    def head(self) -> Position:
        return self.snake[0]

def new_game_state(rng: random.Random, grid_size: int = GRID_SIZE) -> GameState:
    start = (grid_size // 2, grid_size // 2)
    snake = [start]
    return GameState(
        snake=snake,
        direction=RIGHT,
        food=spawn_food(snake, rng, grid_size),
        score=0,
        status=GameStatus.PLAYED,
        grid_size=grid_size,
    )

# ---------- Input / Update / Draw ----------
def set_direction(state: GameState, direction: Direction) -> None:
    # 180° turns are allowed on purpose: with two or more segments the
    # next tick runs into the neck and ends the game.
    state.direction = direction

def step_game(state: GameState, rng: random.Random) -> bool:
    """
    Advance the game by one tick.
    Does nothing unless the game is being played.
    Returns True if the state changed (moved, grew, or was lost).
    """
    if state.status is not GameStatus.PLAYED:
        return False

    new_head = wrap_move(state.head, state.direction, state.grid_size)

    # Self collision, checked against the snake before it moves (tail included)
    if new_head in state.snake:
        state.status = GameStatus.LOST
        return True

    state.snake.insert(0, new_head)

    if new_head == state.food:
        state.score += 1
        if len(state.snake) >= state.grid_size * state.grid_size:
            # Board full: nowhere left to put food
            state.status = GameStatus.LOST
            return True
        state.food = spawn_food(state.snake, rng, state.grid_size)
    else:
        state.snake.pop()
    return True

def draw_cell(surface: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(surface, color, rect)

def draw_board(surface: Optional[pygame.Surface], state: GameState) -> None:
    """Clear the canvas and paint a snapshot of the snake and the food."""
    if surface is None:
        return
    surface.fill(CANVAS_BG)
    for x, y in state.snake:
        draw_cell(surface, x, y, SNAKE_COLOR)
    draw_cell(surface, state.food[0], state.food[1], FOOD_COLOR)

def capture_frame(surface: Optional[pygame.Surface]) -> Optional[np.ndarray]:
    """Copy the canvas pixels into a (width, height, 3) uint8 array."""
    if surface is None:
        return None
    return np.asarray(pygame.surfarray.array3d(surface), dtype=np.uint8)
