import pygame  # type: ignore

from snake.config import CELL_SIZE, CANVAS_SIZE, SNAKE_COLOR, FOOD_COLOR, CANVAS_BG, RIGHT
from snake.game import GameState, GameStatus, draw_board, capture_frame


def cell_pixel(frame, x, y):
    cx = x * CELL_SIZE + CELL_SIZE // 2
    cy = y * CELL_SIZE + CELL_SIZE // 2
    return tuple(int(c) for c in frame[cx, cy])


def test_board_paints_snake_and_food():
    surface = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE))
    state = GameState(snake=[(3, 4), (2, 4)], direction=RIGHT, food=(19, 0),
                      score=0, status=GameStatus.PLAYED)
    draw_board(surface, state)
    frame = capture_frame(surface)

    assert frame.shape == (CANVAS_SIZE, CANVAS_SIZE, 3)
    assert cell_pixel(frame, 3, 4) == SNAKE_COLOR
    assert cell_pixel(frame, 2, 4) == SNAKE_COLOR
    assert cell_pixel(frame, 19, 0) == FOOD_COLOR
    assert cell_pixel(frame, 10, 10) == CANVAS_BG


def test_redraw_clears_previous_snapshot():
    surface = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE))
    state = GameState(snake=[(5, 5)], direction=RIGHT, food=(0, 0),
                      score=0, status=GameStatus.PLAYED)
    draw_board(surface, state)
    state.snake = [(6, 5)]
    draw_board(surface, state)
    frame = capture_frame(surface)
    assert cell_pixel(frame, 5, 5) == CANVAS_BG
    assert cell_pixel(frame, 6, 5) == SNAKE_COLOR


def test_missing_surface_is_skipped():
    state = GameState(snake=[(5, 5)], direction=RIGHT, food=(0, 0),
                      score=0, status=GameStatus.PLAYED)
    draw_board(None, state)
    assert capture_frame(None) is None
