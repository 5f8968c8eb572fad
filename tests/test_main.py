import pygame  # type: ignore
import pytest

from snake.config import Config, CANVAS_SIZE
from snake.game import GameStatus
from snake.main import (
    parse_args, build_buttons, draw_window,
    draw_pause_icon, draw_play_icon,
)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def test_parse_args_defaults():
    cfg = parse_args([])
    assert cfg == Config()
    assert cfg.tick_ms == 100 and cfg.grid_size == 20


def test_parse_args_overrides():
    cfg = parse_args(["--seed", "4", "--tick-ms", "80", "--grid-size", "12", "--debug"])
    assert cfg == Config(seed=4, tick_ms=80, grid_size=12, debug=True)


def test_parse_args_rejects_bad_tick():
    with pytest.raises(SystemExit):
        parse_args(["--tick-ms", "0"])


def test_config_validation():
    with pytest.raises(ValueError):
        Config(grid_size=1)


def test_pause_button_toggles_and_swaps_icon(session):
    pause, _ = build_buttons(session, CANVAS_SIZE)
    assert pause.icon() is draw_pause_icon

    assert pause.handle_event(click(pause.rect.center))
    assert session.status is GameStatus.PAUSED
    assert pause.icon() is draw_play_icon


def test_restart_button_and_missed_clicks(session):
    _, restart = build_buttons(session, CANVAS_SIZE)
    session.state.score = 5
    assert not restart.handle_event(click((0, 0)))
    assert session.state.score == 5
    assert restart.handle_event(click(restart.rect.center))
    assert session.state.score == 0


def test_draw_window_renders(session):
    screen = pygame.Surface((CANVAS_SIZE + 32, CANVAS_SIZE + 88))
    canvas = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE))
    font = pygame.font.Font(None, 28)
    draw_window(screen, canvas, font, session, build_buttons(session, CANVAS_SIZE))
