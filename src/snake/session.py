# session.py
from __future__ import annotations
import random
from typing import Optional

import pygame  # type: ignore

from .config import Config, CFG
from .game import (
    GameState, GameStatus,
    new_game_state, step_game, set_direction, direction_for_key,
)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """
    Fixed-interval tick source backed by pygame.time.set_timer.
    Only one schedule exists at a time: start() always cancels first.
    """

    def __init__(self, interval_ms: int, event_type: int = TICK_EVENT):
        self.interval_ms = interval_ms
        self.event_type = event_type
        self.active = False

    def start(self) -> None:
        self.stop()
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.active = True

    def stop(self) -> None:
        if self.active:
            pygame.time.set_timer(self.event_type, 0)
            self.active = False


class Session:
    """
    Owns the one GameState and everything allowed to write to it.

    Input, the tick timer and the buttons all go through here, so each
    callback sees the state the previous one left. `version` goes up on
    every mutation; the renderer redraws when it changes.
    """

    def __init__(self, cfg: Config = CFG, timer: Optional[TickTimer] = None):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self.timer = timer if timer is not None else TickTimer(cfg.tick_ms)
        self.state: GameState = new_game_state(self.rng, cfg.grid_size)
        self.version = 0

    @property
    def status(self) -> GameStatus:
        return self.state.status

    def _changed(self) -> None:
        self.version += 1

    def start(self) -> None:
        """Mount: begin ticking if the game is in play."""
        if self.state.status is GameStatus.PLAYED:
            self.timer.start()

    def shutdown(self) -> None:
        self.timer.stop()

    def handle_key(self, key: int) -> bool:
        """Arrow keys set the direction in any status. Returns False for other keys."""
        direction = direction_for_key(key)
        if direction is None:
            return False
        set_direction(self.state, direction)
        return True

    def tick(self) -> bool:
        changed = step_game(self.state, self.rng)
        if not changed:
            return False
        self._changed()
        if self.cfg.debug:
            print(f"[TICK] head={self.state.head} len={len(self.state.snake)} "
                  f"food={self.state.food} score={self.state.score}")
        if self.state.status is not GameStatus.PLAYED:
            self.timer.stop()
        return True

    def toggle_pause(self) -> None:
        if self.state.status is GameStatus.PLAYED:
            self.state.status = GameStatus.PAUSED
            self.timer.stop()
        elif self.state.status is GameStatus.PAUSED:
            self.state.status = GameStatus.PLAYED
            self.timer.start()
        else:
            return
        self._changed()

    def restart(self) -> None:
        self.timer.stop()
        self.state = new_game_state(self.rng, self.cfg.grid_size)
        self._changed()
        self.timer.start()
