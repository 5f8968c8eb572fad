# main.py
import argparse
from typing import Callable, List, Optional

import pygame  # type: ignore

from .config import (
    Config, CELL_SIZE, PADDING, PANEL_H, BUTTON_SIZE,
    WINDOW_BG, BORDER, TEXT, PAUSE_BTN, RESTART_BTN, ICON,
)
from .game import GameStatus, draw_board
from .session import Session, TICK_EVENT

# Window shown again after being covered or minimised
EXPOSE_EVENTS = (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED)


# ---------- Buttons ----------
def draw_pause_icon(surf: pygame.Surface, rect: pygame.Rect) -> None:
    bar_w, bar_h = rect.w // 6, rect.h // 2
    top = rect.centery - bar_h // 2
    pygame.draw.rect(surf, ICON, (rect.centerx - bar_w - 3, top, bar_w, bar_h))
    pygame.draw.rect(surf, ICON, (rect.centerx + 3, top, bar_w, bar_h))

def draw_play_icon(surf: pygame.Surface, rect: pygame.Rect) -> None:
    h = rect.h // 2
    left = rect.centerx - h // 3
    pygame.draw.polygon(surf, ICON, [
        (left, rect.centery - h // 2),
        (left, rect.centery + h // 2),
        (left + h * 3 // 4, rect.centery),
    ])

def draw_restart_icon(surf: pygame.Surface, rect: pygame.Rect) -> None:
    r = rect.w // 4
    arc = pygame.Rect(0, 0, 2 * r, 2 * r)
    arc.center = rect.center
    pygame.draw.arc(surf, ICON, arc, 0.9, 6.0, 3)
    # arrow head at the open end of the arc
    tip_x, tip_y = arc.right, rect.centery - r // 2
    pygame.draw.polygon(surf, ICON, [
        (tip_x - 5, tip_y - 6),
        (tip_x + 5, tip_y - 6),
        (tip_x, tip_y + 2),
    ])


class Button:
    def __init__(self, rect, color, callback: Callable[[], None],
                 icon: Callable[[], Callable[[pygame.Surface, pygame.Rect], None]]):
        self.rect = pygame.Rect(rect)
        self.color = color
        self.callback = callback
        self.icon = icon   # picks the icon painter at draw time

    def draw(self, surf: pygame.Surface) -> None:
        pygame.draw.rect(surf, self.color, self.rect, border_radius=6)
        self.icon()(surf, self.rect)

    def handle_event(self, event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


def restart_game(session: Session) -> None:
    session.restart()
    print("[GAME] Restarted")


def build_buttons(session: Session, canvas_px: int) -> List[Button]:
    y = PADDING + canvas_px + (PANEL_H - BUTTON_SIZE) // 2
    right = PADDING + canvas_px
    pause = Button(
        (right - 2 * BUTTON_SIZE - 8, y, BUTTON_SIZE, BUTTON_SIZE),
        PAUSE_BTN,
        session.toggle_pause,
        lambda: draw_pause_icon if session.status is GameStatus.PLAYED else draw_play_icon,
    )
    restart = Button(
        (right - BUTTON_SIZE, y, BUTTON_SIZE, BUTTON_SIZE),
        RESTART_BTN,
        lambda: restart_game(session),
        lambda: draw_restart_icon,
    )
    return [pause, restart]


# ---------- Frame ----------
def draw_window(screen: pygame.Surface, canvas: pygame.Surface, font: pygame.font.Font,
                session: Session, buttons: List[Button]) -> None:
    screen.fill(WINDOW_BG)
    draw_board(canvas, session.state)
    screen.blit(canvas, (PADDING, PADDING))
    pygame.draw.rect(screen, BORDER, canvas.get_rect(topleft=(PADDING, PADDING)).inflate(4, 4), 2)

    canvas_px = canvas.get_width()
    txt = font.render(f"Score: {session.state.score}", True, TEXT)
    screen.blit(txt, txt.get_rect(midleft=(PADDING, PADDING + canvas_px + PANEL_H // 2)))
    for b in buttons:
        b.draw(screen)


# ---------- CLI ----------
def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(prog="snake", description="Single-player Snake.")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: unseeded)")
    parser.add_argument("--tick-ms", type=int, default=Config.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--grid-size", type=int, default=Config.grid_size,
                        help="cells per side of the square board")
    parser.add_argument("--debug", action="store_true",
                        help="print a trace line every tick")
    args = parser.parse_args(argv)
    try:
        return Config(seed=args.seed, tick_ms=args.tick_ms,
                      grid_size=args.grid_size, debug=args.debug)
    except ValueError as e:
        parser.error(str(e))


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    canvas_px = cfg.grid_size * CELL_SIZE
    screen = pygame.display.set_mode((canvas_px + 2 * PADDING, canvas_px + 2 * PADDING + PANEL_H))
    pygame.display.set_caption("Snake Game")
    canvas = pygame.Surface((canvas_px, canvas_px))
    clock = pygame.time.Clock()

    session = Session(cfg)
    buttons = build_buttons(session, canvas_px)
    session.start()
    print(f"[GAME] Started (grid={cfg.grid_size}, tick={cfg.tick_ms}ms, seed={cfg.seed})")

    drawn = None
    running = True
    while running:
        # One event at a time: a key queued before a tick lands before that tick
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                break
            if event.type == TICK_EVENT:
                if session.tick() and session.status is GameStatus.LOST:
                    print(f"[GAME] Game over. score={session.state.score}")
            elif event.type in EXPOSE_EVENTS:
                drawn = None
            elif event.type == pygame.KEYDOWN:
                if session.handle_key(event.key):
                    continue
                if event.key in (pygame.K_p, pygame.K_SPACE):
                    session.toggle_pause()
                elif event.key == pygame.K_r:
                    restart_game(session)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                for b in buttons:
                    if b.handle_event(event):
                        break

        if running and drawn != session.version:
            draw_window(screen, canvas, font, session, buttons)
            pygame.display.flip()
            drawn = session.version

        clock.tick(60)  # logic is driven by TICK_EVENT, not by frame rate

    session.shutdown()
    pygame.quit()

if __name__ == "__main__":
    main()
