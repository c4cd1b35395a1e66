"""Leaving Forms — two ellipse/wave forms animated side by side.

Exercises tick-leaving: every frame each form is advanced once and its
outline drawn.

Controls:
  0-7     Select stage (restarts the cycle)
  +/-     Adjust speed multiplier
  Space   Pause / resume
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_leaving import LeavingForm

from ui.constants import BG_COLOR, FORMS, FPS, MAX_SPEED, SCREEN_H, SCREEN_W, STATUS_BG, STATUS_H, TEXT_COLOR
from ui.forms import draw_form

STAGE_KEYS = {getattr(pygame, f"K_{n}"): n for n in range(8)}


class GameState:
    """Holds the forms and the viewer settings."""

    def __init__(self) -> None:
        self.forms = [(LeavingForm(rx, ry, growing), offset) for rx, ry, growing, offset in FORMS]
        self.stage = 7
        self.speed = 1
        self.paused = False

    def select_stage(self, stage: int) -> None:
        self.stage = stage
        for form, _ in self.forms:
            form.reset_cycle()

    def change_speed(self, delta: int) -> None:
        self.speed = max(1, min(self.speed + delta, MAX_SPEED))
        for form, _ in self.forms:
            form.set_speed(self.speed)


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    pygame.draw.rect(surface, STATUS_BG, (0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H))
    form, _ = state.forms[0]
    text = (
        f"stage {state.stage}  speed x{state.speed}  "
        f"tick {form.tick}/{form.config.max_ticks}"
        f"{'  [paused]' if state.paused else ''}"
    )
    surface.blit(font.render(text, True, TEXT_COLOR), (10, SCREEN_H - STATUS_H + 10))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Leaving Forms — tick-leaving demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.paused = not state.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.change_speed(1)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.change_speed(-1)
                elif event.key in STAGE_KEYS:
                    state.select_stage(STAGE_KEYS[event.key])

        # --- Tick + render ---
        screen.fill(BG_COLOR)
        for form, offset in state.forms:
            if state.paused:
                frame = form.get_shapes(state.stage)
            else:
                frame = form.advance_and_get_shapes(state.stage)
            draw_form(screen, form, frame, offset)

        draw_status_bar(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
