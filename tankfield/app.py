"""Window, input and drawing for the battlefield."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

import pygame

from tankfield.entities import Bullet, Enemy, Item, Player, Player2
from tankfield.hud import HUD_FONT
from tankfield.scene import Key, Scene

WIDTH = 800
HEIGHT = 600
FPS = 60
TITLE = "Tank Field"

_KEYMAP = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_q: Key.Q,
}

_COLORS = {
    Player: (230, 200, 40),
    Player2: (60, 200, 90),
    Enemy: (200, 60, 60),
    Bullet: (240, 240, 240),
}
_BACKGROUND = (20, 20, 20)


def key_from_pygame(code: int) -> Optional[Key]:
    """The battlefield key for a pygame key code, or None if it is not used."""
    return _KEYMAP.get(code)


def _color_of(item: Item) -> tuple[int, int, int]:
    return _COLORS.get(type(item), (128, 128, 128))


def _draw(surface: pygame.Surface, scene: Scene, font: pygame.font.Font) -> None:
    surface.fill(_BACKGROUND)
    for item in scene.items:
        left, top, width, height = item.rect()
        pygame.draw.rect(surface, _color_of(item), pygame.Rect(left, top, width, height))
    for counter in (scene.score, scene.health):
        label = font.render(counter.text(), True, pygame.Color(counter.color))
        surface.blit(label, (counter.x, counter.y))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="tankfield", description="Two-player tank battle.")
    parser.add_argument("--seed", type=int, help="seed for enemy behaviour")
    parser.add_argument("--frames", type=int, help="stop after this many frames")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(250, 30)
        font = pygame.font.SysFont(*HUD_FONT)
        scene = Scene(rng=random.Random(args.seed))
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = key_from_pygame(event.key)
                    if key is not None:
                        scene.key_press(key)
            scene.advance(clock.tick(FPS))
            _draw(screen, scene, font)
            pygame.display.flip()
            frames += 1
    finally:
        pygame.quit()
    return 0