"""The battlefield: players, enemies, bullets, counters and the clock that drives them."""

from __future__ import annotations

import heapq
import itertools
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, NamedTuple, Optional

from tankfield.entities import (
    BULLET_INTERVAL_MS,
    ENEMY_BULLET_INTERVAL_MS,
    ENEMY_INTERVAL_MS,
    SPAWN_HEIGHT,
    SPAWN_WIDTH,
    Bullet,
    Enemy,
    Heading,
    Item,
    Player,
    Player2,
    RandomSource,
)
from tankfield.hud import Health, Score

SPAWN_INTERVAL_MS = 5000
PLAYER_STEP = 10
RIGHT_LIMIT = 700
BACKGROUND_IMAGE = "images/background.jpg"

PLAYER_START = (350.0, 500.0)
PLAYER2_START = (550.0, 500.0)
HEALTH_OFFSET = 25.0


class Key(Enum):
    """Keys the battlefield reacts to."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    SPACE = auto()
    A = auto()
    D = auto()
    W = auto()
    S = auto()
    Q = auto()


class _Controls(NamedTuple):
    left: Key
    right: Key
    up: Key
    down: Key
    fire: Key


_PLAYER1_CONTROLS = _Controls(Key.LEFT, Key.RIGHT, Key.UP, Key.DOWN, Key.SPACE)
_PLAYER2_CONTROLS = _Controls(Key.A, Key.D, Key.W, Key.S, Key.Q)

# Step and rotation a player tank takes for each heading.
_PLAYER_MOVES = {
    Heading.LEFT: (-PLAYER_STEP, 0, -90.0),
    Heading.RIGHT: (PLAYER_STEP, 0, 90.0),
    Heading.UP: (0, -PLAYER_STEP, 0.0),
    Heading.DOWN: (0, PLAYER_STEP, 180.0),
}


@dataclass(order=True)
class _Timer:
    due: int
    seq: int
    interval: int = field(compare=False)
    action: Callable[[], None] = field(compare=False)
    owner: Optional[Item] = field(compare=False, default=None)


class Scene:
    """Everything on the field, advanced in simulated milliseconds."""

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self.background = BACKGROUND_IMAGE
        self.clock = 0
        self.items: list[Item] = []
        self._timers: list[_Timer] = []
        self._sequence = itertools.count()

        self.player = Player(x=PLAYER_START[0], y=PLAYER_START[1])
        self.items.append(self.player)
        self.player2 = Player2(x=PLAYER2_START[0], y=PLAYER2_START[1])
        self.items.append(self.player2)

        self.score = Score()
        self.health = Health()
        self.health.y += HEALTH_OFFSET

        self.player_direction = Heading.UP
        self.player2_direction = Heading.UP

        self._start_timer(SPAWN_INTERVAL_MS, self.spawn_enemy)

    def _start_timer(
        self, interval: int, action: Callable[[], None], owner: Optional[Item] = None
    ) -> None:
        timer = _Timer(self.clock + interval, next(self._sequence), interval, action, owner)
        heapq.heappush(self._timers, timer)

    def _remove(self, item: Item) -> None:
        item.alive = False
        if item in self.items:
            self.items.remove(item)

    def spawn_enemy(self) -> Enemy:
        """Place a new enemy at a random spot and start it moving."""
        x = self.rng.randrange(SPAWN_WIDTH)
        y = self.rng.randrange(SPAWN_HEIGHT)
        enemy = Enemy(x=float(x), y=float(y))
        self.items.append(enemy)
        self._start_timer(ENEMY_INTERVAL_MS, lambda: self._tick_enemy(enemy), enemy)
        return enemy

    def increase_score(self, bullet: Bullet, enemy: Enemy) -> None:
        """Destroy a bullet and the enemy it hit, and count the kill."""
        self._remove(bullet)
        self._remove(enemy)
        self.score.increase()

    def decrease_health(self, enemy: Enemy) -> None:
        """Remove an enemy that reached the ground and lose a life."""
        self._remove(enemy)
        self.health.decrease()

    def key_press(self, key: Key) -> None:
        """Let both players react to a key."""
        self.player_direction = self._control(
            self.player, _PLAYER1_CONTROLS, self.player_direction, key
        )
        self.player2_direction = self._control(
            self.player2, _PLAYER2_CONTROLS, self.player2_direction, key
        )

    def advance(self, milliseconds: int) -> None:
        """Run every timer that falls due in the next `milliseconds`."""
        if milliseconds < 0:
            raise ValueError("cannot advance the clock backwards")
        end = self.clock + milliseconds
        while self._timers and self._timers[0].due <= end:
            timer = heapq.heappop(self._timers)
            if timer.owner is not None and not timer.owner.alive:
                continue
            self.clock = timer.due
            timer.action()
            if timer.owner is None or timer.owner.alive:
                timer.due += timer.interval
                timer.seq = next(self._sequence)
                heapq.heappush(self._timers, timer)
        self.clock = end

    def _control(self, tank: Item, controls: _Controls, heading: Heading, key: Key) -> Heading:
        turn: Optional[Heading] = None
        if key is controls.left and tank.x > 0:
            turn = Heading.LEFT
        elif key is controls.right and tank.x < RIGHT_LIMIT:
            turn = Heading.RIGHT
        elif key is controls.up:
            turn = Heading.UP
        elif key is controls.down:
            turn = Heading.DOWN

        if turn is not None:
            dx, dy, rotation = _PLAYER_MOVES[turn]
            tank.rotation = rotation
            tank.x += dx
            tank.y += dy
            heading = turn

        if key is controls.fire:
            self._fire(tank, heading)
        return heading

    def _fire(self, tank: Item, heading: Heading) -> Bullet:
        bullet = Bullet(direction=heading)
        tank_w, tank_h = int(tank.width), int(tank.height)
        bullet_w, bullet_h = int(bullet.width), int(bullet.height)
        centre_x = tank.x + tank_w // 2 - bullet_w // 2
        centre_y = tank.y + tank_h // 2 - bullet_h // 2
        bullet.x, bullet.y = {
            Heading.UP: (centre_x, tank.y),
            Heading.DOWN: (centre_x, tank.y + tank_h - bullet_h),
            Heading.LEFT: (tank.x, centre_y),
            Heading.RIGHT: (tank.x + tank_w - bullet_w, centre_y),
        }[heading]
        self.items.append(bullet)
        self._start_timer(
            BULLET_INTERVAL_MS, lambda: self._tick_bullet(bullet, scores=True), bullet
        )
        return bullet

    def _tick_bullet(self, bullet: Bullet, scores: bool) -> None:
        enemy = bullet.move(list(self.items))
        if enemy is not None:
            if scores:
                self.increase_score(bullet, enemy)
            return
        if not bullet.alive:
            self._remove(bullet)

    def _tick_enemy_bullet(self, bullet: Bullet) -> None:
        bullet.enemy_move(list(self.items))
        if not bullet.alive:
            self._remove(bullet)

    def _tick_enemy(self, enemy: Enemy) -> None:
        bullet = enemy.move(self.rng)
        if bullet is not None:
            self.items.append(bullet)
            self._start_timer(
                BULLET_INTERVAL_MS, lambda: self._tick_bullet(bullet, scores=False), bullet
            )
            self._start_timer(
                ENEMY_BULLET_INTERVAL_MS, lambda: self._tick_enemy_bullet(bullet), bullet
            )
        if enemy.past_ground:
            self.decrease_health(enemy)