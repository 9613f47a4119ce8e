"""Tanks and bullets on the battlefield, with their movement rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Iterable, Optional, Protocol

TANK_SIZE = 64.0
BULLET_WIDTH = 10.0
BULLET_HEIGHT = 20.0

SPAWN_WIDTH = 700
SPAWN_HEIGHT = 500
GROUND_Y = 600

BULLET_INTERVAL_MS = 50
ENEMY_INTERVAL_MS = 500
ENEMY_BULLET_INTERVAL_MS = 30

BULLET_STEP = 10
ENEMY_BULLET_STEP = 30
ENEMY_STEP = 50


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class Heading(IntEnum):
    """Facing of a player tank, and the direction a bullet travels."""

    LEFT = 1
    RIGHT = 2
    UP = 3
    DOWN = 4


class EnemyDirection(Enum):
    """Direction state of an enemy tank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_HEADING_ROTATION = {
    Heading.LEFT: -90.0,
    Heading.RIGHT: 90.0,
    Heading.UP: 0.0,
    Heading.DOWN: 180.0,
}

_BULLET_STEP = {
    Heading.LEFT: (-BULLET_STEP, 0),
    Heading.RIGHT: (BULLET_STEP, 0),
    Heading.UP: (0, -BULLET_STEP),
    Heading.DOWN: (0, BULLET_STEP),
}

# Enemy bullets read the heading code with their own, mirrored, meaning.
_ENEMY_BULLET_STEP = {
    Heading.LEFT: (ENEMY_BULLET_STEP, 0),
    Heading.RIGHT: (-ENEMY_BULLET_STEP, 0),
    Heading.UP: (0, ENEMY_BULLET_STEP),
    Heading.DOWN: (0, -ENEMY_BULLET_STEP),
}

# How an enemy moves and which heading code it hands to its bullets.
_ENEMY_STEP = {
    EnemyDirection.UP: ((0, ENEMY_STEP), Heading.DOWN),
    EnemyDirection.DOWN: ((0, -ENEMY_STEP), Heading.UP),
    EnemyDirection.LEFT: ((-ENEMY_STEP, 0), Heading.LEFT),
    EnemyDirection.RIGHT: ((ENEMY_STEP, 0), Heading.RIGHT),
}

_ENEMY_TURNS = (
    (EnemyDirection.RIGHT, -90.0),
    (EnemyDirection.LEFT, 90.0),
    (EnemyDirection.UP, 0.0),
    (EnemyDirection.DOWN, 180.0),
)

# Where a fired bullet appears relative to the enemy, and its rotation.
_MUZZLE = {
    EnemyDirection.UP: (15, 110, 0.0),
    EnemyDirection.DOWN: (10, -70, 180.0),
    EnemyDirection.LEFT: (-30, 5, 90.0),
    EnemyDirection.RIGHT: (90, 10, -90.0),
}


@dataclass(eq=False)
class Item:
    """Something placed on the field, rotated about its centre."""

    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0
    width: float = TANK_SIZE
    height: float = TANK_SIZE
    alive: bool = True

    image: ClassVar[str] = ""

    def rect(self) -> tuple[float, float, float, float]:
        """Bounding box on the field as (left, top, width, height)."""
        width, height = self.width, self.height
        if round(self.rotation) % 180 == 90:
            width, height = height, width
        cx = self.x + self.width / 2
        cy = self.y + self.height / 2
        return (cx - width / 2, cy - height / 2, width, height)

    def collides_with(self, other: Item) -> bool:
        """True when the two boxes overlap; an item never collides with itself."""
        if other is self:
            return False
        left, top, width, height = self.rect()
        o_left, o_top, o_width, o_height = other.rect()
        return (
            left < o_left + o_width
            and o_left < left + width
            and top < o_top + o_height
            and o_top < top + height
        )


@dataclass(eq=False)
class Player(Item):
    """The first player's tank."""

    image: ClassVar[str] = "images/player_1.png"


@dataclass(eq=False)
class Player2(Item):
    """The second player's tank."""

    image: ClassVar[str] = "images/player2.png"


@dataclass(eq=False)
class Bullet(Item):
    """A shell; `direction` drives `move`, `tank_direction` drives `enemy_move`."""

    width: float = BULLET_WIDTH
    height: float = BULLET_HEIGHT
    direction: Optional[Heading] = None
    tank_direction: Optional[Heading] = None
    from_enemy: bool = False

    image: ClassVar[str] = "images/bullet.png"

    def move(self, items: Iterable[Item]) -> Optional[Enemy]:
        """Advance one tick; return the enemy struck, if any.

        A bullet that has flown off the top of the field is marked dead.
        """
        for item in items:
            if isinstance(item, Enemy) and self.collides_with(item):
                return item

        if self.direction is not None:
            dx, dy = _BULLET_STEP[self.direction]
            self.rotation = _HEADING_ROTATION[self.direction]
            self.x += dx
            self.y += dy

        if self.y + self.height < 0:
            self.alive = False
        return None

    def enemy_move(self, items: Iterable[Item]) -> Optional[Item]:
        """Advance an enemy shell one tick; return the tank it struck, if any.

        Striking any tank destroys the shell.
        """
        targets = list(items)
        for kind in (Player, Enemy, Player2):
            for item in targets:
                if isinstance(item, kind) and self.collides_with(item):
                    self.alive = False
                    return item

        if self.tank_direction is not None:
            dx, dy = _ENEMY_BULLET_STEP[self.tank_direction]
            self.x += dx
            self.y += dy
        return None


@dataclass(eq=False)
class Enemy(Item):
    """A computer-driven tank that wanders and fires as it goes."""

    direction: EnemyDirection = EnemyDirection.UP
    tank_direction: Heading = Heading.DOWN
    move_distance: int = 0

    image: ClassVar[str] = "images/basic_tank.png"

    @property
    def past_ground(self) -> bool:
        """True once the tank has driven below the bottom of the field."""
        return self.y > GROUND_Y

    def move(self, rng: RandomSource) -> Optional[Bullet]:
        """Take one step, or pick a new direction; return any bullet fired."""
        if self.move_distance < 60 + rng.randrange(400):
            (dx, dy), heading = _ENEMY_STEP[self.direction]
            self.x += dx
            self.y += dy
            self.tank_direction = heading
            bullet = self.shoot_bullet()
            self.move_distance += ENEMY_STEP
            return bullet

        self.direction, self.rotation = _ENEMY_TURNS[rng.randrange(4)]
        self.move_distance = 0
        return None

    def shoot_bullet(self) -> Bullet:
        """Create a bullet at the muzzle for the current direction."""
        dx, dy, rotation = _MUZZLE[self.direction]
        return Bullet(
            x=self.x + dx,
            y=self.y + dy,
            rotation=rotation,
            direction=self.tank_direction,
            from_enemy=True,
        )