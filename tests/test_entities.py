import pytest

from tankfield.entities import (
    Bullet,
    Enemy,
    EnemyDirection,
    Heading,
    Item,
    Player,
    Player2,
)


class _Sequence:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        value = next(self._values)
        assert 0 <= value < stop
        return value


def test_rect_unrotated_matches_position_and_size():
    item = Item(x=5, y=7, width=20, height=40)
    assert item.rect() == (5, 7, 20, 40)


@pytest.mark.parametrize("rotation", [90, -90])
def test_rect_quarter_turn_swaps_sides_about_centre(rotation):
    item = Item(x=5, y=7, width=20, height=40, rotation=rotation)
    left, top, width, height = item.rect()
    assert (width, height) == (40, 20)
    assert left + width / 2 == 5 + 20 / 2
    assert top + height / 2 == 7 + 40 / 2


def test_collision_is_symmetric_and_excludes_self():
    a = Item(x=0, y=0, width=10, height=10)
    b = Item(x=5, y=5, width=10, height=10)
    c = Item(x=50, y=50, width=10, height=10)
    assert a.collides_with(b) and b.collides_with(a)
    assert not a.collides_with(c)
    assert not a.collides_with(a)


@pytest.mark.parametrize(
    "heading, dx, dy, rotation",
    [
        (Heading.LEFT, -10, 0, -90),
        (Heading.RIGHT, 10, 0, 90),
        (Heading.UP, 0, -10, 0),
        (Heading.DOWN, 0, 10, 180),
    ],
)
def test_bullet_move_steps_in_heading(heading, dx, dy, rotation):
    bullet = Bullet(x=100, y=100, direction=heading)
    assert bullet.move([]) is None
    assert (bullet.x, bullet.y) == (100 + dx, 100 + dy)
    assert bullet.rotation == rotation
    assert bullet.alive


def test_bullet_move_reports_enemy_and_stays_put():
    bullet = Bullet(x=100, y=100, direction=Heading.UP)
    enemy = Enemy(x=90, y=90)
    assert bullet.move([bullet, enemy]) is enemy
    assert (bullet.x, bullet.y) == (100, 100)


def test_bullet_move_ignores_players():
    bullet = Bullet(x=100, y=100, direction=Heading.UP)
    player = Player(x=90, y=90)
    assert bullet.move([player]) is None
    assert bullet.y == 90


def test_bullet_leaving_top_dies():
    bullet = Bullet(x=100, y=-15, direction=Heading.UP)
    bullet.move([])
    assert not bullet.alive


@pytest.mark.parametrize("target_type", [Player, Player2, Enemy])
def test_enemy_bullet_destroyed_on_tank(target_type):
    bullet = Bullet(x=100, y=100, tank_direction=Heading.UP)
    target = target_type(x=90, y=90)
    assert bullet.enemy_move([target]) is target
    assert not bullet.alive
    assert (bullet.x, bullet.y) == (100, 100)


@pytest.mark.parametrize(
    "heading, dx, dy",
    [
        (Heading.LEFT, 30, 0),
        (Heading.RIGHT, -30, 0),
        (Heading.UP, 0, 30),
        (Heading.DOWN, 0, -30),
    ],
)
def test_enemy_bullet_steps(heading, dx, dy):
    bullet = Bullet(x=100, y=100, tank_direction=heading)
    other = Bullet(x=100, y=100)
    assert bullet.enemy_move([other]) is None
    assert (bullet.x, bullet.y) == (100 + dx, 100 + dy)
    assert bullet.alive


def test_enemy_bullet_without_tank_direction_stays():
    bullet = Bullet(x=100, y=100)
    bullet.enemy_move([])
    assert (bullet.x, bullet.y) == (100, 100)


def test_enemy_advances_and_fires():
    enemy = Enemy(x=100, y=100)
    bullet = enemy.move(_Sequence([0]))
    assert (enemy.x, enemy.y) == (100, 150)
    assert enemy.tank_direction is Heading.DOWN
    assert enemy.move_distance == 50
    assert (bullet.x, bullet.y) == (115, 260)
    assert bullet.direction is Heading.DOWN
    assert bullet.from_enemy


@pytest.mark.parametrize(
    "choice, direction, rotation",
    [
        (0, EnemyDirection.RIGHT, -90),
        (1, EnemyDirection.LEFT, 90),
        (2, EnemyDirection.UP, 0),
        (3, EnemyDirection.DOWN, 180),
    ],
)
def test_enemy_turns_after_travelling(choice, direction, rotation):
    enemy = Enemy(x=100, y=100, move_distance=500)
    assert enemy.move(_Sequence([399, choice])) is None
    assert enemy.direction is direction
    assert enemy.rotation == rotation
    assert enemy.move_distance == 0
    assert (enemy.x, enemy.y) == (100, 100)


@pytest.mark.parametrize(
    "direction, dx, dy, rotation",
    [
        (EnemyDirection.UP, 15, 110, 0),
        (EnemyDirection.DOWN, 10, -70, 180),
        (EnemyDirection.LEFT, -30, 5, 90),
        (EnemyDirection.RIGHT, 90, 10, -90),
    ],
)
def test_shoot_bullet_muzzle(direction, dx, dy, rotation):
    enemy = Enemy(x=200, y=300, direction=direction, tank_direction=Heading.LEFT)
    bullet = enemy.shoot_bullet()
    assert (bullet.x, bullet.y) == (200 + dx, 300 + dy)
    assert bullet.rotation == rotation
    assert bullet.direction is Heading.LEFT


def test_enemy_past_ground():
    assert Enemy(y=601).past_ground
    assert not Enemy(y=600).past_ground