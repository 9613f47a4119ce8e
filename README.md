# tankfield

tankfield is a small two-player tank shooter on an 800×600 field. A new enemy
tank appears at a random place every five seconds. Enemies drive in random
directions and fire as they go. Both players shoot them down, and each hit
adds one to the shared score. When an enemy drives below the bottom of the
field, it is removed and the players lose one point of health. Health starts
at 3.

## Installing

```
pip install .
```

This also installs pygame, which opens the window, draws the field and reads
the keyboard.

## Playing

```
tankfield
```

Options:

- `--seed N` seeds the random choices that place and steer the enemies, so a
  game can be replayed.
- `--frames N` closes the window after N frames.

| Action        | Player 1     | Player 2 |
|---------------|--------------|----------|
| Move left     | Left arrow   | A        |
| Move right    | Right arrow  | D        |
| Move up       | Up arrow     | W        |
| Move down     | Down arrow   | S        |
| Fire          | Space        | Q        |

Each key press moves a tank 10 pixels and turns it to face the way it moved.
A tank cannot move left once it is at the left edge (x 0), nor right once it
reaches x 700. A bullet travels in the direction its tank faced when it was
fired. Holding a key repeats it. The score and health are shown in the
top-left corner.

## Using the game model

The game logic does not need a window. It runs on a simulated clock:

```python
from tankfield.scene import Key, Scene

scene = Scene()
scene.key_press(Key.UP)
scene.key_press(Key.SPACE)
scene.advance(5000)        # run five seconds of timers; an enemy spawns
print(scene.score.text())  # "Score: 0"
print(scene.health.text()) # "Health: 3"
```

`Scene` takes an optional `rng` with a `randrange` method, such as
`random.Random(seed)`. Its `items` list holds everything on the field, and
`spawn_enemy`, `increase_score`, `decrease_health`, `key_press` and `advance`
drive the game.

`tankfield.hud` holds `Score` and `Health`. `tankfield.entities` holds
`Player`, `Player2`, `Bullet` and `Enemy`, their common base `Item` with
`rect` and `collides_with`, and the `Heading` and `EnemyDirection` enums.
`tankfield.app` holds `main` and `key_from_pygame`, which maps a pygame key
code to a `Key`.

## What it does not do

- Tanks and bullets are drawn as coloured rectangles on a dark background; no
  images are loaded.
- There is no sound.
- The game does not end when health reaches zero; health keeps counting down
  until the window is closed.

## Running the tests

```
pip install .[test]
pytest
```