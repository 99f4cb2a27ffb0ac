# angrycube

A small game about Mr. Angry Cube. He rolls across a grid one quarter turn at a time and squashes the enemies he lands on. Each squashed enemy adds one to your score and lowers his anger by one step. Landing on his face squashes nothing.

He gets angrier in two cases: when he lands on his face, and every time his total number of rotations reaches a multiple of ten. The angrier he is, the faster he rolls. While his anger is at its highest, each quarter turn counts down from 20. If his anger drops, the countdown starts again from 20. If it reaches zero, the game is over.

## Installation

```
pip install .
```

The game uses `pygame` for its window and drawing.

## Playing

Start the game with:

```
angrycube
```

The main menu has two buttons. **Play** starts a game and **Exit** quits.

| Key    | Action                                                        |
|--------|---------------------------------------------------------------|
| W / S  | roll forward / backward                                       |
| A / D  | roll left / right                                             |
| Q / E  | spin around the vertical axis                                 |
| R      | spawn an enemy at a random even grid position, 2 to 20 units from the origin on each axis |
| Escape | pause or resume; on game over, return to the menu             |
| F      | toggle fullscreen                                             |

A new direction takes effect when the cube finishes its current quarter turn. After each quarter turn the cube rests for a moment. The rest is longer when it lands on its face.

During play, the heads-up display shows four values: your score, the cube's anger as a percentage, how many enemies are alive, and how many rotations the cube has made. Short messages pop up for a few seconds when the cube gets angrier.

## Using the pieces

The game logic can run without a window.

- `angrycube.game.Game(config, *, clock=..., rng=..., measure=...)` holds the game state and the registered objects. You can pass in a clock, a `random.Random` and a text-width function, which makes runs repeatable. Its methods `update`, `handle_key`, `spawn_enemy`, `register`, `unregister`, `colliding_enemies`, `enemies`, `render` and `render_hud` drive and draw the game. `render_hud` returns the lines of text it drew. `angrycube.game.main` is the command's entry point.
- `angrycube.config.GameConfig` holds the asset paths, the screen size, the update rate, the background colour and the window title.
- `angrycube.cube.MrAngryCube` is the rolling cube. It provides `update`, `is_at_quarter_rotation`, `is_face_on_the_ground` and `wait_for_non_blocking`. `wait_for_non_blocking` stops the cube at once and starts it again after a background timer fires.
- `angrycube.enemy.Enemy` is a cube-shaped target placed with `set_position`.
- `angrycube.gui.PushButton` and `angrycube.gui.Menu` make up the simple menu. Mouse input is passed to their `update` methods as arguments.
- `angrycube.misc` provides `GameInfo`, `GameState`, `TimedText`, `get_timed_text`, `sum_vector3`, `abs_vector3` and `log`.
- `angrycube.gameobject` provides `Vector2`, `Vector3`, `Matrix` and the `GameObject` base class.

## What it does not do

The game draws everything with flat-coloured polygons. The player cube is a grey cube with one red face, and enemies are red cubes. The texture, shader and model paths in `GameConfig` are stored but never loaded. The game has no sound, does not save scores, and always shows the same two messages.

## Running the tests

```
pip install .[test]
pytest
```