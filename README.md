# brickbreak

A brick-breaking arcade game played with pygame. Move the paddle, bounce the
ball into a randomly sized wall of bricks, and keep the ball from dropping
past the paddle. Each brick is worth 10 points. You start with three hearts.
When the ball falls off the bottom of the screen you lose one, and the ball
is served again. When all three are gone, the game is over.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Playing

```
brickbreak
```

Options:

- `--assets DIR`: the directory that holds the game assets. The default is
  `./assets`.
- `--frames N`: stop after `N` frames instead of running until the window is
  closed.

The asset directory must contain these textures:

- `graphics/background.png`
- `graphics/breakout.png`
- `graphics/arrows.png`
- `graphics/hearts.png`
- `graphics/particle.png`

It must also contain the sounds under `sounds/`, such as `paddle_hit.wav`,
`wall_hit.wav`, `brick-hit-2.wav`, `hurt.wav` and `pause.wav`. If a file is
missing, the game stops with `FileNotFoundError`.

Two cases are handled without an error:

- If no audio device can be opened, the game runs without sound.
- `fonts/font.ttf` is optional. Without it, pygame's default font is used.

The game draws onto a 432×243 surface and scales it up to a 1280×720 window.
A frame-rate counter is shown in the top-left corner.

Controls:

- **Up / Down**: switch between START and HIGH SCORES on the title screen.
- **Enter**: start a game from START, serve the ball, or start a new game
  after game over.
- **Left / Right**: move the paddle, both while serving and during play.
- **Space**: pause and resume during play.

## What it does not do

- Choosing HIGH SCORES on the title screen does nothing. Scores are not
  stored anywhere.
- There is no win condition. Clearing every brick does not end the level, and
  play goes on until all hearts are lost.
- All bricks look the same and break with one hit.
- No music is played. Sound effects only.

## Using the pieces

The game logic does not depend on pygame, so it can be driven and checked
without a window:

```python
import random
from brickbreak.game import Game, Key, Keys

game = Game(random.Random(1), play_sound=print)
game.update(1 / 60, Keys(pressed={Key.ENTER}))
print(game.state_name)  # "serve"
```

The modules:

- `brickbreak.smile`: a small state machine. `StateMachine` holds one current
  `State` and calls its `enter`, `update`, `draw` and `exit` hooks.
  `change_state` runs the exit hook of the current state, then the enter hook
  of the new one. `shutdown` runs the exit hook and clears the current state.
  `reset` clears it without running the exit hook.
- `brickbreak.constants`: screen sizes, speeds, texts and limits.
- `brickbreak.geometry`: `Rect`, with `Rect.collides` (edges that only touch
  do not collide), and `clamp`.
- `brickbreak.assets`: sprite-sheet regions (`Quad`, `QuadAtlas` and the
  `generate_*_quads` functions), `PaddleColor`, and `AssetTable`, a keyed
  store for loaded assets.
- `brickbreak.entities`: `Ball`, `Paddle`, `Brick`, `BrickMap`,
  `paddle_index` and `create_map`. `create_map` builds a level with 1–5 rows
  and 7–13 columns.
- `brickbreak.game`:
  - `Game` wires the title, new-game, serve, play and game-over screens into
    a `StateMachine`.
  - `Game.update(dt, keys)` advances the current screen using a `Keys`
    snapshot.
  - `Game.draw(canvas)` draws onto any object that provides `draw_sprite`,
    `draw_text` and `measure_text`.
  - `score_text` formats the score.
- `brickbreak.app`: the pygame front end. It provides `PygameCanvas`,
  `load_textures`, `load_sounds` and `main`, the function behind the
  `brickbreak` command.

## Running the tests

```
pytest
```