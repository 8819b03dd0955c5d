"""The ball, the paddle, the bricks and the layout of a level."""

from __future__ import annotations

import random
from typing import Iterator, Optional

from .assets import PaddleColor
from .constants import (
    BALL_MAX_STARTING_SPEED_X,
    BALL_MAX_STARTING_SPEED_Y,
    BALL_MIN_STARTING_SPEED_Y,
    BALL_SIZE,
    BRICK_HEIGHT,
    BRICK_TIERS,
    BRICK_WIDTH,
    BRICKS_COL_MAX,
    BRICKS_COL_MIN,
    BRICKS_ROW_MAX,
    BRICKS_ROW_MIN,
    PADDLE_COLORS,
    PADDLE_HEIGHT,
    PADDLE_MEDIUM_WIDTH,
    PADDLE_SMALL_WIDTH,
    PADDLE_SPEED,
    STARTING_Y,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)
from .geometry import Rect, clamp


def _random_value(rng: random.Random, a: int, b: int) -> int:
    """A random integer between two bounds, inclusive, in either order."""
    return rng.randint(min(a, b), max(a, b))


def paddle_index(skin: int, width: int) -> int:
    """Slot of the paddle sprite for a colour bit and a width."""
    if skin <= 0:
        raise ValueError(f"invalid paddle skin {skin}")
    color_index = (skin & -skin).bit_length() - 1
    size_index = width // PADDLE_SMALL_WIDTH - 1
    return color_index * PADDLE_COLORS + size_index


class Ball:
    """The ball: position, velocity and the skin it is drawn with."""

    def __init__(self, skin: int, rng: Optional[random.Random] = None) -> None:
        self.skin = skin
        self.size = BALL_SIZE
        self._rng = rng if rng is not None else random.Random()
        self.x = 0.0
        self.y = 0.0
        self.dx = 0.0
        self.dy = 0.0
        self.reset()

    def reset(self) -> None:
        """Centre the ball and give it a fresh random upward velocity."""
        self.x = (VIRTUAL_WIDTH - self.size) / 2.0
        self.y = (VIRTUAL_HEIGHT - self.size) / 2.0
        self.dx = float(
            _random_value(self._rng, -BALL_MAX_STARTING_SPEED_X, BALL_MAX_STARTING_SPEED_X)
        )
        self.dy = float(
            _random_value(self._rng, BALL_MIN_STARTING_SPEED_Y, BALL_MAX_STARTING_SPEED_Y)
        )

    def update(self, dt: float) -> bool:
        """Move the ball; bounce off the side and top walls.

        Returns True when the ball hit a wall during this step.
        """
        self.x += self.dx * dt
        self.y += self.dy * dt
        bounced = False

        if self.x < 0 or self.x + BALL_SIZE > VIRTUAL_WIDTH:
            self.dx *= -1
            self.x = clamp(self.x, 0, VIRTUAL_WIDTH - self.size)
            bounced = True

        if self.y < 0:
            self.dy *= -1
            self.y = 0.0
            bounced = True

        return bounced

    @property
    def hit_box(self) -> Rect:
        """The rectangle the ball occupies."""
        return Rect(self.x, self.y, self.size, self.size)


class Paddle:
    """The player's paddle."""

    def __init__(self) -> None:
        self.skin = PaddleColor.BLUE
        self.width = PADDLE_MEDIUM_WIDTH
        self.height = PADDLE_HEIGHT
        self.x = (VIRTUAL_WIDTH - self.width) / 2.0
        self.y = float(VIRTUAL_HEIGHT - STARTING_Y)
        self.dx = 0.0

    @property
    def index(self) -> int:
        """Slot of this paddle's sprite."""
        return paddle_index(self.skin, self.width)

    def update(self, dt: float, direction: int) -> None:
        """Move left (-1), right (1) or not at all (0), staying on screen."""
        if direction not in (-1, 0, 1):
            raise ValueError(f"direction must be -1, 0 or 1, not {direction}")
        self.dx = float(direction * PADDLE_SPEED)
        self.x = clamp(self.x + self.dx * dt, 0, VIRTUAL_WIDTH - self.width)

    @property
    def hit_box(self) -> Rect:
        """The rectangle the paddle occupies."""
        return Rect(self.x, self.y, self.width, self.height)


class Brick:
    """A single brick of the level."""

    def __init__(self, x: float, y: float) -> None:
        self.skin = 0
        self.tier = 0
        self.in_play = True
        self.hit_box = Rect(x, y, BRICK_WIDTH, BRICK_HEIGHT)

    @property
    def index(self) -> int:
        """Slot of this brick's sprite."""
        return self.skin * BRICK_TIERS + self.tier

    def hit(self) -> None:
        """Take the brick out of play."""
        self.in_play = False


class BrickMap:
    """A grid of bricks centred horizontally near the top of the screen."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"invalid brick grid {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        starting_x = int((VIRTUAL_WIDTH - cols * BRICK_WIDTH) / 2.0)
        self.grid: list[list[Brick]] = [
            [
                Brick(starting_x + col * BRICK_WIDTH, BRICK_HEIGHT + row * BRICK_HEIGHT)
                for col in range(cols)
            ]
            for row in range(rows)
        ]

    def __iter__(self) -> Iterator[Brick]:
        for row in self.grid:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def active(self) -> Iterator[Brick]:
        """The bricks still in play, row by row."""
        return (brick for brick in self if brick.in_play)


def create_map(rng: Optional[random.Random] = None) -> BrickMap:
    """A level with a random number of rows and columns."""
    rng = rng if rng is not None else random.Random()
    rows = _random_value(rng, BRICKS_ROW_MIN, BRICKS_ROW_MAX)
    cols = _random_value(rng, BRICKS_COL_MIN, BRICKS_COL_MAX)
    return BrickMap(rows, cols)