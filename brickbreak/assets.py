"""Sprite-sheet regions and a keyed store for loaded assets."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from .constants import (
    BALL_SIZE,
    BRICK_ARRAY_SIZE,
    BRICK_HEIGHT,
    BRICK_TIERS,
    BRICK_WIDTH,
    HEART_ARRAY_SIZE,
    HEART_HEIGHT,
    HEART_WIDTH,
    PADDLE_COLORS,
    PADDLE_HEIGHT,
    PADDLE_HUGE_WIDTH,
    PADDLE_LARGE_WIDTH,
    PADDLE_MEDIUM_WIDTH,
    PADDLE_SMALL_WIDTH,
)
from .geometry import Rect

PADDLES_ORIGIN_Y = 64
BALLS_ORIGIN_X = 96
BALLS_ORIGIN_Y = 48
BALLS_AMOUNT_ROW_1 = 4
BALLS_AMOUNT_ROW_2 = 3
_BRICK_SHEET_COLS = 6


class PaddleColor(enum.IntFlag):
    """Paddle skins, one bit each."""

    BLUE = 0b0001
    GREEN = 0b0010
    RED = 0b0100
    PURPLE = 0b1000


@dataclass(frozen=True)
class Quad:
    """A region of the sprite sheet and the skin it shows."""

    rect: Rect
    skin: int


def generate_paddle_quads() -> list[Quad]:
    """Paddle regions: small, medium, large, huge for each colour in turn."""
    quads: list[Quad] = []
    y = PADDLES_ORIGIN_Y
    for color in range(PADDLE_COLORS):
        skin = 1 << color
        medium_x = PADDLE_SMALL_WIDTH
        large_x = medium_x + PADDLE_MEDIUM_WIDTH
        quads += [
            Quad(Rect(0, y, PADDLE_SMALL_WIDTH, PADDLE_HEIGHT), skin),
            Quad(Rect(medium_x, y, PADDLE_MEDIUM_WIDTH, PADDLE_HEIGHT), skin),
            Quad(Rect(large_x, y, PADDLE_LARGE_WIDTH, PADDLE_HEIGHT), skin),
            Quad(Rect(0, y + PADDLE_HEIGHT, PADDLE_HUGE_WIDTH, PADDLE_HEIGHT), skin),
        ]
        y += 2 * PADDLE_HEIGHT
    return quads


def generate_ball_quads() -> list[Quad]:
    """Ball regions, laid out over two rows of the sheet."""
    first = [
        Quad(Rect(BALLS_ORIGIN_X + n * BALL_SIZE, BALLS_ORIGIN_Y, BALL_SIZE, BALL_SIZE), n)
        for n in range(BALLS_AMOUNT_ROW_1)
    ]
    second = [
        Quad(
            Rect(BALLS_ORIGIN_X + n * BALL_SIZE, BALLS_ORIGIN_Y + BALL_SIZE, BALL_SIZE, BALL_SIZE),
            n + BALLS_AMOUNT_ROW_1,
        )
        for n in range(BALLS_AMOUNT_ROW_2)
    ]
    return first + second


def generate_brick_quads() -> list[Quad]:
    """Brick regions; the column offset keeps growing from one row to the next."""
    return [
        Quad(
            Rect(n * BRICK_WIDTH, (n // _BRICK_SHEET_COLS) * BRICK_HEIGHT, BRICK_WIDTH, BRICK_HEIGHT),
            n % BRICK_TIERS,
        )
        for n in range(BRICK_ARRAY_SIZE)
    ]


def generate_heart_quads() -> list[Quad]:
    """Heart regions: full (skin 0) then empty (skin 1)."""
    return [
        Quad(Rect(n * HEART_WIDTH, 0, HEART_WIDTH, HEART_HEIGHT), n)
        for n in range(HEART_ARRAY_SIZE)
    ]


def _slot(quads: list[Quad], index: int, kind: str) -> Quad:
    if not 0 <= index < len(quads):
        raise KeyError(f"no {kind} quad at index {index}")
    return quads[index]


class QuadAtlas:
    """All sprite-sheet regions, looked up by what they show."""

    def __init__(self) -> None:
        self.paddles = generate_paddle_quads()
        self.balls = generate_ball_quads()
        self.bricks = generate_brick_quads()
        self.hearts = generate_heart_quads()

    def paddle(self, skin: int, width: int) -> Rect:
        """Region of the paddle with the given colour bit and width."""
        if skin <= 0:
            raise KeyError(f"invalid paddle skin {skin}")
        color_index = (skin & -skin).bit_length() - 1
        size_index = width // PADDLE_SMALL_WIDTH - 1
        quad = _slot(self.paddles, color_index * PADDLE_COLORS + size_index, "paddle")
        if quad.skin != skin or quad.rect.width != width:
            raise KeyError(f"no paddle quad for skin {skin} and width {width}")
        return quad.rect

    def ball(self, skin: int) -> Rect:
        """Region of the ball with the given skin."""
        quad = _slot(self.balls, skin, "ball")
        if quad.skin != skin:
            raise KeyError(f"no ball quad for skin {skin}")
        return quad.rect

    def brick(self, skin: int, tier: int) -> Rect:
        """Region of the brick with the given skin and tier."""
        quad = _slot(self.bricks, skin * 4 + tier, "brick")
        if quad.skin != skin:
            raise KeyError(f"no brick quad for skin {skin} and tier {tier}")
        return quad.rect

    def heart(self, skin: int) -> Rect:
        """Region of a full (0) or empty (1) heart."""
        if skin not in (0, 1):
            raise KeyError(f"no heart quad for skin {skin}")
        return self.hearts[skin].rect


class AssetTable:
    """Loaded assets stored by name; a later entry hides an earlier one."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}

    def add(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self._entries[key] = value

    def get(self, key: str) -> Optional[Any]:
        """The value stored under ``key``, or None if there is none."""
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries