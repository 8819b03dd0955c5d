"""The game's screens and the rules that connect them."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional, Protocol

from .assets import QuadAtlas
from .constants import (
    BALL_SIZE,
    CONTINUE_TEXT,
    FINAL_SCORE_TEXT,
    FONT_LARGE,
    FONT_MEDIUM,
    FONT_SMALL,
    GAME_OVER_TEXT,
    GAME_TITLE,
    HEART_HEIGHT,
    HEART_WIDTH,
    MAX_HEALTH,
    OPTION_HIGH_SCORES,
    OPTION_START,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)
from .entities import Ball, BrickMap, Paddle, create_map
from .geometry import Rect
from .smile import State, StateMachine

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
HIGHLIGHT: Color = (103, 255, 255, 255)
PAUSE_TEXT = "PAUSE"
PROMPT_TO_PLAY = "Press Enter to serve!"
BALL_SKINS = 7
BRICK_POINTS = 10


class Key(enum.Enum):
    """The keys the game listens to."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    SPACE = "space"


class MenuOption(enum.IntEnum):
    """Entries of the title menu."""

    START = 0
    HIGH_SCORES = 1


@dataclass(frozen=True)
class Keys:
    """Keyboard state for one frame: keys held down and keys just pressed."""

    down: frozenset = field(default_factory=frozenset)
    pressed: frozenset = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "down", frozenset(self.down))
        object.__setattr__(self, "pressed", frozenset(self.pressed))

    def is_down(self, key: Key) -> bool:
        """True while ``key`` is held."""
        return key in self.down

    def is_pressed(self, key: Key) -> bool:
        """True on the frame ``key`` went down."""
        return key in self.pressed


class Canvas(Protocol):
    """What the game needs from a drawing surface."""

    def draw_sprite(self, texture: str, source: Optional[Rect], dest: Rect) -> None:
        """Draw ``source`` of ``texture`` (all of it when None) into ``dest``."""

    def draw_text(self, text: str, pos: tuple[float, float], size: int, color: Color) -> None:
        """Draw ``text`` with its top-left corner at ``pos``."""

    def measure_text(self, text: str, size: int) -> tuple[float, float]:
        """Width and height of ``text`` at ``size``."""


def score_text(score: int) -> str:
    """The score as shown in the corner of the screen."""
    return f"Score: {score:04d}"


def _final_score_text(score: int) -> str:
    return f"{FINAL_SCORE_TEXT} {score:04d}"


class Game:
    """All game state, with the screens wired into a state machine."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        play_sound: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self._play_sound = play_sound if play_sound is not None else (lambda name: None)
        self.atlas = QuadAtlas()
        self.health = MAX_HEALTH
        self.score = 0
        self.paused = False
        self.highlighted = MenuOption.START
        self.ball: Optional[Ball] = None
        self.paddle: Optional[Paddle] = None
        self.bricks: Optional[BrickMap] = None
        self._keys = Keys()
        self._canvas: Optional[Canvas] = None

        self.start_state = State("start", update=self._start_update, draw=self._start_draw)
        self.game_init_state = State("game init", enter=self._game_init_enter)
        self.serve_state = State(
            "serve",
            enter=self._serve_enter,
            update=self._serve_update,
            draw=self._serve_draw,
        )
        self.play_state = State("play", update=self._play_update, draw=self._play_draw)
        self.game_over_state = State(
            "game over", update=self._game_over_update, draw=self._game_over_draw
        )

        self.machine = StateMachine()
        self.machine.change_state(self.start_state, None)

    @property
    def state_name(self) -> Optional[str]:
        """Id of the active screen, or None when none is active."""
        current = self.machine.current
        return current.id if current is not None else None

    def update(self, dt: float, keys: Optional[Keys] = None) -> None:
        """Advance the active screen by ``dt`` seconds with this frame's keys."""
        self._keys = keys if keys is not None else Keys()
        self.machine.update(dt)

    def draw(self, canvas: Canvas) -> None:
        """Draw background, HUD and the active screen onto ``canvas``."""
        self._canvas = canvas
        try:
            canvas.draw_sprite(
                "background", None, Rect(0, 0, VIRTUAL_WIDTH + 2, VIRTUAL_HEIGHT + 2)
            )
            self.draw_hud(canvas)
            self.machine.draw()
        finally:
            self._canvas = None

    def draw_hud(self, canvas: Canvas) -> None:
        """Draw the hearts and the score."""
        x = float(VIRTUAL_WIDTH - 100)
        empty = max(MAX_HEALTH - self.health, 0)
        for skin in [0] * max(self.health, 0) + [1] * empty:
            canvas.draw_sprite(
                "hearts", self.atlas.heart(skin), Rect(x, 4, HEART_WIDTH, HEART_HEIGHT)
            )
            x += HEART_WIDTH + 2
        canvas.draw_text(score_text(self.score), (VIRTUAL_WIDTH - 60, 5), FONT_SMALL, WHITE)

    def check_paddle_collision(self) -> bool:
        """Bounce the ball off the paddle, steering it by the paddle's motion."""
        ball, paddle = self.ball, self.paddle
        if ball is None or paddle is None or not ball.hit_box.collides(paddle.hit_box):
            return False
        ball.dy *= -1
        ball.y = paddle.y - BALL_SIZE
        middle = paddle.x + paddle.width / 2.0
        if ball.x < middle and paddle.dx < 0:
            ball.dx = -(50 + 8 * (middle - ball.x))
        elif ball.x > middle and paddle.dx > 0:
            ball.dx = 50 + 8 * (ball.x - middle)
        self._play_sound("paddle hit")
        return True

    def check_ball_brick_collision(self) -> bool:
        """Break the first brick the ball touches and bounce off it."""
        ball = self.ball
        if ball is None or self.bricks is None:
            return False
        box = ball.hit_box
        brick = next((b for b in self.bricks.active() if box.collides(b.hit_box)), None)
        if brick is None:
            return False

        self.score += BRICK_POINTS
        left = int(brick.hit_box.x)
        right = left + int(brick.hit_box.width)
        if ball.x + 2 < left and ball.dx > 0:
            ball.x = float(left - ball.size)
            ball.dx *= -1
        elif ball.x + ball.size - 2 > right and ball.dx < 0:
            ball.x = float(right)
            ball.dx *= -1
        elif ball.y < brick.hit_box.y:
            ball.dy *= -1
            ball.y = brick.hit_box.y - ball.size
        else:
            ball.dy *= -1
            ball.y = brick.hit_box.y + brick.hit_box.height

        if abs(ball.dy) < 150:
            ball.dy *= 1.02

        brick.hit()
        self._play_sound("brick hit 2")
        return True

    # --- helpers -------------------------------------------------------

    def _direction(self) -> int:
        if self._keys.is_down(Key.LEFT):
            return -1
        if self._keys.is_down(Key.RIGHT):
            return 1
        return 0

    def _draw_centered(self, text: str, size: int, y: float, color: Color = WHITE) -> None:
        canvas = self._canvas
        if canvas is None:
            return
        width, _ = canvas.measure_text(text, size)
        canvas.draw_text(text, ((VIRTUAL_WIDTH - width) / 2.0, y), size, color)

    def _draw_field(self) -> None:
        canvas = self._canvas
        if canvas is None:
            return
        if self.paddle is not None:
            canvas.draw_sprite(
                "main", self.atlas.paddle(self.paddle.skin, self.paddle.width), self.paddle.hit_box
            )
        if self.ball is not None:
            canvas.draw_sprite("main", self.atlas.ball(self.ball.skin), self.ball.hit_box)
        if self.bricks is not None:
            for brick in self.bricks.active():
                canvas.draw_sprite("main", self.atlas.brick(brick.skin, brick.tier), brick.hit_box)

    # --- start screen --------------------------------------------------

    def _start_update(self, dt: float) -> None:
        if self._keys.is_pressed(Key.UP) or self._keys.is_pressed(Key.DOWN):
            self.highlighted = MenuOption((self.highlighted + 1) % len(MenuOption))
            self._play_sound("paddle hit")

        if self._keys.is_pressed(Key.ENTER) and self.highlighted is MenuOption.START:
            self.paddle = Paddle()
            self.ball = Ball(self.rng.randint(0, BALL_SKINS - 1), self.rng)
            self.machine.change_state(self.game_init_state, None)

    def _start_draw(self) -> None:
        self._draw_centered(GAME_TITLE, FONT_LARGE, VIRTUAL_HEIGHT / 3.0)
        start_color = HIGHLIGHT if self.highlighted is MenuOption.START else WHITE
        scores_color = HIGHLIGHT if self.highlighted is MenuOption.HIGH_SCORES else WHITE
        self._draw_centered(OPTION_START, FONT_MEDIUM, VIRTUAL_HEIGHT / 2.0 + 70, start_color)
        self._draw_centered(
            OPTION_HIGH_SCORES, FONT_MEDIUM, VIRTUAL_HEIGHT / 2.0 + 90, scores_color
        )

    # --- new game ------------------------------------------------------

    def _game_init_enter(self, args: Any) -> None:
        self.health = MAX_HEALTH
        self.score = 0
        self.bricks = create_map(self.rng)
        self.machine.change_state(self.serve_state, None)

    # --- serve ---------------------------------------------------------

    def _serve_enter(self, args: Any) -> None:
        if self.ball is not None and self.paddle is not None:
            self.ball.y = self.paddle.y - self.ball.size

    def _serve_update(self, dt: float) -> None:
        if self._keys.is_pressed(Key.ENTER):
            self.machine.change_state(self.play_state, None)
        if self.paddle is None or self.ball is None:
            return
        self.paddle.update(dt, self._direction())
        self.ball.x = self.paddle.x + (self.paddle.width - self.ball.size) / 2.0

    def _serve_draw(self) -> None:
        canvas = self._canvas
        if canvas is not None:
            width, height = canvas.measure_text(PROMPT_TO_PLAY, FONT_MEDIUM)
            canvas.draw_text(
                PROMPT_TO_PLAY,
                ((VIRTUAL_WIDTH - width) / 2.0, (VIRTUAL_HEIGHT - height) / 2.0),
                FONT_MEDIUM,
                WHITE,
            )
        self._draw_field()

    # --- play ----------------------------------------------------------

    def _play_update(self, dt: float) -> None:
        if self._keys.is_pressed(Key.SPACE):
            self.paused = not self.paused
            self._play_sound("pause")

        if self.paused or self.paddle is None or self.ball is None:
            return

        self.paddle.update(dt, self._direction())
        if self.ball.update(dt):
            self._play_sound("wall hit")

        self.check_paddle_collision()
        self.check_ball_brick_collision()

        if self.ball.y > VIRTUAL_HEIGHT:
            self.health -= 1
            self._play_sound("hurt")
            if self.health == 0:
                self.bricks = None
                self.machine.change_state(self.game_over_state, None)
            else:
                self.machine.change_state(self.serve_state, None)

    def _play_draw(self) -> None:
        self._draw_field()
        canvas = self._canvas
        if self.paused and canvas is not None:
            width, height = canvas.measure_text(PAUSE_TEXT, FONT_LARGE)
            canvas.draw_text(
                PAUSE_TEXT,
                ((VIRTUAL_WIDTH - width) / 2.0, (VIRTUAL_HEIGHT - height) / 2.0),
                FONT_LARGE,
                WHITE,
            )

    # --- game over -----------------------------------------------------

    def _game_over_update(self, dt: float) -> None:
        if self._keys.is_pressed(Key.ENTER):
            self.machine.change_state(self.game_init_state, None)

    def _game_over_draw(self) -> None:
        self._draw_centered(GAME_OVER_TEXT, FONT_LARGE, VIRTUAL_HEIGHT / 3.0)
        self._draw_centered(_final_score_text(self.score), FONT_MEDIUM, VIRTUAL_HEIGHT / 2.0)
        self._draw_centered(CONTINUE_TEXT, FONT_MEDIUM, VIRTUAL_HEIGHT - VIRTUAL_HEIGHT / 4.0)