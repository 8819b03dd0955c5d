import random

import pytest

from brickbreak.assets import PaddleColor, QuadAtlas
from brickbreak.constants import (
    BALL_MAX_STARTING_SPEED_X,
    BALL_MAX_STARTING_SPEED_Y,
    BALL_MIN_STARTING_SPEED_Y,
    BALL_SIZE,
    BRICK_HEIGHT,
    BRICK_WIDTH,
    BRICKS_COL_MAX,
    BRICKS_COL_MIN,
    BRICKS_ROW_MAX,
    BRICKS_ROW_MIN,
    PADDLE_HEIGHT,
    PADDLE_HUGE_WIDTH,
    PADDLE_LARGE_WIDTH,
    PADDLE_MEDIUM_WIDTH,
    PADDLE_SMALL_WIDTH,
    PADDLE_SPEED,
    STARTING_Y,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
)
from brickbreak.entities import Ball, Brick, BrickMap, Paddle, create_map, paddle_index

WIDTHS = [PADDLE_SMALL_WIDTH, PADDLE_MEDIUM_WIDTH, PADDLE_LARGE_WIDTH, PADDLE_HUGE_WIDTH]


@pytest.mark.parametrize("color", list(PaddleColor))
@pytest.mark.parametrize("width", WIDTHS)
def test_paddle_index_points_at_matching_quad(color, width):
    quad = QuadAtlas().paddles[paddle_index(color, width)]
    assert quad.skin == color
    assert quad.rect.width == width


def test_paddle_index_blue_medium():
    assert paddle_index(PaddleColor.BLUE, PADDLE_MEDIUM_WIDTH) == 1


def test_paddle_index_rejects_zero_skin():
    with pytest.raises(ValueError):
        paddle_index(0, PADDLE_SMALL_WIDTH)


@pytest.mark.parametrize("seed", range(30))
def test_ball_starting_velocity_in_range(seed):
    ball = Ball(0, random.Random(seed))
    assert -BALL_MAX_STARTING_SPEED_X <= ball.dx <= BALL_MAX_STARTING_SPEED_X
    assert BALL_MAX_STARTING_SPEED_Y <= ball.dy <= BALL_MIN_STARTING_SPEED_Y


def test_ball_starts_centred():
    ball = Ball(3, random.Random(1))
    assert ball.x + ball.size / 2 == VIRTUAL_WIDTH / 2
    assert ball.y + ball.size / 2 == VIRTUAL_HEIGHT / 2
    assert ball.size == BALL_SIZE


def test_ball_reset_recentres():
    ball = Ball(0, random.Random(2))
    start = (ball.x, ball.y)
    ball.x, ball.y = 5.0, 5.0
    ball.reset()
    assert (ball.x, ball.y) == start


@pytest.mark.parametrize("skin", range(7))
def test_ball_skin_has_quad(skin):
    ball = Ball(skin, random.Random(0))
    assert QuadAtlas().ball(ball.skin).width == BALL_SIZE


def test_ball_moves_without_bounce():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y, ball.dx, ball.dy = 100.0, 100.0, 10.0, -20.0
    assert ball.update(0.5) is False
    assert (ball.x, ball.y) == (105.0, 90.0)


def test_ball_bounces_off_left_wall():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y, ball.dx, ball.dy = 1.0, 100.0, -100.0, 0.0
    assert ball.update(0.1) is True
    assert ball.x == 0
    assert ball.dx == 100.0


def test_ball_bounces_off_right_wall():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y, ball.dx, ball.dy = VIRTUAL_WIDTH - BALL_SIZE - 1.0, 100.0, 100.0, 0.0
    assert ball.update(0.1) is True
    assert ball.x == VIRTUAL_WIDTH - BALL_SIZE
    assert ball.dx == -100.0


def test_ball_bounces_off_top():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y, ball.dx, ball.dy = 100.0, 1.0, 0.0, -50.0
    assert ball.update(0.1) is True
    assert ball.y == 0
    assert ball.dy == 50.0


def test_ball_falls_through_bottom():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y, ball.dx, ball.dy = 100.0, VIRTUAL_HEIGHT - 1.0, 0.0, 100.0
    assert ball.update(0.1) is False
    assert ball.y > VIRTUAL_HEIGHT


def test_ball_hit_box_follows_position():
    ball = Ball(0, random.Random(0))
    ball.x, ball.y = 40.0, 60.0
    box = ball.hit_box
    assert (box.x, box.y, box.width, box.height) == (40.0, 60.0, BALL_SIZE, BALL_SIZE)


def test_paddle_starts_centred_near_bottom():
    paddle = Paddle()
    assert paddle.x + paddle.width / 2 == VIRTUAL_WIDTH / 2
    assert paddle.y == VIRTUAL_HEIGHT - STARTING_Y
    assert paddle.skin == PaddleColor.BLUE
    assert paddle.index == paddle_index(PaddleColor.BLUE, PADDLE_MEDIUM_WIDTH)


def test_paddle_moves_left_and_right():
    paddle = Paddle()
    start = paddle.x
    paddle.update(0.1, -1)
    assert paddle.dx == -PADDLE_SPEED
    assert paddle.x == pytest.approx(start - PADDLE_SPEED * 0.1)
    paddle.update(0.1, 1)
    assert paddle.dx == PADDLE_SPEED
    assert paddle.x == pytest.approx(start)
    paddle.update(0.1, 0)
    assert paddle.dx == 0
    assert paddle.x == pytest.approx(start)


def test_paddle_clamped_to_screen():
    paddle = Paddle()
    paddle.update(10.0, -1)
    assert paddle.x == 0
    paddle.update(10.0, 1)
    assert paddle.x == VIRTUAL_WIDTH - paddle.width


def test_paddle_rejects_bad_direction():
    with pytest.raises(ValueError):
        Paddle().update(0.1, 2)


def test_paddle_hit_box():
    paddle = Paddle()
    box = paddle.hit_box
    assert (box.x, box.y) == (paddle.x, paddle.y)
    assert (box.width, box.height) == (PADDLE_MEDIUM_WIDTH, PADDLE_HEIGHT)


def test_brick_defaults_and_hit():
    brick = Brick(10, 20)
    assert brick.in_play
    assert brick.index == 0
    assert QuadAtlas().brick(brick.skin, brick.tier).width == BRICK_WIDTH
    assert (brick.hit_box.x, brick.hit_box.y) == (10, 20)
    assert (brick.hit_box.width, brick.hit_box.height) == (BRICK_WIDTH, BRICK_HEIGHT)
    brick.hit()
    assert not brick.in_play


@pytest.mark.parametrize("rows,cols", [(1, 7), (3, 10), (5, 13)])
def test_brick_map_layout(rows, cols):
    level = BrickMap(rows, cols)
    bricks = list(level)
    assert len(bricks) == rows * cols == len(level)
    left = min(b.hit_box.x for b in bricks)
    right = max(b.hit_box.x + b.hit_box.width for b in bricks)
    assert abs(left - (VIRTUAL_WIDTH - right)) <= 1
    assert right - left == cols * BRICK_WIDTH
    ys = sorted({b.hit_box.y for b in bricks})
    assert ys[0] == BRICK_HEIGHT
    assert all(b - a == BRICK_HEIGHT for a, b in zip(ys, ys[1:]))


def test_brick_map_rows_in_order():
    level = BrickMap(2, 7)
    bricks = list(level)
    assert bricks[:7] == level.grid[0]
    assert bricks[7:] == level.grid[1]


def test_brick_map_active_skips_hit_bricks():
    level = BrickMap(2, 7)
    first = next(iter(level))
    first.hit()
    active = list(level.active())
    assert len(active) == len(level) - 1
    assert first not in active


def test_brick_map_rejects_negative_size():
    with pytest.raises(ValueError):
        BrickMap(-1, 7)


@pytest.mark.parametrize("seed", range(20))
def test_create_map_size_in_range(seed):
    level = create_map(random.Random(seed))
    assert BRICKS_ROW_MIN <= level.rows <= BRICKS_ROW_MAX
    assert BRICKS_COL_MIN <= level.cols <= BRICKS_COL_MAX
    assert all(brick.in_play for brick in level)