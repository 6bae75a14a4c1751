import random

import pytest

from snake_arcade.food import Food
from snake_arcade.snake import Direction, Snake


def test_direction_opposites():
    assert Direction.UP.opposite is Direction.DOWN
    assert Direction.LEFT.opposite is Direction.RIGHT
    assert Direction.LEFT.is_reverse_of(Direction.RIGHT)
    assert not Direction.LEFT.is_reverse_of(Direction.UP)
    assert not Direction.LEFT.is_reverse_of(None)


def test_next_head_steps():
    snake = Snake([(5, 5)])
    assert snake.next_head(Direction.UP) == (5, 4)
    assert snake.next_head(Direction.DOWN) == (5, 6)
    assert snake.next_head(Direction.LEFT) == (4, 5)
    assert snake.next_head(Direction.RIGHT) == (6, 5)


def test_advance_with_and_without_growth():
    snake = Snake([(5, 5), (4, 5)])
    snake.advance((6, 5))
    assert snake.cells() == ((6, 5), (5, 5))

    snake.advance((7, 5), grow=True)
    assert snake.cells() == ((7, 5), (6, 5), (5, 5))
    assert snake.head == (7, 5)
    assert snake.tail == (5, 5)


def test_self_collision_tail_handling():
    snake = Snake([(5, 5), (5, 6), (6, 6), (6, 5)])
    assert snake.check_self_collision((6, 5))
    assert not snake.check_self_collision((6, 5), include_tail=False)
    assert snake.check_self_collision((6, 6), include_tail=False)


def test_wall_collision_bounds():
    snake = Snake()
    assert not snake.check_wall_collision((0, 0), 20)
    assert not snake.check_wall_collision((19, 19), 20)
    assert snake.check_wall_collision((-1, 0), 20)
    assert snake.check_wall_collision((0, 20), 20)


def test_snake_rejects_bad_bodies():
    with pytest.raises(ValueError):
        Snake([])
    with pytest.raises(ValueError):
        Snake([(1, 1), (1, 1)])


def test_food_respawn_avoids_occupied_cells():
    food = Food(board_size=3)
    occupied = [(x, y) for x in range(3) for y in range(3) if (x, y) != (2, 1)]

    pos = food.respawn(occupied, random.Random(0))

    assert pos == (2, 1)
    assert food.position == (2, 1)
    assert food.check_collision((2, 1))
    assert not food.check_collision((0, 0))


def test_food_respawn_is_spread_over_free_cells():
    food = Food(board_size=4)
    rng = random.Random(11)
    seen = {food.respawn([(0, 0)], rng) for _ in range(500)}

    assert (0, 0) not in seen
    assert len(seen) == 15
