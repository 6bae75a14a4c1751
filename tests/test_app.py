import random
from unittest.mock import patch

import pygame
import pytest

from snake_arcade.app import SnakeGameApp
from snake_arcade.engine import GameEngine, Status
from snake_arcade.snake import Direction


@pytest.fixture
def app():
    game = SnakeGameApp(engine=GameEngine(rng=random.Random(4)), camera=False)
    yield game
    game.cleanup()


def test_start_arms_driver(app):
    app.perform("start")
    assert app.engine.status is Status.RUNNING
    assert app.driver.active


def test_reset_replaces_handle_and_drops_swipes(app):
    app.perform("start")
    first = app.driver.handle
    app.swipe.begin((10, 10))
    app.finger_swipe.begin((20, 20))

    app.perform("reset")

    assert app.driver.handle is not None
    assert app.driver.handle != first
    assert app.swipe.anchor is None
    assert app.finger_swipe.anchor is None
    assert app.engine.status is Status.IDLE


def test_start_after_game_over_restarts_driver(app):
    app.perform("start")
    app.engine.snake.reset([(19, 19)])
    app.engine.tick()
    assert app.engine.status is Status.GAME_OVER

    with patch.object(app.driver, "restart", wraps=app.driver.restart) as restart:
        app.perform("start")

    restart.assert_called_once_with()
    assert app.engine.status is Status.RUNNING
    assert app.engine.snake.cells() == ((10, 10),)


def test_toggle_pauses_running_game(app):
    app.perform("toggle")
    assert app.engine.status is Status.RUNNING
    app.perform("toggle")
    assert app.engine.status is Status.IDLE


def test_unknown_action_raises(app):
    with pytest.raises(ValueError):
        app.perform("explode")


def test_quit_confirmation_keys(app):
    app.handle_key(pygame.K_ESCAPE)
    assert app.exit_confirmation
    app.handle_key(pygame.K_n)
    assert not app.exit_confirmation
    assert app.running

    app.handle_key(pygame.K_q)
    assert app.exit_confirmation
    app.handle_key(pygame.K_ESCAPE)
    assert not app.exit_confirmation

    app.handle_key(pygame.K_ESCAPE)
    app.handle_key(pygame.K_y)
    assert not app.running


def test_keys_drive_controls_and_direction(app):
    app.handle_key(pygame.K_SPACE)
    assert app.engine.status is Status.RUNNING

    app.handle_key(pygame.K_UP)
    assert app.engine.direction is Direction.UP

    app.handle_key(pygame.K_p)
    assert app.engine.status is Status.IDLE

    app.handle_key(pygame.K_RETURN)
    assert app.engine.status is Status.RUNNING

    app.handle_key(pygame.K_r)
    assert app.engine.status is Status.IDLE
    assert app.engine.direction is Direction.RIGHT


def test_keys_ignored_while_confirming_quit(app):
    app.perform("start")
    app.handle_key(pygame.K_ESCAPE)
    app.handle_key(pygame.K_UP)
    app.handle_key(pygame.K_r)

    assert app.engine.direction is Direction.RIGHT
    assert app.engine.status is Status.RUNNING
    assert app.running


def test_board_swipe_steers(app):
    app.perform("start")
    app.handle_pointer_down((100, 200))
    app.handle_pointer_up((100, 120))
    assert app.engine.direction is Direction.UP
