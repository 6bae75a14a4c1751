import logging

import pygame

from config import *
from .audio import SoundBank
from .driver import TickDriver
from .engine import GameEngine, TickResult
from .gestures import KEY_DIRECTIONS, SwipeDetector
from .render import Renderer, button_at, control_buttons
from .storage import JsonFileStore

logger = logging.getLogger(__name__)


class SnakeGameApp:
    """pygame front end: input, tick driver, rendering and sound around a GameEngine."""

    def __init__(self, engine=None, camera=CAMERA_ENABLED):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()

        if engine is None:
            engine = GameEngine(store=JsonFileStore(HIGHSCORE_FILE))
        self.engine = engine
        self.driver = TickDriver(self.engine, GAME_SPEED)
        self.renderer = Renderer(self.screen)
        self.sounds = SoundBank()

        self.swipe = SwipeDetector()
        self.finger_swipe = SwipeDetector()
        self.camera = self._open_camera() if camera else None
        self.preview = None

        self.running = True
        # When True, the user must confirm quit with Y
        self.exit_confirmation = False

    def _open_camera(self):
        try:
            from .tracker import FingerCamera

            camera = FingerCamera()
            camera.start()
        except Exception as exc:
            logger.warning("Finger tracking disabled: %s", exc)
            return None
        logger.info("Finger tracking enabled")
        return camera

    def perform(self, action):
        """Run a control-surface action: "start", "pause", "toggle" or "reset"."""
        if action == "toggle":
            action = "pause" if self.engine.is_playing else "start"

        if action == "start":
            was_over = self.engine.is_game_over
            self.engine.start()
            if was_over:
                self.driver.restart()
            else:
                self.driver.start()
            self.sounds.play("start")
        elif action == "pause":
            self.engine.pause()
            self.sounds.play("click")
        elif action == "reset":
            self.engine.reset()
            self.driver.restart()
            self.swipe.cancel()
            self.finger_swipe.cancel()
            self.sounds.play("click")
        else:
            raise ValueError(f"unknown action {action!r}")
        logger.debug("%s -> %s", action, self.engine.status.value)

    def handle_key(self, key):
        if self.exit_confirmation:
            if key == pygame.K_y:
                logger.info("Exit confirmed by user")
                self.running = False
            elif key in (pygame.K_n, pygame.K_ESCAPE):
                self.exit_confirmation = False
            return

        if key in KEY_DIRECTIONS:
            self.engine.set_direction(KEY_DIRECTIONS[key])
        elif key in (pygame.K_ESCAPE, pygame.K_q):
            self.exit_confirmation = True
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.perform("toggle")
        elif key == pygame.K_RETURN and not self.engine.is_playing:
            self.perform("start")
        elif key == pygame.K_r:
            self.perform("reset")
        elif key == pygame.K_m:
            self.sounds.toggle_mute()

    def handle_pointer_down(self, pos):
        button = button_at(control_buttons(self.engine.snapshot()), pos)
        if button is not None:
            self.perform(button.action)
        elif pos[0] < BOARD_PX:
            self.swipe.begin(pos)

    def handle_pointer_up(self, pos):
        direction = self.swipe.end(pos)
        if direction is not None:
            self.engine.set_direction(direction)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
            elif self.exit_confirmation:
                continue
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.handle_pointer_down(event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                self.handle_pointer_up(event.pos)

    def poll_camera(self):
        if self.camera is None:
            return
        finger_pos, self.preview = self.camera.latest()
        direction = self.finger_swipe.feed(finger_pos)
        if direction is not None:
            self.engine.set_direction(direction)

    def play_tick_sound(self, result):
        if result is TickResult.ATE:
            self.sounds.play("eat")
        elif result is not None and result.is_collision:
            self.sounds.play("die")

    def run(self):
        """Main game loop."""
        try:
            while self.running:
                elapsed = self.clock.tick(FPS)
                self.handle_events()
                self.poll_camera()

                if not self.exit_confirmation:
                    self.play_tick_sound(self.driver.update(elapsed))

                state = self.engine.snapshot()
                self.renderer.draw(
                    state,
                    control_buttons(state),
                    muted=self.sounds.muted,
                    preview=self.preview,
                    confirm_quit=self.exit_confirmation,
                )
                pygame.display.flip()
        finally:
            self.cleanup()

    def cleanup(self):
        """Stop the driver and camera, then shut pygame down."""
        self.running = False
        self.driver.cancel()
        if self.camera is not None:
            self.camera.stop()
            self.camera = None
        pygame.quit()
