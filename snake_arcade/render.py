from collections import namedtuple

import pygame

from config import *
from .engine import Status

Button = namedtuple("Button", ["label", "action", "rect"])


def control_buttons(state):
    """Lay out the control surface for ``state``.

    Start/Play Again shows while not running, Pause only while running and
    Reset always.
    """
    x = BOARD_PX + (INFO_PANEL_WIDTH - BUTTON_WIDTH) // 2
    y = 120
    buttons = []
    if state.status is Status.RUNNING:
        buttons.append(("Pause", "pause"))
    elif state.status is Status.GAME_OVER:
        buttons.append(("Play Again", "start"))
    else:
        buttons.append(("Start Game", "start"))
    buttons.append(("Reset", "reset"))

    laid_out = []
    for label, action in buttons:
        laid_out.append(Button(label, action, pygame.Rect(x, y, BUTTON_WIDTH, BUTTON_HEIGHT)))
        y += BUTTON_HEIGHT + BUTTON_SPACING
    return laid_out


def idle_label(state):
    """Overlay text for a stopped game: a game left mid-way is paused."""
    return "PAUSED" if state.has_started else "Press Start"


def button_at(buttons, pos):
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button
    return None


def cell_rect(cell, padding=0):
    """Return the pixel rectangle of a grid cell."""
    x, y = cell
    return pygame.Rect(
        x * CELL_SIZE + padding,
        y * CELL_SIZE + padding,
        CELL_SIZE - padding * 2,
        CELL_SIZE - padding * 2,
    )


class Renderer:
    """Draws a GameState. Never touches the engine."""

    def __init__(self, screen):
        self.screen = screen
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 28)
        self.tiny_font = pygame.font.Font(None, 20)

    def draw_text(self, text, pos, color=WHITE, font=None):
        """Draw text centred on ``pos``."""
        if font is None:
            font = self.font
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=pos)
        self.screen.blit(text_surface, text_rect)

    def draw_background(self, board_size):
        board_area = pygame.Rect(0, 0, BOARD_PX, BOARD_PX)
        self.screen.fill(BOARD_BG, board_area)
        self.screen.fill(INFO_PANEL_COLOR, pygame.Rect(BOARD_PX, 0, INFO_PANEL_WIDTH, WINDOW_HEIGHT))

        for i in range(board_size + 1):
            color = GRID_MAJOR_LINE_COLOR if i % GRID_MAJOR_EVERY == 0 else GRID_LINE_COLOR
            offset = i * CELL_SIZE
            pygame.draw.line(self.screen, color, (offset, 0), (offset, BOARD_PX))
            pygame.draw.line(self.screen, color, (0, offset), (BOARD_PX, offset))

    def draw_border(self):
        pygame.draw.rect(self.screen, GREEN, (0, 0, BOARD_PX, BOARD_PX), 2)

    def draw_food(self, cell):
        rect = cell_rect(cell, padding=3)
        pygame.draw.circle(self.screen, RED, rect.center, rect.width // 2)

    def draw_snake(self, cells):
        for cell in cells[1:]:
            pygame.draw.rect(self.screen, DARK_GREEN, cell_rect(cell, padding=1), border_radius=3)
        head = cell_rect(cells[0], padding=1)
        pygame.draw.rect(self.screen, LIGHT_GREEN, head, border_radius=4)
        pygame.draw.rect(self.screen, DARK_GREEN, head, 2, border_radius=4)

    def draw_hud(self, state, muted=False):
        """Score, high score and status in the info panel."""
        base_x = BOARD_PX + 20
        self.screen.blit(self.font.render("SNAKE", True, GREEN), (base_x, 16))
        self.screen.blit(self.small_font.render(f"Score: {state.score}", True, WHITE), (base_x, 62))
        self.screen.blit(self.small_font.render(f"High: {state.high_score}", True, YELLOW), (base_x, 88))
        if muted:
            self.screen.blit(self.tiny_font.render("MUTED", True, RED), (BOARD_PX + INFO_PANEL_WIDTH - 70, 20))

        hints = ["Swipe or arrows to steer", "Space start/pause  R reset  M mute"]
        y = 236
        for hint in hints:
            self.screen.blit(self.tiny_font.render(hint, True, GREY), (base_x, y))
            y += 24

    def draw_buttons(self, buttons):
        for button in buttons:
            color = YELLOW if button.action == "pause" else DARK_GREEN
            if button.action == "reset":
                color = GREY
            pygame.draw.rect(self.screen, color, button.rect, border_radius=6)
            self.draw_text(button.label, button.rect.center, WHITE, self.small_font)

    def draw_status(self, state):
        centre = (BOARD_PX // 2, BOARD_PX // 2)
        if state.status is Status.GAME_OVER:
            overlay = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 140))
            self.screen.blit(overlay, (0, 0))
            self.draw_text("GAME OVER!", (centre[0], centre[1] - 20), RED)
            self.draw_text(f"Final Score: {state.score}", (centre[0], centre[1] + 24), WHITE, self.small_font)
        elif state.status is Status.IDLE:
            self.draw_text(idle_label(state), centre, YELLOW)

    def draw_preview(self, preview):
        """Camera preview (RGB array) at the bottom of the info panel."""
        surface = pygame.surfarray.make_surface(preview.swapaxes(0, 1))
        x = BOARD_PX + (INFO_PANEL_WIDTH - surface.get_width()) // 2
        y = WINDOW_HEIGHT - surface.get_height() - 10
        self.screen.blit(surface, (x, y))

    def draw_quit_confirmation(self):
        overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        self.screen.blit(overlay, (0, 0))
        msg = "Quit? Press Y to confirm, N or Esc to cancel"
        text_surf = self.small_font.render(msg, True, WHITE)
        text_rect = text_surf.get_rect(center=(WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2))
        pad = 12
        box_rect = text_rect.inflate(pad * 2, pad * 2)
        pygame.draw.rect(self.screen, DARK_GREY, box_rect, border_radius=6)
        self.screen.blit(text_surf, text_rect)

    def draw(self, state, buttons, muted=False, preview=None, confirm_quit=False):
        """Draw one full frame."""
        self.draw_background(state.board_size)
        self.draw_food(state.food)
        self.draw_snake(state.snake)
        self.draw_border()
        self.draw_status(state)
        self.draw_hud(state, muted)
        self.draw_buttons(buttons)
        if preview is not None:
            self.draw_preview(preview)
        if confirm_quit:
            self.draw_quit_confirmation()
