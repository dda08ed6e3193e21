"""Sathi Snake window: frame loop, HUD and overlay around a GameSession."""

from __future__ import annotations

import logging

import pygame

from .audio import AudioEngine
from .config import (
    AUDIO_MUTED,
    BOARD_PADDING,
    FONT_NAME,
    FONT_SIZE,
    FPS,
    GAME_OVER_TEXT,
    MIN_BOARD,
    PALETTE,
    SMALL_FONT_SIZE,
    START_TEXT,
    TILE_COUNT,
    TITLE,
    WINDOW_SIZE,
)
from .controls import InputTranslator, Intent
from .render import Renderer
from .session import GameSession
from .snake import Phase

logger = logging.getLogger(__name__)


class SathiSnake:
    """Owns the window and wires input, session, audio and renderer together."""

    def __init__(self) -> None:
        pygame.mixer.pre_init(22050, -16, 1)
        pygame.init()
        self.window = pygame.display.set_mode(
            (WINDOW_SIZE, WINDOW_SIZE), pygame.RESIZABLE | pygame.DOUBLEBUF
        )
        pygame.display.set_caption(TITLE)
        self.font = pygame.font.SysFont(FONT_NAME, FONT_SIZE, bold=True)
        self.small_font = pygame.font.SysFont(FONT_NAME, SMALL_FONT_SIZE)
        self.audio = AudioEngine(muted=AUDIO_MUTED)

        self.score_text = "0"
        self.overlay_lines: tuple[str, ...] = START_TEXT

        self.session = GameSession(listeners=(self.audio, self))
        self.renderer = Renderer(TILE_COUNT)
        self.controls = InputTranslator(self.window.get_size())
        self.board_rect = pygame.Rect(0, 0, 0, 0)
        self._layout()

    # --- Session listener ----------------------------------------------

    def on_score(self, score: int) -> None:
        self.score_text = str(score)

    def on_phase(self, phase: Phase) -> None:
        if phase is Phase.RUNNING:
            self.overlay_lines = ()
        elif phase is Phase.GAME_OVER:
            self.overlay_lines = GAME_OVER_TEXT

    # --- Layout --------------------------------------------------------

    def _layout(self) -> None:
        """Fit the largest square board in the window and redraw at rest."""
        width, height = self.window.get_size()
        size = max(MIN_BOARD, min(width, height) - 2 * BOARD_PADDING)
        self.board_rect = pygame.Rect(0, 0, size, size)
        self.board_rect.center = (width // 2, height // 2)
        self.controls.window_size = (width, height)
        self.renderer.layout(size)
        self.draw(0.0)
        pygame.display.flip()

    # --- HUD & overlay -------------------------------------------------

    def _draw_overlay(self, lines: tuple[str, ...]) -> None:
        overlay = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        overlay.fill(PALETTE["overlay"])
        center_x = self.board_rect.width // 2
        top = self.board_rect.height // 2 - len(lines) * (SMALL_FONT_SIZE + 8) // 2
        for idx, text in enumerate(lines):
            font = self.font if idx == 0 else self.small_font
            surf = font.render(text, True, PALETTE["text"])
            rect = surf.get_rect()
            rect.center = (center_x, top + idx * (SMALL_FONT_SIZE + 12))
            overlay.blit(surf, rect)
        self.window.blit(overlay, self.board_rect.topleft)

    def show_score(self) -> None:
        """Draw the current score in the top-left corner of the board."""
        score_text = self.font.render(
            f"SCORE {self.score_text}", True, PALETTE["text"]
        )
        hud_rect = pygame.Rect(
            0, 0, score_text.get_width() + 16, score_text.get_height() + 8
        )
        hud_rect.topleft = (self.board_rect.left + 8, self.board_rect.top + 8)
        hud = pygame.Surface(hud_rect.size, pygame.SRCALPHA)
        hud.fill(PALETTE["hud"])
        hud.blit(score_text, (8, 4))
        self.window.blit(hud, hud_rect.topleft)

    # --- Input ---------------------------------------------------------

    def _apply_intent(self, intent: Intent) -> None:
        session = self.session
        if intent is Intent.START:
            if not session.running:
                session.start()
            return
        if session.phase is Phase.NOT_STARTED:
            session.start()
        session.request_direction(intent.direction)

    def handle_events(self) -> bool:
        """Handle window events and forward translated intents."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.window = pygame.display.get_surface()
                self._layout()
                continue
            intent = self.controls.translate(event)
            if intent is not None:
                self._apply_intent(intent)
        return True

    # --- Draw & main loop ----------------------------------------------

    def draw(self, fraction: float) -> None:
        self.window.fill(PALETTE["backdrop"])
        self.renderer.draw(
            self.window, self.session.snapshot(), fraction, self.board_rect.topleft
        )
        self.show_score()
        if self.overlay_lines:
            self._draw_overlay(self.overlay_lines)

    def start(self) -> None:
        """Run the main loop: handle events, step at a fixed rate, then render."""
        clock = pygame.time.Clock()
        running = True

        while running:
            elapsed_ms = clock.tick(FPS)
            running = self.handle_events()
            self.session.tick(elapsed_ms)
            self.draw(self.session.fraction)
            pygame.display.flip()

        pygame.quit()
