"""
renderer.py: Draws the World onto a pygame surface.

Runs every tick in every phase so the menu, score and game-over screens stay
visible while the simulation is paused.
"""

import math
from typing import Optional

import pygame

from .constants import (
    BACKGROUND_COLOR, BIRD_COLOR, TEXT_COLOR, GAME_OVER_COLOR, BUTTON_COLOR,
    HUD_FONT_SIZE, GAME_OVER_FONT_SIZE, HINT_FONT_SIZE, HUD_MARGIN
)
from .data_models import GamePhase, World

HUD_BASELINE = 40
BUTTON_SIZE = (160, 56)


class Renderer:
    def __init__(self, width: int, height: int,
                 pipe_texture: Optional[pygame.Surface] = None,
                 bird_image: Optional[pygame.Surface] = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.width = width
        self.height = height
        self.pipe_texture = pipe_texture
        self.bird_image: Optional[pygame.Surface] = None
        self._bird_scaled: Optional[pygame.Surface] = None
        if bird_image is not None:
            self.set_bird_image(bird_image)

        self.hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.large_font = pygame.font.Font(None, GAME_OVER_FONT_SIZE)
        self.hint_font = pygame.font.Font(None, HINT_FONT_SIZE)

        self.play_button_rect = pygame.Rect((0, 0), BUTTON_SIZE)
        self.play_button_rect.center = (width // 2, height // 2)

    def set_bird_image(self, image: pygame.Surface):
        """Swap the bird sprite. The scaled copy is rebuilt on the next draw."""
        self.bird_image = image
        self._bird_scaled = None

    def draw(self, screen: pygame.Surface, world: World):
        screen.fill(BACKGROUND_COLOR)
        self._draw_bird(screen, world)
        for pipe in world.pipes:
            self._draw_pipe(screen, pipe.x, pipe.width, pipe.top, pipe.bottom)
        self._draw_hud(screen, world)

        phase = world.phase
        if phase is GamePhase.NOT_STARTED:
            self._draw_menu(screen)
        elif phase is GamePhase.OVER:
            self._draw_game_over(screen)

    def _draw_bird(self, screen: pygame.Surface, world: World):
        bird = world.bird
        rect = pygame.Rect(math.floor(bird.x), math.floor(bird.y), bird.width, bird.height)
        if self.bird_image is None:
            pygame.draw.rect(screen, BIRD_COLOR, rect)
            return
        if self._bird_scaled is None or self._bird_scaled.get_size() != rect.size:
            self._bird_scaled = pygame.transform.scale(self.bird_image, rect.size)
        screen.blit(self._bird_scaled, rect)

    def _draw_pipe(self, screen: pygame.Surface, x: float, width: int, top: float, bottom: float):
        # No texture means no pipes on screen; there is no fallback color
        if self.pipe_texture is None:
            return
        regions = (
            (0, top),
            (bottom, self.height - bottom),
        )
        for y, h in regions:
            h = int(h)
            if h <= 0:
                continue
            stretched = pygame.transform.scale(self.pipe_texture, (width, h))
            screen.blit(stretched, (math.floor(x), math.floor(y)))

    def _draw_hud(self, screen: pygame.Surface, world: World):
        score = self.hud_font.render(f"Score: {world.score}", True, TEXT_COLOR)
        screen.blit(score, score.get_rect(bottomleft=(HUD_MARGIN, HUD_BASELINE)))

        best = self.hud_font.render(f"Highscore: {world.best_score}", True, TEXT_COLOR)
        screen.blit(best, best.get_rect(bottomright=(self.width - HUD_MARGIN, HUD_BASELINE)))

    def _draw_menu(self, screen: pygame.Surface):
        title = self.large_font.render("FLAPPY", True, TEXT_COLOR)
        screen.blit(title, title.get_rect(midbottom=(self.width // 2, self.play_button_rect.top - 20)))

        pygame.draw.rect(screen, BUTTON_COLOR, self.play_button_rect, border_radius=8)
        label = self.large_font.render("PLAY", True, TEXT_COLOR)
        screen.blit(label, label.get_rect(center=self.play_button_rect.center))

    def _draw_game_over(self, screen: pygame.Surface):
        center_x = self.width // 2
        over = self.large_font.render("GAME OVER", True, GAME_OVER_COLOR)
        screen.blit(over, over.get_rect(midbottom=(center_x, self.height // 2)))

        hint = self.hint_font.render("Press any key / tap to continue", True, GAME_OVER_COLOR)
        screen.blit(hint, hint.get_rect(midbottom=(center_x, self.height // 2 + 40)))
