#!/usr/bin/env python3
"""
Test suite for flappy.renderer — drawing the World on an offscreen surface.
Uses SDL's dummy video driver, so no window opens.
"""

import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame

from flappy.constants import BACKGROUND_COLOR, BIRD_COLOR
from flappy.data_models import Pipe, World
from flappy.renderer import Renderer

WIDTH, HEIGHT = 400, 600
GREEN = (0, 200, 0)
BLUE = (0, 0, 255)


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def has_pixel(surface, rect, predicate):
    """True if any pixel inside rect satisfies predicate(r, g, b)."""
    for x in range(rect.left, rect.right):
        for y in range(rect.top, rect.bottom):
            if predicate(*rgb(surface, (x, y))):
                return True
    return False


def is_white(r, g, b):
    return r > 200 and g > 200 and b > 200


def is_red(r, g, b):
    return r > 200 and g < 60 and b < 60


class RendererTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def setUp(self):
        self.screen = pygame.Surface((WIDTH, HEIGHT))
        texture = pygame.Surface((4, 4))
        texture.fill(GREEN)
        self.renderer = Renderer(WIDTH, HEIGHT, pipe_texture=texture)
        self.world = World(width=WIDTH, height=HEIGHT)
        self.world.started = True


# =============================================================================
# 1. BIRD
# =============================================================================

class TestBird(RendererTestCase):
    """Placeholder rectangle or the user's image."""

    def test_placeholder(self):
        """Without an image the bird is a yellow rectangle."""
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (66, 316)), BIRD_COLOR)
        self.assertEqual(rgb(self.screen, (66, 340)), BACKGROUND_COLOR)

    def test_follows_position(self):
        """The drawn bird moves with bird.y."""
        self.world.bird.y = 100
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (66, 116)), BIRD_COLOR)
        self.assertEqual(rgb(self.screen, (66, 316)), BACKGROUND_COLOR)

    def test_custom_image(self):
        """A loaded image replaces the placeholder, scaled to bird size."""
        image = pygame.Surface((8, 8))
        image.fill(BLUE)
        self.renderer.set_bird_image(image)
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (51, 301)), BLUE)
        self.assertEqual(rgb(self.screen, (80, 330)), BLUE)

    def test_image_swap(self):
        """Setting a second image replaces the first on the next frame."""
        first = pygame.Surface((8, 8))
        first.fill(BLUE)
        second = pygame.Surface((8, 8))
        second.fill((255, 0, 255))
        self.renderer.set_bird_image(first)
        self.renderer.draw(self.screen, self.world)
        self.renderer.set_bird_image(second)
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (66, 316)), (255, 0, 255))


# =============================================================================
# 2. PIPES
# =============================================================================

class TestPipes(RendererTestCase):
    """Top and bottom sections stretched from the texture."""

    def test_sections_and_gap(self):
        """Texture fills above the gap and below it, not inside."""
        self.world.pipes.append(Pipe(x=200, top=100, bottom=292))
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (230, 99)), GREEN)
        self.assertEqual(rgb(self.screen, (230, 200)), BACKGROUND_COLOR)
        self.assertEqual(rgb(self.screen, (230, 292)), GREEN)
        self.assertEqual(rgb(self.screen, (230, 599)), GREEN)

    def test_pipe_width(self):
        """Each section is exactly one pipe width wide."""
        self.world.pipes.append(Pipe(x=200, top=100, bottom=292))
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (200, 400)), GREEN)
        self.assertEqual(rgb(self.screen, (259, 400)), GREEN)
        self.assertEqual(rgb(self.screen, (260, 400)), BACKGROUND_COLOR)
        self.assertEqual(rgb(self.screen, (199, 400)), BACKGROUND_COLOR)

    def test_partially_off_screen(self):
        """A pipe half past the left edge still draws its visible part."""
        self.world.pipes.append(Pipe(x=-30, top=100, bottom=292))
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (10, 450)), GREEN)

    def test_fractional_x_rounds_down(self):
        """x=-0.5 is drawn from column -1, matching where it collides."""
        self.world.pipes.append(Pipe(x=-0.5, top=100, bottom=292))
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (58, 450)), GREEN)
        self.assertEqual(rgb(self.screen, (59, 450)), BACKGROUND_COLOR)

    def test_missing_texture_draws_nothing(self):
        """No texture, no pipes, and no error."""
        renderer = Renderer(WIDTH, HEIGHT)
        self.world.pipes.append(Pipe(x=200, top=100, bottom=292))
        renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (230, 450)), BACKGROUND_COLOR)


# =============================================================================
# 3. OVERLAYS
# =============================================================================

class TestOverlays(RendererTestCase):
    """Score, best score, menu and game-over text."""

    def test_scores_always_drawn(self):
        """Score at the left and best at the right, in every phase."""
        for started, over in ((False, False), (True, False), (True, True)):
            self.world.started, self.world.over = started, over
            self.renderer.draw(self.screen, self.world)
            self.assertTrue(has_pixel(self.screen, pygame.Rect(10, 10, 120, 30), is_white))
            self.assertTrue(has_pixel(self.screen, pygame.Rect(WIDTH - 200, 10, 190, 30), is_white))

    def test_game_over_text(self):
        """Red GAME OVER appears only when the run is over."""
        area = pygame.Rect(100, HEIGHT // 2 - 40, 200, 80)
        self.renderer.draw(self.screen, self.world)
        self.assertFalse(has_pixel(self.screen, area, is_red))

        self.world.over = True
        self.renderer.draw(self.screen, self.world)
        self.assertTrue(has_pixel(self.screen, area, is_red))

    def test_menu_button(self):
        """The PLAY button is drawn before the game starts."""
        self.world.started = False
        self.renderer.draw(self.screen, self.world)
        button = self.renderer.play_button_rect
        self.assertEqual(rgb(self.screen, (button.left + 4, button.centery)), (0, 150, 0))

    def test_menu_button_hidden_while_running(self):
        """No button once the game runs."""
        self.renderer.draw(self.screen, self.world)
        button = self.renderer.play_button_rect
        self.assertEqual(rgb(self.screen, (button.left + 4, button.centery)), BACKGROUND_COLOR)

    def test_clears_previous_frame(self):
        """Each frame starts from the background."""
        self.screen.fill((9, 9, 9))
        self.renderer.draw(self.screen, self.world)
        self.assertEqual(rgb(self.screen, (200, 500)), BACKGROUND_COLOR)


if __name__ == "__main__":
    unittest.main()
