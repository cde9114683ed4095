"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Tuple

from .constants import GRAVITY, JUMP_IMPULSE
from .data_models import Bird, Pipe


class PhysicsCore:
    """
    Stateless physics and geometry used by the game engine.
    Units are pixels and ticks; nothing here is delta-time corrected.
    """

    def __init__(self, gravity: float = GRAVITY, jump_impulse: float = JUMP_IMPULSE):
        self.gravity = gravity
        self.jump_impulse = jump_impulse

    def apply_gravity_and_movement(self, y: float, velocity: float) -> Tuple[float, float]:
        """
        Calculates new position and velocity after one tick.
        Velocity is integrated before position and is never clamped.
        """
        velocity += self.gravity
        y += velocity
        return y, velocity

    def flap(self) -> float:
        """Returns the velocity after a jump, whatever it was before."""
        return self.jump_impulse

    def out_of_bounds(self, bird: Bird, height: float) -> bool:
        return bird.y < 0 or bird.y + bird.height > height

    def clamp_to_playfield(self, bird: Bird, height: float) -> float:
        """Returns bird.y pulled back inside [0, height - bird.height]."""
        return max(0.0, min(bird.y, height - bird.height))

    def check_pipe_collision(self, bird: Bird, pipe: Pipe) -> bool:
        """True when the bird overlaps the pipe horizontally outside its gap."""
        overlaps_x = bird.x < pipe.right and bird.x + bird.width > pipe.x
        outside_gap = bird.y < pipe.top or bird.y + bird.height > pipe.bottom
        return overlaps_x and outside_gap

    def has_passed(self, bird: Bird, pipe: Pipe) -> bool:
        return pipe.right < bird.x

    def is_off_screen(self, pipe: Pipe) -> bool:
        # Flush with the left edge still counts as off screen
        return pipe.right <= 0
