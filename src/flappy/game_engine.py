"""
game_engine.py: The single-player world simulation.

Every state transition (start, jump, death, restart, spawn) goes through
GameEngine so the renderer only ever reads the World.
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from .audio import AudioOutput, NullAudio
from .constants import DIFFICULTY, PIPE_MARGIN, PIPE_SPEED
from .data_models import GamePhase, Pipe, World
from .physics_core import PhysicsCore
from .score_store import ScoreStore

TAP_SOUND = "tap"
DIE_SOUND = "die"


@dataclass
class GameEngine:
    """
    Owns the World and advances it one tick at a time.
    Driven by the render tick (step) and the spawn timer (spawn_pipe).
    """
    world: World = field(default_factory=World)
    core: PhysicsCore = field(default_factory=PhysicsCore)
    audio: AudioOutput = field(default_factory=NullAudio)
    store: Optional[ScoreStore] = None
    rng: random.Random = field(default_factory=random.Random)
    pipe_speed: float = PIPE_SPEED
    difficulty: int = DIFFICULTY

    def __post_init__(self):
        if self.store is not None:
            self.world.best_score = self.store.get_best()

    @property
    def phase(self) -> GamePhase:
        return self.world.phase

    # ---------- Spawner ----------

    def spawn_pipe(self) -> Optional[Pipe]:
        """Appends a new pipe at the right edge. Does nothing unless running."""
        world = self.world
        if not world.running:
            return None

        gap = world.bird.height * self.difficulty
        top = self.rng.uniform(PIPE_MARGIN, world.height - gap - PIPE_MARGIN)
        pipe = Pipe(x=float(world.width), top=top, bottom=top + gap)
        world.pipes.append(pipe)
        return pipe

    # ---------- Commands ----------

    def start(self):
        """Leaves the menu. The first pipe appears without waiting for the timer."""
        if self.world.started:
            return
        self.world.started = True
        if not self.world.pipes:
            self.spawn_pipe()

    def handle_input(self):
        """A key press or tap: jump while running, restart after game over."""
        phase = self.phase
        if phase is GamePhase.NOT_STARTED:
            return
        if phase is GamePhase.OVER:
            self.restart()
            return
        self.jump()

    def jump(self):
        self.audio.play(TAP_SOUND)
        self.world.bird.velocity = self.core.flap()

    def restart(self):
        world = self.world
        self._record_best()
        world.over = False
        world.score = 0
        world.pipes = []
        world.bird.reset()
        world.started = True

    def die(self):
        """Ends the run. Only the first call per run has any effect."""
        if self.world.over:
            return
        self.world.over = True
        self.audio.play(DIE_SOUND)
        self._record_best()

    def _record_best(self):
        world = self.world
        if world.score > world.best_score:
            world.best_score = world.score
            if self.store is not None:
                self.store.save_best(world.best_score)
                print(f"[Score] New best score saved: {world.best_score}")

    # ---------- Update ----------

    def step(self):
        """
        Advances the world by one render tick.
        Does nothing unless running.
        """
        world = self.world
        if not world.running:
            return

        bird = world.bird
        core = self.core

        # 1. Gravity
        bird.y, bird.velocity = core.apply_gravity_and_movement(bird.y, bird.velocity)

        # 2. Floor / ceiling
        if core.out_of_bounds(bird, world.height):
            self.die()
            bird.y = core.clamp_to_playfield(bird, world.height)

        # 3. Scroll, collide and score. The tick finishes even after a death.
        for pipe in world.pipes:
            pipe.x -= self.pipe_speed

            if core.check_pipe_collision(bird, pipe):
                self.die()

            if not pipe.counted and core.has_passed(bird, pipe):
                world.score += 1
                pipe.counted = True

        # 4. Prune
        world.pipes = [p for p in world.pipes if not core.is_off_screen(p)]
