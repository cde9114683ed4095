"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .constants import (
    BIRD_X, BIRD_START_Y, BIRD_WIDTH, BIRD_HEIGHT, PIPE_WIDTH,
    SCREEN_WIDTH, SCREEN_HEIGHT
)


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    OVER = "over"


@dataclass
class Bird:
    """The single player-controlled bird."""
    x: float = BIRD_X
    y: float = BIRD_START_Y
    width: int = BIRD_WIDTH
    height: int = BIRD_HEIGHT
    velocity: float = 0.0

    # Initial values restored on restart
    start_y: float = BIRD_START_Y

    def reset(self):
        self.y = self.start_y
        self.velocity = 0.0


@dataclass
class Pipe:
    """A gated obstacle. The gap spans top..bottom."""
    x: float
    top: float
    bottom: float
    counted: bool = False
    width: int = PIPE_WIDTH

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class World:
    """Everything the engine mutates and the renderer reads."""
    bird: Bird = field(default_factory=Bird)
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    best_score: int = 0
    started: bool = False
    over: bool = False
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    @property
    def phase(self) -> GamePhase:
        if not self.started:
            return GamePhase.NOT_STARTED
        if self.over:
            return GamePhase.OVER
        return GamePhase.RUNNING

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING
