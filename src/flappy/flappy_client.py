#!/usr/bin/env python3
"""
flappy_client.py

pygame window, event handling and the main loop.
The render tick runs step + draw; a separate pygame timer drives the spawner.
"""

import argparse
from enum import Enum
from typing import List, Optional

import pygame

from .assets import BirdImageLoader, load_image
from .audio import NullAudio, Sounds
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, RENDER_FPS, PIPE_SPAWN_INTERVAL_MS,
    PIPE_TEXTURE_PATH, TAP_SOUND_PATH, DIE_SOUND_PATH, DB_FILE, MUTE
)
from .data_models import GamePhase, World
from .game_engine import DIE_SOUND, TAP_SOUND, GameEngine
from .renderer import Renderer
from .score_store import ScoreStore

SPAWN_PIPE_EVENT = pygame.USEREVENT + 1


class Command(Enum):
    QUIT = "quit"
    SPAWN = "spawn"
    START = "start"
    INPUT = "input"
    DROP_IMAGE = "drop_image"


def translate_event(event: pygame.event.Event, phase: GamePhase,
                    play_button: pygame.Rect) -> Optional[Command]:
    """Maps a pygame event to a game command, or None to ignore it."""
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == SPAWN_PIPE_EVENT:
        return Command.SPAWN
    if event.type == pygame.DROPFILE:
        return Command.DROP_IMAGE

    if phase is GamePhase.NOT_STARTED:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return Command.QUIT
        if event.type == pygame.MOUSEBUTTONDOWN and play_button.collidepoint(event.pos):
            return Command.START
        return None

    if event.type in (pygame.KEYDOWN, pygame.FINGERDOWN):
        return Command.INPUT
    # Touches also arrive as synthesized mouse clicks; FINGERDOWN covers them
    if event.type == pygame.MOUSEBUTTONDOWN and not getattr(event, "touch", False):
        return Command.INPUT
    return None


class FlappyClient:
    def __init__(self, db_file: str = DB_FILE, mute: bool = MUTE, fps: int = RENDER_FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption("Flappy")
        self.fps = fps

        # --- Assets ---
        if mute:
            self.audio = NullAudio()
        else:
            self.audio = Sounds()
            self.audio.load_optional(TAP_SOUND, TAP_SOUND_PATH)
            self.audio.load_optional(DIE_SOUND, DIE_SOUND_PATH)
        self.renderer = Renderer(SCREEN_WIDTH, SCREEN_HEIGHT,
                                 pipe_texture=load_image(PIPE_TEXTURE_PATH))
        self.bird_loader = BirdImageLoader()

        # --- Game Logic ---
        self.store = ScoreStore(db_file)
        self.engine = GameEngine(
            world=World(width=SCREEN_WIDTH, height=SCREEN_HEIGHT),
            audio=self.audio,
            store=self.store,
        )
        print(f"[Client] Best score so far: {self.engine.world.best_score}")

        # Armed once; the spawner itself ignores ticks outside a running game
        pygame.time.set_timer(SPAWN_PIPE_EVENT, PIPE_SPAWN_INTERVAL_MS)
        self.clock = pygame.time.Clock()

    def run(self):
        """The main client execution loop."""
        running = True
        while running:
            self.clock.tick(self.fps)
            running = self.handle_events(pygame.event.get())

            self.engine.step()

            image = self.bird_loader.poll()
            if image is not None:
                self.renderer.set_bird_image(image)

            self.renderer.draw(self.screen, self.engine.world)
            pygame.display.flip()

        self.store.close()
        pygame.quit()

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """Applies a batch of events. Returns False once the window should close."""
        for event in events:
            command = translate_event(event, self.engine.phase,
                                      self.renderer.play_button_rect)
            if command is Command.QUIT:
                return False
            if command is Command.SPAWN:
                self.engine.spawn_pipe()
            elif command is Command.START:
                self.engine.start()
            elif command is Command.INPUT:
                self.engine.handle_input()
            elif command is Command.DROP_IMAGE:
                self.bird_loader.load_file(event.file)
        return True


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Flappy Bird clone.")
    parser.add_argument("--bird-image", type=str, default=None,
                        help="Local image file to use as the bird.")
    parser.add_argument("--bird-url", type=str, default=None,
                        help="Image URL to use as the bird.")
    parser.add_argument("--db", type=str, default=DB_FILE,
                        help="SQLite file holding the best score.")
    parser.add_argument("--mute", action="store_true", default=MUTE,
                        help="Disable sound effects.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS,
                        help="Render tick rate.")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = _parse_args(argv)
    client = FlappyClient(db_file=args.db, mute=args.mute, fps=args.fps)
    if args.bird_image:
        client.bird_loader.load_file(args.bird_image)
    if args.bird_url:
        client.bird_loader.load_url(args.bird_url)
    client.run()


if __name__ == "__main__":
    main()
