#!/usr/bin/env python3
"""
client.py

pygame host for the game: window, fixed-timestep frame driver, input and rendering.
The simulation itself lives in engine.GameEngine.
"""

import argparse
import logging
import time
from typing import Optional

import pygame

from .characters import CharacterManager, DEFAULT_CHARACTERS, roster_from_dir
from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, TICK_TIME, RENDER_FPS, MAX_FRAME_TIME, COLOR_BG
)
from .engine import GameEngine
from .input_manager import InputManager
from .performance import PerformanceMonitor
from .renderer import Renderer
from .ui import UIManager, TITLE

logger = logging.getLogger(__name__)


class PumpyClient:
    def __init__(self, seed: Optional[int] = None, assets_dir: Optional[str] = None,
                 debug: bool = False):
        pygame.init()
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)

        # --- Game Logic ---
        self.engine = GameEngine(seed=seed)
        roster = roster_from_dir(assets_dir) if assets_dir else DEFAULT_CHARACTERS
        self.characters = CharacterManager(roster, self.engine.state)
        self.input = InputManager(self.engine.state, self.engine.request_jump, self.characters)

        # --- Presentation ---
        self.renderer = Renderer(self.screen)
        self.ui = UIManager(self.screen, self.engine.state)
        self.perf = PerformanceMonitor()
        self.perf.toggle(debug)
        self.debug = debug

        # Time Management
        self.clock = pygame.time.Clock()
        self.accumulator = 0.0

    def load_assets(self):
        """Character sprites are the only assets; show progress while they load."""
        def show_progress(done, total):
            self.screen.fill(COLOR_BG)
            self.ui.draw_loading_screen(done * 100 / total)
            pygame.display.flip()

        show_progress(0, 1)
        self.characters.load_images(on_progress=show_progress)
        self.engine.finish_loading()

    def run(self):
        """The main client execution loop."""
        self.load_assets()
        self.perf.start(time.monotonic() * 1000)
        logger.info("Client running at %d ticks/s (seed %d)", round(1 / TICK_TIME), self.engine.seed)

        running = True
        while running:
            frame_time = min(self.clock.tick(RENDER_FPS) / 1000.0, MAX_FRAME_TIME)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_F3:
                    self.debug = not self.debug
                    self.perf.toggle(self.debug)
                else:
                    self.input.handle_event(event)

            # --- Simulation Loop (Fixed Timestep) ---
            self.accumulator += frame_time
            while self.accumulator >= TICK_TIME:
                self.accumulator -= TICK_TIME
                self.engine.tick()

            self._draw()
            self.perf.update(time.monotonic() * 1000)

        self.engine.dispose()
        pygame.quit()

    def _draw(self):
        state = self.engine.state
        self.renderer.draw_world(self.engine, self.characters.selected)
        hud = self.engine.hud_snapshot()

        if state.is_playing:
            self.ui.draw_hud(hud)
        elif state.is_start_screen:
            self.ui.draw_start_screen(self.characters)
        elif state.is_game_over:
            self.ui.draw_game_over_screen(hud, self.characters)

        if self.debug:
            self.ui.draw_debug_info(self.perf.fps, self.perf.frame_time,
                                    self.perf.frame_time_variance)
        pygame.display.flip()


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Trade your way through the rugs.")
    p.add_argument("--seed", type=int, default=None,
                   help="Obstacle seed. Omit for a random run.")
    p.add_argument("--assets", default=None,
                   help="Directory with <character>.png sprites.")
    p.add_argument("--debug", action="store_true",
                   help="Verbose logging and the FPS overlay (toggle with F3).")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = PumpyClient(seed=args.seed, assets_dir=args.assets, debug=args.debug)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
        pygame.quit()


if __name__ == "__main__":
    main()
