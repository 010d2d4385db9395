#!/usr/bin/env python3
"""Dodge - Standalone entry point.

Survival game - keep the red box away from the walls and the blue boxes.

The main loop owns the pygame window, the input manager and the frame
scheduler. Each pass it lets the game run the frame it booked on the previous
pass, then forwards pointer events, then flips the display.
"""

import sys
from typing import Optional, Tuple

import pygame

from pilotlou.games import FrameScheduler
from pilotlou.games.input import InputManager
from pilotlou.games.input.sources.mouse import MouseInputSource
from pilotlou.logging import get_logger
from games.Dodge import config
from games.Dodge.game_mode import DodgeMode

log = get_logger('dodge.main')


def run(
    size: Tuple[int, int] = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT),
    fullscreen: bool = False,
    fps: int = config.FPS,
    max_frames: Optional[int] = None,
) -> DodgeMode:
    """Open a window and play until it is closed.

    Args:
        size: Window size in pixels (ignored when fullscreen)
        fullscreen: Use the whole display
        fps: Display refresh rate to pace the loop at
        max_frames: Stop after this many loop passes (None = until quit)

    Returns:
        The game, so callers can report the best time
    """
    pygame.init()
    try:
        if fullscreen:
            pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            pygame.display.set_mode(size)
        pygame.display.set_caption(config.WINDOW_TITLE)

        scheduler = FrameScheduler()
        game = DodgeMode(scheduler=scheduler)
        game.render_tick()

        input_manager = InputManager(MouseInputSource())
        clock = pygame.time.Clock()
        log.info("Window %dx%d at %d fps", *game.dimensions, fps)

        running = True
        frames = 0
        while running:
            dt = clock.tick(fps) / 1000.0
            input_manager.update(dt)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False

            # Run the frame booked last pass before handling input, so a frame
            # booked by a click waits for the next clock tick
            game.update(dt)
            game.handle_input(input_manager.get_events())
            pygame.display.flip()

            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False

        log.info("Best time %.3fs", game.best_time / 1000)
        return game
    finally:
        pygame.quit()


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
