#!/usr/bin/env python3
"""
Game Launcher

Opens a window and plays Dodge with the mouse.

Usage:
    # Play
    python dev_game.py

    # Show game info
    python dev_game.py --info

    # With custom resolution
    python dev_game.py --resolution 800x600

    # Verbose logging
    python dev_game.py --log-level DEBUG
"""

import argparse
import sys

import pygame
from pydantic import ValidationError

from models import Resolution
from pilotlou.logging import configure_logging, get_logger
from games.Dodge import config
from games.Dodge.game_mode import DodgeMode, SurfaceNotFoundError
from games.Dodge.main import run

log = get_logger('launcher')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f'{DodgeMode.NAME} - {DodgeMode.DESCRIPTION}',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  Click the red box to start, then move the mouse to steer it.
  Click anywhere to pause, click the red box to resume.
  ESC to quit.

Examples:
  python dev_game.py --resolution 800x600
  python dev_game.py --log-level DEBUG
        """
    )

    parser.add_argument(
        '--info',
        action='store_true',
        help='Print game info and exit'
    )

    parser.add_argument(
        '--resolution', '-r',
        type=str,
        default=f'{config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT}',
        help=f'Window resolution as WIDTHxHEIGHT (default: {config.SCREEN_WIDTH}x{config.SCREEN_HEIGHT})'
    )

    parser.add_argument(
        '--fullscreen', '-f',
        action='store_true',
        help='Run in fullscreen mode'
    )

    parser.add_argument(
        '--fps',
        type=int,
        default=config.FPS,
        help=f'Frame rate (default: {config.FPS})'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default=None,
        choices=['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
        help='Default log level (overrides PILOTLOU_LOG_LEVEL)'
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the launcher."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    if args.info:
        info = DodgeMode.get_info()
        print(f"\n  {info['name']} {info['version']}")
        print(f"    {info['description']}")
        print(f"    Author: {info['author']}\n")
        return 0

    try:
        resolution = Resolution.parse(args.resolution)
    except (ValueError, ValidationError):
        print(f"Invalid resolution format: {args.resolution}")
        print("Expected format: WIDTHxHEIGHT (e.g., 800x600)")
        return 1

    try:
        game = run(size=resolution.size, fullscreen=args.fullscreen, fps=args.fps)
    except (SurfaceNotFoundError, pygame.error) as e:
        log.error("Failed to start game: %s", e)
        return 1

    print(f"Best time: {game.best_time / 1000:.3f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
