"""Common GameState enum for Pilot Lou games.

All games report one of these states via their `state` property, so the
launcher can react to phase changes without knowing the game.
"""
from enum import Enum


class GameState(Enum):
    """Standard game phases.

    States:
        WAITING: Fresh board, waiting for the player to start
        PLAYING: Active gameplay in progress, frames are scheduled
        PAUSED: Game temporarily paused by the player
        GAME_OVER: Run ended in a fatal collision

    Transitions:
        WAITING -> PLAYING -> PAUSED -> PLAYING
        PLAYING -> GAME_OVER -> WAITING
    """
    WAITING = "waiting"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
