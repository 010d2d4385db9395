"""
Pilot Lou Game Framework.

Provides:
- base_game: BaseGame class that all games inherit from
- game_state: Standard GameState enum
- frame_loop: FrameScheduler, the animation-frame callback queue
- input: Common input event handling
"""

from pilotlou.games.game_state import GameState
from pilotlou.games.base_game import BaseGame
from pilotlou.games.frame_loop import FrameScheduler

__all__ = [
    'GameState',
    'BaseGame',
    'FrameScheduler',
]
