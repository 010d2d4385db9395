"""
Pilot Lou

Small pygame framework for single-screen mouse games: the game state
contract, input sources, an animation-frame scheduler and logging.
"""

from pilotlou.logging import get_logger

__all__ = ['get_logger']
