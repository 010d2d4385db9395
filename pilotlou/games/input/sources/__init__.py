"""
Input source implementations.
"""

from pilotlou.games.input.sources.base import InputSource
from pilotlou.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
