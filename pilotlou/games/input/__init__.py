"""
Input abstraction layer for Pilot Lou games.

Provides unified input handling so games see the same InputEvent whether
it came from a real mouse or a test double.
"""

from pilotlou.games.input.input_event import InputEvent, EventType
from pilotlou.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'EventType', 'InputManager']
