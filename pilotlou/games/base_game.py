"""Contract between a Pilot Lou game and the loop that drives it.

dev_game.py and each game's main.py only talk to a game through this class:
they read its metadata for --info, feed it one batch of pointer events per
display refresh, let it run its scheduled frame, and ask it for a score on
exit.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from pilotlou.games.game_state import GameState


class BaseGame(ABC):
    """A game driven one display refresh at a time.

    Per refresh the main loop calls, in order:
        update(dt)            run the frame the game booked last refresh
        handle_input(events)  clicks and moves, oldest first
    then flips the display. A game that draws from a scheduled frame does
    not need render() in the loop; render(screen) exists so a frame can be
    drawn onto any surface (tests, screenshots).

    Metadata (class attributes, reported by get_info):
        NAME, DESCRIPTION, VERSION, AUTHOR
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Metadata as printed by ``dev_game.py --info``."""
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
        }

    @property
    def state(self) -> GameState:
        """Current phase. Subclasses override _get_internal_state instead."""
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Score reported when the loop exits (Dodge: best time in ms)."""
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Apply one refresh's InputEvents.

        May book a frame with the game's FrameScheduler; that frame runs on
        the next update().
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Run whatever frame is booked. Called once per display refresh.

        Args:
            dt: Seconds since the previous refresh
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Draw the current state onto screen without changing it."""
        pass

    def reset(self) -> None:
        """Return to the initial phase. Games without state can skip this."""
        pass
