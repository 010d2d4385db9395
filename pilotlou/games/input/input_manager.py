"""
Input Manager - Collects pointer events from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from pilotlou.games.input.input_event import EventType, InputEvent
from pilotlou.games.input.sources.base import InputSource


def coalesce_moves(events: List[InputEvent]) -> List[InputEvent]:
    """Collapse each run of consecutive MOVE events into its last event.

    A move sets the pointer position outright, so only the final move
    before a click (or the end of the batch) can affect the game.
    """
    result: List[InputEvent] = []
    for event in events:
        if (event.event_type == EventType.MOVE and result
                and result[-1].event_type == EventType.MOVE):
            result[-1] = event
        else:
            result.append(event)
    return result


class InputManager:
    """Owns the input source and hands the game one batch per frame.

    The source can be swapped at runtime (real mouse, scripted source in
    tests) without the game noticing.
    """

    def __init__(self, source: Optional[InputSource] = None, coalesce: bool = True):
        """
        Args:
            source: Where events come from
            coalesce: Merge consecutive pointer moves into the latest one
        """
        self._source = source
        self._coalesce = coalesce

    def set_source(self, source: InputSource) -> None:
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Let the active source collect events.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events collected since the last call, oldest first."""
        if self._source is None:
            return []
        events = self._source.poll_events()
        return coalesce_moves(events) if self._coalesce else events

    def clear_events(self) -> None:
        """Drop any pending events from the active source."""
        if self._source is not None:
            self._source.poll_events()
