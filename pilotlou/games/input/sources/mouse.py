"""
Mouse Input Source - Pointer movement and left clicks from pygame.

This is a shared module used by all games.
"""
import time
from typing import List

import pygame

from models import Vector2D
from pilotlou.games.input.input_event import InputEvent, EventType
from pilotlou.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Mouse input source.

    Converts pygame left-button clicks and pointer motion into InputEvent
    models, preserving their order. Other buttons are dropped. Non-mouse
    events are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self):
        """Initialize the mouse input source."""
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect clicks and moves."""
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    self._push(event.pos, EventType.CLICK)
            elif event.type == pygame.MOUSEMOTION:
                self._push(event.pos, EventType.MOVE)
            elif event.type != pygame.MOUSEBUTTONUP:
                # Re-post non-mouse events for the main loop to handle
                pygame.event.post(event)

    def _push(self, pos, event_type: EventType) -> None:
        pos_x, pos_y = pos
        self._event_queue.append(InputEvent(
            position=Vector2D(x=float(pos_x), y=float(pos_y)),
            timestamp=time.monotonic(),
            event_type=event_type,
        ))

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
