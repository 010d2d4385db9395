"""
Input Event - Represents a single pointer action.

This is a shared module used by all games.
Uses dataclass for immutability (Pydantic not available in WASM).
"""
from dataclasses import dataclass
from enum import Enum

from models import Vector2D


class EventType(str, Enum):
    """Types of pointer events.

    Attributes:
        CLICK: Primary button pressed at a position
        MOVE: Pointer moved to a position
    """
    CLICK = "click"
    MOVE = "move"


@dataclass(frozen=True)
class InputEvent:
    """Immutable input event from any source.

    All input sources must convert their events to this common format.

    Attributes:
        position: Pointer position in surface coordinates
        timestamp: Time when the event occurred (seconds, from monotonic clock)
        event_type: CLICK or MOVE
    """
    position: Vector2D
    timestamp: float
    event_type: EventType = EventType.CLICK

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f}, type={self.event_type.value})")
