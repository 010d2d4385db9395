"""
Pydantic v2 models for the Dodge game's fixed tables.

The starting enemy layout and the speed schedule are literal data, not
configuration. These models validate them once at import and keep them
immutable so a reset always starts from the same layout.
"""

from typing import Sequence

from pydantic import BaseModel, Field, field_validator

from .primitives import Point2D


class EnemySpawn(BaseModel):
    """
    Starting position, size and velocity of one enemy.

    Velocity is in pixels per speed-divided millisecond: each tick an enemy
    moves by ``velocity * delta_ms / speed``.
    """
    model_config = {"frozen": True}

    position: Point2D = Field(description="Center of the enemy at reset")
    dimensions: Point2D = Field(description="Width and height in pixels")
    velocity: Point2D = Field(description="Initial direction and magnitude")

    @field_validator('dimensions')
    @classmethod
    def validate_positive_dimensions(cls, v: Point2D) -> Point2D:
        """Enemies are rectangles, so both sides must be positive."""
        if v.x <= 0 or v.y <= 0:
            raise ValueError(f'Enemy dimensions must be positive, got {v}')
        return v


class SpeedStep(BaseModel):
    """
    One row of the speed schedule.

    While total elapsed time is below ``until_ms`` (and not covered by an
    earlier row) the speed divisor is ``speed``. The last row also
    covers everything past its bound.
    """
    model_config = {"frozen": True}

    until_ms: float = Field(description="Exclusive upper bound of elapsed time", gt=0)
    speed: float = Field(description="Speed divisor; lower is faster", gt=0)


def speed_for_elapsed(elapsed_ms: float, schedule: Sequence[SpeedStep]) -> float:
    """
    Look up the speed divisor for an elapsed time.

    Args:
        elapsed_ms: Total elapsed play time in milliseconds
        schedule: Steps ordered by increasing ``until_ms``

    Returns:
        Speed of the first step whose bound is above ``elapsed_ms``; past the
        last bound the last step's speed stays in effect
    """
    for step in schedule:
        if elapsed_ms < step.until_ms:
            return step.speed
    return schedule[-1].speed
