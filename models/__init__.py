"""
Unified models library for Pilot Lou.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Vector2D, Color, Rectangle, Resolution)
- Dodge: Fixed tables for the Dodge game (EnemySpawn, SpeedStep)

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.dodge import EnemySpawn, speed_for_elapsed
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Resolution,
    Color,
    Rectangle,
)

# ============================================================================
# Dodge game tables
# ============================================================================
from .dodge import (
    EnemySpawn,
    SpeedStep,
    speed_for_elapsed,
)

# Top-level exports - most commonly used models
__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Resolution",
    "Color",
    "Rectangle",
    # Dodge
    "EnemySpawn",
    "SpeedStep",
    "speed_for_elapsed",
]
