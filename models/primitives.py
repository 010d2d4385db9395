"""
Shared primitive data types for the game.

This module provides the basic geometric and color types used by the
entities, the renderer and the input layer.
"""

from pydantic import BaseModel, Field, field_validator, computed_field, ConfigDict
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and dimensions.

    This is the unified type used throughout the system for any 2D pair,
    whether it's a position, velocity, or width/height.

    Attributes:
        x: X component (horizontal)
        y: Y component (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> vel = Point2D(x=-10.0, y=12.0)  # Moving left and down
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Velocities and dimensions read better as vectors
Vector2D = Point2D


class Resolution(BaseModel):
    """Display resolution in pixels.

    Attributes:
        width: Width in pixels (must be positive)
        height: Height in pixels (must be positive)

    Examples:
        >>> Resolution.parse("640x480")
        Resolution(width=640, height=480)
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> 'Resolution':
        """Parse a WIDTHxHEIGHT string.

        Raises:
            ValueError: If the text is not two positive integers joined by 'x'
        """
        width, height = text.lower().split('x')
        return cls(width=int(width), height=int(height))

    @property
    def size(self) -> Tuple[int, int]:
        """Return (width, height) for pygame.display.set_mode."""
        return (self.width, self.height)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Resolution({self.width}x{self.height})"


class Color(BaseModel):
    """Immutable RGBA color with validation.

    All color components must be in the range [0, 255] inclusive.

    Attributes:
        r: Red component (0-255)
        g: Green component (0-255)
        b: Blue component (0-255)
        a: Alpha/opacity component (0-255), where 255 is fully opaque
    """
    r: int
    g: int
    b: int
    a: int = 255  # Default to fully opaque

    @field_validator('r', 'g', 'b', 'a')
    @classmethod
    def validate_color_range(cls, v: int) -> int:
        """Validate color components are in valid range [0, 255]."""
        if not 0 <= v <= 255:
            raise ValueError(f'Color component must be in range [0, 255], got {v}')
        return v

    @computed_field
    @property
    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return color as RGBA tuple for pygame compatibility."""
        return (self.r, self.g, self.b, self.a)

    @computed_field
    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """Return color as RGB tuple (without alpha)."""
        return (self.r, self.g, self.b)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle defined by its center and size.

    Unlike pygame.Rect, the position is the CENTER of the rectangle, and
    the edges are derived from it. Both overlap and containment tests are
    strict: rectangles that only touch along an edge do not collide, and a
    point on the boundary is not contained.

    Attributes:
        position: Center of the rectangle
        dimensions: Width (x) and height (y), both positive

    Examples:
        >>> rect = Rectangle(position=Point2D(x=100.0, y=100.0),
        ...                  dimensions=Point2D(x=40.0, y=40.0))
        >>> rect.left, rect.right
        (80.0, 120.0)
        >>> rect.contains_point(Point2D(x=100.0, y=100.0))
        True
    """
    position: Point2D
    dimensions: Point2D

    @field_validator('dimensions')
    @classmethod
    def validate_positive_dimensions(cls, v: Point2D) -> Point2D:
        """Validate dimensions are positive."""
        if v.x <= 0 or v.y <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.position.x - self.dimensions.x / 2

    @computed_field
    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.position.x + self.dimensions.x / 2

    @computed_field
    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.position.y - self.dimensions.y / 2

    @computed_field
    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.position.y + self.dimensions.y / 2

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point lies strictly inside the rectangle.

        Args:
            point: The point to check

        Returns:
            True if point is inside all four edges (boundary excluded)

        Examples:
            >>> rect = Rectangle(position=Point2D(x=50.0, y=50.0),
            ...                  dimensions=Point2D(x=100.0, y=100.0))
            >>> rect.contains_point(Point2D(x=100.0, y=50.0))
            False
        """
        return (self.left < point.x < self.right and
                self.top < point.y < self.bottom)

    def collides_with(self, other: 'Rectangle') -> bool:
        """Check if this rectangle overlaps another.

        Args:
            other: Another rectangle to check against

        Returns:
            True if the projections overlap strictly on both axes
        """
        return (self.left < other.right and
                self.right > other.left and
                self.top < other.bottom and
                self.bottom > other.top)

    def as_pygame_rect(self) -> Tuple[int, int, int, int]:
        """Return (left, top, width, height) in whole pixels for pygame.draw."""
        return (int(self.left), int(self.top),
                int(self.dimensions.x), int(self.dimensions.y))

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"Rectangle(center=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"size={self.dimensions.x:.2f}x{self.dimensions.y:.2f})")
