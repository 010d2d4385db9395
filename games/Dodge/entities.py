"""
Dodge - Entities

The player and the enemies are both plain rectangles. They differ only in
data: enemies carry a velocity, and each kind has its own fixed color.
"""
from dataclasses import dataclass
from typing import ClassVar, List, Sequence

from models import Color, EnemySpawn, Rectangle, Vector2D
from games.Dodge import config


@dataclass
class Entity:
    """A movable rectangle with a fixed color per kind.

    Attributes:
        position: Center of the rectangle
        dimensions: Width and height; never changes after construction
    """
    position: Vector2D
    dimensions: Vector2D

    COLOR: ClassVar[Color]

    @property
    def color(self) -> Color:
        return self.COLOR

    @property
    def bounds(self) -> Rectangle:
        """Current bounding box."""
        return Rectangle(position=self.position, dimensions=self.dimensions)

    def collides_with(self, other: 'Entity') -> bool:
        return self.bounds.collides_with(other.bounds)

    def contains_point(self, point: Vector2D) -> bool:
        return self.bounds.contains_point(point)


@dataclass
class Player(Entity):
    """The dark red box that follows the mouse."""
    COLOR: ClassVar[Color] = config.PLAYER_COLOR

    def move_to(self, position: Vector2D) -> None:
        """Jump straight to position; no smoothing."""
        self.position = position


@dataclass
class Enemy(Entity):
    """A dark blue box that travels in a straight line and bounces off walls.

    Attributes:
        velocity: Displacement per speed-divided millisecond
    """
    velocity: Vector2D

    COLOR: ClassVar[Color] = config.ENEMY_COLOR

    @classmethod
    def from_spawn(cls, spawn: EnemySpawn) -> 'Enemy':
        return cls(
            position=spawn.position,
            dimensions=spawn.dimensions,
            velocity=spawn.velocity,
        )

    def advance(self, delta_ms: float, speed: float) -> None:
        """Move by velocity * delta / speed on each axis.

        Args:
            delta_ms: Milliseconds since the previous tick
            speed: Speed divisor (lower is faster)
        """
        self.position = Vector2D(
            x=self.position.x + self.velocity.x * delta_ms / speed,
            y=self.position.y + self.velocity.y * delta_ms / speed,
        )

    def bounce_off_walls(self, width: float, height: float) -> bool:
        """Reverse direction on each axis whose leading edge left the surface.

        The position is not clamped, so an enemy can sit past a wall for a
        tick. An enemy already past a wall but heading back in is left alone.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels

        Returns:
            True if either velocity component was flipped
        """
        box = self.bounds
        vx, vy = self.velocity.x, self.velocity.y

        if box.left < 0 and vx < 0:
            vx = -vx
        elif box.right > width and vx > 0:
            vx = -vx

        if box.top < 0 and vy < 0:
            vy = -vy
        elif box.bottom > height and vy > 0:
            vy = -vy

        if (vx, vy) == (self.velocity.x, self.velocity.y):
            return False
        self.velocity = Vector2D(x=vx, y=vy)
        return True


def spawn_player(width: float, height: float) -> Player:
    """Create the player centered on a surface of the given size."""
    return Player(
        position=Vector2D(x=width / 2, y=height / 2),
        dimensions=config.PLAYER_DIMENSIONS,
    )


def spawn_enemies(layout: Sequence[EnemySpawn] = config.ENEMY_LAYOUT) -> List[Enemy]:
    """Create a fresh enemy for every entry of layout, in order."""
    return [Enemy.from_spawn(spawn) for spawn in layout]
