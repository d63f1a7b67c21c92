"""Grid geometry and movement primitives for hide and seek."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

GRID_SIZE = 10


class Direction(str, Enum):
    """One of the four unit steps an agent can take."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) for this direction. Up is towards row 0."""
        return _DELTAS[self]

    @classmethod
    def parse(cls, value: Direction | str) -> Direction | None:
        """Coerce a direction name to a Direction, or None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return None


_DELTAS = {
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Grid coordinate. x is the column (0 at left), y the row (0 at top)."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


def move_position(position: Position, direction: Direction | str) -> Position:
    """Apply a unit step. The result is not clamped and may be off the grid.

    Raises:
        ValueError: If direction is not a known direction name.
    """
    parsed = Direction.parse(direction)
    if parsed is None:
        raise ValueError(f"Unknown direction: {direction!r}")
    dx, dy = parsed.delta
    return Position(position.x + dx, position.y + dy)


def in_bounds(position: Position, grid_size: int = GRID_SIZE) -> bool:
    """Whether position lies on a grid_size x grid_size board."""
    return 0 <= position.x < grid_size and 0 <= position.y < grid_size


def is_blocked(
    position: Position,
    obstacles: frozenset[Position],
    grid_size: int = GRID_SIZE,
) -> bool:
    """True if position is off the grid or occupied by an obstacle."""
    return not in_bounds(position, grid_size) or position in obstacles


def sense_walls(position: Position, grid_size: int = GRID_SIZE) -> dict[str, bool]:
    """Which grid edges the position is already touching.

    Only the outer boundary counts; obstacles are reported by sense_obstacles.
    """
    return {
        Direction.LEFT.value: position.x <= 0,
        Direction.RIGHT.value: position.x >= grid_size - 1,
        Direction.UP.value: position.y <= 0,
        Direction.DOWN.value: position.y >= grid_size - 1,
    }


def sense_obstacles(
    position: Position,
    obstacles: frozenset[Position],
    grid_size: int = GRID_SIZE,
) -> dict[str, bool]:
    """Which single steps from position would be blocked (edge or obstacle)."""
    return {
        direction.value: is_blocked(move_position(position, direction), obstacles, grid_size)
        for direction in Direction
    }


def generate_obstacles(
    grid_size: int = GRID_SIZE,
    count: int = 5,
    rng: random.Random | None = None,
) -> frozenset[Position]:
    """Scatter count random obstacles over the grid.

    Draws may land on the same cell, so the set can hold fewer than count
    positions. Start corners are not excluded.

    Args:
        grid_size: Side length of the grid.
        count: Number of random draws.
        rng: Random source; a fresh unseeded one is used if omitted.

    Returns:
        Frozen set of obstacle positions.
    """
    rng = rng or random.Random()
    return frozenset(
        Position(rng.randrange(grid_size), rng.randrange(grid_size))
        for _ in range(count)
    )


def layout_to_dict(grid_size: int, obstacles: frozenset[Position]) -> dict:
    """Serialisable description of an obstacle layout, sorted for stable output."""
    return {
        "gridSize": grid_size,
        "obstacles": [{"x": o.x, "y": o.y} for o in sorted(obstacles)],
    }

