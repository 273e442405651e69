"""
Grid geometry shared by the agents and the explorer.

Coordinates grow east (x) and south (y), matching the row/column order
floor plans are written in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence


@dataclass(frozen=True)
class Point:
    """Immutable 2D grid coordinate."""

    x: int
    y: int

    def adjacent_points(self) -> list["Point"]:
        """The four unit neighbours, in direction order."""
        return [direction.move(self) for direction in Direction]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y})"


ORIGIN = Point(0, 0)


class Direction(Enum):
    """Compass directions.

    The enumeration order is also the tie-break order used when several
    move plans have the same length.
    """

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        return _DELTAS[self]

    @property
    def command(self) -> int:
        """Movement command understood by the droid program."""
        return _COMMANDS[self]

    def move(self, point: Point) -> Point:
        """Return the point one step away in this direction."""
        dx, dy = self.delta
        return Point(point.x + dx, point.y + dy)

    def opposite(self) -> "Direction":
        """Get the opposite direction."""
        return _OPPOSITES[self]

    @classmethod
    def from_segment(cls, start: Point, end: Point) -> "Direction":
        """
        Direction of a single step from start to end.

        Raises:
            ValueError: If the points are not unit-adjacent.
        """
        for direction in cls:
            if direction.move(start) == end:
                return direction
        raise ValueError(f"{start} and {end} are not adjacent")


_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}

_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_COMMANDS = {
    Direction.NORTH: 1,
    Direction.SOUTH: 2,
    Direction.WEST: 3,
    Direction.EAST: 4,
}


def directions_along(points: Sequence[Point]) -> list[Direction]:
    """Convert a path of adjacent points into the steps that walk it."""
    return [Direction.from_segment(a, b) for a, b in zip(points, points[1:])]


def walk(start: Point, directions: Sequence[Direction]) -> Iterator[Point]:
    """Yield every point visited when stepping from start."""
    point = start
    for direction in directions:
        point = direction.move(point)
        yield point
