"""Movable agent interface used by the explorer."""

from enum import Enum
from typing import Protocol

from .geometry import Direction, ORIGIN, Point

STARTING_POSITION = ORIGIN


class AgentError(Exception):
    """Raised when an agent cannot deliver a move outcome."""

    pass


class MoveOutcome(Enum):
    """What the agent found when it tried to step."""

    WALL = 0
    OPEN = 1
    GOAL = 2

    @classmethod
    def from_code(cls, code: int) -> "MoveOutcome":
        """Convert a droid status code to an outcome."""
        try:
            return cls(code)
        except ValueError:
            raise AgentError(f"Unknown status code: {code}") from None

    @property
    def moved(self) -> bool:
        """Whether the agent changed cell."""
        return self is not MoveOutcome.WALL


class MovableAgent(Protocol):
    """
    Something that can be stepped through an unknown grid.

    The position only changes when a move does not hit a wall.
    release() must be idempotent.
    """

    @property
    def position(self) -> Point: ...

    def attempt_move(self, direction: Direction) -> MoveOutcome: ...

    def release(self) -> None: ...
