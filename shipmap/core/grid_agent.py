"""
Grid-backed movable agent.

Steps through a known set of open cells while only revealing what a move
runs into, so the explorer sees it exactly like a droid. Positions are
relative to the start cell, which is always the origin.
"""

import logging
from typing import Iterable, Optional

from .agent import AgentError, MoveOutcome, STARTING_POSITION
from .floor_plan import FloorPlan
from .geometry import Direction, Point

logger = logging.getLogger(__name__)


class GridAgent:
    """
    Agent moving through an in-memory grid.

    Example usage:
        agent = GridAgent.from_floor_plan(parse_floor_plan(text))
        outcome = agent.attempt_move(Direction.EAST)
    """

    def __init__(self, open_cells: Iterable[Point], goal: Optional[Point] = None):
        """
        Args:
            open_cells: Every passable cell, relative to the start.
            goal: The goal cell, if any. It is passable even when missing
                from open_cells.
        """
        self._open_cells = set(open_cells)
        self._goal = goal
        if goal is not None:
            self._open_cells.add(goal)
        self._open_cells.add(STARTING_POSITION)
        self._position = STARTING_POSITION
        self.move_count = 0
        self.wall_hits = 0
        self.released = False

    @classmethod
    def from_floor_plan(cls, floor_plan: FloorPlan) -> "GridAgent":
        """Build an agent standing on the floor plan's start cell."""
        start_x, start_y = floor_plan.start

        def relative(x: int, y: int) -> Point:
            return Point(x - start_x, y - start_y)

        return cls(
            (relative(x, y) for x, y in floor_plan.open_cells()),
            goal=relative(*floor_plan.goal),
        )

    @property
    def position(self) -> Point:
        return self._position

    def attempt_move(self, direction: Direction) -> MoveOutcome:
        """Try one step. The position only changes when no wall is hit."""
        if self.released:
            raise AgentError("Agent has been released")

        self.move_count += 1
        target = direction.move(self._position)

        if target not in self._open_cells:
            self.wall_hits += 1
            return MoveOutcome.WALL

        self._position = target
        if target == self._goal:
            return MoveOutcome.GOAL
        return MoveOutcome.OPEN

    def release(self) -> None:
        if not self.released:
            logger.debug(
                f"Grid agent released after {self.move_count} moves "
                f"({self.wall_hits} walls)"
            )
        self.released = True
