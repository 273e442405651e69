"""Exploration service tying agents, the explorer and the path metrics together."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from shipmap.config import get_settings
from shipmap.core import (
    Explorer,
    FloorPlan,
    GridAgent,
    IntcodeDroid,
    MovableAgent,
    Point,
    parse_floor_plan,
    parse_program,
)

logger = logging.getLogger(__name__)


@dataclass
class ExplorationReport:
    """Result of a complete exploration run."""

    distance_to_goal: int
    goal_eccentricity: int
    goal: Point
    cells: int
    passages: int
    moves: int

    def answers(self) -> tuple[str, str]:
        """Both metrics as decimal strings."""
        return str(self.distance_to_goal), str(self.goal_eccentricity)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "distance_to_goal": self.distance_to_goal,
            "goal_eccentricity": self.goal_eccentricity,
            "goal": self.goal.to_dict(),
            "cells": self.cells,
            "passages": self.passages,
            "moves": self.moves,
        }


class ExplorationService:
    """Runs complete explorations for programs, floor plans or ready-made agents."""

    def __init__(self):
        self.settings = get_settings()

    def explore_agent(self, agent: MovableAgent) -> ExplorationReport:
        """
        Explore with an agent and compute both metrics.

        The agent is released before this returns, whatever happens.

        Raises:
            GoalUnreachableError: If the goal is not reachable from the start.
            NoRouteError: If exploration loses track of the map.
            AgentError: If the agent fails.
        """
        start_time = time.time()
        explorer = Explorer(agent)
        explorer.explore()

        report = ExplorationReport(
            distance_to_goal=explorer.distance_to_goal(),
            goal_eccentricity=explorer.goal_eccentricity(),
            goal=explorer.goal,
            cells=explorer.graph.number_of_nodes(),
            passages=explorer.graph.number_of_edges(),
            moves=explorer.moves_made,
        )
        logger.info(
            f"Explored {report.cells} cells in {report.moves} moves "
            f"({(time.time() - start_time) * 1000:.2f}ms): "
            f"distance={report.distance_to_goal} eccentricity={report.goal_eccentricity}"
        )
        return report

    def explore_program(
        self,
        source: str,
        response_timeout: Optional[float] = None,
    ) -> ExplorationReport:
        """
        Explore with a droid running the given Intcode program.

        Raises:
            IntcodeError: If the program cannot be parsed.
        """
        program = parse_program(source)
        with IntcodeDroid(
            program,
            response_timeout=response_timeout,
            shutdown_timeout=self.settings.agent_shutdown_timeout_seconds,
        ) as droid:
            return self.explore_agent(droid)

    def explore_floor_plan(self, floor_plan_text: str, name: str = "Unnamed") -> ExplorationReport:
        """
        Explore a floor plan given as text.

        Raises:
            FloorPlanError: If the text is not a valid floor plan.
        """
        return self.explore_layout(parse_floor_plan(floor_plan_text, name=name))

    def explore_layout(self, floor_plan: FloorPlan) -> ExplorationReport:
        """Explore an already parsed floor plan with a grid agent."""
        logger.info(
            f"Exploring floor plan '{floor_plan.name}' "
            f"({floor_plan.width}x{floor_plan.height})"
        )
        return self.explore_agent(GridAgent.from_floor_plan(floor_plan))


# Singleton instance
_exploration_service: Optional[ExplorationService] = None


def get_exploration_service() -> ExplorationService:
    """Get singleton exploration service instance."""
    global _exploration_service
    if _exploration_service is None:
        _exploration_service = ExplorationService()
    return _exploration_service
