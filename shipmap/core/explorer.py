"""
Incremental explorer.

Drives a movable agent through an unknown grid until every reachable cell
has been visited, building an undirected graph of confirmed cells and the
passages between them.

The frontier is a stack of candidate cells. Candidates are pushed freely
and deduplicated when popped. Reaching a candidate that is not next to the
agent means walking there over confirmed passages first, so only the last
move of any plan can hit a wall.
"""

import logging
import threading
from typing import Optional

import networkx as nx

from . import analyzer
from .agent import MovableAgent, MoveOutcome
from .geometry import Direction, Point, directions_along

logger = logging.getLogger(__name__)


class NoRouteError(RuntimeError):
    """No confirmed route leads next to a frontier cell."""

    pass


class GoalUnreachableError(Exception):
    """Exploration finished without finding the goal."""

    pass


class Explorer:
    """
    Maps the region reachable from the agent's start position.

    Example usage:
        explorer = Explorer(agent)
        explorer.explore()
        explorer.distance_to_goal()
        explorer.goal_eccentricity()
    """

    def __init__(self, agent: MovableAgent):
        self._agent = agent
        self._origin = agent.position
        self._graph = nx.Graph()
        self._graph.add_node(self._origin)
        self._frontier: list[Point] = self._origin.adjacent_points()
        self._visited: set[Point] = set()
        self._goal: Optional[Point] = None
        self._explored = False
        self._lock = threading.RLock()
        self.moves_made = 0

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def graph(self) -> nx.Graph:
        """Confirmed cells and passages. Frozen once exploration finishes."""
        return self._graph

    @property
    def goal(self) -> Optional[Point]:
        return self._goal

    @property
    def explored(self) -> bool:
        return self._explored

    def explore(self) -> nx.Graph:
        """
        Visit every reachable cell, then release the agent.

        Calling it again after completion changes nothing.

        Raises:
            NoRouteError: If a frontier cell cannot be reached over known passages.
            AgentError: If the agent fails.
        """
        with self._lock:
            try:
                while self._frontier:
                    target = self._frontier.pop()

                    if target in self._visited:
                        continue
                    self._visited.add(target)

                    self._visit(target)
            finally:
                self._agent.release()

            if not self._explored:
                self._explored = True
                nx.freeze(self._graph)
                logger.info(
                    f"Exploration finished: {self._graph.number_of_nodes()} cells, "
                    f"{self._graph.number_of_edges()} passages, "
                    f"{self.moves_made} moves, goal at {self._goal}"
                )
            return self._graph

    def plan_moves(self, target: Point) -> list[Direction]:
        """
        Shortest list of moves taking the agent from where it stands onto target.

        Every move but the last follows a confirmed passage. The search
        spreads out from the agent one ring at a time and stops at the first
        ring holding a confirmed neighbour of target. Ties go to the earliest
        direction.

        Raises:
            NoRouteError: If no confirmed cell next to target can be reached.
        """
        current = self._agent.position

        for direction in Direction:
            if direction.move(current) == target:
                return [direction]

        entries = [d for d in Direction if d.move(target) in self._graph]
        if entries:
            for depth, layer in enumerate(nx.bfs_layers(self._graph, current)):
                reached = set(layer)
                for direction in entries:
                    neighbour = direction.move(target)
                    if neighbour in reached:
                        paths = nx.single_source_shortest_path(
                            self._graph, current, cutoff=depth
                        )
                        return directions_along(paths[neighbour]) + [direction.opposite()]

        raise NoRouteError(f"Couldn't find a route to {target} from {current}")

    def distance_to_goal(self) -> int:
        """Shortest number of moves from the start to the goal."""
        goal = self._require_goal()
        return analyzer.distance(self._graph, self._origin, goal)

    def goal_eccentricity(self) -> int:
        """Greatest number of moves from the goal to any reachable cell."""
        goal = self._require_goal()
        return analyzer.eccentricity(self._graph, goal)

    def _visit(self, target: Point) -> None:
        plan = self.plan_moves(target)
        if len(plan) > 1:
            logger.debug(f"Backtracking {len(plan) - 1} moves to probe {target}")

        outcome = None
        previous = self._agent.position
        for direction in plan:
            previous = self._agent.position
            outcome = self._agent.attempt_move(direction)
            self.moves_made += 1

        if outcome is MoveOutcome.WALL:
            return

        position = self._agent.position
        self._graph.add_edge(previous, position)
        # Open cells next to each other are always connected
        for neighbour in position.adjacent_points():
            if neighbour in self._graph:
                self._graph.add_edge(position, neighbour)

        if outcome is MoveOutcome.GOAL and self._goal is None:
            self._goal = position
            logger.info(f"Goal found at {position} after {self.moves_made} moves")

        self._frontier.extend(position.adjacent_points())

    def _require_goal(self) -> Point:
        with self._lock:
            if self._goal is None and not self._explored:
                self.explore()
            if self._goal is None:
                raise GoalUnreachableError(
                    f"Goal not found among {self._graph.number_of_nodes()} reachable cells"
                )
            return self._goal
