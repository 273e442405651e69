# Core module
from .agent import AgentError, MovableAgent, MoveOutcome, STARTING_POSITION
from .analyzer import PathAnalysisError, distance, eccentricity
from .droid import IntcodeDroid
from .explorer import Explorer, GoalUnreachableError, NoRouteError
from .floor_plan import (
    FloorPlan,
    FloorPlanError,
    parse_floor_plan,
    load_floor_plan_file,
)
from .geometry import Direction, Point
from .grid_agent import GridAgent
from .intcode import IntcodeError, IntcodeVm, parse_program

__all__ = [
    "AgentError",
    "MovableAgent",
    "MoveOutcome",
    "STARTING_POSITION",
    "PathAnalysisError",
    "distance",
    "eccentricity",
    "IntcodeDroid",
    "Explorer",
    "GoalUnreachableError",
    "NoRouteError",
    "FloorPlan",
    "FloorPlanError",
    "parse_floor_plan",
    "load_floor_plan_file",
    "Direction",
    "Point",
    "GridAgent",
    "IntcodeError",
    "IntcodeVm",
    "parse_program",
]
