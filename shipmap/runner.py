#!/usr/bin/env python3
"""
Shipmap Runner

Explores with a droid program (or a floor plan) and prints the start-to-goal
distance and the goal's eccentricity as JSON.

Usage:
    shipmap-run <program_path>
    shipmap-run --maze <floor_plan_path>
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

from shipmap.config import get_settings
from shipmap.core import (
    AgentError,
    FloorPlanError,
    GoalUnreachableError,
    IntcodeError,
    NoRouteError,
    load_floor_plan_file,
)
from shipmap.services.exploration_service import get_exploration_service

USAGE = "Usage: shipmap-run <program_path> | shipmap-run --maze <floor_plan_path>"


def run(path: str, maze: bool = False) -> dict:
    """
    Explore and return results.

    Args:
        path: Intcode program file, or floor plan file when maze is set.
        maze: Treat path as a floor plan.

    Returns:
        Dictionary with execution results
    """
    result = {
        "success": False,
        "distance_to_goal": None,
        "goal_eccentricity": None,
        "error": None,
    }

    service = get_exploration_service()
    try:
        if maze:
            floor_plan = load_floor_plan_file(path)
            report = service.explore_layout(floor_plan)
        else:
            program_file = Path(path)
            if not program_file.is_file():
                result["error"] = f"Program file not found: {path}"
                return result
            report = service.explore_program(program_file.read_text(encoding="utf-8"))
    except (
        FileNotFoundError,
        FloorPlanError,
        IntcodeError,
        GoalUnreachableError,
        NoRouteError,
        AgentError,
    ) as e:
        result["error"] = f"{type(e).__name__}: {str(e)}"
        return result

    result.update(report.to_dict())
    result["success"] = True
    return result


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = sys.argv[1:] if argv is None else argv

    # Logs go to stderr so stdout stays valid JSON
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if len(args) == 2 and args[0] == "--maze":
        result = run(args[1], maze=True)
    elif len(args) == 1 and not args[0].startswith("-"):
        result = run(args[0])
    else:
        print(json.dumps({"success": False, "error": USAGE}))
        return 1

    print(json.dumps(result))
    return 0 if result["success"] else 1


if __name__ == "__main__":
    sys.exit(main())
