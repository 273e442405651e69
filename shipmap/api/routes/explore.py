"""Exploration routes for droid programs and floor plans."""

import asyncio
import logging

from fastapi import APIRouter, HTTPException, status

from shipmap.core import (
    AgentError,
    FloorPlanError,
    GoalUnreachableError,
    IntcodeError,
)
from shipmap.schemas.exploration import (
    ExplorationResponse,
    FloorPlanExploreRequest,
    GridPosition,
    ProgramExploreRequest,
)
from shipmap.services.exploration_service import (
    ExplorationReport,
    get_exploration_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/explore", tags=["Exploration"])


def _to_response(report: ExplorationReport) -> ExplorationResponse:
    return ExplorationResponse(
        distance_to_goal=report.distance_to_goal,
        goal_eccentricity=report.goal_eccentricity,
        goal=GridPosition(x=report.goal.x, y=report.goal.y),
        cells=report.cells,
        passages=report.passages,
        moves=report.moves,
    )


@router.post(
    "/program",
    response_model=ExplorationResponse,
)
async def explore_program(request: ProgramExploreRequest) -> ExplorationResponse:
    """Explore with a droid running the submitted Intcode program.

    Returns the start-to-goal distance and the goal's eccentricity.
    """
    service = get_exploration_service()
    try:
        report = await asyncio.to_thread(
            service.explore_program,
            request.program,
            request.response_timeout_seconds,
        )
    except IntcodeError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid program: {e}",
        )
    except GoalUnreachableError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except AgentError as e:
        logger.error(f"Droid failed during exploration: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Droid failed: {e}",
        )

    return _to_response(report)


@router.post(
    "/maze",
    response_model=ExplorationResponse,
)
async def explore_maze(request: FloorPlanExploreRequest) -> ExplorationResponse:
    """Explore a floor plan.

    The start cell (S) is reported as the origin; the goal position in the
    response is relative to it.
    """
    service = get_exploration_service()
    try:
        report = await asyncio.to_thread(
            service.explore_floor_plan,
            request.grid_data,
            request.name,
        )
    except FloorPlanError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except GoalUnreachableError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return _to_response(report)
