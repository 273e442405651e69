"""Exploration schemas for request/response validation."""

from pydantic import BaseModel, Field, field_validator

from shipmap.config import get_settings


class ProgramExploreRequest(BaseModel):
    """Schema for exploring with an Intcode droid program."""

    program: str = Field(..., min_length=1)
    response_timeout_seconds: float | None = Field(None, gt=0, le=300)

    @field_validator("program")
    @classmethod
    def validate_program_length(cls, v: str) -> str:
        limit = get_settings().max_program_length
        if len(v) > limit:
            raise ValueError(f"Program exceeds {limit} characters")
        return v


class FloorPlanExploreRequest(BaseModel):
    """Schema for exploring a floor plan given as text."""

    name: str = Field("Unnamed", min_length=1, max_length=100)
    grid_data: str = Field(..., min_length=1)

    @field_validator("grid_data")
    @classmethod
    def validate_grid_length(cls, v: str) -> str:
        limit = get_settings().max_floor_plan_length
        if len(v) > limit:
            raise ValueError(f"Floor plan exceeds {limit} characters")
        return v


class GridPosition(BaseModel):
    """Schema for a position relative to the start cell."""

    x: int
    y: int


class ExplorationResponse(BaseModel):
    """Schema for a completed exploration."""

    distance_to_goal: int = Field(..., ge=0)
    goal_eccentricity: int = Field(..., ge=0)
    goal: GridPosition
    cells: int = Field(..., gt=0)
    passages: int = Field(..., ge=0)
    moves: int = Field(..., ge=0)
