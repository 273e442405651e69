"""
Text floor plans.

A floor plan draws a deck as rows of characters:

    S   start cell, exactly one
    E   goal cell, exactly one
    X   bulkhead (wall)
    .   open floor, a space works too

Rows may differ in length. Anything beyond the end of a row, or outside
the drawing, is solid wall.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

START_MARKER = "S"
GOAL_MARKER = "E"
WALL_CHAR = "X"
OPEN_CHARS = frozenset(". ")
VALID_CHARS = OPEN_CHARS | {START_MARKER, GOAL_MARKER, WALL_CHAR}

Cell = tuple[int, int]


class FloorPlanError(ValueError):
    """The floor plan text is blank, unreadable or badly drawn."""

    pass


@dataclass(frozen=True)
class FloorPlan:
    """A validated floor plan, in absolute (column, row) coordinates."""

    name: str
    rows: tuple[str, ...]
    start: Cell
    goal: Cell

    @property
    def width(self) -> int:
        return max(len(row) for row in self.rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def text(self) -> str:
        return "\n".join(self.rows)

    def open_cells(self) -> set[Cell]:
        """Every cell that is not a wall, markers included."""
        return {
            (x, y)
            for y, row in enumerate(self.rows)
            for x, char in enumerate(row)
            if char != WALL_CHAR
        }


def _split_rows(text: str) -> tuple[str, ...]:
    # Spaces are floor, so only newlines are trimmed from the ends
    return tuple(row.rstrip("\r") for row in text.strip("\n").split("\n"))


def _single(markers: dict[str, list[Cell]], marker: str, label: str) -> Cell:
    found = markers.get(marker, [])
    if len(found) != 1:
        where = ", ".join(str(cell) for cell in found) or "nowhere"
        raise FloorPlanError(
            f"Expected one {label} marker '{marker}', found {len(found)} ({where})"
        )
    return found[0]


def parse_floor_plan(text: str, name: str = "Unnamed") -> FloorPlan:
    """
    Parse and validate a floor plan drawing.

    Raises:
        FloorPlanError: If the drawing is blank, uses an unknown character,
            or does not have exactly one start and one goal.
    """
    if not text or text.isspace():
        raise FloorPlanError("Floor plan is blank")

    rows = _split_rows(text)
    markers: dict[str, list[Cell]] = {}
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char not in VALID_CHARS:
                raise FloorPlanError(
                    f"Unexpected character {char!r} at ({x}, {y}); "
                    f"use one of {''.join(sorted(VALID_CHARS))!r}"
                )
            if char in (START_MARKER, GOAL_MARKER):
                markers.setdefault(char, []).append((x, y))

    return FloorPlan(
        name=name,
        rows=rows,
        start=_single(markers, START_MARKER, "start"),
        goal=_single(markers, GOAL_MARKER, "goal"),
    )


def _name_from_path(path: Path) -> str:
    return re.sub(r"[_\-]+", " ", path.stem).title()


def load_floor_plan_file(path: Path | str, name: Optional[str] = None) -> FloorPlan:
    """
    Read a floor plan file. The name defaults to a title built from the file name.

    Raises:
        FileNotFoundError: If nothing exists at path.
        FloorPlanError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise FloorPlanError(f"Cannot read floor plan {path}: {e}") from e

    return parse_floor_plan(text, name=name or _name_from_path(path))
