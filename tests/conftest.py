"""Pytest configuration and fixtures."""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from shipmap.core import Direction, Point, STARTING_POSITION
from shipmap.main import app

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Eight cells in a ring, goal opposite the start
SIMPLE_MAZE = """XXXXX
XS..X
X.X.X
X..EX
XXXXX"""

# Start and goal separated by a wall
SEALED_MAZE = """XXXXXX
XS.XEX
XXXXXX"""

# Winding corridor from the start, goal four steps in, two dead ends
DEAD_END_MAZE = """XXXXXX
X.SXXX
X.X..X
X.E.XX
XXXXXX"""

# Droid programs
ALWAYS_WALL_PROGRAM = "3,100,104,0,1105,1,0"
SILENT_PROGRAM = "3,100,1105,1,0"
BUSY_PROGRAM = "1105,1,0"


def from_origin(*directions: Direction) -> Point:
    """Point reached by walking the given steps from the start."""
    point = STARTING_POSITION
    for direction in directions:
        point = direction.move(point)
    return point


@pytest.fixture
def tutorial_maze_path() -> Path:
    """Ten-by-ten floor plan with an unreachable inner ring."""
    return FIXTURES_DIR / "tutorial.txt"


@pytest.fixture
def two_cell_program_path() -> Path:
    """Droid program for a two-cell ship: the start and a goal to its east."""
    return FIXTURES_DIR / "two_cell_droid.intcode"


@pytest.fixture
def two_cell_program(two_cell_program_path) -> str:
    return two_cell_program_path.read_text()


@pytest.fixture
def dead_end_program_path() -> Path:
    """Droid program for the DEAD_END_MAZE deck, read from a lookup table."""
    return FIXTURES_DIR / "dead_end_droid.intcode"


@pytest.fixture
def dead_end_program(dead_end_program_path) -> str:
    return dead_end_program_path.read_text()


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
