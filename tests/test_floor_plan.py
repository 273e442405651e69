"""Tests for the floor plan parser."""

import pytest

from shipmap.core.floor_plan import (
    FloorPlan,
    FloorPlanError,
    load_floor_plan_file,
    parse_floor_plan,
)

from conftest import SIMPLE_MAZE


class TestParseFloorPlan:
    """Tests for parse_floor_plan."""

    def test_parse_simple_floor_plan(self):
        """Test parsing a simple valid floor plan."""
        result = parse_floor_plan(SIMPLE_MAZE, name="Simple")

        assert isinstance(result, FloorPlan)
        assert result.name == "Simple"
        assert result.width == 5
        assert result.height == 5
        assert result.start == (1, 1)
        assert result.goal == (3, 3)

    def test_text_round_trips(self):
        """Test the rows join back into the original drawing."""
        assert parse_floor_plan(SIMPLE_MAZE).text == SIMPLE_MAZE

    def test_leading_spaces_are_floor(self):
        """Test leading spaces keep their columns."""
        result = parse_floor_plan("\n  S\nXXE\n")
        assert result.start == (2, 0)
        assert result.goal == (2, 1)

    def test_windows_line_endings(self):
        """Test carriage returns are dropped."""
        result = parse_floor_plan(SIMPLE_MAZE.replace("\n", "\r\n"))
        assert result.text == SIMPLE_MAZE

    def test_ragged_rows(self):
        """Test width is the longest row."""
        result = parse_floor_plan("S\n..E")
        assert result.width == 3
        assert result.open_cells() == {(0, 0), (0, 1), (1, 1), (2, 1)}

    def test_open_cells(self):
        """Test open cells include both markers and skip walls."""
        result = parse_floor_plan(SIMPLE_MAZE)
        assert result.open_cells() == {
            (1, 1), (2, 1), (3, 1),
            (1, 2), (3, 2),
            (1, 3), (2, 3), (3, 3),
        }

    @pytest.mark.parametrize("text", ["", "   \n   \n   "])
    def test_blank_text_raises(self, text):
        """Test empty and whitespace-only drawings are rejected."""
        with pytest.raises(FloorPlanError, match="blank"):
            parse_floor_plan(text)

    def test_missing_start_raises(self):
        """Test a drawing without S is rejected."""
        with pytest.raises(FloorPlanError, match="one start marker 'S', found 0"):
            parse_floor_plan("XXXXX\nX...X\nX..EX\nXXXXX")

    def test_missing_goal_raises(self):
        """Test a drawing without E is rejected."""
        with pytest.raises(FloorPlanError, match="one goal marker 'E', found 0"):
            parse_floor_plan("XXXXX\nXS..X\nX...X\nXXXXX")

    def test_multiple_starts_raises(self):
        """Test every extra start is listed."""
        with pytest.raises(FloorPlanError, match=r"found 2 \(\(1, 1\), \(3, 1\)\)"):
            parse_floor_plan("XXXXX\nXS.SX\nX..EX\nXXXXX")

    def test_multiple_goals_raises(self):
        """Test a drawing with two goals is rejected."""
        with pytest.raises(FloorPlanError, match="one goal marker 'E', found 2"):
            parse_floor_plan("XXXXX\nXS..X\nXE.EX\nXXXXX")

    def test_invalid_char_raises(self):
        """Test unknown characters are reported with their position."""
        with pytest.raises(FloorPlanError, match=r"Unexpected character '\?' at \(3, 2\)"):
            parse_floor_plan("XXXXX\nXS..X\nX.X?X\nX..EX\nXXXXX")

    def test_error_is_value_error(self):
        """Test callers can catch parse failures as ValueError."""
        with pytest.raises(ValueError):
            parse_floor_plan("S")


class TestLoadFloorPlanFile:
    """Tests for loading floor plan files from the filesystem."""

    def test_load_floor_plan_file(self, tutorial_maze_path):
        """Test loading the tutorial fixture."""
        result = load_floor_plan_file(tutorial_maze_path)

        assert result.name == "Tutorial"
        assert result.width == 10
        assert result.height == 10
        assert result.start == (1, 1)
        assert result.goal == (9, 8)

    def test_name_from_filename(self, tmp_path):
        """Test underscores and dashes become spaces in the default name."""
        path = tmp_path / "cargo_bay-2.txt"
        path.write_text(SIMPLE_MAZE)
        assert load_floor_plan_file(path).name == "Cargo Bay 2"

    def test_name_override(self, tutorial_maze_path):
        """Test an explicit name wins over the filename."""
        result = load_floor_plan_file(tutorial_maze_path, name="Deck 1")
        assert result.name == "Deck 1"

    def test_missing_file(self):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_floor_plan_file("/nonexistent/path/deck.txt")

    def test_directory_raises(self, tmp_path):
        """Test a directory cannot be loaded as a floor plan."""
        with pytest.raises(FloorPlanError, match="Cannot read floor plan"):
            load_floor_plan_file(tmp_path)

    def test_undecodable_file_raises(self, tmp_path):
        """Test bytes that are not UTF-8 are rejected."""
        path = tmp_path / "deck.txt"
        path.write_bytes(b"\xff\xfeS.E")
        with pytest.raises(FloorPlanError, match="Cannot read floor plan"):
            load_floor_plan_file(path)
