"""Test crossword grid synthesis."""

import pytest

from wordwheel.engine.models import Level
from wordwheel.grid import (
    Grid,
    GridCoordinates,
    Placement,
    SolutionFormat,
    WheelPath,
    build_grid,
    build_grid_from_wheel_paths,
    build_grid_from_explicit_coordinates,
    parse_solution_formats,
)


def words(*names):
    """Ordered solutions with dummy paths; layout only reads the words."""
    return [(name, list(range(len(name)))) for name in names]


class TestWheelPathLayout:
    """Test intersection-based layout of target words."""

    def test_empty_input(self):
        """No words gives a 1x1 empty grid."""
        grid = build_grid_from_wheel_paths([])
        assert grid.rows == 1
        assert grid.cols == 1
        assert grid.cells == [[None]]

    def test_first_word_horizontal_at_origin(self):
        grid = build_grid_from_wheel_paths(words("CAT"))
        assert grid.lines() == ["CAT"]
        assert grid.placements["CAT"] == Placement(0, 0, 'H')

    def test_vertical_tried_before_horizontal(self):
        """TAR crosses the T of CAT going down."""
        grid = build_grid_from_wheel_paths(words("CAT", "TAR"))
        assert grid.lines() == ["CAT", "..A", "..R"]
        assert grid.placements["TAR"] == Placement(0, 2, 'V')

    def test_placement_above_row_zero_rejected(self):
        """BAT could only cross CAT by starting above the grid, so it gets a new row."""
        grid = build_grid_from_wheel_paths(words("CAT", "BAT"))
        assert grid.lines() == ["CAT", "BAT"]
        assert grid.placements["BAT"] == Placement(1, 0, 'H')

    def test_rejected_candidates_do_not_grow_grid(self):
        """Candidates that were checked and rejected leave no trace on the grid size."""
        grid = build_grid_from_wheel_paths(words("CAT", "BAT"))
        assert grid.rows == 2
        assert grid.cols == 3

    def test_fallback_row_widens_grid(self):
        """A longer unconnected word widens every row; nothing shrinks."""
        grid = build_grid_from_wheel_paths(words("CAT", "DOGS"))
        assert grid.lines() == ["CAT.", "DOGS"]

    def test_order_matters(self):
        """The same words in a different order give a different layout."""
        first = build_grid_from_wheel_paths(words("CAT", "TAR"))
        second = build_grid_from_wheel_paths(words("TAR", "CAT"))
        assert first.lines() != second.lines()
        assert second.lines() == ["TAR", "CAT"]

    def test_deterministic(self):
        solutions = words("CAT", "DOG", "COT", "GOT", "TOGA")
        assert build_grid_from_wheel_paths(solutions).cells == build_grid_from_wheel_paths(solutions).cells

    def test_catdog_level_layout(self):
        """Every target of the CATDOG level ends up readable in the grid."""
        solutions = words("CAT", "DOG", "COT", "GOT", "TOGA")
        grid = build_grid_from_wheel_paths(solutions)
        assert grid.lines() == ["CATOGA", "DOGOT.", "COT..."]
        for word, _ in solutions:
            assert grid.contains_word(word)

    def test_lowercase_words_uppercased(self):
        grid = build_grid_from_wheel_paths([("cat", [0, 1, 2])])
        assert grid.lines() == ["CAT"]


class TestExplicitCoordinateLayout:
    """Test the legacy coordinate-pair format."""

    def test_places_words_at_coordinates(self):
        grid = build_grid_from_explicit_coordinates([
            ("CAT", [0, 0, 0, 1, 0, 2]),
            ("TAR", [0, 2, 1, 2, 2, 2]),
        ])
        assert grid.lines() == ["CAT", "..A", "..R"]
        assert grid.placements["TAR"] == Placement(0, 2, 'V')

    def test_skips_wrong_coordinate_count(self):
        grid = build_grid_from_explicit_coordinates([
            ("CAT", [0, 0, 0, 1, 0, 2]),
            ("DOG", [5, 5, 5]),
        ])
        assert grid.lines() == ["CAT"]
        assert "DOG" not in grid.placements

    def test_bounding_box_of_placed_words(self):
        grid = build_grid_from_explicit_coordinates([("AT", [2, 3, 2, 4])])
        assert grid.rows == 3
        assert grid.cols == 5
        assert grid.at(2, 3) == "A"
        assert grid.filled_cells() == 2

    def test_nothing_placeable(self):
        grid = build_grid_from_explicit_coordinates([("CAT", [0, 0])])
        assert grid.cells == [[None]]


class TestBuildGridDispatch:
    """Test format dispatch on a level."""

    def test_wheel_level(self):
        level = Level(id=1, base_letters="CATDOG", solutions={"CAT": [0, 1, 2], "DOG": [3, 4, 5]})
        grid = build_grid(level)
        assert grid.lines() == ["CAT", "DOG"]
        formats = parse_solution_formats(level)
        assert formats["CAT"] == WheelPath(indices=[0, 1, 2])

    def test_grid_level(self):
        level = Level(
            id=2,
            base_letters="CATDOG",
            solutions={"CAT": [0, 0, 0, 1, 0, 2]},
            solution_format=SolutionFormat.GRID,
        )
        assert build_grid(level).lines() == ["CAT"]
        formats = parse_solution_formats(level)
        assert formats["CAT"] == GridCoordinates(coords=[(0, 0), (0, 1), (0, 2)])


class TestGridModel:
    """Test Grid accessors."""

    def test_render_marks_empty_cells(self):
        grid = Grid(cells=[["C", None], [None, "A"]])
        assert grid.render() == "C.\n.A"

    def test_at_out_of_range(self):
        grid = Grid(cells=[["C"]])
        assert grid.at(5, 5) is None
        assert grid.at(-1, 0) is None

    def test_contains_word_in_column(self):
        grid = Grid(cells=[["C", None], ["A", None], ["T", None]])
        assert grid.contains_word("cat")
        assert not grid.contains_word("TAC")
