"""Crossword grid synthesis for word-wheel levels."""

from .models import (
    EMPTY,
    Grid,
    GridLetter,
    GridCoordinates,
    Placement,
    SolutionFormat,
    WheelPath,
)
from .builder import (
    build_grid,
    build_grid_from_wheel_paths,
    build_grid_from_explicit_coordinates,
    parse_solution_formats,
)

__all__ = [
    # Models
    "EMPTY",
    "Grid",
    "GridLetter",
    "GridCoordinates",
    "Placement",
    "SolutionFormat",
    "WheelPath",
    # Layout
    "build_grid",
    "build_grid_from_wheel_paths",
    "build_grid_from_explicit_coordinates",
    "parse_solution_formats",
]
