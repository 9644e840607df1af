"""Data models for the crossword display grid."""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Literal, NamedTuple, Union

from pydantic import BaseModel, Field


# A grid cell: a resolved letter, or None when the cell is empty.
GridLetter = Optional[str]

EMPTY = '.'


class SolutionFormat(str, Enum):
    """How the integers stored for a solution are interpreted."""
    WHEEL = "wheel"  # ordered wheel indices (the swipe path)
    GRID = "grid"  # legacy flattened (row, col) pairs


class WheelPath(BaseModel):
    """A solution stored as the ordered wheel indices a player must trace."""
    kind: Literal["wheel"] = "wheel"
    indices: List[int]


class GridCoordinates(BaseModel):
    """A solution stored as absolute grid coordinates, one pair per letter."""
    kind: Literal["grid"] = "grid"
    coords: List[Tuple[int, int]]


ParsedSolution = Union[WheelPath, GridCoordinates]


class Placement(NamedTuple):
    """Where a word landed: its first cell and direction ('H' or 'V')."""
    row: int
    col: int
    direction: str


class Grid(BaseModel):
    """
    Rectangular letter grid sized to the bounding box of the placed words.

    Cells hold a single uppercase letter or None. The grid carries no
    gameplay state; found/hinted overlays are tracked elsewhere by word.
    """
    cells: List[List[GridLetter]] = Field(default_factory=lambda: [[None]])
    placements: Dict[str, Placement] = Field(default_factory=dict)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def at(self, row: int, col: int) -> GridLetter:
        """Letter at (row, col); out-of-range cells read as empty."""
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None

    def filled_cells(self) -> int:
        return sum(1 for row in self.cells for cell in row if cell is not None)

    def lines(self) -> List[str]:
        """Rows as strings, with '.' standing in for empty cells."""
        return [''.join(cell or EMPTY for cell in row) for row in self.cells]

    def columns(self) -> List[str]:
        """Columns as strings, with '.' standing in for empty cells."""
        return [
            ''.join(self.cells[r][c] or EMPTY for r in range(self.rows))
            for c in range(self.cols)
        ]

    def render(self) -> str:
        return '\n'.join(self.lines())

    def contains_word(self, word: str) -> bool:
        """True if `word` reads left-to-right in a row or top-to-bottom in a column."""
        word = word.upper()
        return any(word in line for line in self.lines() + self.columns())
