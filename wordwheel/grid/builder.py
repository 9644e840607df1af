"""
Grid synthesis for a level's target words.

Builds a crossword-style grid by intersecting each word with letters already
placed. Output depends only on the order of the input sequence, so callers
pass solutions as an explicit ordered list of (word, path) pairs.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from .models import (
    Grid,
    GridCoordinates,
    GridLetter,
    ParsedSolution,
    Placement,
    SolutionFormat,
    WheelPath,
)

if TYPE_CHECKING:
    from ..engine.models import Level


logger = logging.getLogger(__name__)

OrderedSolutions = Sequence[Tuple[str, Sequence[int]]]


class _Canvas:
    """Growable cell matrix used while a grid is being laid out."""

    def __init__(self) -> None:
        self.cells: List[List[GridLetter]] = []
        self.placements: Dict[str, Placement] = {}

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def get(self, row: int, col: int) -> GridLetter:
        if row < self.rows and col < self.cols:
            return self.cells[row][col]
        return None

    def ensure_size(self, rows: int, cols: int) -> None:
        """Grow (never shrink) so that the grid is at least rows x cols."""
        width = max(cols, self.cols)
        for row in self.cells:
            row.extend([None] * (width - len(row)))
        while len(self.cells) < rows:
            self.cells.append([None] * width)

    def fits(self, word: str, row: int, col: int, direction: str) -> bool:
        """Check a candidate placement against existing letters without mutating."""
        if row < 0 or col < 0:
            return False
        for k, letter in enumerate(word):
            r, c = (row, col + k) if direction == 'H' else (row + k, col)
            existing = self.get(r, c)
            if existing is not None and existing != letter:
                return False
        return True

    def write(self, word: str, row: int, col: int, direction: str) -> None:
        if direction == 'H':
            self.ensure_size(row + 1, col + len(word))
        else:
            self.ensure_size(row + len(word), col + 1)
        for k, letter in enumerate(word):
            r, c = (row, col + k) if direction == 'H' else (row + k, col)
            self.cells[r][c] = letter
        self.placements[word] = Placement(row, col, direction)

    def to_grid(self) -> Grid:
        if not self.cells:
            return Grid()
        return Grid(cells=self.cells, placements=self.placements)


def _try_intersect(canvas: _Canvas, word: str) -> bool:
    """
    Place `word` across an existing matching letter.

    For each letter of the word, cells are scanned in row-major order; at every
    matching cell a vertical placement is tried before a horizontal one. The
    first placement without conflicts is written.
    """
    for wi, letter in enumerate(word):
        for r in range(canvas.rows):
            for c in range(canvas.cols):
                if canvas.cells[r][c] != letter:
                    continue
                if canvas.fits(word, r - wi, c, 'V'):
                    canvas.write(word, r - wi, c, 'V')
                    return True
                if canvas.fits(word, r, c - wi, 'H'):
                    canvas.write(word, r, c - wi, 'H')
                    return True
    return False


def build_grid_from_wheel_paths(solutions: OrderedSolutions) -> Grid:
    """
    Lay out target words as a connected-where-possible crossword grid.

    The first word goes horizontally at the origin. Each following word is
    crossed with an existing letter when a conflict-free placement exists;
    otherwise it starts a new row below everything placed so far.

    Args:
        solutions: (word, wheel path) pairs in a fixed, reproducible order.
            Only the words are used for layout.

    Returns:
        The finished Grid; a 1x1 empty grid when there are no words.
    """
    words = [word.upper() for word, _ in solutions]
    if not words:
        return Grid()

    canvas = _Canvas()
    canvas.write(words[0], 0, 0, 'H')

    for word in words[1:]:
        if not _try_intersect(canvas, word):
            logger.debug("No intersection for %s; placing on row %d", word, canvas.rows)
            canvas.write(word, canvas.rows, 0, 'H')

    return canvas.to_grid()


def build_grid_from_explicit_coordinates(solutions: OrderedSolutions) -> Grid:
    """
    Legacy layout: each word lists a flattened (row, col) pair per letter.

    Words whose coordinate count is not exactly twice their length are
    skipped. The grid is sized to the bounding box of the words placed.
    """
    accepted: List[Tuple[str, List[Tuple[int, int]]]] = []
    for word, positions in solutions:
        word = word.upper()
        if len(positions) != len(word) * 2:
            logger.warning(
                "Skipping %s: %d coordinates for %d letters", word, len(positions), len(word)
            )
            continue
        coords = [(positions[i * 2], positions[i * 2 + 1]) for i in range(len(word))]
        if any(r < 0 or c < 0 for r, c in coords):
            logger.warning("Skipping %s: negative coordinate in %s", word, coords)
            continue
        accepted.append((word, coords))

    if not accepted:
        return Grid()

    max_row = max(r for _, coords in accepted for r, _ in coords)
    max_col = max(c for _, coords in accepted for _, c in coords)

    canvas = _Canvas()
    canvas.ensure_size(max_row + 1, max_col + 1)
    for word, coords in accepted:
        for letter, (r, c) in zip(word, coords):
            canvas.cells[r][c] = letter
        first_row, first_col = coords[0]
        direction = 'V' if len(coords) > 1 and coords[1][1] == first_col else 'H'
        canvas.placements[word] = Placement(first_row, first_col, direction)

    return canvas.to_grid()


def parse_solution_formats(level: "Level") -> Dict[str, ParsedSolution]:
    """Tag every solution of `level` with its interpreted format."""
    formats: Dict[str, ParsedSolution] = {}
    for word, values in level.ordered_solutions():
        if level.solution_format == SolutionFormat.GRID:
            pairs = [(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]
            formats[word] = GridCoordinates(coords=pairs)
        else:
            formats[word] = WheelPath(indices=list(values))
    return formats


def build_grid(level: "Level") -> Grid:
    """Build the display grid for `level`, honouring its solution format."""
    solutions = level.ordered_solutions()
    if level.solution_format == SolutionFormat.GRID:
        return build_grid_from_explicit_coordinates(solutions)
    return build_grid_from_wheel_paths(solutions)
