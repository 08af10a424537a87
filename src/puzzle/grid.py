"""Grid building and rendering utilities."""

from typing import List, Optional

from .models import LetterCell, Position, Orientation, ORIENTATION_DELTAS


Grid = List[List[LetterCell]]


def create_empty_grid(size: int = 6) -> Grid:
    """Build a size x size grid of unfilled cells, indexed grid[y][x]."""
    return [
        [LetterCell(position=Position(x=x, y=y)) for x in range(size)]
        for y in range(size)
    ]


def is_valid_position(position: Position, grid_size: int = 6) -> bool:
    """Check if a position is within grid bounds."""
    return 0 <= position.x < grid_size and 0 <= position.y < grid_size


def get_cell(grid: Grid, position: Position) -> Optional[LetterCell]:
    """Return the cell at `position`, or None when out of bounds."""
    if not is_valid_position(position, len(grid)):
        return None
    row = grid[position.y]
    if position.x >= len(row):
        return None
    return row[position.x]


def calculate_word_positions(
    start: Position,
    length: int,
    orientation: Orientation,
    grid_size: int = 6,
) -> List[Position]:
    """
    Compute the cells a word of `length` letters covers from `start`.

    Returns an empty list if any letter would fall outside the grid.
    """
    dx, dy = ORIENTATION_DELTAS[orientation]
    positions: List[Position] = []

    for i in range(length):
        pos = Position(x=start.x + dx * i, y=start.y + dy * i)
        if not is_valid_position(pos, grid_size):
            return []
        positions.append(pos)

    return positions


def orientation_from_delta(dx: int, dy: int) -> Optional[Orientation]:
    """Map a single-step delta back to its orientation, or None if it is not one."""
    for orientation, delta in ORIENTATION_DELTAS.items():
        if delta == (dx, dy):
            return orientation
    return None


def render_grid(grid: Grid, highlight_words: bool = False) -> str:
    """
    Render the grid to a string, one row per line.

    Unfilled cells render as '.'. With `highlight_words`, filler letters are
    lowercased so placed words stand out.
    """
    lines = []
    for row in grid:
        chars = []
        for cell in row:
            letter = cell.letter or "."
            if highlight_words and not cell.is_part_of_word:
                letter = letter.lower()
            chars.append(letter)
        lines.append(" ".join(chars))

    return "\n".join(lines)
