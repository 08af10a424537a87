"""
Word placement onto a mutable grid.

Placement is greedy and never backtracks: a word that cannot be laid down
in any orientation within its position budget is reported as failed and
previously placed words stay where they are.
"""

from typing import Optional

from .grid import Grid, calculate_word_positions, get_cell
from .models import Word, Position, Orientation, ORIENTATIONS
from .rng import RandomSource, make_random_source, random_int, random_index, shuffled


MAX_POSITION_ATTEMPTS = 20

_ID_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"
_ID_SUFFIX_LENGTH = 9


def create_word(text: str, is_target: bool, rng: Optional[RandomSource] = None) -> Word:
    """Create an unplaced Word from a plain string."""
    if rng is None:
        rng = make_random_source()
    suffix = "".join(
        _ID_ALPHABET[random_index(rng, len(_ID_ALPHABET))] for _ in range(_ID_SUFFIX_LENGTH)
    )
    text = text.upper()
    return Word(id=f"word_{text}_{suffix}", text=text, is_target=is_target)


def random_start_position(
    grid_size: int,
    length: int,
    orientation: Orientation,
    rng: RandomSource,
) -> Position:
    """
    Draw a start position from which a word of `length` letters fits the grid.

    The caller must ensure `length <= grid_size`.
    """
    min_x, max_x = 0, grid_size - 1
    min_y, max_y = 0, grid_size - 1

    if orientation == "horizontal-lr":
        max_x = grid_size - length
    elif orientation == "horizontal-rl":
        min_x = length - 1
    elif orientation == "vertical-tb":
        max_y = grid_size - length
    elif orientation == "vertical-bt":
        min_y = length - 1

    return Position(x=random_int(rng, min_x, max_x), y=random_int(rng, min_y, max_y))


def can_place_word_at(
    grid: Grid,
    text: str,
    start: Position,
    orientation: Orientation,
    allow_word_overlaps: bool = False,
) -> bool:
    """
    Check whether `text` can be laid down from `start` without conflicts.

    A cell is usable if it is empty, or if overlaps are allowed and it
    already holds the same letter.
    """
    positions = calculate_word_positions(start, len(text), orientation, len(grid))
    if len(positions) != len(text):
        return False

    for pos, letter in zip(positions, text):
        cell = get_cell(grid, pos)
        if cell is None:
            return False
        if cell.letter == "":
            continue
        if allow_word_overlaps and cell.letter == letter:
            continue
        return False

    return True


def place_word_in_grid(grid: Grid, word: Word, start: Position, orientation: Orientation) -> None:
    """Write the word into the grid and record its final positions and orientation."""
    positions = calculate_word_positions(start, len(word.text), orientation, len(grid))
    if len(positions) != len(word.text):
        raise ValueError(
            f"'{word.text}' does not fit from ({start.x}, {start.y}) going {orientation}"
        )

    word.positions = positions
    word.orientation = orientation

    for pos, letter in zip(positions, word.text):
        cell = grid[pos.y][pos.x]
        cell.letter = letter
        cell.is_part_of_word = True
        cell.word_id = word.id


def try_place_word(
    grid: Grid,
    word: Word,
    allow_word_overlaps: bool = False,
    rng: Optional[RandomSource] = None,
) -> bool:
    """
    Try to place a word using random orientations and start positions.

    Orientations are tried in a random order, each with up to
    MAX_POSITION_ATTEMPTS random starts. On success the grid and word are
    updated and True is returned; on failure nothing is mutated.
    """
    if rng is None:
        rng = make_random_source()

    grid_size = len(grid)
    if len(word.text) > grid_size:
        return False

    for orientation in shuffled(rng, ORIENTATIONS):
        for _ in range(MAX_POSITION_ATTEMPTS):
            start = random_start_position(grid_size, len(word.text), orientation, rng)
            if can_place_word_at(grid, word.text, start, orientation, allow_word_overlaps):
                place_word_in_grid(grid, word, start, orientation)
                return True

    return False
