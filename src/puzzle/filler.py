"""Filler letters for cells not covered by any word."""

from typing import Iterable, Optional, Set

from .grid import Grid
from .models import Word
from .rng import RandomSource, make_random_source, choice


# Vowels are left out to cut down on accidental words
CONSONANTS = "BCDFGHJKLMNPQRSTVWXYZ"
MAX_FILL_DRAWS = 10


def random_consonant(rng: RandomSource) -> str:
    return choice(rng, CONSONANTS)


def used_letters(words: Iterable[Word]) -> Set[str]:
    """Distinct letters across all placed words."""
    letters: Set[str] = set()
    for word in words:
        letters.update(word.text)
    return letters


def fill_empty_cells(
    grid: Grid,
    placed_words: Iterable[Word],
    rng: Optional[RandomSource] = None,
) -> int:
    """
    Fill every empty cell with a random consonant.

    Draws avoid letters used by placed words, giving up after
    MAX_FILL_DRAWS draws and keeping the last one. This reduces the
    chance of accidental words but does not rule them out.

    Returns the number of cells filled.
    """
    if rng is None:
        rng = make_random_source()

    avoid = used_letters(placed_words)
    filled = 0

    for row in grid:
        for cell in row:
            if cell.letter != "":
                continue

            letter = random_consonant(rng)
            draws = 1
            while letter in avoid and draws < MAX_FILL_DRAWS:
                letter = random_consonant(rng)
                draws += 1

            cell.letter = letter
            filled += 1

    return filled
