"""
Deterministic fallback puzzle builder.

Used when the search-based generator is exhausted. Short words are laid
left-to-right from column 1 on every other row, with a single placement
try per word and no retries.
"""

import logging
from typing import Iterator, List, Optional

from .errors import FallbackGenerationError
from .filler import fill_empty_cells
from .grid import create_empty_grid
from .models import (
    GeneratedPuzzle,
    GenerationStats,
    Position,
    Theme,
    Word,
    MIN_TARGET_WORDS,
    MIN_DISTRACTOR_WORDS,
)
from .placement import can_place_word_at, create_word, place_word_in_grid
from .rng import RandomSource, make_random_source
from .selector import is_alpha_word, normalize_word


logger = logging.getLogger(__name__)

FALLBACK_GRID_SIZE = 6
FALLBACK_MIN_LENGTH = 3
FALLBACK_MAX_LENGTH = 4
FALLBACK_START_COLUMN = 1


def short_words(pool, limit: int) -> List[str]:
    """First `limit` A-Z words of length 3-4, in pool order."""
    words = [normalize_word(w) for w in pool]
    return [
        w for w in words
        if FALLBACK_MIN_LENGTH <= len(w) <= FALLBACK_MAX_LENGTH and is_alpha_word(w)
    ][:limit]


def fallback_rows(grid_size: int) -> Iterator[int]:
    """Rows 1, 3, 5, ... then 0, 2, 4, ..."""
    yield from range(1, grid_size, 2)
    yield from range(0, grid_size, 2)


def generate_fallback_puzzle(
    theme: Theme,
    grid_size: int = FALLBACK_GRID_SIZE,
    rng: Optional[RandomSource] = None,
) -> GeneratedPuzzle:
    """
    Build a minimal puzzle without search.

    Raises:
        FallbackGenerationError: If the theme cannot supply enough short,
            placeable words for the minimum target and distractor counts
    """
    if rng is None:
        rng = make_random_source()

    grid = create_empty_grid(grid_size)
    target_words: List[Word] = []
    distractor_words: List[Word] = []

    skipped = 0
    rows = fallback_rows(grid_size)
    row = next(rows, None)
    pending = [(text, True) for text in short_words(theme.target_words, MIN_TARGET_WORDS)]
    pending += [(text, False) for text in short_words(theme.distractor_words, MIN_DISTRACTOR_WORDS)]

    for text, is_target in pending:
        start = Position(x=FALLBACK_START_COLUMN, y=row) if row is not None else None
        if start is None or not can_place_word_at(grid, text, start, "horizontal-lr"):
            logger.debug("Fallback skipped '%s' for theme %s", text, theme.name)
            skipped += 1
            continue

        word = create_word(text, is_target, rng)
        place_word_in_grid(grid, word, start, "horizontal-lr")
        (target_words if is_target else distractor_words).append(word)
        row = next(rows, None)

    if len(target_words) < MIN_TARGET_WORDS or len(distractor_words) < MIN_DISTRACTOR_WORDS:
        raise FallbackGenerationError(
            f"Theme '{theme.name}' has too few short placeable words for a fallback puzzle "
            f"({len(target_words)} targets, {len(distractor_words)} distractors placed)"
        )

    placed = [*target_words, *distractor_words]
    stats = GenerationStats(attempts=1, placed_words=len(placed), failed_placements=skipped)
    stats.fill_letters = fill_empty_cells(grid, placed, rng)

    return GeneratedPuzzle(
        grid=grid,
        target_words=target_words,
        distractor_words=distractor_words,
        theme=theme,
        generation_stats=stats,
    )
