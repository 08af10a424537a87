"""Themed word grid puzzle generation."""

from .models import (
    Orientation,
    Difficulty,
    ORIENTATIONS,
    MIN_TARGET_WORDS,
    MIN_DISTRACTOR_WORDS,
    Position,
    LetterCell,
    Word,
    Theme,
    GenerationOptions,
    GenerationStats,
    WordSelection,
    GeneratedPuzzle,
    AttemptFailure,
    AttemptResult,
)
from .errors import (
    PuzzleGenerationError,
    GenerationExhaustedError,
    FallbackGenerationError,
    UnknownThemeError,
)
from .rng import RandomSource, make_random_source
from .grid import create_empty_grid, calculate_word_positions, render_grid
from .selector import select_words, is_valid_word
from .placement import create_word, can_place_word_at, place_word_in_grid, try_place_word
from .filler import fill_empty_cells, CONSONANTS
from .scoring import score_candidate, GOOD_ENOUGH_SCORE
from .generator import generate_puzzle, attempt_generation
from .fallback import generate_fallback_puzzle

__all__ = [
    "Orientation",
    "Difficulty",
    "ORIENTATIONS",
    "MIN_TARGET_WORDS",
    "MIN_DISTRACTOR_WORDS",
    "Position",
    "LetterCell",
    "Word",
    "Theme",
    "GenerationOptions",
    "GenerationStats",
    "WordSelection",
    "GeneratedPuzzle",
    "AttemptFailure",
    "AttemptResult",
    "PuzzleGenerationError",
    "GenerationExhaustedError",
    "FallbackGenerationError",
    "UnknownThemeError",
    "RandomSource",
    "make_random_source",
    "create_empty_grid",
    "calculate_word_positions",
    "render_grid",
    "select_words",
    "is_valid_word",
    "create_word",
    "can_place_word_at",
    "place_word_in_grid",
    "try_place_word",
    "fill_empty_cells",
    "CONSONANTS",
    "score_candidate",
    "GOOD_ENOUGH_SCORE",
    "generate_puzzle",
    "attempt_generation",
    "generate_fallback_puzzle",
]
