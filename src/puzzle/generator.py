"""
Puzzle generation loop.

Runs repeated select -> place -> fill attempts, scores every usable
candidate and keeps the best one. Expected failures (not enough words,
not enough placements) come back as AttemptResult values rather than
exceptions.
"""

import logging
from collections import Counter
from typing import List, Optional

from .errors import GenerationExhaustedError
from .filler import fill_empty_cells
from .grid import create_empty_grid
from .models import (
    AttemptFailure,
    AttemptResult,
    GeneratedPuzzle,
    GenerationOptions,
    GenerationStats,
    Theme,
    Word,
)
from .placement import create_word, try_place_word
from .rng import RandomSource, make_random_source, shuffled
from .scoring import GOOD_ENOUGH_SCORE, score_candidate
from .selector import select_words


logger = logging.getLogger(__name__)


def _failure(code: str, message: str) -> AttemptResult:
    return AttemptResult(failure=AttemptFailure(code=code, message=message))


def attempt_generation(
    theme: Theme,
    options: GenerationOptions,
    rng: RandomSource,
) -> AttemptResult:
    """Run a single select/place/fill pass."""
    selection = select_words(
        theme,
        options.difficulty,
        options.target_word_count,
        options.distractor_word_count,
        rng=rng,
    )

    if len(selection.target_words) < options.target_word_count:
        return _failure(
            "STARVED_TARGETS",
            f"Not enough valid target words for theme '{theme.name}' "
            f"({len(selection.target_words)}/{options.target_word_count})",
        )
    if len(selection.distractor_words) < options.distractor_word_count:
        return _failure(
            "STARVED_DISTRACTORS",
            f"Not enough valid distractor words for theme '{theme.name}' "
            f"({len(selection.distractor_words)}/{options.distractor_word_count})",
        )

    grid = create_empty_grid(options.grid_size)
    stats = GenerationStats()
    placed: List[Word] = []

    pending = [(text, True) for text in selection.target_words]
    pending += [(text, False) for text in selection.distractor_words]

    for text, is_target in shuffled(rng, pending):
        word = create_word(text, is_target, rng)
        if try_place_word(grid, word, options.allow_word_overlaps, rng):
            placed.append(word)
            stats.placed_words += 1
        else:
            stats.failed_placements += 1

    target_words = [w for w in placed if w.is_target]
    distractor_words = [w for w in placed if not w.is_target]

    if len(target_words) < options.target_word_count:
        return _failure(
            "TARGET_SHORTFALL",
            f"Could not place enough target words ({len(target_words)}/{options.target_word_count})",
        )
    if len(distractor_words) < options.distractor_word_count:
        return _failure(
            "DISTRACTOR_SHORTFALL",
            f"Could not place enough distractor words "
            f"({len(distractor_words)}/{options.distractor_word_count})",
        )

    stats.fill_letters = fill_empty_cells(grid, placed, rng)

    return AttemptResult(candidate=GeneratedPuzzle(
        grid=grid,
        target_words=target_words,
        distractor_words=distractor_words,
        theme=theme,
        generation_stats=stats,
    ))


def generate_puzzle(
    theme: Theme,
    options: Optional[GenerationOptions] = None,
    rng: Optional[RandomSource] = None,
) -> GeneratedPuzzle:
    """
    Generate a complete puzzle for a theme.

    Args:
        theme: Source vocabulary
        options: Generation options (defaults apply when omitted)
        rng: Random source; a fresh one seeded from options.seed by default

    A usable candidate has placed every selected word, so it never carries a
    placement penalty and always clears GOOD_ENOUGH_SCORE: the loop stops on
    the first usable candidate.

    Returns:
        The best-scoring candidate, with the attempts actually used recorded

    Raises:
        GenerationExhaustedError: If no attempt produced a usable candidate
    """
    if options is None:
        options = GenerationOptions()
    if rng is None:
        rng = make_random_source(options.seed)

    best: Optional[GeneratedPuzzle] = None
    best_score = -1
    failures: Counter = Counter()
    attempts = 0

    while attempts < options.max_attempts:
        attempts += 1
        result = attempt_generation(theme, options, rng)

        if not result.ok:
            failures[result.failure.code] += 1
            logger.debug("Attempt %d for %s failed: %s", attempts, theme.name, result.failure.message)
            continue

        score = score_candidate(result.candidate)
        if score > best_score:
            best_score = score
            best = result.candidate

        if score >= GOOD_ENOUGH_SCORE:
            break

    if best is None:
        logger.warning(
            "Gave up on theme %s (%s) after %d attempts", theme.name, options.difficulty, attempts
        )
        raise GenerationExhaustedError(attempts, failures)

    best.generation_stats.attempts = attempts
    logger.info(
        "Generated %s puzzle for %s in %d attempts (score %d)",
        options.difficulty, theme.name, attempts, best_score,
    )
    return best
