"""
Puzzle verification module for validating generated puzzles.

Validates:
1. Grid structure (square shape, one A-Z letter per cell)
2. Word placement (position count, letters on the grid, straight lines, orientation)
3. Word overlaps (shared cells must hold matching letters)
4. Word counts (minimum targets and distractors)

Errors are returned as data and never raised. A puzzle with any error
must not be served.
"""

import re
from typing import Dict, List, Tuple

from ..puzzle.grid import Grid, is_valid_position, orientation_from_delta
from ..puzzle.models import (
    GeneratedPuzzle,
    Position,
    Theme,
    Word,
    MIN_TARGET_WORDS,
    MIN_DISTRACTOR_WORDS,
)
from ..puzzle.selector import filter_valid_words, normalize_word
from .cascade import FATAL, CRITICAL, HIGH, MEDIUM, LOW
from .models import CompletenessResult, ValidationError, ValidationResult


_LETTER_RE = re.compile(r"^[A-Z]$")

MAX_QUIET_FAILED_PLACEMENTS = 5
MAX_QUIET_ATTEMPTS = 50
MIN_VALID_WORDS_PER_POOL = 5


def validate_grid_structure(grid: Grid) -> Tuple[List[ValidationError], List[ValidationError]]:
    """Check the grid is square and every cell holds a single A-Z letter."""
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    if not grid:
        errors.append(ValidationError(
            code="GRID_EMPTY",
            message="Grid is empty or missing",
            cascade_level=FATAL
        ))
        return errors, warnings

    size = len(grid)
    for y, row in enumerate(grid):
        if len(row) != size:
            errors.append(ValidationError(
                code="ROW_LENGTH",
                message=f"Grid row {y} has {len(row)} cells, expected {size}",
                cascade_level=FATAL
            ))
            continue

        for x, cell in enumerate(row):
            here = Position(x=x, y=y)
            if cell.letter == "":
                errors.append(ValidationError(
                    code="EMPTY_CELL",
                    message=f"Empty letter at position ({x}, {y})",
                    position=here,
                    cascade_level=CRITICAL
                ))
            elif not _LETTER_RE.match(cell.letter):
                errors.append(ValidationError(
                    code="INVALID_LETTER",
                    message=f"Invalid letter \"{cell.letter}\" at position ({x}, {y})",
                    position=here,
                    cascade_level=CRITICAL
                ))

            if cell.position != here:
                warnings.append(ValidationError(
                    code="CELL_POSITION_MISMATCH",
                    message=(
                        f"Cell at ({x}, {y}) records position "
                        f"({cell.position.x}, {cell.position.y})"
                    ),
                    position=here,
                    cascade_level=CRITICAL
                ))

    return errors, warnings


def validate_word_orientation(word: Word) -> List[ValidationError]:
    """Check the word runs in a straight unit-step line matching its orientation."""
    errors: List[ValidationError] = []

    if len(word.positions) < 2:
        return errors

    first, second = word.positions[0], word.positions[1]
    expected = orientation_from_delta(second.x - first.x, second.y - first.y)

    if expected is None:
        errors.append(ValidationError(
            code="MISALIGNED_POSITIONS",
            message=f"Word \"{word.text}\": positions are not one step apart horizontally or vertically",
            word=word.text,
            cascade_level=HIGH
        ))
        return errors

    if word.orientation != expected:
        errors.append(ValidationError(
            code="ORIENTATION_MISMATCH",
            message=f"Word \"{word.text}\": orientation mismatch, expected \"{expected}\", got \"{word.orientation}\"",
            word=word.text,
            cascade_level=HIGH
        ))

    for i in range(2, len(word.positions)):
        prev, cur = word.positions[i - 1], word.positions[i]
        if orientation_from_delta(cur.x - prev.x, cur.y - prev.y) != expected:
            errors.append(ValidationError(
                code="WORD_NOT_STRAIGHT",
                message=f"Word \"{word.text}\": letter {i} breaks the line at ({cur.x}, {cur.y})",
                word=word.text,
                position=cur,
                cascade_level=HIGH
            ))
            break

    return errors


def validate_word_placement(grid: Grid, word: Word) -> Tuple[List[ValidationError], List[ValidationError]]:
    """Check a word's positions against its text and the grid contents."""
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []

    if not word.positions:
        errors.append(ValidationError(
            code="NO_POSITIONS",
            message=f"Word \"{word.text}\": word has no positions",
            word=word.text,
            cascade_level=HIGH
        ))
        return errors, warnings

    if len(word.positions) != len(word.text):
        errors.append(ValidationError(
            code="POSITION_COUNT_MISMATCH",
            message=(
                f"Word \"{word.text}\": position count ({len(word.positions)}) "
                f"doesn't match word length ({len(word.text)})"
            ),
            word=word.text,
            cascade_level=HIGH
        ))

    for pos, expected_letter in zip(word.positions, word.text):
        if not is_valid_position(pos, len(grid)) or pos.x >= len(grid[pos.y]):
            errors.append(ValidationError(
                code="OUT_OF_BOUNDS",
                message=f"Word \"{word.text}\": position ({pos.x}, {pos.y}) is out of bounds",
                word=word.text,
                position=pos,
                cascade_level=HIGH
            ))
            continue

        cell = grid[pos.y][pos.x]
        if cell.letter != expected_letter:
            errors.append(ValidationError(
                code="LETTER_MISMATCH",
                message=(
                    f"Word \"{word.text}\": letter mismatch at ({pos.x}, {pos.y}), "
                    f"expected \"{expected_letter}\", found \"{cell.letter}\""
                ),
                word=word.text,
                position=pos,
                cascade_level=HIGH
            ))

        if not cell.is_part_of_word:
            warnings.append(ValidationError(
                code="CELL_NOT_MARKED",
                message=f"Cell at ({pos.x}, {pos.y}) not marked as part of word",
                word=word.text,
                position=pos,
                cascade_level=HIGH
            ))

    errors.extend(validate_word_orientation(word))

    return errors, warnings


def validate_word_overlaps(words: List[Word]) -> Tuple[List[ValidationError], List[ValidationError]]:
    """Cells shared by several words must hold the same letter for each of them."""
    errors: List[ValidationError] = []
    warnings: List[ValidationError] = []
    covering: Dict[Position, List[Tuple[Word, str]]] = {}

    for word in words:
        for pos, letter in zip(word.positions, word.text):
            covering.setdefault(pos, []).append((word, letter))

    for pos, entries in covering.items():
        if len(entries) < 2:
            continue

        texts = ", ".join(w.text for w, _ in entries)
        letters = {letter for _, letter in entries}

        if len(letters) > 1:
            errors.append(ValidationError(
                code="LETTER_CONFLICT",
                message=f"Letter conflict at ({pos.x}, {pos.y}) between words: {texts}",
                position=pos,
                cascade_level=MEDIUM
            ))
        else:
            warnings.append(ValidationError(
                code="WORD_OVERLAP",
                message=f"Words overlap at ({pos.x}, {pos.y}): {texts}",
                position=pos,
                cascade_level=MEDIUM
            ))

    return errors, warnings


def validate_word_counts(
    puzzle: GeneratedPuzzle,
    min_target_words: int = MIN_TARGET_WORDS,
    min_distractor_words: int = MIN_DISTRACTOR_WORDS,
) -> List[ValidationError]:
    """Check the puzzle carries enough target and distractor words."""
    errors: List[ValidationError] = []

    if len(puzzle.target_words) < min_target_words:
        errors.append(ValidationError(
            code="TOO_FEW_TARGETS",
            message=f"Puzzle must have at least {min_target_words} target words",
            cascade_level=LOW
        ))

    if len(puzzle.distractor_words) < min_distractor_words:
        errors.append(ValidationError(
            code="TOO_FEW_DISTRACTORS",
            message=f"Puzzle must have at least {min_distractor_words} distractor words",
            cascade_level=LOW
        ))

    return errors


def validate_puzzle_completeness(
    puzzle: GeneratedPuzzle,
    min_target_words: int = MIN_TARGET_WORDS,
    min_distractor_words: int = MIN_DISTRACTOR_WORDS,
) -> CompletenessResult:
    """
    Main verification function: structurally re-checks a finished puzzle.

    Returns a CompletenessResult with:
    - is_valid: True if no errors were found
    - errors: problems that make the puzzle unservable
    - warnings: harmless oddities (same-letter overlaps, noisy generation)
    """
    all_errors: List[ValidationError] = []
    all_warnings: List[ValidationError] = []

    grid_errors, grid_warnings = validate_grid_structure(puzzle.grid)
    all_errors.extend(grid_errors)
    all_warnings.extend(grid_warnings)

    # Word checks index into the grid, so stop on a broken shape
    if any(e.cascade_level == FATAL for e in grid_errors):
        return CompletenessResult(is_valid=False, errors=all_errors, warnings=all_warnings)

    all_errors.extend(validate_word_counts(puzzle, min_target_words, min_distractor_words))

    words = puzzle.all_words
    for word in words:
        word_errors, word_warnings = validate_word_placement(puzzle.grid, word)
        all_errors.extend(word_errors)
        all_warnings.extend(word_warnings)

    overlap_errors, overlap_warnings = validate_word_overlaps(words)
    all_errors.extend(overlap_errors)
    all_warnings.extend(overlap_warnings)

    stats = puzzle.generation_stats
    if stats.failed_placements > MAX_QUIET_FAILED_PLACEMENTS:
        all_warnings.append(ValidationError(
            code="MANY_FAILED_PLACEMENTS",
            message="High number of failed word placements - consider adjusting word selection",
            cascade_level=LOW
        ))
    if stats.attempts > MAX_QUIET_ATTEMPTS:
        all_warnings.append(ValidationError(
            code="MANY_ATTEMPTS",
            message="Required many generation attempts - puzzle may be difficult to generate consistently",
            cascade_level=LOW
        ))

    return CompletenessResult(
        is_valid=len(all_errors) == 0,
        errors=all_errors,
        warnings=all_warnings,
    )


def validate_theme(theme: Theme) -> ValidationResult:
    """Theme-level checks: non-empty pools, enough valid words, no cross-pool duplicates."""
    errors: List[ValidationError] = []

    pools = (
        ("target", theme.target_words),
        ("distractor", theme.distractor_words),
    )
    for label, pool in pools:
        if not pool:
            errors.append(ValidationError(
                code=f"EMPTY_{label.upper()}_POOL",
                message=f"Theme \"{theme.name}\" has no {label} words",
                cascade_level=FATAL
            ))
            continue

        valid_count = len(filter_valid_words(pool))
        if valid_count < MIN_VALID_WORDS_PER_POOL:
            errors.append(ValidationError(
                code=f"TOO_FEW_VALID_{label.upper()}S",
                message=(
                    f"Theme \"{theme.name}\" has {valid_count} valid {label} words, "
                    f"needs at least {MIN_VALID_WORDS_PER_POOL}"
                ),
                cascade_level=CRITICAL
            ))

    targets = {normalize_word(w) for w in theme.target_words}
    for word in theme.distractor_words:
        if normalize_word(word) in targets:
            errors.append(ValidationError(
                code="CROSS_POOL_DUPLICATE",
                message=f"Theme \"{theme.name}\" lists \"{normalize_word(word)}\" as both target and distractor",
                word=normalize_word(word),
                cascade_level=CRITICAL
            ))

    return ValidationResult(valid=len(errors) == 0, errors=errors)
