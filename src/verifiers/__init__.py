"""Puzzle verification for the word grid generator."""

from .verify import (
    validate_puzzle_completeness,
    validate_grid_structure,
    validate_word_placement,
    validate_word_orientation,
    validate_word_overlaps,
    validate_word_counts,
    validate_theme,
)
from .reachability import (
    find_path,
    check_word_accessibility,
    analyze_puzzle_flow,
    validate_advanced_solvability,
    validate_puzzle_solvability,
)
from .models import ValidationError, ValidationResult, CompletenessResult, SolvabilityResult
from .cascade import filter_cascading_errors

__all__ = [
    # Structural verification
    "validate_puzzle_completeness",
    "validate_grid_structure",
    "validate_word_placement",
    "validate_word_orientation",
    "validate_word_overlaps",
    "validate_word_counts",
    "validate_theme",
    # Reachability
    "find_path",
    "check_word_accessibility",
    "analyze_puzzle_flow",
    "validate_advanced_solvability",
    "validate_puzzle_solvability",
    # Models
    "ValidationError",
    "ValidationResult",
    "CompletenessResult",
    "SolvabilityResult",
    # Reporting
    "filter_cascading_errors",
]
