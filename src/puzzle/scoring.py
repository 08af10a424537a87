"""Quality scoring for generated candidates."""

from .models import GeneratedPuzzle


TARGET_WORD_POINTS = 30
DISTRACTOR_WORD_POINTS = 20
FULL_BOARD_WORDS = 5
FULL_BOARD_BONUS = 20
FAILED_PLACEMENT_PENALTY = 5
ORIENTATION_VARIETY_POINTS = 5

# Scores at or above this stop the generation loop early
GOOD_ENOUGH_SCORE = 100


def score_candidate(candidate: GeneratedPuzzle) -> int:
    """
    Score one fully generated candidate.

    +30 per target, +20 per distractor, +20 once at 5+ words, -5 per failed
    placement, +5 per distinct orientation in use. Never below zero.
    """
    score = 0
    score += len(candidate.target_words) * TARGET_WORD_POINTS
    score += len(candidate.distractor_words) * DISTRACTOR_WORD_POINTS

    words = candidate.all_words
    if len(words) >= FULL_BOARD_WORDS:
        score += FULL_BOARD_BONUS

    score -= candidate.generation_stats.failed_placements * FAILED_PLACEMENT_PENALTY

    orientations = {w.orientation for w in words}
    score += len(orientations) * ORIENTATION_VARIETY_POINTS

    return max(0, score)
