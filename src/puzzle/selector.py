"""
Word selection for puzzle generation.

Filters a theme's raw pools down to placeable words, drops look-alike
pairs, and samples the target and distractor words for one attempt.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Difficulty, Theme, WordSelection
from .rng import RandomSource, make_random_source, shuffled


logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 6
MAX_LETTER_REPEATS = 2

EASY_MAX_LENGTH = 5
HARD_MIN_TARGET_LENGTH = 4

# Words sharing more than this many distinct letters are treated as look-alikes
CONFLICT_THRESHOLDS: Dict[str, int] = {
    "easy": 2,
    "medium": 2,
    "hard": 3,
}

_WORD_RE = re.compile(r"^[A-Z]+$")


def normalize_word(word: str) -> str:
    """Uppercase and strip surrounding whitespace."""
    return word.strip().upper()


def is_alpha_word(word: str) -> bool:
    """True when the word is non-empty and made of A-Z only."""
    return bool(_WORD_RE.match(word))


def is_valid_word(word: str) -> bool:
    """
    Check the placement rules for a single word.

    Length must be within [3, 6], only A-Z is allowed, and no letter may
    appear more than twice.
    """
    if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
        return False
    if not is_alpha_word(word):
        return False
    return all(word.count(letter) <= MAX_LETTER_REPEATS for letter in set(word))


def filter_valid_words(words: Iterable[str]) -> List[str]:
    """Normalize words and keep the valid ones, preserving order."""
    normalized = (normalize_word(w) for w in words)
    return [w for w in normalized if is_valid_word(w)]


def filter_by_difficulty(words: List[str], difficulty: Difficulty, is_target: bool) -> List[str]:
    """Apply the per-difficulty length limits."""
    if difficulty == "easy":
        return [w for w in words if len(w) <= EASY_MAX_LENGTH]
    if difficulty == "hard" and is_target:
        return [w for w in words if len(w) >= HARD_MIN_TARGET_LENGTH]
    return list(words)


def shared_letter_count(a: str, b: str) -> int:
    """Number of distinct letters two words have in common."""
    return len(set(a) & set(b))


def filter_conflicting_words(
    targets: List[str],
    distractors: List[str],
    threshold: int,
) -> Tuple[List[str], List[str]]:
    """
    Drop words that look too much like an already accepted word.

    The combined pool (targets first, then distractors) is walked in order;
    a word is dropped when it shares more than `threshold` distinct letters
    with any word accepted before it.
    """
    accepted: List[str] = []
    kept_targets: List[str] = []
    kept_distractors: List[str] = []

    pool = [(w, True) for w in targets] + [(w, False) for w in distractors]
    for word, is_target in pool:
        if any(shared_letter_count(word, other) > threshold for other in accepted):
            continue
        accepted.append(word)
        (kept_targets if is_target else kept_distractors).append(word)

    return kept_targets, kept_distractors


def candidate_pools(theme: Theme, difficulty: Difficulty) -> Tuple[List[str], List[str]]:
    """Return the filtered (targets, distractors) pools for a theme and difficulty."""
    targets = filter_by_difficulty(filter_valid_words(theme.target_words), difficulty, is_target=True)
    distractors = filter_by_difficulty(filter_valid_words(theme.distractor_words), difficulty, is_target=False)
    return filter_conflicting_words(targets, distractors, CONFLICT_THRESHOLDS[difficulty])


def select_words(
    theme: Theme,
    difficulty: Difficulty = "medium",
    target_count: int = 3,
    distractor_count: int = 2,
    rng: Optional[RandomSource] = None,
) -> WordSelection:
    """
    Randomly sample target and distractor words for one attempt.

    The selection may come back short when the theme cannot supply enough
    words for the difficulty; the caller decides what that means.
    """
    if rng is None:
        rng = make_random_source()

    targets, distractors = candidate_pools(theme, difficulty)
    logger.debug(
        "Theme %s (%s): %d target and %d distractor candidates",
        theme.name, difficulty, len(targets), len(distractors),
    )

    return WordSelection(
        target_words=shuffled(rng, targets)[:target_count],
        distractor_words=shuffled(rng, distractors)[:distractor_count],
    )
