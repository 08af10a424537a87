"""Tests for candidate scoring."""

from src.puzzle import (
    GOOD_ENOUGH_SCORE,
    GeneratedPuzzle,
    GenerationStats,
    Theme,
    Word,
    create_empty_grid,
    score_candidate,
)


def candidate(targets, distractors, failed=0):
    """Build a candidate from (text, orientation) pairs; positions are irrelevant to scoring."""
    return GeneratedPuzzle(
        grid=create_empty_grid(6),
        target_words=[Word(id=f"t{i}", text=t, orientation=o, is_target=True) for i, (t, o) in enumerate(targets)],
        distractor_words=[Word(id=f"d{i}", text=t, orientation=o, is_target=False) for i, (t, o) in enumerate(distractors)],
        theme=Theme(name="Test"),
        generation_stats=GenerationStats(failed_placements=failed),
    )


class TestScoreCandidate:
    """Test the scoring arithmetic."""

    def test_full_board(self):
        """Five words in two orientations score 160."""
        puzzle = candidate(
            [("CAT", "horizontal-lr"), ("DOG", "vertical-tb"), ("OWL", "horizontal-lr")],
            [("SUN", "vertical-tb"), ("TREE", "horizontal-lr")],
        )
        # 90 + 40 + 20 bonus + 2 orientations * 5
        assert score_candidate(puzzle) == 160
        assert score_candidate(puzzle) >= GOOD_ENOUGH_SCORE

    def test_failed_placements_penalized(self):
        """Each failed placement costs five points."""
        puzzle = candidate(
            [("CAT", "horizontal-lr"), ("DOG", "horizontal-lr"), ("OWL", "horizontal-lr")],
            [("SUN", "horizontal-lr")],
            failed=1,
        )
        # 90 + 20 - 5 + 5, no bonus below five words
        assert score_candidate(puzzle) == 110

    def test_every_orientation_counts(self):
        """Each distinct orientation adds five points."""
        puzzle = candidate(
            [("CAT", "horizontal-lr"), ("DOG", "horizontal-rl"), ("OWL", "vertical-tb")],
            [("SUN", "vertical-bt"), ("TREE", "horizontal-lr")],
        )
        assert score_candidate(puzzle) == 150 + 20

    def test_floored_at_zero(self):
        """Scores never go negative."""
        puzzle = candidate([("CAT", "horizontal-lr")], [], failed=10)
        assert score_candidate(puzzle) == 0

    def test_empty_candidate(self):
        """A candidate with no words scores zero."""
        assert score_candidate(candidate([], [])) == 0
