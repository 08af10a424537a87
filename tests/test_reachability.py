"""Tests for reachability and flow analysis."""

from src.puzzle import Position, Word
from src.verifiers import (
    analyze_puzzle_flow,
    check_word_accessibility,
    find_path,
    validate_advanced_solvability,
    validate_puzzle_solvability,
)


def codes(errors):
    return [e.code for e in errors]


def word_named(puzzle, text):
    return next(w for w in puzzle.all_words if w.text == text)


class TestFindPath:
    """Test the breadth-first search."""

    def test_open_grid(self):
        """Any cell is reachable on an open grid."""
        assert find_path(6, Position(x=0, y=0), Position(x=5, y=5)) is True

    def test_start_is_target(self):
        """The start cell reaches itself."""
        assert find_path(6, Position(x=2, y=2), Position(x=2, y=2)) is True

    def test_target_off_grid(self):
        """Cells outside the grid are unreachable."""
        assert find_path(6, Position(x=0, y=0), Position(x=6, y=0)) is False

    def test_blocked_target(self):
        """A blocked target is unreachable."""
        target = Position(x=1, y=1)
        assert find_path(6, Position(x=0, y=0), target, {target}) is False

    def test_wall_cuts_grid(self):
        """A full wall splits the grid."""
        wall = {Position(x=1, y=y) for y in range(3)}
        assert find_path(3, Position(x=0, y=0), Position(x=2, y=2), wall) is False
        assert find_path(3, Position(x=0, y=0), Position(x=0, y=2), wall) is True

    def test_path_around_obstacle(self):
        """The search walks around a partial wall."""
        blocked = {Position(x=1, y=0), Position(x=1, y=1)}
        assert find_path(3, Position(x=0, y=0), Position(x=2, y=0), blocked) is True


class TestWordAccessibility:
    """Test per-word checks."""

    def test_reachable_word(self, valid_puzzle):
        """A nearby straight word has no issues."""
        issues, warnings = check_word_accessibility(valid_puzzle.grid, word_named(valid_puzzle, "DOG"))
        assert issues == []
        assert warnings == []

    def test_far_from_start(self, valid_puzzle):
        """ROCK starts at (2, 5), seven steps from the origin."""
        issues, warnings = check_word_accessibility(valid_puzzle.grid, word_named(valid_puzzle, "ROCK"))
        assert issues == []
        assert codes(warnings) == ["FAR_FROM_START"]

    def test_gap_between_letters(self, valid_puzzle):
        """Letters must sit on neighbouring cells."""
        word = Word(id="w", text="CAT", positions=[Position(x=0, y=0), Position(x=2, y=0), Position(x=3, y=0)], is_target=True)
        issues, _ = check_word_accessibility(valid_puzzle.grid, word)
        assert codes(issues) == ["LETTERS_NOT_ADJACENT"]

    def test_unplaced_word(self, valid_puzzle):
        """A word without positions is reported."""
        word = Word(id="w", text="CAT", is_target=True)
        issues, _ = check_word_accessibility(valid_puzzle.grid, word)
        assert codes(issues) == ["NO_POSITIONS"]


class TestAdvancedSolvability:
    """Test the full reachability report."""

    def test_open_grid_is_solvable(self, valid_puzzle):
        """Without obstacles every target is reachable."""
        result = validate_advanced_solvability(valid_puzzle)
        assert result.is_solvable is True
        assert result.unreachable_words == []
        assert result.pathing_issues == []

    def test_boxed_in_origin(self, valid_puzzle):
        """Blocking both neighbours of the origin leaves only CAT reachable."""
        blocked = {Position(x=1, y=0), Position(x=0, y=1)}
        result = validate_advanced_solvability(valid_puzzle, blocked=blocked)

        assert result.is_solvable is False
        assert [w.text for w in result.unreachable_words] == ["DOG", "BIRD"]
        assert codes(result.pathing_issues) == ["UNREACHABLE_START", "UNREACHABLE_START"]

    def test_flow_recommendations(self, valid_puzzle):
        """Three left-to-right targets of length 3, 3 and 4."""
        result = validate_advanced_solvability(valid_puzzle)
        assert codes(result.recommendations) == ["SINGLE_ORIENTATION", "SIMILAR_LENGTHS"]


class TestPuzzleFlow:
    """Test layout and variety hints."""

    def test_clustered_words(self, puzzle_builder):
        """Targets packed against one edge are flagged."""
        puzzle = puzzle_builder([
            ("CAT", True, 0, 0, "vertical-tb"),
            ("DOG", True, 0, 3, "vertical-tb"),
            ("BIRD", True, 1, 0, "vertical-tb"),
            ("TREE", False, 5, 0, "vertical-tb"),
            ("ROCK", False, 2, 5, "horizontal-lr"),
        ])
        _, recommendations = analyze_puzzle_flow(puzzle)
        assert "CLUSTERED_WORDS" in codes(recommendations)

    def test_varied_layout(self, puzzle_builder):
        """Spread, varied targets get no recommendations."""
        puzzle = puzzle_builder([
            ("CAT", True, 0, 0, "horizontal-lr"),
            ("SHEEP", True, 5, 0, "vertical-tb"),
            ("DOG", True, 3, 3, "horizontal-rl"),
            ("SUN", False, 0, 5, "horizontal-lr"),
            ("OWL", False, 0, 2, "horizontal-lr"),
        ])
        issues, recommendations = analyze_puzzle_flow(puzzle)
        assert issues == []
        assert recommendations == []

    def test_no_targets(self, valid_puzzle):
        """A puzzle without targets has nothing to analyse."""
        valid_puzzle.target_words.clear()
        assert analyze_puzzle_flow(valid_puzzle) == ([], [])


class TestQuickSolvability:
    """Test the lightweight solvability check."""

    def test_valid_puzzle(self, valid_puzzle):
        """The hand-built puzzle passes the quick check."""
        result = validate_puzzle_solvability(valid_puzzle)
        assert result.is_solvable is True
        assert result.pathing_issues == []

    def test_target_without_positions(self, valid_puzzle):
        """Targets without positions are unreachable."""
        word_named(valid_puzzle, "CAT").positions = []
        result = validate_puzzle_solvability(valid_puzzle)
        assert result.is_solvable is False
        assert [w.text for w in result.unreachable_words] == ["CAT"]
        assert codes(result.pathing_issues) == ["NO_POSITIONS"]
