"""Shared fixtures: deterministic random sources and hand-built puzzles."""

from typing import List, Tuple

import pytest

from src.puzzle import (
    GeneratedPuzzle,
    Position,
    Theme,
    Word,
    create_empty_grid,
    fill_empty_cells,
    place_word_in_grid,
)
from src.themes import DEFAULT_REGISTRY


class FixedRandom:
    """Random source that always returns the same value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class SequenceRandom:
    """Random source cycling through a fixed list of values."""

    def __init__(self, values: List[float]):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def sequence_random():
    return SequenceRandom


@pytest.fixture
def animals():
    return DEFAULT_REGISTRY.require("Animals")


@pytest.fixture
def unplaceable_theme():
    """Every word fails the validity filter, but all are short enough for the fallback."""
    return Theme(
        name="Stutter",
        category="Broken",
        target_words=("AAAB", "CCCD", "EEEF"),
        distractor_words=("GGGH", "KKKL"),
    )


def build_puzzle(
    placements: List[Tuple[str, bool, int, int, str]],
    size: int = 6,
) -> GeneratedPuzzle:
    """Place (text, is_target, x, y, orientation) entries and fill the rest."""
    grid = create_empty_grid(size)
    targets, distractors = [], []

    for i, (text, is_target, x, y, orientation) in enumerate(placements):
        word = Word(id=f"w{i}_{text}", text=text, is_target=is_target)
        place_word_in_grid(grid, word, Position(x=x, y=y), orientation)
        (targets if is_target else distractors).append(word)

    fill_empty_cells(grid, targets + distractors, FixedRandom(0.5))

    return GeneratedPuzzle(
        grid=grid,
        target_words=targets,
        distractor_words=distractors,
        theme=Theme(name="Test", category="Fixtures"),
    )


@pytest.fixture
def valid_puzzle():
    """
    C A T . . T
    . . . . . R
    D O G . . E
    . . . . . E
    B I R D . .
    . . R O C K
    """
    return build_puzzle([
        ("CAT", True, 0, 0, "horizontal-lr"),
        ("DOG", True, 0, 2, "horizontal-lr"),
        ("BIRD", True, 0, 4, "horizontal-lr"),
        ("TREE", False, 5, 0, "vertical-tb"),
        ("ROCK", False, 2, 5, "horizontal-lr"),
    ])


@pytest.fixture
def puzzle_builder():
    return build_puzzle
