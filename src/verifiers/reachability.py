"""
Reachability and flow analysis for generated puzzles.

The collectible entity starts at the grid origin and moves one cell at a
time in four directions. Generated grids have no obstacles, so the path
search always succeeds today; `blocked` is the hook for an obstacle model.
Everything reported here is advisory and never grounds for rejecting an
otherwise valid puzzle.
"""

from collections import deque
from typing import AbstractSet, Deque, List, Optional, Set, Tuple

from ..puzzle.grid import Grid, is_valid_position
from ..puzzle.models import GeneratedPuzzle, Position, Word
from .cascade import HIGH, LOW
from .models import SolvabilityResult, ValidationError


ORIGIN = Position(x=0, y=0)

# up, down, left, right
NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))

# Mean word position further than this share of half the grid from the centre is "clustered"
CLUSTER_TOLERANCE = 0.8
MIN_LENGTH_SPREAD = 2


def find_path(
    grid_size: int,
    start: Position,
    target: Position,
    blocked: Optional[AbstractSet[Position]] = None,
) -> bool:
    """Breadth-first search over four-directional neighbours."""
    blocked = blocked or frozenset()
    if start == target:
        return True
    if target in blocked or not is_valid_position(target, grid_size):
        return False

    visited: Set[Position] = {start}
    queue: Deque[Position] = deque([start])

    while queue:
        current = queue.popleft()
        for dx, dy in NEIGHBOR_STEPS:
            nxt = Position(x=current.x + dx, y=current.y + dy)
            if nxt in visited or nxt in blocked or not is_valid_position(nxt, grid_size):
                continue
            if nxt == target:
                return True
            visited.add(nxt)
            queue.append(nxt)

    return False


def check_word_accessibility(
    grid: Grid,
    word: Word,
    start: Position = ORIGIN,
    blocked: Optional[AbstractSet[Position]] = None,
) -> Tuple[List[ValidationError], List[ValidationError]]:
    """Return (issues, warnings) for reaching and walking one word."""
    issues: List[ValidationError] = []
    warnings: List[ValidationError] = []

    if not word.positions:
        issues.append(ValidationError(
            code="NO_POSITIONS",
            message=f"Word \"{word.text}\": no positions defined",
            word=word.text,
            cascade_level=HIGH
        ))
        return issues, warnings

    first = word.positions[0]
    if not find_path(len(grid), start, first, blocked):
        issues.append(ValidationError(
            code="UNREACHABLE_START",
            message=f"Word \"{word.text}\": first letter not reachable from start position",
            word=word.text,
            position=first,
            cascade_level=HIGH
        ))

    for i in range(1, len(word.positions)):
        prev, cur = word.positions[i - 1], word.positions[i]
        if abs(cur.x - prev.x) + abs(cur.y - prev.y) != 1:
            issues.append(ValidationError(
                code="LETTERS_NOT_ADJACENT",
                message=f"Word \"{word.text}\": letters at positions {i - 1} and {i} are not adjacent",
                word=word.text,
                position=cur,
                cascade_level=HIGH
            ))

    distance = abs(first.x - start.x) + abs(first.y - start.y)
    if distance > len(grid):
        warnings.append(ValidationError(
            code="FAR_FROM_START",
            message=f"Word \"{word.text}\": word is far from starting position",
            word=word.text,
            position=first,
            cascade_level=LOW
        ))

    return issues, warnings


def analyze_puzzle_flow(puzzle: GeneratedPuzzle) -> Tuple[List[ValidationError], List[ValidationError]]:
    """Return (issues, recommendations) about target word layout and variety."""
    issues: List[ValidationError] = []
    recommendations: List[ValidationError] = []

    targets = [w for w in puzzle.target_words if w.positions]
    if not targets:
        return issues, recommendations

    positions = [pos for w in targets for pos in w.positions]
    avg_x = sum(p.x for p in positions) / len(positions)
    avg_y = sum(p.y for p in positions) / len(positions)
    center = puzzle.grid_size / 2

    if abs(avg_x - center) > center * CLUSTER_TOLERANCE or abs(avg_y - center) > center * CLUSTER_TOLERANCE:
        recommendations.append(ValidationError(
            code="CLUSTERED_WORDS",
            message="Words are clustered to one side - consider more even distribution",
            cascade_level=LOW
        ))

    if len({w.orientation for w in targets}) < 2:
        recommendations.append(ValidationError(
            code="SINGLE_ORIENTATION",
            message="All words have same orientation - add variety for better gameplay",
            cascade_level=LOW
        ))

    lengths = [len(w.text) for w in targets]
    if max(lengths) - min(lengths) < MIN_LENGTH_SPREAD:
        recommendations.append(ValidationError(
            code="SIMILAR_LENGTHS",
            message="Words have similar lengths - vary word lengths for better challenge",
            cascade_level=LOW
        ))

    return issues, recommendations


def validate_advanced_solvability(
    puzzle: GeneratedPuzzle,
    blocked: Optional[AbstractSet[Position]] = None,
) -> SolvabilityResult:
    """
    Check every target word can be reached from the origin and walked in order.

    Returns a SolvabilityResult; treat it as advice for the caller.
    """
    unreachable: List[Word] = []
    pathing_issues: List[ValidationError] = []
    recommendations: List[ValidationError] = []

    for word in puzzle.target_words:
        issues, warnings = check_word_accessibility(puzzle.grid, word, blocked=blocked)
        if issues:
            unreachable.append(word)
            pathing_issues.extend(issues)
        recommendations.extend(warnings)

    flow_issues, flow_recommendations = analyze_puzzle_flow(puzzle)
    pathing_issues.extend(flow_issues)
    recommendations.extend(flow_recommendations)

    return SolvabilityResult(
        is_solvable=len(unreachable) == 0,
        unreachable_words=unreachable,
        pathing_issues=pathing_issues,
        recommendations=recommendations,
    )


def validate_puzzle_solvability(puzzle: GeneratedPuzzle) -> SolvabilityResult:
    """
    Quick check: targets need positions, and non-edge starts need a path from the origin.

    A missing path is only reported as an issue, not as unreachable.
    """
    unreachable: List[Word] = []
    issues: List[ValidationError] = []
    size = puzzle.grid_size

    for word in puzzle.target_words:
        if not word.positions:
            unreachable.append(word)
            issues.append(ValidationError(
                code="NO_POSITIONS",
                message=f"Target word \"{word.text}\" has no positions",
                word=word.text,
                cascade_level=HIGH
            ))
            continue

        first = word.positions[0]
        near_edge = first.x in (0, size - 1) or first.y in (0, size - 1)
        if not near_edge and not find_path(size, ORIGIN, first):
            issues.append(ValidationError(
                code="MAYBE_UNREACHABLE",
                message=f"Target word \"{word.text}\" may not be reachable",
                word=word.text,
                position=first,
                cascade_level=LOW
            ))

    return SolvabilityResult(
        is_solvable=len(unreachable) == 0,
        unreachable_words=unreachable,
        pathing_issues=issues,
    )
