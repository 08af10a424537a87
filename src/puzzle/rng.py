"""Injectable randomness used by every generation step."""

import random
from typing import List, Optional, Protocol, Sequence, TypeVar, runtime_checkable


T = TypeVar("T")


@runtime_checkable
class RandomSource(Protocol):
    """Anything producing floats in [0, 1). `random.Random` qualifies."""

    def random(self) -> float:
        ...


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    """Create a fresh production source, seeded when a seed is given."""
    return random.Random(seed)


def random_index(rng: RandomSource, n: int) -> int:
    """Uniform integer in [0, n)."""
    if n <= 0:
        raise ValueError(f"Cannot draw an index from an empty range (n={n})")
    # Clamp so a misbehaving source returning 1.0 stays in range
    return min(int(rng.random() * n), n - 1)


def random_int(rng: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high], inclusive on both ends."""
    return low + random_index(rng, high - low + 1)


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element uniformly."""
    return items[random_index(rng, len(items))]


def shuffled(rng: RandomSource, items: Sequence[T]) -> List[T]:
    """Return a uniformly shuffled copy (Fisher-Yates). The input is untouched."""
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = random_index(rng, i + 1)
        result[i], result[j] = result[j], result[i]
    return result
