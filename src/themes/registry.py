"""
Theme registry.

The registry is built once and never mutated afterwards: lookups are pure
reads over a read-only mapping, so concurrent generation calls can share it.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import yaml

from ..puzzle.errors import UnknownThemeError
from ..puzzle.models import Theme
from ..puzzle.rng import RandomSource, make_random_source, choice
from ..verifiers.verify import validate_theme


_BUILTIN_THEMES: List[Theme] = [
    Theme(
        name="Animals",
        category="Living Creatures",
        target_words=(
            "CAT", "DOG", "BIRD", "FISH", "BEAR", "WOLF", "LION", "TIGER",
            "MOUSE", "HORSE", "SHEEP", "GOAT", "DUCK", "FROG", "SNAKE",
        ),
        distractor_words=(
            "TREE", "ROCK", "BOOK", "CHAIR", "TABLE", "PHONE", "WATER",
            "FIRE", "WIND", "CLOUD", "STAR", "MOON", "SUN", "RAIN",
        ),
    ),
    Theme(
        name="Colors",
        category="Visual Spectrum",
        target_words=(
            "RED", "BLUE", "GREEN", "YELLOW", "BLACK", "WHITE", "PINK",
            "BROWN", "GRAY", "ORANGE", "PURPLE", "GOLD", "SILVER",
        ),
        distractor_words=(
            "HOUSE", "TREE", "BOOK", "MUSIC", "DANCE", "SPORT", "GAME",
            "FOOD", "DRINK", "PLANT", "STONE", "METAL", "WOOD",
        ),
    ),
    Theme(
        name="Food",
        category="Edible Items",
        target_words=(
            "APPLE", "BREAD", "CHEESE", "FISH", "MEAT", "RICE", "PASTA",
            "PIZZA", "CAKE", "MILK", "WATER", "JUICE", "SOUP", "SALAD",
        ),
        distractor_words=(
            "CHAIR", "TABLE", "BOOK", "PHONE", "MUSIC", "DANCE", "SPORT",
            "TREE", "FLOWER", "STONE", "METAL", "GLASS", "PAPER",
        ),
    ),
    Theme(
        name="Sports",
        category="Athletic Activities",
        target_words=(
            "SOCCER", "TENNIS", "GOLF", "SWIM", "RUN", "JUMP", "BIKE",
            "SKATE", "SURF", "CLIMB", "DANCE", "YOGA", "BOXING",
        ),
        distractor_words=(
            "BOOK", "MUSIC", "FOOD", "HOUSE", "TREE", "FLOWER", "WATER",
            "FIRE", "STONE", "METAL", "GLASS", "PAPER", "CLOTH",
        ),
    ),
    Theme(
        name="Nature",
        category="Natural World",
        target_words=(
            "TREE", "FLOWER", "GRASS", "ROCK", "WATER", "FIRE", "WIND",
            "CLOUD", "RAIN", "SNOW", "SUN", "MOON", "STAR", "OCEAN",
        ),
        distractor_words=(
            "HOUSE", "CAR", "PHONE", "BOOK", "MUSIC", "DANCE", "SPORT",
            "FOOD", "CHAIR", "TABLE", "GLASS", "METAL", "PAPER",
        ),
    ),
]


class ThemeRegistry:
    """Read-only lookup table of themes keyed by name."""

    def __init__(self, themes: Mapping[str, Theme]):
        self._themes: Mapping[str, Theme] = MappingProxyType(dict(themes))

    @classmethod
    def from_themes(cls, themes: List[Theme]) -> "ThemeRegistry":
        return cls({theme.name: theme for theme in themes})

    @property
    def themes(self) -> Mapping[str, Theme]:
        return self._themes

    def __len__(self) -> int:
        return len(self._themes)

    def __contains__(self, name: str) -> bool:
        return name in self._themes

    def names(self) -> List[str]:
        """All theme names in registration order."""
        return list(self._themes)

    def get(self, name: str) -> Optional[Theme]:
        """Look up a theme by name, None when unknown."""
        return self._themes.get(name)

    def require(self, name: str) -> Theme:
        """Look up a theme by name, raising UnknownThemeError when unknown."""
        theme = self._themes.get(name)
        if theme is None:
            raise UnknownThemeError(name, self.names())
        return theme

    def random_theme(self, rng: Optional[RandomSource] = None) -> Theme:
        if not self._themes:
            raise UnknownThemeError("random", [])
        return choice(rng or make_random_source(), list(self._themes.values()))

    def random_valid_theme(self, rng: Optional[RandomSource] = None) -> Theme:
        """Pick a random theme among those passing the theme-level checks."""
        valid = [t for t in self._themes.values() if validate_theme(t).valid]
        if not valid:
            raise UnknownThemeError("random", self.names())
        return choice(rng or make_random_source(), valid)


def load_themes(path: str | Path) -> ThemeRegistry:
    """
    Load a registry from a YAML file.

    Expected layout:
        themes:
          - name: Space
            category: Outer Space
            target_words: [STAR, MOON, ...]
            distractor_words: [BOOK, ...]
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Themes file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("themes", []) if isinstance(data, dict) else []
    themes: Dict[str, Theme] = {}
    for entry in entries:
        theme = Theme(
            name=entry["name"],
            category=entry.get("category", ""),
            target_words=tuple(str(w).strip().upper() for w in entry.get("target_words", [])),
            distractor_words=tuple(str(w).strip().upper() for w in entry.get("distractor_words", [])),
        )
        themes[theme.name] = theme

    return ThemeRegistry(themes)


DEFAULT_REGISTRY = ThemeRegistry.from_themes(_BUILTIN_THEMES)


def get_theme_by_name(name: str) -> Optional[Theme]:
    return DEFAULT_REGISTRY.get(name)


def get_available_themes() -> List[str]:
    return DEFAULT_REGISTRY.names()
