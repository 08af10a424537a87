"""Theme vocabulary registry."""

from .registry import (
    ThemeRegistry,
    DEFAULT_REGISTRY,
    load_themes,
    get_theme_by_name,
    get_available_themes,
)

__all__ = [
    "ThemeRegistry",
    "DEFAULT_REGISTRY",
    "load_themes",
    "get_theme_by_name",
    "get_available_themes",
]
