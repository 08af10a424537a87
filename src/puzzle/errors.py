"""Exception hierarchy for puzzle generation."""

from typing import Dict, Sequence


class PuzzleGenerationError(Exception):
    """Base exception for generator failures."""


class GenerationExhaustedError(PuzzleGenerationError):
    """Raised when no attempt produced a usable candidate within the attempt budget."""

    def __init__(self, attempts: int, failure_counts: Dict[str, int]):
        self.attempts = attempts
        self.failure_counts = dict(failure_counts)
        detail = ", ".join(f"{code}={count}" for code, count in sorted(self.failure_counts.items()))
        message = f"Failed to generate puzzle after {attempts} attempts"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class FallbackGenerationError(PuzzleGenerationError):
    """Raised when the fallback builder cannot place the minimum word counts."""


class UnknownThemeError(PuzzleGenerationError):
    """Raised when a theme lookup fails."""

    def __init__(self, name: str, available: Sequence[str]):
        self.name = name
        self.available = list(available)
        super().__init__(
            f"Invalid theme \"{name}\". Available themes: {', '.join(self.available) or '(none)'}"
        )
