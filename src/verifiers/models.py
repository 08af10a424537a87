"""Data models for puzzle verification."""

from typing import List, Optional
from pydantic import BaseModel, Field

from ..puzzle.models import Position, Word


class ValidationError(BaseModel):
    """A single validation error or warning."""
    code: str
    message: str
    word: Optional[str] = None
    position: Optional[Position] = None
    cascade_level: int = 0  # 0=FATAL, 1=CRITICAL, 2=HIGH, 3=MEDIUM, 4=LOW


class ValidationResult(BaseModel):
    """Generic pass/fail result, used for theme-level checks."""
    valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)


class CompletenessResult(BaseModel):
    """Structural validation of a finished puzzle."""
    is_valid: bool
    errors: List[ValidationError] = Field(default_factory=list)
    warnings: List[ValidationError] = Field(default_factory=list)


class SolvabilityResult(BaseModel):
    """Advisory reachability and flow analysis of a puzzle."""
    is_solvable: bool
    unreachable_words: List[Word] = Field(default_factory=list)
    pathing_issues: List[ValidationError] = Field(default_factory=list)
    recommendations: List[ValidationError] = Field(default_factory=list)
