"""
Pydantic models for the puzzle generation layer.

Covers the grid cells, placed words, themes, generation options and the
finished puzzle artifact handed to the gameplay layer. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import List, Dict, Optional, Literal, Tuple
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


# Type aliases
Orientation = Literal["horizontal-lr", "horizontal-rl", "vertical-tb", "vertical-bt"]
Difficulty = Literal["easy", "medium", "hard"]

ORIENTATIONS: Tuple[Orientation, ...] = (
    "horizontal-lr",
    "horizontal-rl",
    "vertical-tb",
    "vertical-bt",
)

# (dx, dy) step between consecutive letters
ORIENTATION_DELTAS: Dict[str, Tuple[int, int]] = {
    "horizontal-lr": (1, 0),
    "horizontal-rl": (-1, 0),
    "vertical-tb": (0, 1),
    "vertical-bt": (0, -1),
}

# Word counts every servable puzzle must reach
MIN_TARGET_WORDS = 3
MIN_DISTRACTOR_WORDS = 2


class CamelModel(BaseModel):
    """Base model serializing to camelCase while accepting snake_case input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Position(CamelModel):
    """A 0-based grid coordinate."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    x: int
    y: int


class LetterCell(CamelModel):
    """One grid slot. An empty letter means the cell has not been filled yet."""
    letter: str = ""
    position: Position
    is_part_of_word: bool = False
    word_id: Optional[str] = None
    is_collected: bool = False


class Word(CamelModel):
    """A target or distractor word, placed or awaiting placement."""
    id: str
    text: str = Field(..., min_length=1)
    positions: List[Position] = Field(default_factory=list)
    orientation: Orientation = "horizontal-lr"
    is_target: bool
    is_collected: bool = False
    collection_progress: int = 0


class Theme(CamelModel):
    """A read-only vocabulary entry of the theme registry."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    name: str
    category: str = ""
    target_words: Tuple[str, ...] = ()
    distractor_words: Tuple[str, ...] = ()


class GenerationOptions(CamelModel):
    """Configuration for a generation run."""
    grid_size: int = Field(default=6, ge=3)
    target_word_count: int = Field(default=3, ge=0)
    distractor_word_count: int = Field(default=2, ge=0)
    difficulty: Difficulty = "medium"
    max_attempts: int = Field(default=100, ge=0)
    allow_word_overlaps: bool = False
    seed: Optional[int] = None


class GenerationStats(CamelModel):
    """Counters collected while building a candidate."""
    attempts: int = 0
    placed_words: int = 0
    failed_placements: int = 0
    fill_letters: int = 0


class WordSelection(BaseModel):
    """Plain word strings chosen for one attempt."""
    target_words: List[str] = Field(default_factory=list)
    distractor_words: List[str] = Field(default_factory=list)


class GeneratedPuzzle(CamelModel):
    """The finished puzzle: grid, placed words, source theme and stats."""
    grid: List[List[LetterCell]]
    target_words: List[Word] = Field(default_factory=list)
    distractor_words: List[Word] = Field(default_factory=list)
    theme: Theme
    generation_stats: GenerationStats = Field(default_factory=GenerationStats)

    @property
    def grid_size(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    @property
    def all_words(self) -> List[Word]:
        """Targets followed by distractors."""
        return [*self.target_words, *self.distractor_words]

    def to_payload(self) -> Dict:
        """Serialize to the camelCase shape consumed by the gameplay layer."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


AttemptFailureCode = Literal[
    "STARVED_TARGETS",
    "STARVED_DISTRACTORS",
    "TARGET_SHORTFALL",
    "DISTRACTOR_SHORTFALL",
]


class AttemptFailure(BaseModel):
    """Why a single generation attempt did not yield a usable candidate."""
    code: AttemptFailureCode
    message: str


class AttemptResult(BaseModel):
    """Outcome of one attempt: either a candidate or a failure reason."""
    candidate: Optional[GeneratedPuzzle] = None
    failure: Optional[AttemptFailure] = None

    @property
    def ok(self) -> bool:
        return self.candidate is not None
