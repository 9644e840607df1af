"""
Pydantic models for the engine layer.

Levels are immutable catalog data. Players are the durable profile owned by
the player store and only ever replaced wholesale by the ledger. Session
state lives for exactly one loaded level and is never persisted.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Set, Tuple, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..grid.models import SolutionFormat
from ..validation.letters import can_make_word, canon


WHEEL_SIZE = 6
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 6


def level_key(level_id: int) -> str:
    """Key used for a level inside Player.level_progress."""
    return str(level_id)


class Level(BaseModel):
    """
    A single puzzle: six base letters and the target words with their paths.

    `solutions` keeps catalog declaration order; use `ordered_solutions()`
    wherever iteration order matters.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    base_letters: str
    solutions: Dict[str, List[int]]
    bonus_words: List[str] = Field(default_factory=list)
    realm: Optional[str] = None
    solution_format: SolutionFormat = SolutionFormat.WHEEL

    @field_validator("base_letters", mode="before")
    @classmethod
    def _normalize_base_letters(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        letters = canon(value)
        if len(letters) != WHEEL_SIZE or not letters.isalpha():
            raise ValueError(
                f"base_letters must be exactly {WHEEL_SIZE} letters, got '{value}'"
            )
        return letters

    @field_validator("solutions", mode="before")
    @classmethod
    def _normalize_solutions(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        normalized: Dict[str, Any] = {}
        for word, path in value.items():
            # Catalog exports occasionally store paths as "3,1,4,0"
            if isinstance(path, str):
                path = [
                    int(part) for part in path.strip("[] ").split(",") if part.strip()
                ]
            normalized[canon(word)] = path
        return normalized

    @field_validator("bonus_words", mode="before")
    @classmethod
    def _normalize_bonus_words(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return list(dict.fromkeys(canon(w) for w in value))

    @model_validator(mode="after")
    def _check_wheel_paths(self) -> "Level":
        if self.solution_format != SolutionFormat.WHEEL:
            return self
        for word, path in self.solutions.items():
            if not MIN_WORD_LENGTH <= len(word) <= MAX_WORD_LENGTH:
                raise ValueError(f"'{word}' must be {MIN_WORD_LENGTH}-{MAX_WORD_LENGTH} letters")
            if not can_make_word(word, self.base_letters):
                raise ValueError(f"'{word}' cannot be made from '{self.base_letters}'")
            if any(i < 0 or i >= WHEEL_SIZE for i in path):
                raise ValueError(f"Path {path} for '{word}' has an index outside 0-{WHEEL_SIZE - 1}")
            if len(set(path)) != len(path):
                raise ValueError(f"Path {path} for '{word}' uses a wheel slot twice")
            spelled = ''.join(self.base_letters[i] for i in path)
            if spelled != word:
                raise ValueError(f"Path {path} spells '{spelled}', not '{word}'")
        return self

    def ordered_solutions(self) -> List[Tuple[str, List[int]]]:
        """Solutions as (word, path) pairs in catalog declaration order."""
        return list(self.solutions.items())

    @property
    def target_words(self) -> Set[str]:
        return set(self.solutions)

    @property
    def bonus_non_targets(self) -> List[str]:
        """Catalog bonus hints that are not also target words."""
        return sorted(set(self.bonus_words) - self.target_words)


class WheelLetter(BaseModel):
    """One slot of the letter wheel."""

    model_config = ConfigDict(frozen=True)

    char: str = Field(..., min_length=1, max_length=1)
    original_index: int = Field(..., ge=0, lt=WHEEL_SIZE)
    position: int = 0  # display slot after scrambling


class Player(BaseModel):
    """Durable player profile, owned by the player store."""

    uid: str = "local"
    coins: int = Field(default=0, ge=0)
    current_level_id: int = 1
    level_progress: Dict[str, Set[str]] = Field(default_factory=dict)
    found_bonus_words: Set[str] = Field(default_factory=set)
    total_words_found: int = 0
    longest_word_found: int = 0
    total_levels_completed: int = 0
    total_hints_used: int = 0
    last_level_duration: Optional[float] = None
    last_played_at: Optional[datetime] = None

    def found_in_level(self, level_id: int) -> Set[str]:
        return set(self.level_progress.get(level_key(level_id), set()))


class SessionState(BaseModel):
    """In-memory state for the level currently being played."""

    level_id: int
    found_words: Set[str] = Field(default_factory=set)
    bonus_words_found: Set[str] = Field(default_factory=set)
    consecutive_failed_guesses: int = 0
    combo_count: int = 0
    combo_multiplier: int = 1
    last_combo_time: Optional[float] = None
    is_level_complete: bool = False
    hints_used: int = 0
    started_at: float = 0.0


EventKind = Literal[
    "level_loaded",
    "target_accepted",
    "bonus_accepted",
    "duplicate",
    "invalid",
    "wrong_path",
    "combo",
    "hint_suggested",
    "coins_changed",
    "level_complete",
]


class GameEvent(BaseModel):
    """A one-way notification for presentation, audio and haptic sinks."""

    kind: EventKind
    level_id: int
    word: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)
