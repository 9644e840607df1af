"""Data models for guess classification."""

from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict


OutcomeKind = Literal[
    "accepted_target",
    "accepted_bonus",
    "rejected_length",
    "rejected_duplicate_target",
    "rejected_duplicate_bonus",
    "rejected_wrong_path",
    "rejected_invalid_word",
]

ACCEPTED = frozenset({"accepted_target", "accepted_bonus"})
DUPLICATES = frozenset({"rejected_duplicate_target", "rejected_duplicate_bonus"})


class Outcome(BaseModel):
    """
    Classification of one submitted guess.

    `guess` is the word derived from the wheel (empty when the indices could
    not be resolved). `target_letter_match` is set whenever the derived word
    is a target of the level, regardless of whether its path matched.
    """

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    guess: str = ""
    word: Optional[str] = None
    target_letter_match: bool = False

    @property
    def accepted(self) -> bool:
        return self.kind in ACCEPTED

    @property
    def is_duplicate(self) -> bool:
        return self.kind in DUPLICATES

    @property
    def counts_as_failure(self) -> bool:
        """Rejections that feed the consecutive-failure counter."""
        return not self.accepted and not self.is_duplicate

    @classmethod
    def accepted_target(cls, word: str) -> "Outcome":
        return cls(kind="accepted_target", guess=word, word=word, target_letter_match=True)

    @classmethod
    def accepted_bonus(cls, word: str) -> "Outcome":
        return cls(kind="accepted_bonus", guess=word, word=word)

    @classmethod
    def rejected_length(cls, guess: str) -> "Outcome":
        return cls(kind="rejected_length", guess=guess)

    @classmethod
    def duplicate_target(cls, word: str) -> "Outcome":
        return cls(kind="rejected_duplicate_target", guess=word, word=word, target_letter_match=True)

    @classmethod
    def duplicate_bonus(cls, word: str) -> "Outcome":
        return cls(kind="rejected_duplicate_bonus", guess=word, word=word)

    @classmethod
    def wrong_path(cls, word: str) -> "Outcome":
        return cls(kind="rejected_wrong_path", guess=word, word=word, target_letter_match=True)

    @classmethod
    def invalid_word(cls, guess: str) -> "Outcome":
        return cls(kind="rejected_invalid_word", guess=guess)
