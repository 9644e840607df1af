"""Guess validation for word-wheel levels."""

from .letters import canon, letter_counts, can_make_word
from .models import Outcome, OutcomeKind
from .validator import GuessValidator, derive_guess, MIN_GUESS_LENGTH, MAX_GUESS_LENGTH
from .messages import describe_outcome

__all__ = [
    # Letter multisets
    "canon",
    "letter_counts",
    "can_make_word",
    # Classification
    "Outcome",
    "OutcomeKind",
    "GuessValidator",
    "derive_guess",
    "MIN_GUESS_LENGTH",
    "MAX_GUESS_LENGTH",
    # Feedback
    "describe_outcome",
]
