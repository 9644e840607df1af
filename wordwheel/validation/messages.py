"""Player-facing feedback for classified guesses."""

from typing import Dict

from .models import Outcome, OutcomeKind
from .validator import MIN_GUESS_LENGTH, MAX_GUESS_LENGTH


MESSAGES: Dict[OutcomeKind, str] = {
    "accepted_target": "Found {word}!",
    "accepted_bonus": "Bonus word! {word}",
    "rejected_length": f"Words need {MIN_GUESS_LENGTH}-{MAX_GUESS_LENGTH} letters",
    "rejected_duplicate_target": "Already found!",
    "rejected_duplicate_bonus": "Already found!",
    "rejected_wrong_path": "Wrong swipe pattern",
    "rejected_invalid_word": "Not a valid word",
}


def describe_outcome(outcome: Outcome) -> str:
    """Short message to show the player for `outcome`."""
    return MESSAGES[outcome.kind].format(word=outcome.word or outcome.guess)
