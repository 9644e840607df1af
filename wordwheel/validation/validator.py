"""
Guess classification for word-wheel levels.

A guess is the ordered list of wheel indices the player traced. Checks run in
a fixed order so that every guess maps to exactly one outcome:

1. Derive the word from the wheel letters at those indices
2. Length gate (3-6 letters)
3. Target check: the word is a solution AND the path matches exactly
4. Bonus check: letters fit the base letters AND the dictionary knows the word
5. Otherwise wrong path (the word is a target traced the wrong way) or invalid
"""

import logging
from typing import TYPE_CHECKING, AbstractSet, Dict, Optional, Sequence

from .letters import can_make_word
from .models import Outcome

if TYPE_CHECKING:
    from ..engine.models import Level, WheelLetter
    from ..services.interfaces import Dictionary


logger = logging.getLogger(__name__)

MIN_GUESS_LENGTH = 3
MAX_GUESS_LENGTH = 6


def derive_guess(guess_indices: Sequence[int], wheel: Sequence["WheelLetter"]) -> Optional[str]:
    """
    Spell the word traced by `guess_indices`.

    Indices refer to each wheel letter's original index, not its display
    slot. Returns None if an index names no wheel letter or the same slot is
    traced twice.
    """
    by_index: Dict[int, str] = {letter.original_index: letter.char for letter in wheel}
    if len(set(guess_indices)) != len(guess_indices):
        return None
    letters = []
    for index in guess_indices:
        if index not in by_index:
            return None
        letters.append(by_index[index])
    return ''.join(letters).upper()


class GuessValidator:
    """
    Classifies guesses against a level and the current session's found sets.

    Holds no state besides the dictionary collaborator, so `submit` depends
    only on its arguments and the dictionary's answers.
    """

    def __init__(self, dictionary: "Dictionary") -> None:
        self.dictionary = dictionary

    def is_dictionary_word(self, word: str) -> bool:
        """Ask the dictionary, treating a failing lookup as 'not a word'."""
        try:
            return bool(self.dictionary.is_valid_word(word))
        except Exception as e:
            logger.warning("Dictionary lookup failed for %s: %s", word, e)
            return False

    def is_bonus_candidate(self, word: str, level: "Level") -> bool:
        return can_make_word(word, level.base_letters) and self.is_dictionary_word(word)

    def submit(
        self,
        guess_indices: Sequence[int],
        level: "Level",
        wheel: Sequence["WheelLetter"],
        session_found_targets: AbstractSet[str],
        session_found_bonus: AbstractSet[str],
    ) -> Outcome:
        """
        Classify one guess.

        Args:
            guess_indices: Wheel indices in the order they were traced
            level: The level being played
            wheel: The level's wheel letters
            session_found_targets: Target words already found this session
            session_found_bonus: Bonus words already found this session

        Returns:
            Exactly one Outcome
        """
        guess = derive_guess(guess_indices, wheel)
        length = len(guess) if guess is not None else len(guess_indices)

        if not MIN_GUESS_LENGTH <= length <= MAX_GUESS_LENGTH:
            return Outcome.rejected_length(guess or "")

        if guess is None:
            return Outcome.invalid_word("")

        # Path order encodes the swipe, so compare as sequences, not sets
        solution_path = level.solutions.get(guess)
        target_letter_match = solution_path is not None
        if target_letter_match and list(guess_indices) == list(solution_path):
            if guess in session_found_targets:
                return Outcome.duplicate_target(guess)
            return Outcome.accepted_target(guess)

        # A target traced along another path falls through to here but is
        # never rewarded as a bonus word
        if not target_letter_match and self.is_bonus_candidate(guess, level):
            if guess in session_found_bonus:
                return Outcome.duplicate_bonus(guess)
            return Outcome.accepted_bonus(guess)

        if target_letter_match:
            logger.debug("Path %s does not match %s for %s", list(guess_indices), solution_path, guess)
            return Outcome.wrong_path(guess)
        return Outcome.invalid_word(guess)
