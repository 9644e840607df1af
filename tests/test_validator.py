"""Test guess classification."""

from unittest.mock import Mock

import pytest

from wordwheel.engine import Level, build_wheel
from wordwheel.services import WordListDictionary
from wordwheel.validation import GuessValidator, Outcome, derive_guess, describe_outcome


CATDOG = Level(
    id=1,
    base_letters="CATDOG",
    solutions={"CAT": [0, 1, 2], "DOG": [3, 4, 5], "COT": [0, 4, 2], "GOT": [5, 4, 2], "TOGA": [2, 4, 5, 1]},
    bonus_words=["ACT", "COD", "GOD"],
)

TRAINS = Level(
    id=2,
    base_letters="TRAINS",
    solutions={"RAIN": [1, 2, 3, 4], "STAR": [5, 0, 2, 1], "TRAIN": [0, 1, 2, 3, 4]},
)

TATERS = Level(
    id=3,
    base_letters="TATERS",
    solutions={"TAT": [0, 1, 2], "RATE": [4, 1, 2, 3]},
)


@pytest.fixture
def validator():
    return GuessValidator(WordListDictionary())


def classify(validator, level, indices, found_targets=(), found_bonus=()):
    return validator.submit(indices, level, build_wheel(level), set(found_targets), set(found_bonus))


class TestDeriveGuess:
    """Test spelling a traced path from the wheel."""

    def test_uses_original_index(self):
        """Display positions are scrambled, but indices name original slots."""
        assert derive_guess([0, 1, 2], build_wheel(CATDOG)) == "CAT"

    def test_unknown_index(self):
        assert derive_guess([0, 1, 9], build_wheel(CATDOG)) is None

    def test_repeated_index(self):
        assert derive_guess([0, 0, 1], build_wheel(CATDOG)) is None


class TestTargetWords:
    """Test exact-path target acceptance."""

    def test_accepts_target(self, validator):
        outcome = classify(validator, CATDOG, [0, 1, 2])
        assert outcome.kind == "accepted_target"
        assert outcome.word == "CAT"
        assert outcome.target_letter_match is True
        assert outcome.accepted

    def test_duplicate_target(self, validator):
        outcome = classify(validator, CATDOG, [0, 1, 2], found_targets={"CAT"})
        assert outcome.kind == "rejected_duplicate_target"
        assert outcome.is_duplicate
        assert not outcome.counts_as_failure

    def test_rain_and_star(self, validator):
        assert classify(validator, TRAINS, [1, 2, 3, 4]).word == "RAIN"
        assert classify(validator, TRAINS, [5, 0, 2, 1]).word == "STAR"

    def test_wrong_path_for_target(self, validator):
        """TAT traced from the other T spells a target but along the wrong path."""
        outcome = classify(validator, TATERS, [2, 1, 0])
        assert outcome.kind == "rejected_wrong_path"
        assert outcome.word == "TAT"
        assert outcome.target_letter_match is True
        assert outcome.counts_as_failure

    def test_wrong_path_never_becomes_bonus(self):
        """Even if the dictionary knows the word, a mis-traced target is not a bonus."""
        dictionary = Mock()
        dictionary.is_valid_word.return_value = True
        outcome = classify(GuessValidator(dictionary), TATERS, [2, 1, 0])
        assert outcome.kind == "rejected_wrong_path"


class TestBonusWords:
    """Test dictionary-backed bonus acceptance."""

    def test_accepts_bonus(self, validator):
        outcome = classify(validator, CATDOG, [1, 0, 2])
        assert outcome.kind == "accepted_bonus"
        assert outcome.word == "ACT"
        assert outcome.target_letter_match is False

    def test_bonus_not_in_catalog_list(self, validator):
        """Any dictionary word made from the base letters counts, listed or not."""
        outcome = classify(validator, TRAINS, [1, 2, 4, 0])
        assert outcome.kind == "accepted_bonus"
        assert outcome.word == "RANT"

    def test_duplicate_bonus(self, validator):
        outcome = classify(validator, CATDOG, [1, 0, 2], found_bonus={"ACT"})
        assert outcome.kind == "rejected_duplicate_bonus"
        assert not outcome.counts_as_failure

    def test_dictionary_failure_is_not_a_word(self):
        dictionary = Mock()
        dictionary.is_valid_word.side_effect = RuntimeError("lookup down")
        outcome = classify(GuessValidator(dictionary), CATDOG, [1, 0, 2])
        assert outcome.kind == "rejected_invalid_word"

    def test_bonus_candidate_needs_base_letters(self, validator):
        assert validator.is_bonus_candidate("ACT", CATDOG) is True
        assert validator.is_bonus_candidate("ZOO", CATDOG) is False


class TestRejections:
    """Test length and invalid-word rejections."""

    @pytest.mark.parametrize("indices", [[], [0], [0, 1]])
    def test_too_short(self, validator, indices):
        assert classify(validator, CATDOG, indices).kind == "rejected_length"

    def test_too_long(self, validator):
        """Seven indices cannot fit a six-letter wheel, so length is reported first."""
        assert classify(validator, CATDOG, [0, 1, 2, 3, 4, 5, 0]).kind == "rejected_length"

    def test_not_a_word(self, validator):
        outcome = classify(validator, CATDOG, [2, 1, 0])
        assert outcome.kind == "rejected_invalid_word"
        assert outcome.guess == "TAC"
        assert outcome.counts_as_failure

    def test_repeated_slot(self, validator):
        outcome = classify(validator, CATDOG, [0, 0, 1])
        assert outcome.kind == "rejected_invalid_word"
        assert outcome.guess == ""

    def test_unknown_slot(self, validator):
        assert classify(validator, CATDOG, [0, 1, 7]).kind == "rejected_invalid_word"

    def test_validation_is_pure(self, validator):
        """Same inputs, same outcome."""
        assert classify(validator, CATDOG, [0, 1, 2]) == classify(validator, CATDOG, [0, 1, 2])


class TestMessages:
    """Test player-facing feedback."""

    def test_messages(self):
        assert describe_outcome(Outcome.accepted_target("CAT")) == "Found CAT!"
        assert describe_outcome(Outcome.duplicate_target("CAT")) == "Already found!"
        assert describe_outcome(Outcome.wrong_path("TAT")) == "Wrong swipe pattern"
        assert describe_outcome(Outcome.invalid_word("TAC")) == "Not a valid word"
        assert describe_outcome(Outcome.rejected_length("CA")) == "Words need 3-6 letters"
