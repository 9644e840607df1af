"""Test letter multiset helpers."""

from wordwheel.validation import canon, letter_counts, can_make_word


class TestCanon:
    """Test canonical word form."""

    def test_uppercases_and_strips(self):
        assert canon("  rain\n") == "RAIN"

    def test_empty(self):
        assert canon("") == ""


class TestCanMakeWord:
    """Test multiset containment against base letters."""

    def test_word_from_distinct_letters(self):
        assert can_make_word("CAT", "CATDOG") is True

    def test_needs_letter_twice(self):
        """A letter appearing once in the base cannot be used twice."""
        assert can_make_word("TOOT", "CATDOG") is False

    def test_repeated_base_letter(self):
        """TATERS has two Ts, so TAT fits but TATT does not."""
        assert can_make_word("TAT", "TATERS") is True
        assert can_make_word("TATT", "TATERS") is False

    def test_missing_letter(self):
        assert can_make_word("ZOO", "CATDOG") is False

    def test_case_insensitive(self):
        assert can_make_word("cat", "CatDog") is True

    def test_empty_word(self):
        assert can_make_word("", "CATDOG") is True

    def test_letter_counts(self):
        counts = letter_counts("TaTers")
        assert counts["T"] == 2
        assert counts["S"] == 1
