"""Letter frequency helpers shared by the validator and the level catalog."""

from collections import Counter
from typing import Iterable


def canon(word: str) -> str:
    """Canonical form used for every word comparison: trimmed and uppercased."""
    return word.strip().upper()


def letter_counts(letters: Iterable[str]) -> Counter:
    """Count each letter, case-insensitively."""
    return Counter(ch.upper() for ch in letters)


def can_make_word(word: str, base_letters: str) -> bool:
    """
    Check multiset containment: every letter of `word` appears in
    `base_letters` at least as many times as it appears in `word`.
    """
    base = letter_counts(base_letters)
    for ch, count in letter_counts(word).items():
        if base[ch] < count:
            return False
    return True

