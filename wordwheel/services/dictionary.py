"""Word-list dictionary used for bonus-word lookups."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Set

from ..validation.letters import canon


logger = logging.getLogger(__name__)

_DATA_FILE = Path(__file__).parent / "data" / "words.txt"


def read_word_list(path: Path) -> Set[str]:
    """Read one word per line, skipping blanks and '#' comments."""
    words: Set[str] = set()
    with open(path) as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                words.add(canon(line))
    return words


class WordListDictionary:
    """
    In-memory dictionary backed by a plain word list.

    Defaults to the bundled list; pass `words` or `path` to use another.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, path: Optional[str] = None):
        if words is not None:
            self._words: Set[str] = {canon(w) for w in words}
        else:
            source = Path(path) if path else _DATA_FILE
            self._words = read_word_list(source)
            logger.info("Dictionary loaded: %d words from %s", len(self._words), source)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_valid_word(word)

    def is_valid_word(self, word: str) -> bool:
        if not word:
            return False
        return canon(word) in self._words
