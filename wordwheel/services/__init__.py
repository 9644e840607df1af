"""Collaborators the engine depends on, with in-process implementations."""

from .interfaces import (
    Dictionary,
    LevelCatalog,
    PlayerStore,
    ProgressStore,
    Leaderboard,
    EventSink,
)
from .dictionary import WordListDictionary, read_word_list
from .catalog import (
    BOOTSTRAP_LEVEL,
    LevelInvariantError,
    StaticLevelCatalog,
    parse_level,
    read_level_file,
)
from .persistence import (
    InMemoryPlayerStore,
    JsonPlayerStore,
    InMemoryProgressStore,
    InMemoryLeaderboard,
    CompletionRecord,
    LeaderboardEntry,
)
from .events import EventBus, RecordingSink

__all__ = [
    # Interfaces
    "Dictionary",
    "LevelCatalog",
    "PlayerStore",
    "ProgressStore",
    "Leaderboard",
    "EventSink",
    # Dictionary
    "WordListDictionary",
    "read_word_list",
    # Catalog
    "BOOTSTRAP_LEVEL",
    "LevelInvariantError",
    "StaticLevelCatalog",
    "parse_level",
    "read_level_file",
    # Persistence
    "InMemoryPlayerStore",
    "JsonPlayerStore",
    "InMemoryProgressStore",
    "InMemoryLeaderboard",
    "CompletionRecord",
    "LeaderboardEntry",
    # Events
    "EventBus",
    "RecordingSink",
]
