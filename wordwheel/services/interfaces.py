"""
Narrow interfaces to the collaborators the engine depends on.

The engine only ever talks to these protocols; concrete implementations are
passed in at construction time.
"""

from typing import Any, Dict, Protocol, runtime_checkable

from ..engine.models import GameEvent, Level, Player


@runtime_checkable
class Dictionary(Protocol):
    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership test."""
        ...


@runtime_checkable
class LevelCatalog(Protocol):
    def fetch_level(self, level_id: int) -> Level:
        ...

    def validate_level_id(self, level_id: int) -> bool:
        ...


@runtime_checkable
class PlayerStore(Protocol):
    def load_player(self) -> Player:
        ...

    def save_player(self, player: Player) -> None:
        ...


@runtime_checkable
class ProgressStore(Protocol):
    def mark_level_complete(self, player_id: str, level_id: int, stats: Dict[str, Any]) -> None:
        ...


@runtime_checkable
class Leaderboard(Protocol):
    def report_level_complete(
        self,
        level_id: int,
        solve_time: float,
        words_found: int,
        bonus_words_found: int,
        hints_used: int,
    ) -> None:
        ...


@runtime_checkable
class EventSink(Protocol):
    def notify(self, event: GameEvent) -> None:
        ...
