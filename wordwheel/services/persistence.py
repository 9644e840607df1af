"""
Player, progress and leaderboard stores.

The in-memory stores keep copies so that callers can never mutate stored
state behind the store's back. `JsonPlayerStore` writes the whole profile on
every save.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ..engine.models import Player


logger = logging.getLogger(__name__)


class InMemoryPlayerStore:
    """Player store holding a single profile in memory."""

    def __init__(self, player: Optional[Player] = None):
        self._player = (player or Player()).model_copy(deep=True)
        self.save_count = 0

    def load_player(self) -> Player:
        return self._player.model_copy(deep=True)

    def save_player(self, player: Player) -> None:
        self._player = player.model_copy(deep=True)
        self.save_count += 1


class JsonPlayerStore:
    """Player store persisting the profile as a JSON file."""

    def __init__(self, path: str, uid: str = "local"):
        self.path = Path(path)
        self.uid = uid

    def load_player(self) -> Player:
        if not self.path.exists():
            logger.info("No player file at %s; starting a new profile", self.path)
            return Player(uid=self.uid)
        return Player.model_validate_json(self.path.read_text())

    def save_player(self, player: Player) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write then rename so a failed save never leaves a half-written profile
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(player.model_dump_json(indent=2))
        tmp_path.replace(self.path)


class CompletionRecord(BaseModel):
    """One completed level as reported to a progress store."""
    player_id: str
    level_id: int
    stats: Dict[str, Any] = Field(default_factory=dict)


class InMemoryProgressStore:
    """Progress store recording completions in memory."""

    def __init__(self) -> None:
        self.records: List[CompletionRecord] = []

    def mark_level_complete(self, player_id: str, level_id: int, stats: Dict[str, Any]) -> None:
        self.records.append(CompletionRecord(player_id=player_id, level_id=level_id, stats=dict(stats)))

    def has_completed(self, player_id: str, level_id: int) -> bool:
        return any(r.player_id == player_id and r.level_id == level_id for r in self.records)

    def last_level_id(self, player_id: str) -> Optional[int]:
        ids = [r.level_id for r in self.records if r.player_id == player_id]
        return ids[-1] if ids else None


class LeaderboardEntry(BaseModel):
    """Summary stats for one level completion."""
    level_id: int
    solve_time: float
    words_found: int
    bonus_words_found: int
    hints_used: int


class InMemoryLeaderboard:
    """Leaderboard recording reported completions in memory."""

    def __init__(self) -> None:
        self.entries: List[LeaderboardEntry] = []

    def report_level_complete(
        self,
        level_id: int,
        solve_time: float,
        words_found: int,
        bonus_words_found: int,
        hints_used: int,
    ) -> None:
        self.entries.append(LeaderboardEntry(
            level_id=level_id,
            solve_time=solve_time,
            words_found=words_found,
            bonus_words_found=bonus_words_found,
            hints_used=hints_used,
        ))
