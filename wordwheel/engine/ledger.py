"""
Reward and progress ledger.

Every `apply_*` method is a pure transformation returning a new Player; the
input is never modified. `commit` is the single write-back to the player
store, so a profile is either saved whole or not at all.
"""

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from ..config import EconomyConfig
from ..validation.letters import canon
from .models import Player, level_key

if TYPE_CHECKING:
    from ..services.interfaces import PlayerStore


logger = logging.getLogger(__name__)


class RewardLedger:
    """
    Computes coin rewards and applies them to player profiles.

    Attributes:
        store: Player store receiving committed profiles
        economy: Reward amounts
    """

    def __init__(self, store: "PlayerStore", economy: Optional[EconomyConfig] = None):
        self.store = store
        self.economy = economy or EconomyConfig()

    def target_reward(self, word: str) -> int:
        """Length-table reward plus the flat bonus for long words."""
        reward = self.economy.word_reward(len(word))
        if len(word) >= self.economy.long_word_length:
            reward += self.economy.long_word_bonus
        return reward

    def apply_target_found(self, word: str, player: Player, level_id: Optional[int] = None) -> Player:
        """Record a found target word for the level and grant its reward."""
        word = canon(word)
        key = level_key(player.current_level_id if level_id is None else level_id)

        progress = {k: set(v) for k, v in player.level_progress.items()}
        progress.setdefault(key, set()).add(word)

        return player.model_copy(update={
            "coins": player.coins + self.target_reward(word),
            "level_progress": progress,
            "total_words_found": player.total_words_found + 1,
            "longest_word_found": max(player.longest_word_found, len(word)),
            "last_played_at": datetime.now(timezone.utc),
        })

    def apply_bonus_found(self, word: str, player: Player) -> Player:
        """
        Add a bonus word to the lifetime set, paying out only on first insertion.

        A word already in `found_bonus_words` (from any earlier level or
        session) leaves the profile unchanged.
        """
        word = canon(word)
        if word in player.found_bonus_words:
            return player
        return player.model_copy(update={
            "coins": player.coins + self.economy.bonus_word_reward,
            "found_bonus_words": player.found_bonus_words | {word},
            "last_played_at": datetime.now(timezone.utc),
        })

    def apply_combo_bonus(self, multiplier: int, player: Player) -> Player:
        """Extra coins while a combo is running: one per step above 1x."""
        bonus = max(0, multiplier - 1)
        if not self.economy.combo_bonus_enabled or bonus == 0:
            return player
        return player.model_copy(update={"coins": player.coins + bonus})

    def apply_level_completion_bonus(self, player: Player, duration: Optional[float] = None) -> Player:
        """Flat completion reward. Callers guarantee this runs once per completion."""
        return player.model_copy(update={
            "coins": player.coins + self.economy.level_completion_bonus,
            "total_levels_completed": player.total_levels_completed + 1,
            "last_level_duration": duration,
            "last_played_at": datetime.now(timezone.utc),
        })

    def apply_hint_used(self, player: Player) -> Player:
        return player.model_copy(update={"total_hints_used": player.total_hints_used + 1})

    def commit(self, player: Player) -> bool:
        """
        Persist `player` through the store.

        Returns False if the store raised. The store owns retrying; the
        in-memory profile stays authoritative for the rest of the session.
        """
        try:
            self.store.save_player(player)
            return True
        except Exception as e:
            logger.error("Saving player %s failed: %s", player.uid, e)
            return False
