"""
Configuration for the word-wheel engine.

Every value has a default matching the shipped economy, so an empty YAML
file (or no file at all) yields a playable configuration.
"""

from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class EconomyConfig(BaseModel):
    """Coin amounts granted by the reward ledger."""
    word_rewards: Dict[int, int] = Field(
        default_factory=lambda: {3: 3, 4: 5, 5: 8, 6: 12}
    )
    long_word_length: int = 6
    long_word_bonus: int = 5
    default_word_reward: int = 1
    bonus_word_reward: int = Field(default=5, ge=0)
    level_completion_bonus: int = Field(default=50, ge=0)
    combo_bonus_enabled: bool = True

    @field_validator("word_rewards")
    @classmethod
    def _rewards_not_negative(cls, value: Dict[int, int]) -> Dict[int, int]:
        if not value:
            raise ValueError("word_rewards must not be empty")
        if any(amount < 0 for amount in value.values()):
            raise ValueError("word_rewards must not be negative")
        return value

    def word_reward(self, length: int) -> int:
        """Table reward for a target word; lengths past the table use the top tier."""
        if length in self.word_rewards:
            return self.word_rewards[length]
        top = max(self.word_rewards)
        if length > top:
            return self.word_rewards[top]
        return self.default_word_reward


class GameplayConfig(BaseModel):
    """Timing and threshold constants for the session tracker."""
    combo_window_seconds: float = Field(default=5.0, gt=0)
    max_combo_multiplier: int = Field(default=5, ge=1)
    failure_threshold: int = Field(default=5, ge=1)
    resume_level_progress: bool = False


class GameConfig(BaseModel):
    """Top-level configuration."""
    economy: EconomyConfig = Field(default_factory=EconomyConfig)
    gameplay: GameplayConfig = Field(default_factory=GameplayConfig)
    levels_path: Optional[str] = None
    dictionary_path: Optional[str] = None
    player_path: Optional[str] = None
    start_level_id: Optional[int] = None


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load configuration from a YAML file, or the defaults when no path is given."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)
