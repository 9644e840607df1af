"""Game engine for word-wheel levels."""

from .models import (
    WHEEL_SIZE,
    MIN_WORD_LENGTH,
    MAX_WORD_LENGTH,
    level_key,
    Level,
    WheelLetter,
    Player,
    SessionState,
    EventKind,
    GameEvent,
)
from .wheel import build_wheel
from .ledger import RewardLedger
from .session import CompletionDetector, InlineExecutor, SessionTracker
from .game import SubmitResult, WordWheelGame

__all__ = [
    # Models
    "WHEEL_SIZE",
    "MIN_WORD_LENGTH",
    "MAX_WORD_LENGTH",
    "level_key",
    "Level",
    "WheelLetter",
    "Player",
    "SessionState",
    "EventKind",
    "GameEvent",
    # Wheel
    "build_wheel",
    # Rewards
    "RewardLedger",
    # Session
    "CompletionDetector",
    "InlineExecutor",
    "SessionTracker",
    # Game
    "SubmitResult",
    "WordWheelGame",
]
