"""
The word-wheel game: one player working through levels from a catalog.

`WordWheelGame` wires the grid synthesizer, guess validator, reward ledger
and session tracker to the collaborators passed in at construction. Guesses
are evaluated one at a time under a re-entrant lock, so each outcome is
fully applied before the next guess is classified.
"""

import logging
import threading
import time
from concurrent.futures import Executor
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from ..config import GameConfig
from ..grid.builder import build_grid
from ..grid.models import Grid
from ..services.catalog import BOOTSTRAP_LEVEL
from ..services.events import EventBus
from ..validation.messages import describe_outcome
from ..validation.models import Outcome
from ..validation.validator import GuessValidator
from .ledger import RewardLedger
from .models import EventKind, GameEvent, Level, Player, WheelLetter
from .session import SessionTracker, SideEffect
from .wheel import build_wheel

if TYPE_CHECKING:
    from ..services.interfaces import (
        Dictionary,
        Leaderboard,
        LevelCatalog,
        PlayerStore,
        ProgressStore,
    )


logger = logging.getLogger(__name__)


class SubmitResult(BaseModel):
    """
    Everything a presentation layer needs after one guess.

    Attributes:
        outcome: How the guess was classified
        message: Player-facing text for the outcome
        coins_awarded: Coins added to the profile by this guess
        combo_multiplier: Session combo multiplier after this guess
        hint_suggested: True if this guess hit the failure threshold
        level_complete: True only for the guess that completed the level
        events: Events emitted while handling the guess, in order
    """
    outcome: Outcome
    message: str
    coins_awarded: int = 0
    combo_multiplier: int = 1
    hint_suggested: bool = False
    level_complete: bool = False
    events: List[GameEvent] = Field(default_factory=list)


class WordWheelGame:
    """
    Orchestrates a single player's play through a level catalog.

    Attributes:
        catalog: Level source
        player: In-memory player profile, replaced after every ledger update
        level: Level currently loaded, or None before the first load
        grid: Display grid of the current level
        wheel: Wheel letters of the current level
        tracker: Session tracker of the current level
        bus: Event fan-out to presentation sinks
    """

    def __init__(
        self,
        catalog: "LevelCatalog",
        dictionary: "Dictionary",
        player_store: "PlayerStore",
        progress: Optional["ProgressStore"] = None,
        leaderboard: Optional["Leaderboard"] = None,
        bus: Optional[EventBus] = None,
        config: Optional[GameConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        executor: Optional[Executor] = None,
    ):
        self.catalog = catalog
        self.player_store = player_store
        self.progress = progress
        self.leaderboard = leaderboard
        self.bus = bus or EventBus()
        self.config = config or GameConfig()
        self.clock = clock
        self.executor = executor

        self.validator = GuessValidator(dictionary)
        self.ledger = RewardLedger(player_store, self.config.economy)
        self.player: Player = player_store.load_player()

        self.level: Optional[Level] = None
        self.grid: Optional[Grid] = None
        self.wheel: List[WheelLetter] = []
        self.tracker: Optional[SessionTracker] = None

        self._lock = threading.RLock()

    def _emit(self, events: List[GameEvent], kind: EventKind, level_id: int,
              word: Optional[str] = None, **data: Any) -> GameEvent:
        event = GameEvent(kind=kind, level_id=level_id, word=word, data=data)
        events.append(event)
        self.bus.notify(event)
        return event

    def _update_player(self, player: Player) -> None:
        self.player = player
        self.ledger.commit(player)

    def _fetch_level(self, level_id: int) -> Level:
        try:
            return self.catalog.fetch_level(level_id)
        except Exception as e:
            logger.error("Fetching level %d failed: %s; using bootstrap level", level_id, e)
            return BOOTSTRAP_LEVEL

    def load_level(self, level_id: Optional[int] = None) -> Level:
        """
        Load a level and start a fresh session for it.

        Defaults to the player's current level. Any previous session is
        discarded; completion work still pending for it is dropped.
        """
        with self._lock:
            if level_id is None:
                level_id = self.config.start_level_id or self.player.current_level_id

            level = self._fetch_level(level_id)
            self.level = level
            self.grid = build_grid(level)
            self.wheel = build_wheel(level)
            self.tracker = SessionTracker(level.id, self.config.gameplay, self.clock, self.executor)

            if self.config.gameplay.resume_level_progress:
                found = self.player.found_in_level(level.id) & level.target_words
                self.tracker.state.found_words = found
                if found == level.target_words:
                    # Already finished in an earlier session; nothing left to reward
                    self.tracker.completion.try_transition()
                    self.tracker.state.is_level_complete = True

            if self.player.current_level_id != level.id:
                self._update_player(self.player.model_copy(update={"current_level_id": level.id}))

            logger.info("Loaded level %d (%s, %d targets)", level.id, level.base_letters, len(level.solutions))
            self._emit(
                [], "level_loaded", level.id,
                base_letters=level.base_letters,
                targets=len(level.solutions),
                rows=self.grid.rows,
                cols=self.grid.cols,
            )
            return level

    def submit(self, guess_indices: Sequence[int]) -> SubmitResult:
        """
        Classify one traced path and apply its effects.

        Args:
            guess_indices: Wheel indices in the order they were traced

        Returns:
            SubmitResult describing the outcome and every event it produced

        Raises:
            RuntimeError: If no level is loaded
        """
        with self._lock:
            if self.level is None or self.tracker is None:
                raise RuntimeError("No level loaded")

            level = self.level
            tracker = self.tracker
            state = tracker.state
            events: List[GameEvent] = []
            coins_before = self.player.coins
            hint_suggested = False

            outcome = self.validator.submit(
                guess_indices, level, self.wheel, state.found_words, state.bonus_words_found
            )
            logger.debug("Guess %s on level %d -> %s", list(guess_indices), level.id, outcome.kind)

            if outcome.accepted:
                combo_continued = tracker.record_acceptance(outcome)
                player = self.player
                if outcome.kind == "accepted_target":
                    player = self.ledger.apply_target_found(outcome.word, player, level.id)
                    self._emit(events, "target_accepted", level.id, outcome.word)
                else:
                    player = self.ledger.apply_bonus_found(outcome.word, player)
                    self._emit(events, "bonus_accepted", level.id, outcome.word)
                if combo_continued:
                    player = self.ledger.apply_combo_bonus(state.combo_multiplier, player)
                    self._emit(events, "combo", level.id, multiplier=state.combo_multiplier, count=state.combo_count)
                self._update_player(player)
            else:
                if outcome.is_duplicate:
                    kind: EventKind = "duplicate"
                elif outcome.kind == "rejected_wrong_path":
                    kind = "wrong_path"
                else:
                    kind = "invalid"
                self._emit(events, kind, level.id, outcome.word or outcome.guess or None, reason=outcome.kind)
                if tracker.record_rejection(outcome):
                    hint_suggested = True
                    self._emit(events, "hint_suggested", level.id, source="failures")

            coins_awarded = self.player.coins - coins_before
            if coins_awarded:
                self._emit(events, "coins_changed", level.id, coins=self.player.coins, delta=coins_awarded)

            completed = outcome.kind == "accepted_target" and tracker.check_completion(level.target_words)
            if completed:
                logger.info("Level %d complete", level.id)
                self._dispatch_completion(level, tracker, events)

            return SubmitResult(
                outcome=outcome,
                message=describe_outcome(outcome),
                coins_awarded=coins_awarded,
                combo_multiplier=state.combo_multiplier,
                hint_suggested=hint_suggested,
                level_complete=completed,
                events=events,
            )

    def _completion_stats(self, tracker: SessionTracker) -> Dict[str, Any]:
        state = tracker.state
        return {
            "solve_time": tracker.elapsed,
            "words_found": len(state.found_words),
            "bonus_words_found": len(state.bonus_words_found),
            "hints_used": state.hints_used,
        }

    def _dispatch_completion(self, level: Level, tracker: SessionTracker, events: List[GameEvent]) -> None:
        stats = self._completion_stats(tracker)
        player_id = self.player.uid

        def grant_bonus() -> None:
            with self._lock:
                before = self.player.coins
                self._update_player(
                    self.ledger.apply_level_completion_bonus(self.player, stats["solve_time"])
                )
                self._emit(events, "coins_changed", level.id,
                           coins=self.player.coins, delta=self.player.coins - before)

        effects: List[SideEffect] = []
        if self.progress is not None:
            progress = self.progress
            effects.append(("progress", lambda: progress.mark_level_complete(player_id, level.id, stats)))
        if self.leaderboard is not None:
            leaderboard = self.leaderboard
            effects.append(("leaderboard", lambda: leaderboard.report_level_complete(
                level.id,
                stats["solve_time"],
                stats["words_found"],
                stats["bonus_words_found"],
                stats["hints_used"],
            )))
        effects.append(("reward", grant_bonus))
        effects.append(("notify", lambda: self._emit(events, "level_complete", level.id, **stats)))

        tracker.completion.dispatch(effects, is_current=lambda: self.tracker is tracker)

    def use_hint(self) -> Optional[str]:
        """
        Reveal the first unfound target word, in catalog order.

        Returns None when every target is already found.
        """
        with self._lock:
            if self.level is None or self.tracker is None:
                raise RuntimeError("No level loaded")

            found = self.tracker.state.found_words
            word = next((w for w, _ in self.level.ordered_solutions() if w not in found), None)
            if word is None:
                return None

            self.tracker.record_hint()
            self._update_player(self.ledger.apply_hint_used(self.player))
            self._emit([], "hint_suggested", self.level.id, word, source="requested")
            return word

    def next_level_id(self) -> Optional[int]:
        """Level after the current one, or None at the end of the catalog."""
        if self.level is None:
            return None
        finder = getattr(self.catalog, "next_level_id", None)
        if finder is not None:
            return finder(self.level.id)
        candidate = self.level.id + 1
        return candidate if self.catalog.validate_level_id(candidate) else None

    def advance_to_next_level(self) -> Optional[Level]:
        """
        Load the next level once the current one is complete.

        Returns None if there is no next level.

        Raises:
            RuntimeError: If the current level is not complete
        """
        with self._lock:
            if self.tracker is None or not self.tracker.state.is_level_complete:
                raise RuntimeError("Current level is not complete")
            next_id = self.next_level_id()
            if next_id is None:
                return None
            return self.load_level(next_id)
