"""
Per-level session tracking: found sets, combos, failure streaks, completion.

The completion detector is a one-way state machine. Its transition is a
locked check-and-set, so however many times (or from however many threads)
the check runs, the completion side effects are dispatched at most once per
level instance.
"""

import logging
import threading
import time
from concurrent.futures import Executor, Future
from typing import Callable, Dict, Literal, Optional, Sequence, Set, Tuple

from ..config import GameplayConfig
from ..validation.models import Outcome
from .models import SessionState


logger = logging.getLogger(__name__)

CompletionState = Literal["in_progress", "completed"]
EffectResult = Literal["ok", "failed", "skipped"]
SideEffect = Tuple[str, Callable[[], None]]


class InlineExecutor(Executor):
    """Executor that runs each task immediately on the submitting thread."""

    def submit(self, fn, /, *args, **kwargs) -> Future:
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as e:
            future.set_exception(e)
        return future


class CompletionDetector:
    """
    Fires the level-complete transition exactly once.

    Attributes:
        level_id: Level this detector belongs to; side effects are tagged with it
        executor: Runs completion side effects (inline by default)
    """

    def __init__(self, level_id: int, executor: Optional[Executor] = None):
        self.level_id = level_id
        self.executor = executor or InlineExecutor()
        self._lock = threading.Lock()
        self._state: CompletionState = "in_progress"

    @property
    def state(self) -> CompletionState:
        return self._state

    @property
    def is_complete(self) -> bool:
        return self._state == "completed"

    def try_transition(self) -> bool:
        """Move to 'completed'; True only for the single call that made the move."""
        with self._lock:
            if self._state == "completed":
                return False
            self._state = "completed"
            return True

    def check(self, targets: Set[str], found: Set[str]) -> bool:
        """Transition if every target has been found. True only on the firing call."""
        if not targets or not targets <= found:
            return False
        return self.try_transition()

    def _run_effect(self, name: str, effect: Callable[[], None], is_current: Callable[[], bool]) -> EffectResult:
        if not is_current():
            logger.info("Dropping %s for level %d: level is no longer active", name, self.level_id)
            return "skipped"
        try:
            effect()
            return "ok"
        except Exception as e:
            logger.error("Completion step %s failed for level %d: %s", name, self.level_id, e)
            return "failed"

    def dispatch(
        self,
        effects: Sequence[SideEffect],
        is_current: Callable[[], bool] = lambda: True,
    ) -> Dict[str, "Future[EffectResult]"]:
        """
        Run each completion side effect independently.

        A failing effect is logged and does not stop the others. Effects are
        never retried and never re-arm the detector. `is_current` is checked
        right before each effect so work for a level that has since been
        replaced is dropped.
        """
        return {
            name: self.executor.submit(self._run_effect, name, effect, is_current)
            for name, effect in effects
        }


class SessionTracker:
    """
    Mutable state for one loaded level.

    Attributes:
        state: Found sets, combo and failure counters
        completion: The level's completion detector
        config: Combo window, multiplier cap and failure threshold
    """

    def __init__(
        self,
        level_id: int,
        config: Optional[GameplayConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        executor: Optional[Executor] = None,
    ):
        self.config = config or GameplayConfig()
        self.clock = clock
        self.state = SessionState(level_id=level_id, started_at=clock())
        self.completion = CompletionDetector(level_id, executor)

    @property
    def level_id(self) -> int:
        return self.state.level_id

    @property
    def elapsed(self) -> float:
        return max(0.0, self.clock() - self.state.started_at)

    def update_combo(self) -> bool:
        """Register an acceptance for combo timing. Returns True if a combo continued."""
        now = self.clock()
        s = self.state
        continued = (
            s.last_combo_time is not None
            and now - s.last_combo_time < self.config.combo_window_seconds
        )
        if continued:
            s.combo_count += 1
            s.combo_multiplier = min(s.combo_count, self.config.max_combo_multiplier)
        else:
            s.combo_count = 1
            s.combo_multiplier = 1
        s.last_combo_time = now
        return continued

    def record_acceptance(self, outcome: Outcome) -> bool:
        """
        Add an accepted word to the session's found sets.

        Resets the failure streak and updates the combo. Returns True if the
        acceptance continued a combo.
        """
        if outcome.kind == "accepted_target":
            self.state.found_words.add(outcome.word)
        elif outcome.kind == "accepted_bonus":
            self.state.bonus_words_found.add(outcome.word)
        else:
            raise ValueError(f"Not an acceptance: {outcome.kind}")
        self.state.consecutive_failed_guesses = 0
        return self.update_combo()

    def record_rejection(self, outcome: Outcome) -> bool:
        """
        Count a failed guess. Duplicates are not counted.

        Returns True when the streak reaches the threshold; the streak then
        starts over so the signal is raised once per run of failures.
        """
        if not outcome.counts_as_failure:
            return False
        self.state.consecutive_failed_guesses += 1
        if self.state.consecutive_failed_guesses >= self.config.failure_threshold:
            self.state.consecutive_failed_guesses = 0
            return True
        return False

    def record_hint(self) -> None:
        self.state.hints_used += 1

    def check_completion(self, targets: Set[str]) -> bool:
        """True exactly once: on the call that finds every target already found."""
        fired = self.completion.check(targets, self.state.found_words)
        if fired:
            self.state.is_level_complete = True
        return fired
