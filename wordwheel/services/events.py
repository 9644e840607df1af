"""Explicit event fan-out to presentation, audio and haptic sinks."""

import logging
from typing import TYPE_CHECKING, List

from ..engine.models import GameEvent

if TYPE_CHECKING:
    from .interfaces import EventSink


logger = logging.getLogger(__name__)


class EventBus:
    """
    Delivers each event to every subscribed sink.

    Sinks are one-way: a sink that raises is logged and skipped, and the
    remaining sinks still receive the event.
    """

    def __init__(self) -> None:
        self._sinks: List["EventSink"] = []

    def subscribe(self, sink: "EventSink") -> None:
        self._sinks.append(sink)

    def unsubscribe(self, sink: "EventSink") -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def notify(self, event: GameEvent) -> None:
        for sink in list(self._sinks):
            try:
                sink.notify(event)
            except Exception as e:
                logger.warning("Event sink %r failed on %s: %s", sink, event.kind, e)


class RecordingSink:
    """Sink that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: List[GameEvent] = []

    def notify(self, event: GameEvent) -> None:
        self.events.append(event)

    def kinds(self) -> List[str]:
        return [e.kind for e in self.events]
