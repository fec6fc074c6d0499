from __future__ import annotations

from typing import Iterator, List

from forbidden_apis.app.events.emitter import EventEmitter
from forbidden_apis.app.events.models import (
    TERMINAL_EVENT_TYPES,
    RunEvent,
    RunEventType,
)


class MemoryEventEmitter(EventEmitter):
    """
    In-memory emitter that records events in emission order.

    Properties:
    - deterministic ordering
    - closes itself on the first terminal event; later events are dropped
    """

    def __init__(self) -> None:
        self._events: List[RunEvent] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def emit(self, event: RunEvent) -> None:
        if self._closed:
            return

        self._events.append(event)

        if event.event_type in TERMINAL_EVENT_TYPES:
            self.close()

    def close(self) -> None:
        self._closed = True

    @property
    def events(self) -> List[RunEvent]:
        return list(self._events)

    def of_type(self, event_type: RunEventType) -> List[RunEvent]:
        return [e for e in self._events if e.event_type is event_type]

    def __iter__(self) -> Iterator[RunEvent]:
        return iter(list(self._events))
