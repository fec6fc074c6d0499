from __future__ import annotations

from typing import Protocol

from forbidden_apis.app.events.models import RunEvent


class EventEmitter(Protocol):
    """
    Interface for broadcasting run observations.

    Implementations must be:
    - fail-safe (the run drops events whose emission raises)
    - observational only
    """

    def emit(self, event: RunEvent) -> None:
        ...


class NullEventEmitter:
    """
    A safe no-op emitter.

    Used when nobody listens: command line runs, embedding callers that
    only want the outcome, tests that do not care about events.
    """

    def emit(self, event: RunEvent) -> None:
        return
