from .models import RunEvent, RunEventType
from .emitter import EventEmitter, NullEventEmitter
from .memory_emitter import MemoryEventEmitter

__all__ = [
    "RunEvent",
    "RunEventType",
    "EventEmitter",
    "NullEventEmitter",
    "MemoryEventEmitter",
]
