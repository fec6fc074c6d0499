from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


# ----------------------------------------------------------------------
# Event Types
# ----------------------------------------------------------------------
class RunEventType(str, Enum):
    """
    Progression events emitted during one verification run.

    NOTE:
    New entries must preserve observational semantics.
    """

    # ------------------------------------------------------------------
    # Run lifecycle
    # ------------------------------------------------------------------
    RUN_STARTED = "run_started"
    RUN_COMPLETED = "run_completed"
    RUN_SKIPPED = "run_skipped"
    RUN_FAILED = "run_failed"

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    RUNTIME_RESOLVED = "runtime_resolved"
    SIGNATURES_LOADED = "signatures_loaded"
    CLASSES_ENUMERATED = "classes_enumerated"

    # ------------------------------------------------------------------
    # Engine findings
    # ------------------------------------------------------------------
    MISSING_REFERENCE = "missing_reference"
    VIOLATION = "violation"


TERMINAL_EVENT_TYPES = frozenset(
    {
        RunEventType.RUN_COMPLETED,
        RunEventType.RUN_SKIPPED,
        RunEventType.RUN_FAILED,
    }
)


# ----------------------------------------------------------------------
# Event Model
# ----------------------------------------------------------------------
class RunEvent(BaseModel):
    """
    An immutable observation of a phase transition or finding.

    Events are strictly observational and never influence the outcome.
    """

    event_id: UUID = Field(default_factory=uuid4)
    run_id: str = Field(..., description="Identifier of the verification run")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    event_type: RunEventType

    details: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )
