"""
RunOutcome schema.

Describes how one verification run ended when it did not abort. Aborted
runs raise one of the errors in ``forbidden_apis.app.errors`` instead.

The outcome records:
- whether the run executed the engine or terminated early (non-failing),
- whether the host runtime was supported,
- how many class files were handed to the engine,
- every finding the engine reported, in arrival order.
"""

from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RunState(str, Enum):
    """State machine of one run, in execution order."""

    INIT = "init"
    RESOLVING_RUNTIME = "resolving_runtime"
    LOADING_SIGNATURES = "loading_signatures"
    ENUMERATING_CLASSES = "enumerating_classes"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"


class RunStatus(str, Enum):
    COMPLETED = "completed"
    SKIPPED_UNSUPPORTED_RUNTIME = "skipped_unsupported_runtime"
    SKIPPED_EMPTY_INPUT = "skipped_empty_input"


class FindingKind(str, Enum):
    VIOLATION = "violation"
    MISSING_REFERENCE = "missing_reference"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class CheckFinding(BaseModel):
    """A single message received on one of the engine's event channels."""

    kind: FindingKind
    message: str

    model_config = ConfigDict(frozen=True)


class RunOutcome(BaseModel):
    run_id: str = Field(..., description="Identifier of the run")

    status: RunStatus

    state: RunState = Field(
        RunState.COMPLETED,
        description="Terminal state of the run state machine",
    )

    supported: bool = Field(
        True,
        description="Whether the engine supports the host runtime",
    )

    scanned_count: int = Field(
        0,
        ge=0,
        description="Number of class files handed to the engine",
    )

    findings: List[CheckFinding] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def violation_count(self) -> int:
        return sum(1 for f in self.findings if f.kind is FindingKind.VIOLATION)

    @property
    def missing_count(self) -> int:
        return sum(
            1 for f in self.findings if f.kind is FindingKind.MISSING_REFERENCE
        )

    @property
    def skipped(self) -> bool:
        return self.status is not RunStatus.COMPLETED
