from .orchestrator import CheckOrchestrator, run
from .policy import FailurePolicy

__all__ = [
    "CheckOrchestrator",
    "FailurePolicy",
    "run",
]
