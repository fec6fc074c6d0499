"""
Build-time verifier for calls to forbidden APIs in compiled class files.

    from forbidden_apis import ForbiddenApisConfig, run

    config = ForbiddenApisConfig(
        CLASSES_DIR=Path("build/classes"),
        SIGNATURES=["java.lang.System#exit(int)"],
    )
    outcome = run(config, engine_factory)
"""

from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.coordinator import CheckOrchestrator, FailurePolicy, run
from forbidden_apis.app.errors import (
    ConfigurationError,
    ForbiddenApisError,
    ResourceIOError,
    UnsupportedRuntimeError,
    ViolationError,
)
from forbidden_apis.app.schemas import (
    BundledSignatureRef,
    FileList,
    FileSet,
    RunOutcome,
    RunStatus,
)

__version__ = "0.1.0"

__all__ = [
    "BundledSignatureRef",
    "CheckOrchestrator",
    "ConfigurationError",
    "FailurePolicy",
    "FileList",
    "FileSet",
    "ForbiddenApisConfig",
    "ForbiddenApisError",
    "ResourceIOError",
    "RunOutcome",
    "RunStatus",
    "UnsupportedRuntimeError",
    "ViolationError",
    "run",
]
