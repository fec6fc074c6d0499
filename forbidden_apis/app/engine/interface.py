"""
Checking engine contract.

The bytecode-level scanner is an external collaborator. This module fixes
the seam between it and the orchestration layer: the options it
understands, the two event channels it reports through, the exceptions it
raises, and the factory used to construct it for one run.

An engine instance is single-use. The orchestrator constructs it with the
run's class loader, registers suppression annotations, feeds signatures
and class files, and finally calls ``run()`` exactly once.
"""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Callable, FrozenSet, Optional, Protocol

from forbidden_apis.app.classpath.loader import ClassLoader


# ---------------------------------------------------------------------------
# Bundled signature constants
# ---------------------------------------------------------------------------

JDK_BUNDLE_PREFIX = "jdk-"

BS_JDK_NONPORTABLE = "jdk-non-portable"

DEPRECATED_WARN_INTERNALRUNTIME = (
    "The setting 'internalRuntimeForbidden' was deprecated and will be "
    "removed in next version. For backwards compatibility task/mojo is using "
    "'" + BS_JDK_NONPORTABLE + "' bundled signatures instead."
)


# ---------------------------------------------------------------------------
# Engine options
# ---------------------------------------------------------------------------

class EngineOption(str, Enum):
    """Failure-policy switches the engine itself interprets."""

    FAIL_ON_MISSING_CLASSES = "fail_on_missing_classes"
    FAIL_ON_VIOLATION = "fail_on_violation"
    FAIL_ON_UNRESOLVABLE_SIGNATURES = "fail_on_unresolvable_signatures"
    DISABLE_CLASSLOADING_CACHE = "disable_classloading_cache"


# ---------------------------------------------------------------------------
# Engine-side exceptions
# ---------------------------------------------------------------------------

class SignatureParseError(Exception):
    """Raised by the engine when a signature source cannot be parsed."""


class ForbiddenApiError(Exception):
    """
    Raised by ``CheckEngine.run`` when the run must fail.

    The engine decides this itself, from the findings it aggregated and the
    options it was constructed with.
    """


# ---------------------------------------------------------------------------
# Protocols
# ---------------------------------------------------------------------------

class CheckListener(Protocol):
    """
    Receives findings from the engine while it runs.

    Neither channel aborts the run by itself.
    """

    def missing(self, message: str) -> None:
        ...

    def violation(self, message: str) -> None:
        ...


class CheckEngine(Protocol):
    is_supported_runtime: bool
    runtime_description: str

    def add_suppress_annotation(self, classname: str) -> None:
        ...

    def add_bundled_signatures(
        self, name: str, target_version: Optional[str]
    ) -> None:
        ...

    def parse_signatures_string(self, text: str) -> None:
        ...

    def parse_signatures_file(self, stream: BinaryIO, name: str) -> None:
        ...

    def has_no_signatures(self) -> bool:
        ...

    def add_class_to_check(self, stream: BinaryIO, name: str) -> None:
        ...

    def run(self) -> None:
        ...


EngineFactory = Callable[
    [ClassLoader, FrozenSet[EngineOption], CheckListener],
    CheckEngine,
]


__all__ = [
    "BS_JDK_NONPORTABLE",
    "CheckEngine",
    "CheckListener",
    "DEPRECATED_WARN_INTERNALRUNTIME",
    "EngineFactory",
    "EngineOption",
    "ForbiddenApiError",
    "JDK_BUNDLE_PREFIX",
    "SignatureParseError",
]
