"""
Verification run orchestrator.

IMPORTANT:
The orchestrator does not match signatures.

It MUST NOT:
- interpret class file contents
- aggregate violations into a verdict of its own
- re-implement any engine option

Its sole responsibilities are:
- enforcing execution order
- enforcing hard stop conditions (configuration errors, runtime support,
  empty input)
- owning the class loader for exactly the lifetime of the run
- translating engine failures into the run's error taxonomy
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional
from uuid import uuid4

from forbidden_apis.app.classpath.context import ClassResolutionContext
from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.coordinator.policy import FailurePolicy
from forbidden_apis.app.engine.interface import CheckEngine, EngineFactory
from forbidden_apis.app.errors import (
    ConfigurationError,
    UnsupportedRuntimeError,
    ViolationError,
)
from forbidden_apis.app.events import (
    EventEmitter,
    NullEventEmitter,
    RunEvent,
    RunEventType,
)
from forbidden_apis.app.resources.collector import ClassArtifactCollector
from forbidden_apis.app.schemas.outcome import (
    CheckFinding,
    FindingKind,
    RunOutcome,
    RunState,
    RunStatus,
)
from forbidden_apis.app.signatures.source_set import SignatureSourceSet
from forbidden_apis.app.signatures.suppression import SuppressionRegistry

logger = logging.getLogger(__name__)


def safe_emit(emitter: EventEmitter, event: RunEvent) -> None:
    try:
        emitter.emit(event)
    except Exception:
        # Fail-safe: never let observability break the run
        logger.debug("dropped %s event for run %s", event.event_type.value, event.run_id, exc_info=True)


EMPTY_INPUT_MESSAGE = (
    "There is no class file collection given, or the collection does not "
    "contain any class files to check: no class files to check"
)


class _RunListener:
    """
    Engine event channels of one run.

    Missing references are logged as warnings, violations as errors.
    Neither aborts the run by itself.
    """

    def __init__(self, run_id: str, emitter: EventEmitter) -> None:
        self._run_id = run_id
        self._emitter = emitter
        self.findings: List[CheckFinding] = []

    def missing(self, message: str) -> None:
        logger.warning(message)
        self._record(FindingKind.MISSING_REFERENCE, RunEventType.MISSING_REFERENCE, message)

    def violation(self, message: str) -> None:
        logger.error(message)
        self._record(FindingKind.VIOLATION, RunEventType.VIOLATION, message)

    def _record(self, kind: FindingKind, event_type: RunEventType, message: str) -> None:
        self.findings.append(CheckFinding(kind=kind, message=message))
        safe_emit(
            self._emitter,
            RunEvent(
                run_id=self._run_id,
                event_type=event_type,
                details={"message": message},
            ),
        )


class CheckOrchestrator:
    """
    Top-level state machine of one verification run.

    Execution order:
        1. Resolving runtime     (class loader built, engine constructed,
                                  runtime support checked)
        2. Loading signatures    (suppressions, bundled, inline, files)
        3. Enumerating classes   (early exit on empty input per policy)
        4. Running               (engine run, failures → ViolationError)

    The class loader is released on every exit path.
    """

    def __init__(
        self,
        config: ForbiddenApisConfig,
        engine_factory: EngineFactory,
        *,
        emitter: Optional[EventEmitter] = None,
        context_factory: Callable[..., ClassResolutionContext] = ClassResolutionContext,
    ) -> None:
        self._config = config
        self._engine_factory = engine_factory
        self._emitter = emitter or NullEventEmitter()
        self._context_factory = context_factory

        self.policy = FailurePolicy.from_config(config)
        self.state = RunState.INIT

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, *, run_id: Optional[str] = None) -> RunOutcome:
        """
        Execute one verification run.

        Returns a RunOutcome for completed and non-failing early-terminated
        runs. Raises a ForbiddenApisError subclass when the run aborts.
        """
        run_id = run_id or uuid4().hex
        self.state = RunState.INIT
        listener = _RunListener(run_id, self._emitter)

        self._emit(run_id, RunEventType.RUN_STARTED)

        try:
            with self._context_factory(self._config.CLASSPATH) as loader:
                # ------------------------------------------------------
                # 1. Runtime support (HARD GATE or SKIP)
                # ------------------------------------------------------
                self.state = RunState.RESOLVING_RUNTIME
                engine = self._engine_factory(
                    loader, self.policy.engine_options(), listener
                )

                if not self._runtime_supported(run_id, engine):
                    return self._skip(
                        run_id,
                        RunStatus.SKIPPED_UNSUPPORTED_RUNTIME,
                        supported=False,
                        listener=listener,
                    )

                # ------------------------------------------------------
                # 2. Signatures (configuration errors always abort)
                # ------------------------------------------------------
                self.state = RunState.LOADING_SIGNATURES
                self._load_signatures(run_id, engine)

                # ------------------------------------------------------
                # 3. Class files (SKIP or abort on empty input)
                # ------------------------------------------------------
                self.state = RunState.ENUMERATING_CLASSES
                scanned = self._enumerate_classes(run_id, engine)

                if scanned == 0:
                    if not self.policy.ignore_empty_file_set:
                        raise ConfigurationError(EMPTY_INPUT_MESSAGE)
                    logger.warning(EMPTY_INPUT_MESSAGE)
                    logger.info("Scanned 0 class files")
                    return self._skip(
                        run_id,
                        RunStatus.SKIPPED_EMPTY_INPUT,
                        supported=True,
                        listener=listener,
                    )

                # ------------------------------------------------------
                # 4. Engine run
                # ------------------------------------------------------
                self.state = RunState.RUNNING
                self._run_engine(engine)

                logger.info("Scanned %d class file(s)", scanned)
                self.state = RunState.COMPLETED

                outcome = RunOutcome(
                    run_id=run_id,
                    status=RunStatus.COMPLETED,
                    state=self.state,
                    supported=True,
                    scanned_count=scanned,
                    findings=listener.findings,
                )

        except Exception as exc:
            self.state = RunState.ABORTED
            self._emit(
                run_id,
                RunEventType.RUN_FAILED,
                {
                    "error": str(exc),
                    "exception_type": type(exc).__name__,
                },
            )
            raise

        if outcome.findings:
            logger.warning(
                "Run finished with %d violation(s) and %d missing reference(s)",
                outcome.violation_count,
                outcome.missing_count,
            )

        self._emit(
            run_id,
            RunEventType.RUN_COMPLETED,
            {
                "scanned_count": outcome.scanned_count,
                "violation_count": outcome.violation_count,
                "missing_count": outcome.missing_count,
            },
        )
        return outcome

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _runtime_supported(self, run_id: str, engine: CheckEngine) -> bool:
        supported = bool(engine.is_supported_runtime)
        self._emit(run_id, RunEventType.RUNTIME_RESOLVED, {"supported": supported})
        if supported:
            return True

        message = (
            f"Your Java runtime ({engine.runtime_description}) is not supported "
            f"by the forbidden API checker. Please run the checks with a "
            f"supported JDK!"
        )
        if self.policy.fail_on_unsupported_java:
            raise UnsupportedRuntimeError(message)

        logger.warning(message)
        return False

    def _load_signatures(self, run_id: str, engine: CheckEngine) -> None:
        SuppressionRegistry(self._config.SUPPRESS_ANNOTATIONS).register_with(engine)

        sources = SignatureSourceSet.from_config(self._config)
        sources.load_into(engine, self._config.TARGET_VERSION)

        self._emit(
            run_id,
            RunEventType.SIGNATURES_LOADED,
            {"origin_count": len(sources)},
        )

    def _enumerate_classes(self, run_id: str, engine: CheckEngine) -> int:
        logger.info("Loading classes to check...")
        scanned = ClassArtifactCollector.from_config(self._config).add_to(engine)
        self._emit(
            run_id,
            RunEventType.CLASSES_ENUMERATED,
            {"class_count": scanned},
        )
        return scanned

    @staticmethod
    def _run_engine(engine: CheckEngine) -> None:
        try:
            engine.run()
        except Exception as exc:
            raise ViolationError(str(exc)) from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _skip(
        self,
        run_id: str,
        status: RunStatus,
        *,
        supported: bool,
        listener: _RunListener,
    ) -> RunOutcome:
        self.state = RunState.COMPLETED
        outcome = RunOutcome(
            run_id=run_id,
            status=status,
            state=self.state,
            supported=supported,
            scanned_count=0,
            findings=listener.findings,
        )
        self._emit(run_id, RunEventType.RUN_SKIPPED, {"status": status.value})
        return outcome

    def _emit(self, run_id: str, event_type: RunEventType, details: Optional[dict] = None) -> None:
        safe_emit(
            self._emitter,
            RunEvent(run_id=run_id, event_type=event_type, details=details),
        )


def run(
    config: ForbiddenApisConfig,
    engine_factory: EngineFactory,
    *,
    emitter: Optional[EventEmitter] = None,
) -> RunOutcome:
    """Run one verification with ``config`` using engines from ``engine_factory``."""
    return CheckOrchestrator(config, engine_factory, emitter=emitter).run()
