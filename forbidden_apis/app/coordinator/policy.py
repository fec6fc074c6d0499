from __future__ import annotations

from typing import FrozenSet

from pydantic import BaseModel, ConfigDict

from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.engine.interface import EngineOption


class FailurePolicy(BaseModel):
    """
    Failure switches consulted at each decision point of a run.

    Two switches are decided by the orchestrator itself
    (``fail_on_unsupported_java``, ``ignore_empty_file_set``); the rest are
    forwarded to the engine as options and decided there.
    """

    fail_on_unsupported_java: bool = False
    fail_on_missing_classes: bool = True
    fail_on_unresolvable_signatures: bool = True
    fail_on_violation: bool = True
    ignore_empty_file_set: bool = False
    disable_classloading_cache: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def from_config(cls, config: ForbiddenApisConfig) -> "FailurePolicy":
        return cls(
            fail_on_unsupported_java=config.FAIL_ON_UNSUPPORTED_JAVA,
            fail_on_missing_classes=config.FAIL_ON_MISSING_CLASSES,
            fail_on_unresolvable_signatures=config.FAIL_ON_UNRESOLVABLE_SIGNATURES,
            fail_on_violation=config.FAIL_ON_VIOLATION,
            ignore_empty_file_set=config.IGNORE_EMPTY_FILE_SET,
            disable_classloading_cache=config.DISABLE_CLASSLOADING_CACHE,
        )

    def engine_options(self) -> FrozenSet[EngineOption]:
        options = set()
        if self.fail_on_missing_classes:
            options.add(EngineOption.FAIL_ON_MISSING_CLASSES)
        if self.fail_on_violation:
            options.add(EngineOption.FAIL_ON_VIOLATION)
        if self.fail_on_unresolvable_signatures:
            options.add(EngineOption.FAIL_ON_UNRESOLVABLE_SIGNATURES)
        if self.disable_classloading_cache:
            options.add(EngineOption.DISABLE_CLASSLOADING_CACHE)
        return frozenset(options)
