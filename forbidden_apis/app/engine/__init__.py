from .interface import (
    BS_JDK_NONPORTABLE,
    DEPRECATED_WARN_INTERNALRUNTIME,
    JDK_BUNDLE_PREFIX,
    CheckEngine,
    CheckListener,
    EngineFactory,
    EngineOption,
    ForbiddenApiError,
    SignatureParseError,
)
from .loading import load_engine_factory

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
    "load_engine_factory",
]
