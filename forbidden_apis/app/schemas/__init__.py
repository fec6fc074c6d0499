from .resources import BundledSignatureRef, FileList, FileSet
from .signatures import SignatureOrigin, SignatureOriginKind
from .outcome import (
    CheckFinding,
    FindingKind,
    RunOutcome,
    RunState,
    RunStatus,
)

__all__ = [
    "BundledSignatureRef",
    "CheckFinding",
    "FileList",
    "FileSet",
    "FindingKind",
    "RunOutcome",
    "RunState",
    "RunStatus",
    "SignatureOrigin",
    "SignatureOriginKind",
]
