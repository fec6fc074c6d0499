"""
Error taxonomy of a verification run.

Every aborting condition surfaces to the caller as exactly one of these
exceptions, carrying a human-readable message and, where available, the
originating cause (``__cause__``).

- ConfigurationError:      malformed, missing or contradictory configuration.
                           Always fatal, never gated by the failure policy.
- ResourceIOError:         a signature or class resource could not be read.
                           Always fatal. A ConfigurationError subtype.
- UnsupportedRuntimeError: the engine cannot read the host runtime's class
                           format. Fatal only with FAIL_ON_UNSUPPORTED_JAVA.
- ViolationError:          the engine reported a violation, missing class or
                           unresolvable signature condition it was configured
                           to fail on.
"""

from __future__ import annotations

from typing import Optional


class ForbiddenApisError(RuntimeError):
    """Base class for every error that aborts a verification run."""


class ConfigurationError(ForbiddenApisError):
    pass


class ResourceIOError(ConfigurationError):
    """
    A signature file or class file could not be opened or read.

    ``resource`` names the offending resource when it is known.
    """

    def __init__(self, message: str, resource: Optional[str] = None) -> None:
        super().__init__(message)
        self.resource = resource


class UnsupportedRuntimeError(ForbiddenApisError):
    """Environment error: the host runtime is not supported by the engine."""


class ViolationError(ForbiddenApisError):
    pass


__all__ = [
    "ConfigurationError",
    "ForbiddenApisError",
    "ResourceIOError",
    "UnsupportedRuntimeError",
    "ViolationError",
]
