"""
Aggregation of every signature source of a run.

Origins are deduplicated by value and fed to the engine in a fixed order:

    1. bundled signature references (declaration order)
    2. the deprecated 'internal runtime forbidden' bundle, if enabled
    3. inline text and signature file resources (declaration order)

Loading is all-or-nothing: the first unreadable file or unparsable source
aborts the run with a ConfigurationError, and a run that ends up with no
signatures at all is rejected regardless of the failure policy.
"""

from __future__ import annotations

import io
import logging
from typing import Iterable, Iterator, List, Optional

from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.engine.interface import (
    BS_JDK_NONPORTABLE,
    DEPRECATED_WARN_INTERNALRUNTIME,
    CheckEngine,
    SignatureParseError,
)
from forbidden_apis.app.errors import ConfigurationError, ResourceIOError
from forbidden_apis.app.resources.collections import (
    iter_file_list,
    iter_file_set,
)
from forbidden_apis.app.schemas.signatures import (
    SignatureOrigin,
    SignatureOriginKind,
)
from forbidden_apis.app.signatures.bundled import resolve_bundled_version

logger = logging.getLogger(__name__)


NO_SIGNATURES_MESSAGE = (
    "No API signatures found, no signatures supplied; use SIGNATURES, "
    "SIGNATURES_FILES, SIGNATURES_FILE_SETS, SIGNATURES_FILE_LISTS or "
    "BUNDLED_SIGNATURES to define those!"
)


class SignatureSourceSet:
    def __init__(
        self,
        origins: Iterable[SignatureOrigin] = (),
        *,
        internal_runtime_forbidden: bool = False,
    ) -> None:
        self._origins: dict[SignatureOrigin, None] = {}
        for origin in origins:
            self.add(origin)
        self._internal_runtime_forbidden = internal_runtime_forbidden

    @classmethod
    def from_config(cls, config: ForbiddenApisConfig) -> "SignatureSourceSet":
        """
        Collect every signature origin named by ``config``.

        File sets are expanded here, so a missing file-set directory is
        reported as a ResourceIOError.
        """
        origins: List[SignatureOrigin] = [
            SignatureOrigin.bundled(ref.name, ref.target_version)
            for ref in config.BUNDLED_SIGNATURES
        ]
        origins.extend(SignatureOrigin.inline(text) for text in config.SIGNATURES)
        origins.extend(
            SignatureOrigin.file_resource(path) for path in config.SIGNATURES_FILES
        )
        for file_set in config.SIGNATURES_FILE_SETS:
            origins.extend(
                SignatureOrigin.file_resource(r.path, str(r))
                for r in iter_file_set(file_set)
            )
        for file_list in config.SIGNATURES_FILE_LISTS:
            origins.extend(
                SignatureOrigin.file_resource(r.path, str(r))
                for r in iter_file_list(file_list)
            )

        return cls(
            origins,
            internal_runtime_forbidden=config.INTERNAL_RUNTIME_FORBIDDEN,
        )

    def add(self, origin: SignatureOrigin) -> None:
        self._origins[origin] = None

    def __iter__(self) -> Iterator[SignatureOrigin]:
        return iter(self._origins)

    def __len__(self) -> int:
        return len(self._origins)

    def bundled(self) -> List[SignatureOrigin]:
        return [
            o for o in self._origins if o.kind is SignatureOriginKind.BUNDLED_NAME
        ]

    def textual(self) -> List[SignatureOrigin]:
        return [
            o for o in self._origins if o.kind is not SignatureOriginKind.BUNDLED_NAME
        ]

    @property
    def adds_internal_runtime_bundle(self) -> bool:
        """
        True when the deprecated flag will add 'jdk-non-portable'.

        An explicit reference to the same bundle takes precedence.
        """
        if not self._internal_runtime_forbidden:
            return False
        return not any(o.name == BS_JDK_NONPORTABLE for o in self.bundled())

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_into(
        self,
        engine: CheckEngine,
        default_target_version: Optional[str] = None,
    ) -> None:
        try:
            for origin in self.bundled():
                version = resolve_bundled_version(
                    origin.name,
                    origin.target_version,
                    default_target_version,
                )
                engine.add_bundled_signatures(origin.name, version)

            if self._internal_runtime_forbidden:
                logger.warning(DEPRECATED_WARN_INTERNALRUNTIME)
                if self.adds_internal_runtime_bundle:
                    engine.add_bundled_signatures(BS_JDK_NONPORTABLE, None)

            for origin in self.textual():
                self._load_textual(engine, origin)

        except OSError as exc:
            raise ResourceIOError(
                f"IO problem while reading files with API signatures: {exc}"
            ) from exc
        except SignatureParseError as exc:
            raise ConfigurationError(f"Parsing signatures failed: {exc}") from exc

        if engine.has_no_signatures():
            raise ConfigurationError(NO_SIGNATURES_MESSAGE)

    @staticmethod
    def _load_textual(engine: CheckEngine, origin: SignatureOrigin) -> None:
        if origin.kind is SignatureOriginKind.INLINE:
            text = origin.content or ""
            if text.strip():
                engine.parse_signatures_string(text)
            return

        name = origin.describe()
        try:
            data = origin.path.read_bytes()
        except OSError as exc:
            raise ResourceIOError(
                f"IO problem while reading files with API signatures: "
                f"{name}: {exc}",
                resource=name,
            ) from exc
        engine.parse_signatures_file(io.BytesIO(data), name)
