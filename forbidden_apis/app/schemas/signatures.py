from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignatureOriginKind(str, Enum):
    INLINE = "inline"
    FILE_RESOURCE = "file_resource"
    BUNDLED_NAME = "bundled_name"


class SignatureOrigin(BaseModel):
    """
    One source of forbidden signatures.

    Exactly one of ``content`` (inline), ``path`` (file resource) or
    ``name`` (bundled) is meaningful, depending on ``kind``. Origins are
    immutable and hashable; equal origins collapse into one.
    """

    kind: SignatureOriginKind

    content: Optional[str] = Field(None, description="Inline signature text")

    path: Optional[Path] = Field(None, description="Signature file on disk")

    resource_name: Optional[str] = Field(
        None,
        description="Name reported to the engine for a file resource",
    )

    name: Optional[str] = Field(None, description="Bundled signatures name")

    target_version: Optional[str] = Field(
        None,
        description="Declared per-origin target version (bundled only)",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def inline(cls, text: str) -> "SignatureOrigin":
        return cls(kind=SignatureOriginKind.INLINE, content=text)

    @classmethod
    def file_resource(
        cls, path: Path, resource_name: Optional[str] = None
    ) -> "SignatureOrigin":
        return cls(
            kind=SignatureOriginKind.FILE_RESOURCE,
            path=Path(path),
            resource_name=resource_name or str(path),
        )

    @classmethod
    def bundled(
        cls, name: Optional[str], target_version: Optional[str] = None
    ) -> "SignatureOrigin":
        return cls(
            kind=SignatureOriginKind.BUNDLED_NAME,
            name=name,
            target_version=target_version,
        )

    def describe(self) -> str:
        if self.kind is SignatureOriginKind.INLINE:
            return "inline signatures"
        if self.kind is SignatureOriginKind.FILE_RESOURCE:
            return self.resource_name or str(self.path)
        if self.target_version:
            return f"bundled:{self.name}@{self.target_version}"
        return f"bundled:{self.name}"
