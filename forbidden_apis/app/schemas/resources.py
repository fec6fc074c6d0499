"""
Resource collection schemas.

These are the nested configuration objects a caller uses to describe
where class files and signature files live. They carry no behaviour;
enumeration happens in ``forbidden_apis.app.resources``.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileSet(BaseModel):
    """
    All files below ``dir`` matching one of ``includes`` and none of
    ``excludes``.

    Patterns are Ant-style and relative to ``dir``: ``**`` spans any number
    of directories, ``*`` and ``?`` stay within one path segment.
    """

    dir: Path = Field(..., description="Base directory of the file set")

    includes: List[str] = Field(
        default_factory=lambda: ["**"],
        description="Include patterns (default: every file)",
    )

    excludes: List[str] = Field(
        default_factory=list,
        description="Exclude patterns",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class FileList(BaseModel):
    """An explicit, ordered list of file names relative to ``dir``."""

    dir: Path = Field(..., description="Base directory of the file list")

    files: List[str] = Field(
        default_factory=list,
        description="File names, relative to dir",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


class BundledSignatureRef(BaseModel):
    """
    Reference to a named signature set shipped with the engine.

    ``name`` is optional here on purpose: a missing name is reported as a
    configuration error when the run loads its signatures, not when the
    configuration object is built.
    """

    name: Optional[str] = Field(
        None,
        description="Bundled signatures name, e.g. 'jdk-deprecated'",
    )

    target_version: Optional[str] = Field(
        None,
        description="Per-reference target version (JDK bundles only)",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("name", "target_version")
    @classmethod
    def blank_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @classmethod
    def parse(cls, text: str) -> "BundledSignatureRef":
        """Parse ``name`` or ``name@version``."""
        name, _, version = text.partition("@")
        return cls(name=name, target_version=version or None)


__all__ = [
    "BundledSignatureRef",
    "FileList",
    "FileSet",
]
