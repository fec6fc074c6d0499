"""
Configuration of one verification run.

A single immutable object carries every input of a run: where the classes
to check live, which classpath resolves their references, which signature
sources define the forbidden APIs, and the failure policy switches.

The caller builds it once and hands it to ``run(config, engine_factory)``.
Nothing here is mutated while the run executes.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from forbidden_apis.app.schemas.resources import (
    BundledSignatureRef,
    FileList,
    FileSet,
)


ENV_PREFIX = "FORBIDDEN_APIS_"


class ForbiddenApisConfig(BaseModel):
    """
    Run configuration for the forbidden API verifier.

    Flag defaults match the documented task defaults.
    """

    # ------------------------------------------------------------------
    # Class resolution
    # ------------------------------------------------------------------

    CLASSPATH: List[Path] = Field(
        default_factory=list,
        description=(
            "Directories and jar/zip archives used to resolve referenced "
            "types. Empty means the system class loader is used directly."
        ),
    )

    # ------------------------------------------------------------------
    # Classes to check
    # ------------------------------------------------------------------

    CLASSES_DIR: Optional[Path] = Field(
        None,
        description=(
            "Convenience input: every '**/*.class' file below this "
            "directory, regardless of RESTRICT_CLASS_FILENAME"
        ),
    )

    CLASS_FILES: List[Path] = Field(
        default_factory=list,
        description="Individual class files",
    )

    CLASS_FILE_SETS: List[FileSet] = Field(
        default_factory=list,
        description="Pattern-based class file collections",
    )

    CLASS_FILE_LISTS: List[FileList] = Field(
        default_factory=list,
        description="Explicit class file lists",
    )

    # ------------------------------------------------------------------
    # Signature sources
    # ------------------------------------------------------------------

    SIGNATURES: List[str] = Field(
        default_factory=list,
        description="Inline signature text blocks",
    )

    SIGNATURES_FILES: List[Path] = Field(
        default_factory=list,
        description="Signature files",
    )

    SIGNATURES_FILE_SETS: List[FileSet] = Field(
        default_factory=list,
        description="Pattern-based signature file collections",
    )

    SIGNATURES_FILE_LISTS: List[FileList] = Field(
        default_factory=list,
        description="Explicit signature file lists",
    )

    BUNDLED_SIGNATURES: List[BundledSignatureRef] = Field(
        default_factory=list,
        description="Bundled signature sets shipped with the engine",
    )

    TARGET_VERSION: Optional[str] = Field(
        None,
        description=(
            "Default compiler target version used to expand JDK bundled "
            "signatures such as 'jdk-deprecated'"
        ),
    )

    SUPPRESS_ANNOTATIONS: List[str] = Field(
        default_factory=list,
        description=(
            "Fully qualified annotation class names that suppress "
            "reporting on classes, methods and fields"
        ),
    )

    # ------------------------------------------------------------------
    # Failure policy
    # ------------------------------------------------------------------

    FAIL_ON_UNSUPPORTED_JAVA: bool = Field(
        False,
        description="Abort when the engine cannot read the runtime's class format",
    )

    FAIL_ON_MISSING_CLASSES: bool = Field(
        True,
        description="Fail when a referenced class cannot be resolved",
    )

    FAIL_ON_UNRESOLVABLE_SIGNATURES: bool = Field(
        True,
        description="Fail when a signature does not resolve",
    )

    FAIL_ON_VIOLATION: bool = Field(
        True,
        description="Fail when forbidden API usage is found",
    )

    IGNORE_EMPTY_FILE_SET: bool = Field(
        False,
        description="Warn and skip instead of failing when no class files are found",
    )

    RESTRICT_CLASS_FILENAME: bool = Field(
        True,
        description="Only consider resources whose name ends in '.class'",
    )

    DISABLE_CLASSLOADING_CACHE: bool = Field(
        False,
        description="Ask the engine not to cache classes read from the classpath",
    )

    INTERNAL_RUNTIME_FORBIDDEN: bool = Field(
        False,
        description=(
            "Deprecated. Adds the 'jdk-non-portable' bundled signatures."
        ),
    )

    # ------------------------------------------------------------------
    # Validators (Pydantic v2)
    # ------------------------------------------------------------------

    @field_validator("TARGET_VERSION")
    @classmethod
    def blank_target_version_is_unset(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @field_validator("SUPPRESS_ANNOTATIONS")
    @classmethod
    def annotation_names_not_blank(cls, v: List[str]) -> List[str]:
        names = [name.strip() for name in v]
        if any(not name for name in names):
            raise ValueError("SUPPRESS_ANNOTATIONS entries must not be blank")
        return names

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "ForbiddenApisConfig":
        """
        Load configuration from FORBIDDEN_APIS_* environment variables.

        Path lists are os.pathsep-separated. Bundled signatures and
        suppression annotations are comma-separated; a bundled entry may
        carry a version as ``name@version``.
        """

        def env(name: str) -> Optional[str]:
            return os.getenv(ENV_PREFIX + name)

        def env_bool(name: str, default: bool) -> bool:
            raw = env(name)
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        def env_paths(name: str) -> List[Path]:
            raw = env(name) or ""
            return [Path(p) for p in raw.split(os.pathsep) if p.strip()]

        def env_csv(name: str) -> List[str]:
            raw = env(name) or ""
            return [item.strip() for item in raw.split(",") if item.strip()]

        classes_dir = env("CLASSES_DIR")
        inline = env("SIGNATURES")

        return cls(
            CLASSPATH=env_paths("CLASSPATH"),
            CLASSES_DIR=Path(classes_dir) if classes_dir else None,
            CLASS_FILES=env_paths("CLASS_FILES"),
            SIGNATURES=[inline] if inline else [],
            SIGNATURES_FILES=env_paths("SIGNATURES_FILES"),
            BUNDLED_SIGNATURES=[
                BundledSignatureRef.parse(item)
                for item in env_csv("BUNDLED_SIGNATURES")
            ],
            TARGET_VERSION=env("TARGET_VERSION"),
            SUPPRESS_ANNOTATIONS=env_csv("SUPPRESS_ANNOTATIONS"),
            FAIL_ON_UNSUPPORTED_JAVA=env_bool("FAIL_ON_UNSUPPORTED_JAVA", False),
            FAIL_ON_MISSING_CLASSES=env_bool("FAIL_ON_MISSING_CLASSES", True),
            FAIL_ON_UNRESOLVABLE_SIGNATURES=env_bool(
                "FAIL_ON_UNRESOLVABLE_SIGNATURES", True
            ),
            FAIL_ON_VIOLATION=env_bool("FAIL_ON_VIOLATION", True),
            IGNORE_EMPTY_FILE_SET=env_bool("IGNORE_EMPTY_FILE_SET", False),
            RESTRICT_CLASS_FILENAME=env_bool("RESTRICT_CLASS_FILENAME", True),
            DISABLE_CLASSLOADING_CACHE=env_bool(
                "DISABLE_CLASSLOADING_CACHE", False
            ),
            INTERNAL_RUNTIME_FORBIDDEN=env_bool(
                "INTERNAL_RUNTIME_FORBIDDEN", False
            ),
        )

    model_config = {
        "frozen": True,
    }
