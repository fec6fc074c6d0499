"""Command line entry point: check class files for calls to forbidden APIs."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pydantic import ValidationError

from forbidden_apis.app.config import ENV_PREFIX, ForbiddenApisConfig
from forbidden_apis.app.coordinator.orchestrator import run
from forbidden_apis.app.engine.loading import load_engine_factory
from forbidden_apis.app.errors import ForbiddenApisError, ViolationError
from forbidden_apis.app.schemas.resources import BundledSignatureRef

logger = logging.getLogger("forbidden_apis")

EXIT_OK = 0
EXIT_VIOLATION = 1
EXIT_CONFIG = 2

ENGINE_ENV = ENV_PREFIX + "ENGINE"

# argparse dest -> config field, for the tri-state boolean switches
FLAG_FIELDS = {
    "fail_on_unsupported_java": "FAIL_ON_UNSUPPORTED_JAVA",
    "fail_on_missing_classes": "FAIL_ON_MISSING_CLASSES",
    "fail_on_unresolvable_signatures": "FAIL_ON_UNRESOLVABLE_SIGNATURES",
    "fail_on_violation": "FAIL_ON_VIOLATION",
    "ignore_empty_file_set": "IGNORE_EMPTY_FILE_SET",
    "restrict_class_filename": "RESTRICT_CLASS_FILENAME",
    "disable_classloading_cache": "DISABLE_CLASSLOADING_CACHE",
    "internal_runtime_forbidden": "INTERNAL_RUNTIME_FORBIDDEN",
}


def _path_list(value: str) -> List[Path]:
    return [Path(p) for p in value.split(os.pathsep) if p.strip()]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="forbidden-apis",
        description="Check compiled class files for calls to forbidden APIs.",
    )
    parser.add_argument(
        "--engine",
        default=os.environ.get(ENGINE_ENV),
        help=f"Engine factory as 'module:factory' (default: env {ENGINE_ENV}).",
    )
    parser.add_argument(
        "--from-env",
        action="store_true",
        help=f"Seed the configuration from {ENV_PREFIX}* environment variables.",
    )
    parser.add_argument(
        "-c",
        "--classpath",
        action="append",
        type=_path_list,
        default=[],
        help=f"Classpath entries, '{os.pathsep}'-separated. Repeatable.",
    )
    parser.add_argument(
        "-d",
        "--dir",
        type=Path,
        default=None,
        help="Directory scanned for '**/*.class' files.",
    )
    parser.add_argument(
        "--class-file",
        action="append",
        type=Path,
        default=[],
        help="Individual class file to check. Repeatable.",
    )
    parser.add_argument(
        "-s",
        "--signatures",
        action="append",
        default=[],
        help="Inline signature text. Repeatable.",
    )
    parser.add_argument(
        "-f",
        "--signatures-file",
        action="append",
        type=Path,
        default=[],
        help="Signature file. Repeatable.",
    )
    parser.add_argument(
        "-b",
        "--bundled-signatures",
        action="append",
        default=[],
        help="Bundled signatures name, optionally 'name@version'. Repeatable.",
    )
    parser.add_argument(
        "--suppress-annotation",
        action="append",
        default=[],
        help="Annotation class name that suppresses reporting. Repeatable.",
    )
    parser.add_argument(
        "--target-version",
        default=None,
        help="Default target version for JDK bundled signatures.",
    )
    for dest, field_name in FLAG_FIELDS.items():
        parser.add_argument(
            "--" + dest.replace("_", "-"),
            dest=dest,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=ForbiddenApisConfig.model_fields[field_name].description,
        )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> ForbiddenApisConfig:
    base = ForbiddenApisConfig.from_env() if args.from_env else ForbiddenApisConfig()
    values: Dict[str, Any] = base.model_dump()

    classpath = [p for group in args.classpath for p in group]
    values["CLASSPATH"] = [*values["CLASSPATH"], *classpath]
    if args.dir is not None:
        values["CLASSES_DIR"] = args.dir
    values["CLASS_FILES"] = [*values["CLASS_FILES"], *args.class_file]
    values["SIGNATURES"] = [*values["SIGNATURES"], *args.signatures]
    values["SIGNATURES_FILES"] = [*values["SIGNATURES_FILES"], *args.signatures_file]
    values["BUNDLED_SIGNATURES"] = [
        *values["BUNDLED_SIGNATURES"],
        *(BundledSignatureRef.parse(b).model_dump() for b in args.bundled_signatures),
    ]
    values["SUPPRESS_ANNOTATIONS"] = [
        *values["SUPPRESS_ANNOTATIONS"],
        *args.suppress_annotation,
    ]
    if args.target_version is not None:
        values["TARGET_VERSION"] = args.target_version

    for dest, field_name in FLAG_FIELDS.items():
        flag = getattr(args, dest)
        if flag is not None:
            values[field_name] = flag

    return ForbiddenApisConfig.model_validate(values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.engine:
        logger.error("no engine configured: pass --engine or set %s", ENGINE_ENV)
        return EXIT_CONFIG

    try:
        config = build_config(args)
    except ValidationError as exc:
        logger.error("invalid configuration: %s", exc)
        return EXIT_CONFIG

    try:
        engine_factory = load_engine_factory(args.engine)
        outcome = run(config, engine_factory)
    except ViolationError as exc:
        logger.error("%s", exc)
        return EXIT_VIOLATION
    except ForbiddenApisError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG

    logger.info(
        "status=%s scanned=%d violations=%d missing=%d",
        outcome.status.value,
        outcome.scanned_count,
        outcome.violation_count,
        outcome.missing_count,
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
