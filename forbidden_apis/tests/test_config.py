import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.schemas.resources import BundledSignatureRef


def test_defaults():
    config = ForbiddenApisConfig()

    assert config.CLASSPATH == []
    assert config.TARGET_VERSION is None
    assert config.FAIL_ON_UNSUPPORTED_JAVA is False
    assert config.FAIL_ON_MISSING_CLASSES is True
    assert config.FAIL_ON_UNRESOLVABLE_SIGNATURES is True
    assert config.FAIL_ON_VIOLATION is True
    assert config.IGNORE_EMPTY_FILE_SET is False
    assert config.RESTRICT_CLASS_FILENAME is True
    assert config.DISABLE_CLASSLOADING_CACHE is False
    assert config.INTERNAL_RUNTIME_FORBIDDEN is False


def test_config_is_frozen():
    config = ForbiddenApisConfig()

    with pytest.raises(ValidationError):
        config.FAIL_ON_VIOLATION = False


def test_blank_target_version_is_unset():
    assert ForbiddenApisConfig(TARGET_VERSION="  ").TARGET_VERSION is None


def test_blank_suppress_annotation_is_rejected():
    with pytest.raises(ValidationError):
        ForbiddenApisConfig(SUPPRESS_ANNOTATIONS=["com.example.Ok", " "])


def test_bundled_reference_parsing():
    assert BundledSignatureRef.parse("jdk-unsafe@11") == BundledSignatureRef(
        name="jdk-unsafe", target_version="11"
    )
    assert BundledSignatureRef.parse("commons-io-unsafe") == BundledSignatureRef(
        name="commons-io-unsafe"
    )
    assert BundledSignatureRef.parse("").name is None


def test_from_env(monkeypatch, tmp_path):
    lib_a = tmp_path / "a.jar"
    lib_b = tmp_path / "b"
    monkeypatch.setenv("FORBIDDEN_APIS_CLASSPATH", os.pathsep.join([str(lib_a), str(lib_b)]))
    monkeypatch.setenv("FORBIDDEN_APIS_CLASSES_DIR", str(tmp_path / "classes"))
    monkeypatch.setenv("FORBIDDEN_APIS_SIGNATURES", "java.lang.System#exit(int)")
    monkeypatch.setenv("FORBIDDEN_APIS_BUNDLED_SIGNATURES", "jdk-unsafe@11, jdk-deprecated")
    monkeypatch.setenv("FORBIDDEN_APIS_SUPPRESS_ANNOTATIONS", "a.Suppress,b.Suppress")
    monkeypatch.setenv("FORBIDDEN_APIS_TARGET_VERSION", "17")
    monkeypatch.setenv("FORBIDDEN_APIS_FAIL_ON_VIOLATION", "false")
    monkeypatch.setenv("FORBIDDEN_APIS_IGNORE_EMPTY_FILE_SET", "yes")

    config = ForbiddenApisConfig.from_env()

    assert config.CLASSPATH == [lib_a, lib_b]
    assert config.CLASSES_DIR == Path(tmp_path / "classes")
    assert config.SIGNATURES == ["java.lang.System#exit(int)"]
    assert config.BUNDLED_SIGNATURES == [
        BundledSignatureRef(name="jdk-unsafe", target_version="11"),
        BundledSignatureRef(name="jdk-deprecated"),
    ]
    assert config.SUPPRESS_ANNOTATIONS == ["a.Suppress", "b.Suppress"]
    assert config.TARGET_VERSION == "17"
    assert config.FAIL_ON_VIOLATION is False
    assert config.IGNORE_EMPTY_FILE_SET is True
    assert config.FAIL_ON_MISSING_CLASSES is True
