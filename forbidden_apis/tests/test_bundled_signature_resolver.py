"""
Tests for bundled signature version resolution.

Coverage matrix:

  name missing / blank                          → ConfigurationError
  per-reference version on non-JDK bundle       → ConfigurationError (with or without default)
  per-reference version on JDK bundle           → wins over default
  no per-reference version                      → default passed through
  JDK bundle, no version at all                 → warning, None
  non-JDK bundle, no version at all             → no warning, None
"""

import logging

import pytest

from forbidden_apis.app.errors import ConfigurationError
from forbidden_apis.app.signatures.bundled import (
    is_jdk_bundle,
    resolve_bundled_version,
)


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_is_rejected(name):
    with pytest.raises(ConfigurationError, match="missing name"):
        resolve_bundled_version(name, None, "11")


@pytest.mark.parametrize("default", [None, "11"])
def test_target_version_on_non_jdk_bundle_is_rejected(default):
    with pytest.raises(ConfigurationError, match="targetVersion only valid"):
        resolve_bundled_version("commons-io-unsafe", "2.5", default)


def test_per_reference_version_wins_over_default():
    assert resolve_bundled_version("jdk-deprecated", "1.8", "17") == "1.8"


def test_default_version_is_used_without_per_reference_version():
    assert resolve_bundled_version("jdk-unsafe", None, "17") == "17"


def test_default_version_passes_through_for_non_jdk_bundle():
    assert resolve_bundled_version("commons-io-unsafe", None, "17") == "17"


def test_unversioned_jdk_bundle_warns_and_returns_none(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve_bundled_version("jdk-deprecated") is None

    assert any(
        "'targetVersion' parameter is missing" in r.getMessage()
        for r in caplog.records
    )


def test_unversioned_non_jdk_bundle_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING):
        assert resolve_bundled_version("commons-io-unsafe") is None

    assert caplog.records == []


def test_resolution_is_idempotent():
    first = resolve_bundled_version("jdk-system-out", None, "11")
    second = resolve_bundled_version("jdk-system-out", None, "11")
    assert first == second == "11"


def test_jdk_prefix_detection():
    assert is_jdk_bundle("jdk-internal")
    assert not is_jdk_bundle("jdkinternal")
    assert not is_jdk_bundle("commons-io-unsafe")
