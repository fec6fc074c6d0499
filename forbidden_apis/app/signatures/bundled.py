from __future__ import annotations

import logging
from typing import Optional

from forbidden_apis.app.engine.interface import JDK_BUNDLE_PREFIX
from forbidden_apis.app.errors import ConfigurationError

logger = logging.getLogger(__name__)


MISSING_TARGET_VERSION_WARNING = (
    "The 'targetVersion' parameter is missing. "
    "Trying to read bundled JDK signatures without compiler target. "
    "You have to explicitly specify the version in the resource name."
)


def is_jdk_bundle(name: str) -> bool:
    return name.startswith(JDK_BUNDLE_PREFIX)


def resolve_bundled_version(
    name: Optional[str],
    target_version: Optional[str] = None,
    default_target_version: Optional[str] = None,
) -> Optional[str]:
    """
    Return the version to pass to the engine for bundled signatures ``name``.

    A per-reference ``target_version`` wins over ``default_target_version``
    and is only accepted for JDK bundles. An unresolved version on a JDK
    bundle is passed through as None after a warning; the engine then
    expands the name on a best-effort basis.
    """
    if not name:
        raise ConfigurationError(
            "Bundled signatures reference is missing name: it must have the "
            "mandatory attribute 'name' referring to a bundled signatures file"
        )

    if target_version is not None and not is_jdk_bundle(name):
        raise ConfigurationError(
            f"Cannot supply a targetVersion for non-JDK signatures '{name}': "
            f"targetVersion only valid for '{JDK_BUNDLE_PREFIX}' prefixed bundles"
        )

    version = target_version if target_version is not None else default_target_version

    if version is None and is_jdk_bundle(name):
        logger.warning("%s (bundled signatures: %s)", MISSING_TARGET_VERSION_WARNING, name)

    return version
