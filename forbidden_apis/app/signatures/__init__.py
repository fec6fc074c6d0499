from .bundled import is_jdk_bundle, resolve_bundled_version
from .source_set import NO_SIGNATURES_MESSAGE, SignatureSourceSet
from .suppression import SuppressionRegistry

__all__ = [
    "NO_SIGNATURES_MESSAGE",
    "SignatureSourceSet",
    "SuppressionRegistry",
    "is_jdk_bundle",
    "resolve_bundled_version",
]
