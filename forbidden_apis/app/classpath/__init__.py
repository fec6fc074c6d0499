from .loader import (
    CLASS_FILE_SUFFIX,
    ClassLoader,
    ClasspathClassLoader,
    SystemClassLoader,
    class_resource_name,
    get_system_class_loader,
)
from .context import ClassResolutionContext

__all__ = [
    "CLASS_FILE_SUFFIX",
    "ClassLoader",
    "ClassResolutionContext",
    "ClasspathClassLoader",
    "SystemClassLoader",
    "class_resource_name",
    "get_system_class_loader",
]
