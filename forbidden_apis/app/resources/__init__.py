from .collections import Resource, file_resource, iter_file_list, iter_file_set
from .collector import ClassArtifact, ClassArtifactCollector
from .patterns import compile_pattern, is_selected, match_path

__all__ = [
    "ClassArtifact",
    "ClassArtifactCollector",
    "Resource",
    "compile_pattern",
    "file_resource",
    "is_selected",
    "iter_file_list",
    "iter_file_set",
    "match_path",
]
