"""
Class artifact collection.

Turns the configured class-file inputs into ClassArtifact values and hands
them to the engine one by one.

Inputs, in enumeration order:
    1. CLASSES_DIR        implicit '**/*.class' include, always applied
    2. CLASS_FILE_SETS
    3. CLASS_FILE_LISTS
    4. CLASS_FILES

With RESTRICT_CLASS_FILENAME (the default) only resources whose name ends
in '.class' are yielded. Without it every resource of every collection is
yielded as-is.

The collector does not decide what an empty result means; that is the
orchestrator's call under the failure policy.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Iterator, List, Optional

from forbidden_apis.app.classpath.loader import CLASS_FILE_SUFFIX
from forbidden_apis.app.config import ForbiddenApisConfig
from forbidden_apis.app.engine.interface import CheckEngine
from forbidden_apis.app.errors import ResourceIOError
from forbidden_apis.app.resources.collections import (
    Resource,
    file_resource,
    iter_file_list,
    iter_file_set,
)
from forbidden_apis.app.schemas.resources import FileList, FileSet

logger = logging.getLogger(__name__)


CLASSES_DIR_INCLUDE = "**/*" + CLASS_FILE_SUFFIX


@dataclass(frozen=True)
class ClassArtifact:
    """
    A compiled class to check.

    The byte content is opened lazily and consumed once by the engine.
    """

    binary_name: str
    opener: Callable[[], BinaryIO]

    def open(self) -> BinaryIO:
        return self.opener()


class ClassArtifactCollector:
    def __init__(
        self,
        *,
        classes_dir: Optional[Path] = None,
        file_sets: Iterable[FileSet] = (),
        file_lists: Iterable[FileList] = (),
        files: Iterable[Path] = (),
        restrict_class_filename: bool = True,
    ) -> None:
        self._file_sets: List[FileSet] = []
        if classes_dir is not None:
            self._file_sets.append(
                FileSet(dir=Path(classes_dir), includes=[CLASSES_DIR_INCLUDE])
            )
        self._file_sets.extend(file_sets)
        self._file_lists = list(file_lists)
        self._files = [Path(f) for f in files]
        self._restrict_class_filename = restrict_class_filename

    @classmethod
    def from_config(cls, config: ForbiddenApisConfig) -> "ClassArtifactCollector":
        return cls(
            classes_dir=config.CLASSES_DIR,
            file_sets=config.CLASS_FILE_SETS,
            file_lists=config.CLASS_FILE_LISTS,
            files=config.CLASS_FILES,
            restrict_class_filename=config.RESTRICT_CLASS_FILENAME,
        )

    def _resources(self) -> Iterator[Resource]:
        for file_set in self._file_sets:
            yield from iter_file_set(file_set)
        for file_list in self._file_lists:
            yield from iter_file_list(file_list)
        for path in self._files:
            yield file_resource(path)

    def __iter__(self) -> Iterator[ClassArtifact]:
        for resource in self._resources():
            if self._restrict_class_filename and not resource.name.endswith(
                CLASS_FILE_SUFFIX
            ):
                continue
            yield ClassArtifact(binary_name=resource.name, opener=resource.open)

    def add_to(self, engine: CheckEngine) -> int:
        """
        Hand every artifact to ``engine``; return how many were added.

        Raises ResourceIOError naming the artifact that could not be read.
        """
        count = 0
        for artifact in self:
            try:
                with artifact.open() as stream:
                    engine.add_class_to_check(stream, artifact.binary_name)
            except OSError as exc:
                raise ResourceIOError(
                    f"Failed to load one of the given class files: "
                    f"{artifact.binary_name}: {exc}",
                    resource=artifact.binary_name,
                ) from exc
            count += 1
        return count
