"""
Enumeration of resource collections (file sets, file lists, plain files).

Enumeration is lazy and deterministic: file sets yield matching files in
sorted relative-path order, file lists yield in declaration order. Opening
a resource is deferred until a consumer asks for its bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from forbidden_apis.app.errors import ResourceIOError
from forbidden_apis.app.resources.patterns import is_selected
from forbidden_apis.app.schemas.resources import FileList, FileSet


@dataclass(frozen=True)
class Resource:
    """A named file resource. ``name`` is relative to its collection."""

    name: str
    path: Path

    def open(self) -> BinaryIO:
        return self.path.open("rb")

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()

    def __str__(self) -> str:
        return str(self.path)


def iter_file_set(file_set: FileSet) -> Iterator[Resource]:
    base = Path(file_set.dir)
    if not base.is_dir():
        raise ResourceIOError(
            f"File set directory {base} does not exist or is not a directory",
            resource=str(base),
        )

    try:
        candidates = sorted(
            (p for p in base.rglob("*") if p.is_file()),
            key=lambda p: p.relative_to(base).as_posix(),
        )
    except OSError as exc:
        raise ResourceIOError(
            f"Failed to scan file set directory {base}: {exc}",
            resource=str(base),
        ) from exc
    for path in candidates:
        relative = path.relative_to(base).as_posix()
        if is_selected(relative, file_set.includes, file_set.excludes):
            yield Resource(name=relative, path=path)


def iter_file_list(file_list: FileList) -> Iterator[Resource]:
    base = Path(file_list.dir)
    for name in file_list.files:
        yield Resource(name=name.replace("\\", "/"), path=base / name)


def file_resource(path: Path) -> Resource:
    path = Path(path)
    return Resource(name=path.as_posix(), path=path)
