"""
Class loaders used to resolve types referenced by the checked code.

A loader answers one question: "what are the bytes of resource X?", where
X is a class-file resource name such as ``java/lang/String.class``.
Delegation is parent-first: a loader asks its parent before searching its
own classpath entries.

Two implementations exist:

- SystemClassLoader:    the platform fallback. Its entries come from the
                        ``CLASSPATH`` environment variable. It holds no
                        open handles and is never closed.
- ClasspathClassLoader: scoped to exactly the classpath given for one run.
                        Archive entries (jar/zip) are opened lazily and
                        kept open until ``close()``.

The host process's own import machinery is never consulted.
"""

from __future__ import annotations

import logging
import os
import zipfile
from pathlib import Path
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

CLASS_FILE_SUFFIX = ".class"


def class_resource_name(binary_name: str) -> str:
    """``java.lang.String`` -> ``java/lang/String.class``"""
    return binary_name.replace(".", "/") + CLASS_FILE_SUFFIX


def _read_from_directory(entry: Path, name: str) -> Optional[bytes]:
    candidate = entry.joinpath(*name.split("/"))
    if not candidate.is_file():
        return None
    return candidate.read_bytes()


def _read_from_archive(archive: zipfile.ZipFile, name: str) -> Optional[bytes]:
    try:
        return archive.read(name)
    except KeyError:
        return None


class ClassLoader:
    """Base loader: parent-first delegation, no entries of its own."""

    def __init__(self, parent: Optional["ClassLoader"] = None) -> None:
        self.parent = parent

    def get_resource(self, name: str) -> Optional[bytes]:
        if self.parent is not None:
            data = self.parent.get_resource(name)
            if data is not None:
                return data
        return self.find_resource(name)

    def find_resource(self, name: str) -> Optional[bytes]:
        return None

    def load_class_bytes(self, binary_name: str) -> Optional[bytes]:
        return self.get_resource(class_resource_name(binary_name))

    def close(self) -> None:
        return None


class SystemClassLoader(ClassLoader):
    """
    Platform/system loader.

    Archives are opened per lookup, so there is nothing to release.
    """

    def __init__(self, entries: Iterable[Path] = ()) -> None:
        super().__init__(parent=None)
        self.entries: List[Path] = [Path(e) for e in entries]

    def find_resource(self, name: str) -> Optional[bytes]:
        for entry in self.entries:
            if entry.is_dir():
                data = _read_from_directory(entry, name)
            elif zipfile.is_zipfile(entry):
                with zipfile.ZipFile(entry) as archive:
                    data = _read_from_archive(archive, name)
            else:
                continue
            if data is not None:
                return data
        return None

    def __repr__(self) -> str:
        return f"SystemClassLoader(entries={len(self.entries)})"


def get_system_class_loader() -> SystemClassLoader:
    """Build the fallback loader from the current ``CLASSPATH``; nothing is cached between runs."""
    raw = os.environ.get("CLASSPATH", "")
    entries = [Path(p) for p in raw.split(os.pathsep) if p.strip()]
    return SystemClassLoader(entries)


class ClasspathClassLoader(ClassLoader):
    """
    Loader scoped to one run's classpath.

    Non-existent entries are skipped, as an unresolvable classpath element
    contributes no classes. Archive handles stay open until ``close()``.
    """

    def __init__(
        self,
        classpath: Iterable[Path],
        parent: Optional[ClassLoader] = None,
    ) -> None:
        super().__init__(parent=parent)
        self.entries: List[Path] = []
        for entry in classpath:
            entry = Path(entry)
            if not entry.exists():
                logger.debug("skipping non-existent classpath entry %s", entry)
                continue
            self.entries.append(entry)

        self._archives: Dict[Path, zipfile.ZipFile] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def find_resource(self, name: str) -> Optional[bytes]:
        if self._closed:
            raise RuntimeError("ClasspathClassLoader used after close()")

        for entry in self.entries:
            if entry.is_dir():
                data = _read_from_directory(entry, name)
            else:
                archive = self._archive(entry)
                if archive is None:
                    continue
                data = _read_from_archive(archive, name)
            if data is not None:
                return data
        return None

    def _archive(self, entry: Path) -> Optional[zipfile.ZipFile]:
        archive = self._archives.get(entry)
        if archive is None:
            if not zipfile.is_zipfile(entry):
                return None
            archive = zipfile.ZipFile(entry)
            self._archives[entry] = archive
        return archive

    def close(self) -> None:
        archives, self._archives = self._archives, {}
        self._closed = True
        for archive in archives.values():
            archive.close()

    def __repr__(self) -> str:
        return f"ClasspathClassLoader(entries={[str(e) for e in self.entries]})"


__all__ = [
    "CLASS_FILE_SUFFIX",
    "ClassLoader",
    "ClasspathClassLoader",
    "SystemClassLoader",
    "class_resource_name",
    "get_system_class_loader",
]
