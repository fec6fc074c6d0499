"""
Class resolution context for one verification run.

The context is the single owner of the run's class loader:

    with ClassResolutionContext(config.CLASSPATH) as loader:
        ...

- With a non-empty classpath, a dedicated ClasspathClassLoader is created
  whose parent is the system loader. It is closed exactly once when the
  scope exits, whatever the exit path.
- With an empty classpath, the shared system loader is used directly and
  nothing is released.

If constructing the dedicated loader raises, the ``with`` block is never
entered and there is nothing to release.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from forbidden_apis.app.classpath.loader import (
    ClassLoader,
    ClasspathClassLoader,
    get_system_class_loader,
)

logger = logging.getLogger(__name__)


LoaderClass = Callable[..., ClassLoader]


class ClassResolutionContext:
    def __init__(
        self,
        classpath: Iterable[Path] = (),
        *,
        parent: Optional[ClassLoader] = None,
        loader_class: LoaderClass = ClasspathClassLoader,
    ) -> None:
        self._classpath: List[Path] = [Path(p) for p in classpath]
        self._parent = parent
        self._loader_class = loader_class

        self._owned: Optional[ClassLoader] = None
        self.loader: Optional[ClassLoader] = None

    @property
    def owns_loader(self) -> bool:
        return self._owned is not None

    def __enter__(self) -> ClassLoader:
        parent = self._parent if self._parent is not None else get_system_class_loader()

        if self._classpath:
            self._owned = self._loader_class(self._classpath, parent=parent)
            self.loader = self._owned
            logger.debug("created class loader for %d classpath entries", len(self._classpath))
        else:
            self.loader = parent
            logger.debug("no classpath given, using the system class loader")

        return self.loader

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    def release(self) -> None:
        owned, self._owned = self._owned, None
        if owned is not None:
            owned.close()
            logger.debug("released class loader %r", owned)
