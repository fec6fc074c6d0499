from __future__ import annotations

import logging
from typing import Iterable, Iterator

from forbidden_apis.app.engine.interface import CheckEngine

logger = logging.getLogger(__name__)


class SuppressionRegistry:
    """
    Annotation class names that exempt checked elements from reporting.

    Set semantics: duplicates collapse. Whether a name resolves to a real
    annotation type is the engine's concern.
    """

    def __init__(self, classnames: Iterable[str] = ()) -> None:
        self._classnames: dict[str, None] = {}
        for classname in classnames:
            self.add(classname)

    def add(self, classname: str) -> None:
        self._classnames[classname] = None

    def __iter__(self) -> Iterator[str]:
        return iter(self._classnames)

    def __len__(self) -> int:
        return len(self._classnames)

    def __contains__(self, classname: object) -> bool:
        return classname in self._classnames

    def register_with(self, engine: CheckEngine) -> None:
        for classname in self:
            engine.add_suppress_annotation(classname)
        if self._classnames:
            logger.debug("registered %d suppression annotation(s)", len(self))
