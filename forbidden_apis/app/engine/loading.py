from __future__ import annotations

import importlib
import logging

from forbidden_apis.app.engine.interface import EngineFactory
from forbidden_apis.app.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_engine_factory(reference: str) -> EngineFactory:
    """
    Resolve an engine factory from a ``module:attribute`` reference.

    The attribute part may be dotted (``pkg.mod:Engine.create``).
    """
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise ConfigurationError(
            f"Engine reference '{reference}' must have the form 'module:factory'"
        )

    try:
        target = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigurationError(
            f"Cannot import engine module '{module_name}': {exc}"
        ) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(
                f"Engine module '{module_name}' has no attribute '{attr_path}'"
            ) from exc

    if not callable(target):
        raise ConfigurationError(f"Engine factory '{reference}' is not callable")

    logger.debug("loaded engine factory %s", reference)
    return target
