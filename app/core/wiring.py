"""Load collaborator factories named in settings ("package.module:factory")."""

import importlib
import logging
from typing import Any

logger = logging.getLogger(__name__)


def load_factory(path: str) -> Any:
    """Import and return the attribute named by a "module:attr" path.

    Raises:
        ImportError: If the module or attribute cannot be found.
        TypeError: If the attribute is not callable.
    """
    module_path, _, attr = path.partition(":")
    if not module_path or not attr:
        raise ImportError(f"Factory path must look like 'module:attr', got: {path!r}")
    module = importlib.import_module(module_path)
    if not hasattr(module, attr):
        raise ImportError(f"'{attr}' not found in module '{module_path}'")
    factory = getattr(module, attr)
    if not callable(factory):
        raise TypeError(f"'{path}' is not callable")
    return factory


def build_from_factory(path: str | None) -> Any | None:
    """Call the zero-argument factory at path; None when no path is configured."""
    if path is None:
        return None
    instance = load_factory(path)()
    logger.info("Loaded collaborator from %s", path)
    return instance
