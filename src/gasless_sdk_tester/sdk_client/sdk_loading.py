"""Resolution of the SDK client factory from an import path."""

from __future__ import annotations

import importlib
import logging
from typing import cast

from .client_contracts import SdkFactory
from .client_factory import ConstructionError

logger = logging.getLogger(__name__)


def load_sdk_factory(import_path: str) -> SdkFactory:
    """Import `package.module:attribute` and return the callable it names.

    Raises:
      ConstructionError: If the path is malformed, the module cannot be imported,
        or the attribute is missing or not callable.
    """
    module_name, separator, attribute_path = import_path.partition(":")
    if not separator or not module_name or not attribute_path:
        raise ConstructionError(
            f"SDK factory must use the 'package.module:attribute' form: {import_path}"
        )
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConstructionError(f"Cannot import SDK module '{module_name}': {exc}") from exc

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise ConstructionError(
                f"SDK module '{module_name}' has no attribute '{attribute_path}'."
            ) from exc

    if not callable(target):
        raise ConstructionError(f"SDK factory '{import_path}' is not callable.")
    logger.debug("Resolved SDK factory %s", import_path)
    return cast(SdkFactory, target)
