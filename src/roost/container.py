"""Dependency container — builds controllers named by route actions.

Keys are plain strings.  A key is resolved from, in order:

1. a shared instance registered with ``instance()``;
2. a zero-argument factory registered with ``bind()``;
3. an import string (``"module:Class"`` or ``"module.Class"``), whose
   target is called with no arguments.
"""

import importlib
import logging
from collections.abc import Callable
from typing import Any

from roost.errors import BindingResolutionError

logger = logging.getLogger("roost.container")


class Container:
    """Resolves string keys to objects.

    Usage::

        container = Container()
        container.bind("UserController", UserController)
        container.make("UserController")            # -> UserController()
        container.make("app.http:PostController")   # imported, then built
    """

    __slots__ = ("_bindings", "_instances")

    def __init__(self) -> None:
        self._bindings: dict[str, Callable[[], Any]] = {}
        self._instances: dict[str, Any] = {}

    def bind(self, key: str, factory: Callable[[], Any]) -> None:
        """Register a factory called each time ``key`` is made."""
        self._bindings[key] = factory

    def instance(self, key: str, obj: Any) -> None:
        """Register an already-built object returned for ``key``."""
        self._instances[key] = obj

    def make(self, key: str) -> Any:
        """Build the object for ``key``.

        Raises:
            BindingResolutionError: If the key is unbound and cannot be
                imported, or its factory raises.
        """
        if key in self._instances:
            return self._instances[key]

        factory = self._bindings.get(key)
        if factory is None:
            factory = _import_target(key)

        try:
            obj = factory()
        except Exception as exc:
            raise BindingResolutionError(key, f"construction failed: {exc}") from exc

        logger.debug("Resolved %r to %s", key, type(obj).__qualname__)
        return obj


def _import_target(key: str) -> Callable[[], Any]:
    """Import the callable named by ``"module:attr"`` or ``"module.attr"``."""
    module_path, sep, attr_name = key.partition(":")
    if not sep:
        module_path, _, attr_name = key.rpartition(".")
    if not module_path or not attr_name:
        raise BindingResolutionError(key, "not bound and not an import string")

    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise BindingResolutionError(key, f"cannot import {module_path!r}") from exc

    try:
        target = getattr(module, attr_name)
    except AttributeError as exc:
        raise BindingResolutionError(
            key, f"module {module_path!r} has no attribute {attr_name!r}"
        ) from exc

    if not callable(target):
        raise BindingResolutionError(key, f"{type(target).__name__} is not callable")
    return target
