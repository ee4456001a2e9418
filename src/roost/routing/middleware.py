"""Middleware provider protocol and the controller-backed implementation.

The route listing never inspects controllers itself.  It asks a
``MiddlewareProvider`` which middleware apply to an action::

    class StaticProvider:
        def middleware_for(self, action: str) -> list[MiddlewareDescriptor]:
            return [MiddlewareDescriptor("auth")]

No base class required. The listing checks the shape, not the lineage.
"""

import logging
from typing import Protocol

from roost.container import Container
from roost.routing.controller import MiddlewareDescriptor, split_action
from roost.routing.router import Router

logger = logging.getLogger("roost.routing")


class MiddlewareProvider(Protocol):
    """Protocol for looking up the middleware that applies to an action."""

    def middleware_for(self, action: str) -> list[MiddlewareDescriptor]: ...


class ControllerMiddlewareProvider:
    """Reads middleware declared on controllers built by a container.

    For ``"Class@method"`` the controller ``Class`` is made through the
    container and its ``get_middleware()`` is filtered by the ``only`` /
    ``except`` options for ``method``.  Names are mapped through the
    router's middleware aliases.  Objects without ``get_middleware()``
    declare no middleware.

    Container failures propagate as ``BindingResolutionError``.
    """

    __slots__ = ("_container", "_router")

    def __init__(self, container: Container, router: Router) -> None:
        self._container = container
        self._router = router

    def middleware_for(self, action: str) -> list[MiddlewareDescriptor]:
        class_key, method = split_action(action)
        controller = self._container.make(class_key)

        get_middleware = getattr(controller, "get_middleware", None)
        if get_middleware is None:
            logger.debug("%s declares no controller middleware", class_key)
            return []

        aliases = self._router.middleware_aliases
        results: list[MiddlewareDescriptor] = []
        for name, options in get_middleware().items():
            if options.excludes(method):
                continue
            results.append(MiddlewareDescriptor(aliases.get(name, name), options))
        return results
