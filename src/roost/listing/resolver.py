"""Middleware resolution for a single route.

Three sources contribute, in order, to one de-duplicated list:

1. middleware attached to the route itself;
2. pattern filters matching the route's path, for each of its methods;
3. controller middleware, when the action is a ``Class@method`` pair.

The first occurrence of a name fixes its position.
"""

import logging

from roost.routing.middleware import MiddlewareProvider
from roost.routing.route import Route
from roost.routing.router import Router

logger = logging.getLogger("roost.listing")


class MiddlewareResolver:
    """Computes the middleware names that apply to a route.

    The router answers pattern-filter lookups; the provider answers
    controller lookups.  Provider errors propagate unchanged.
    """

    __slots__ = ("_provider", "_router")

    def __init__(self, router: Router, provider: MiddlewareProvider | None = None) -> None:
        self._router = router
        self._provider = provider

    def __call__(self, route: Route) -> list[str]:
        names: dict[str, None] = dict.fromkeys(route.middleware)

        for name in self.pattern_filters(route):
            names.setdefault(name)

        if self._provider is not None and route.is_controller_action:
            for descriptor in self._provider.middleware_for(route.action_name):
                names.setdefault(descriptor.name)

        return list(names)

    def pattern_filters(self, route: Route) -> list[str]:
        """Names of pattern filters matching ``route`` for any of its methods."""
        found: list[str] = []
        for method in route.methods:
            found.extend(self._router.find_pattern_filters(route.path, method))
        return found
