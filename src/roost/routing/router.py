"""Ordered route table with middleware aliases and pattern filters.

Routes are registered during setup and read back in registration order.
Pattern filters attach named middleware to every route whose path matches
a wildcard or regex pattern, independent of the route's own middleware.
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Any, TypeAlias

from roost.errors import ConfigurationError
from roost.routing.route import Action, Route

logger = logging.getLogger("roost.routing")

Handler: TypeAlias = Callable[..., Any]


def check_path(path: str) -> None:
    """Reject paths written with ``<param>`` placeholders.

    They would otherwise be listed as literal segments; routes use
    ``{param}`` (e.g. ``/users/{id}``).
    """
    for part in path.split("/"):
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route path {path!r} uses <param> placeholders. "
                "Use {param} instead (e.g. /users/{id})."
            )
            raise ConfigurationError(msg)


def parse_filter_names(names: str | Iterable[str]) -> dict[str, tuple[str, ...]]:
    """Split a filter declaration into ``{name: parameters}``.

    Accepts ``"auth|csrf"`` or ``["auth", "csrf"]``; a name may carry
    comma-separated parameters after a colon (``"throttle:60,1"``).
    """
    items = names.split("|") if isinstance(names, str) else list(names)
    parsed: dict[str, tuple[str, ...]] = {}
    for item in items:
        name, _, params = item.strip().partition(":")
        if not name:
            continue
        parsed[name] = tuple(params.split(",")) if params else ()
    return parsed


def _wildcard_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` wildcard pattern into an anchored regex."""
    pattern = pattern.strip("/") or "/"
    escaped = re.escape(pattern).replace(r"\*", ".*")
    return re.compile(rf"\A{escaped}\Z")


@dataclass(frozen=True, slots=True)
class PatternFilter:
    """Named middleware attached to every path matching ``regex``.

    An empty ``methods`` tuple applies the filter to every HTTP method.
    """

    pattern: str
    regex: re.Pattern[str]
    names: dict[str, tuple[str, ...]]
    methods: tuple[str, ...] = ()

    def supports(self, method: str) -> bool:
        return not self.methods or method.upper() in self.methods

    def matches(self, path: str) -> bool:
        return self.regex.search(path) is not None


class Router:
    """Ordered route table for a single tenant.

    Usage::

        router = Router(domain="acme.example.com")
        router.add(Route("/users/{id}", "app.controllers:UserController@show"))
        router.when("admin/*", "auth")
        router.alias_middleware("auth", "app.middleware.Authenticate")
        router.find_pattern_filters("admin/users", "GET")
    """

    __slots__ = ("_aliases", "_pattern_filters", "_regex_filters", "_routes", "domain")

    def __init__(self, domain: str | None = None) -> None:
        self.domain = domain
        self._routes: list[Route] = []
        self._aliases: dict[str, object] = {}
        self._pattern_filters: list[PatternFilter] = []
        self._regex_filters: list[PatternFilter] = []

    # -- Route registration --

    def add(self, route: Route) -> Route:
        """Add a route to the table.

        Returns the stored route, which carries the router's domain when
        the route declared none and ``HEAD`` after ``GET``.
        """
        check_path(route.path)

        methods = tuple(m.upper() for m in route.methods)
        if "GET" in methods and "HEAD" not in methods:
            methods = (*methods, "HEAD")

        route = replace(
            route,
            methods=methods,
            domain=route.domain if route.domain is not None else self.domain,
        )
        self._routes.append(route)
        return route

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
        middleware: list[str] | None = None,
        domain: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a callable route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name.
            middleware: Middleware names attached directly to the route.
            domain: Overrides the router's domain for this route.
        """

        def decorator(func: Handler) -> Handler:
            self.add(self._make_route(path, func, methods, name, middleware, domain))
            return func

        return decorator

    def action(
        self,
        path: str,
        action: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
        middleware: list[str] | None = None,
        domain: str | None = None,
    ) -> Route:
        """Register a route served by a ``"Class@method"`` controller action."""
        if "@" not in action:
            msg = f"Controller action {action!r} must look like 'Class@method'."
            raise ConfigurationError(msg)
        return self.add(self._make_route(path, action, methods, name, middleware, domain))

    @staticmethod
    def _make_route(
        path: str,
        action: Action,
        methods: list[str] | None,
        name: str | None,
        middleware: list[str] | None,
        domain: str | None,
    ) -> Route:
        return Route(
            path=path,
            action=action,
            methods=tuple(methods or ["GET"]),
            name=name,
            domain=domain,
            middleware=tuple(middleware or ()),
        )

    @property
    def routes(self) -> list[Route]:
        """Return all registered routes in registration order."""
        return list(self._routes)

    # -- Middleware aliases --

    def alias_middleware(self, name: str, target: object) -> None:
        """Map a short middleware name to its canonical reference."""
        self._aliases[name] = target

    @property
    def middleware_aliases(self) -> dict[str, str]:
        """Alias -> canonical middleware reference, rendered as strings."""
        return {name: _reference(target) for name, target in self._aliases.items()}

    # -- Pattern filters --

    def when(
        self,
        pattern: str,
        names: str | Iterable[str],
        methods: Iterable[str] | None = None,
    ) -> None:
        """Attach middleware to every path matching a ``*`` wildcard pattern."""
        self._pattern_filters.append(
            PatternFilter(
                pattern=pattern,
                regex=_wildcard_regex(pattern),
                names=parse_filter_names(names),
                methods=tuple(m.upper() for m in methods or ()),
            )
        )

    def when_regex(
        self,
        regex: str,
        names: str | Iterable[str],
        methods: Iterable[str] | None = None,
    ) -> None:
        """Attach middleware to every path matching a regular expression."""
        try:
            compiled = re.compile(regex)
        except re.error as exc:
            msg = f"Pattern filter regex {regex!r} is invalid: {exc}"
            raise ConfigurationError(msg) from exc
        self._regex_filters.append(
            PatternFilter(
                pattern=regex,
                regex=compiled,
                names=parse_filter_names(names),
                methods=tuple(m.upper() for m in methods or ()),
            )
        )

    def find_pattern_filters(self, path: str, method: str) -> dict[str, tuple[str, ...]]:
        """Return ``{name: parameters}`` for every pattern filter matching a request.

        Wildcard filters are checked before regex filters, each in
        registration order.  A later match for the same name replaces
        the earlier parameters but keeps its position.
        """
        path = path.strip("/") or "/"
        results: dict[str, tuple[str, ...]] = {}
        for pattern_filter in (*self._pattern_filters, *self._regex_filters):
            if pattern_filter.matches(path) and pattern_filter.supports(method):
                results.update(pattern_filter.names)
        if results:
            logger.debug("Pattern filters for %s %s: %s", method, path, ", ".join(results))
        return results


def _reference(target: object) -> str:
    """Render a middleware alias target as a dotted reference."""
    if isinstance(target, str):
        return target
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None)
    if module and qualname:
        return f"{module}.{qualname}"
    return repr(target)
