"""Tests for roost.listing.resolver — combined middleware per route."""

import pytest

from roost.container import Container
from roost.errors import BindingResolutionError
from roost.listing.resolver import MiddlewareResolver
from roost.routing.controller import Controller, MiddlewareDescriptor
from roost.routing.middleware import ControllerMiddlewareProvider
from roost.routing.route import Route
from roost.routing.router import Router


def _handler() -> str:
    return "ok"


class UserController(Controller):
    def __init__(self) -> None:
        super().__init__()
        self.middleware("auth")
        self.middleware("verified", only=["show"])
        self.middleware("audit", except_=["show"])


class RecordingProvider:
    def __init__(self, names: list[str]) -> None:
        self.names = names
        self.calls: list[str] = []

    def middleware_for(self, action: str) -> list[MiddlewareDescriptor]:
        self.calls.append(action)
        return [MiddlewareDescriptor(name) for name in self.names]


def _resolver(router: Router) -> MiddlewareResolver:
    container = Container()
    container.bind("UserController", UserController)
    return MiddlewareResolver(router, ControllerMiddlewareProvider(container, router))


class TestRouteMiddleware:
    def test_route_middleware_only(self) -> None:
        router = Router()
        route = router.add(Route("/", _handler, middleware=("web", "session")))
        assert MiddlewareResolver(router)(route) == ["web", "session"]

    def test_no_middleware(self) -> None:
        router = Router()
        route = router.add(Route("/", _handler))
        assert MiddlewareResolver(router)(route) == []

    def test_duplicate_route_middleware_collapsed(self) -> None:
        router = Router()
        route = router.add(Route("/", _handler, middleware=("web", "web")))
        assert MiddlewareResolver(router)(route) == ["web"]


class TestPatternFilterMiddleware:
    def test_route_and_pattern_same_name_deduplicated(self) -> None:
        router = Router()
        router.when("users/*", "auth")
        route = router.add(Route("/users/{id}", _handler, middleware=("auth",)))
        assert ",".join(MiddlewareResolver(router)(route)) == "auth"

    def test_pattern_appended_after_route_middleware(self) -> None:
        router = Router()
        router.when("*", "web")
        route = router.add(Route("/users", _handler, middleware=("auth",)))
        assert MiddlewareResolver(router)(route) == ["auth", "web"]

    def test_each_method_consulted(self) -> None:
        router = Router()
        router.when("users", "csrf", methods=["POST"])
        router.when("users", "etag", methods=["GET"])
        route = router.add(Route("/users", _handler, methods=("POST", "GET")))
        assert MiddlewareResolver(router)(route) == ["csrf", "etag"]

    def test_implied_head_consulted(self) -> None:
        router = Router()
        router.when("users", "cache", methods=["HEAD"])
        route = router.add(Route("/users", _handler))
        assert MiddlewareResolver(router)(route) == ["cache"]

    def test_order_is_first_seen_not_alphabetical(self) -> None:
        router = Router()
        router.when("*", "zeta|alpha")
        route = router.add(Route("/", _handler, middleware=("mid",)))
        assert MiddlewareResolver(router)(route) == ["mid", "zeta", "alpha"]


class TestControllerMiddleware:
    def test_only_included_for_show(self) -> None:
        router = Router()
        route = router.action("/users/{id}", "UserController@show")
        assert _resolver(router)(route) == ["auth", "verified"]

    def test_only_excluded_except_included_for_index(self) -> None:
        router = Router()
        route = router.action("/users", "UserController@index")
        assert _resolver(router)(route) == ["auth", "audit"]

    def test_controller_middleware_deduplicated_against_route(self) -> None:
        router = Router()
        router.when("users/*", "verified")
        route = router.action("/users/{id}", "UserController@show", middleware=["auth"])
        assert _resolver(router)(route) == ["auth", "verified"]

    def test_aliases_applied_to_controller_middleware(self) -> None:
        router = Router()
        router.alias_middleware("auth", "app.middleware.Authenticate")
        route = router.action("/users", "UserController@index", middleware=["auth"])
        assert _resolver(router)(route) == ["auth", "app.middleware.Authenticate", "audit"]

    def test_closure_skips_provider(self) -> None:
        router = Router()
        provider = RecordingProvider(["never"])
        route = router.add(Route("/", _handler))
        assert MiddlewareResolver(router, provider)(route) == []
        assert provider.calls == []

    def test_provider_receives_action(self) -> None:
        router = Router()
        provider = RecordingProvider(["admin"])
        route = router.action("/", "HomeController@index")
        assert MiddlewareResolver(router, provider)(route) == ["admin"]
        assert provider.calls == ["HomeController@index"]

    def test_unresolvable_controller_is_fatal(self) -> None:
        router = Router()
        route = router.action("/", "MissingController@index")
        with pytest.raises(BindingResolutionError):
            _resolver(router)(route)
