"""Roost — tenant-aware route tables and route listing.

Each tenant, identified by its domain, owns an ordered route table.
``roost tenant:route:list`` prints a tenant's routes together with the
middleware that applies to each one.

Basic usage::

    from roost import Controller, Tenancy

    tenancy = Tenancy()
    shop = tenancy.tenant("shop.example.com")

    @shop.route("/", name="home", middleware=["web"])
    def home():
        return "Welcome"

    shop.action("/users/{id}", "shop.http:UserController@show", name="users.show")
    shop.when("users/*", "auth")

Then, from a shell::

    roost tenant:route:list shop.example.com --app shop.app:tenancy --sort=name
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "BindingResolutionError",
    "ConfigurationError",
    "Container",
    "Controller",
    "MiddlewareDescriptor",
    "MiddlewareProvider",
    "RoostError",
    "Route",
    "Router",
    "Tenancy",
    "TenancyConfig",
    "TenantNotFound",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    if name == "Tenancy":
        from roost.tenancy import Tenancy

        return Tenancy

    if name == "TenancyConfig":
        from roost.config import TenancyConfig

        return TenancyConfig

    if name == "Container":
        from roost.container import Container

        return Container

    if name in ("Route", "Router"):
        from roost.routing import route as _route
        from roost.routing import router as _router

        return getattr(_route if name == "Route" else _router, name)

    if name in ("Controller", "MiddlewareDescriptor"):
        from roost.routing import controller as _controller

        return getattr(_controller, name)

    if name == "MiddlewareProvider":
        from roost.routing.middleware import MiddlewareProvider

        return MiddlewareProvider

    if name in ("BindingResolutionError", "ConfigurationError", "RoostError", "TenantNotFound"):
        from roost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
