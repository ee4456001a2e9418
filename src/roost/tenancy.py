"""Tenancy — maps tenant domains to their route tables.

Each tenant owns one ``Router`` whose routes default to the tenant's
domain.  The route listing reads a tenant's routes back through
``routes_for()``.
"""

import logging

from roost.config import TenancyConfig
from roost.container import Container
from roost.errors import ConfigurationError, TenantNotFound
from roost.routing.route import Route
from roost.routing.router import Router

logger = logging.getLogger("roost.tenancy")


class Tenancy:
    """Registry of tenant route tables keyed by domain.

    Usage::

        tenancy = Tenancy()
        shop = tenancy.tenant("shop.example.com")

        @shop.route("/", name="home")
        def home(): ...

        shop.action("/users/{id}", "app.http:UserController@show", name="users.show")
    """

    __slots__ = ("_routers", "config", "container")

    def __init__(
        self,
        config: TenancyConfig | None = None,
        *,
        container: Container | None = None,
    ) -> None:
        self.config: TenancyConfig = config or TenancyConfig()
        self.container: Container = container or Container()
        self._routers: dict[str, Router] = {}

    def tenant(self, domain: str) -> Router:
        """Return the route table for ``domain``, creating it on first use."""
        router = self._routers.get(domain)
        if router is None:
            router = Router(domain=domain)
            self._routers[domain] = router
        return router

    def router_for(self, domain: str) -> Router:
        """Return an existing tenant's route table.

        Raises:
            ConfigurationError: If domain tenancy is disabled.
            TenantNotFound: If no tenant is registered for ``domain``.
        """
        if not self.config.domain_tenancy:
            msg = (
                "Domain tenancy is disabled; routes are only partitioned per "
                "tenant when tenants are identified by domain."
            )
            raise ConfigurationError(msg)
        try:
            return self._routers[domain]
        except KeyError:
            raise TenantNotFound(domain) from None

    def routes_for(self, domain: str) -> list[Route]:
        """Return ``domain``'s routes in registration order."""
        routes = self.router_for(domain).routes
        logger.debug("Tenant %s has %d route(s)", domain, len(routes))
        return routes
