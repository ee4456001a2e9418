"""``roost tenant:route:list`` — list a tenant's registered routes.

Resolves an import string to a Tenancy, looks up the tenant's route
table, and prints the routes as a table with their resolved middleware.
"""

import argparse
import logging
import sys
from typing import NoReturn

from roost.cli._resolve import resolve_tenancy
from roost.errors import RoostError
from roost.listing import HEADERS, FilterCriteria, MiddlewareResolver, SortSpec, list_routes
from roost.listing.table import render_table
from roost.routing.middleware import ControllerMiddlewareProvider

logger = logging.getLogger("roost.cli")

NO_ROUTES_MESSAGE = "The specified tenant does not have any routes."


def run_route_list(args: argparse.Namespace) -> None:
    """List the routes registered for ``args.domain``.

    Prints the empty-tenant message instead of a table when the tenant
    has no routes.  Any roost error, from importing the app through
    building controllers, prints ``Error: ...`` to stderr and exits
    with status 1 before anything reaches stdout.
    """
    try:
        tenancy = resolve_tenancy(args.app)
        if args.log_level is None:
            logging.getLogger("roost").setLevel(tenancy.config.log_level.upper())

        routes = tenancy.routes_for(args.domain)
        if not routes:
            print(NO_ROUTES_MESSAGE)
            return

        router = tenancy.router_for(args.domain)
        resolver = MiddlewareResolver(
            router, ControllerMiddlewareProvider(tenancy.container, router)
        )
        records = list_routes(
            routes,
            resolver,
            FilterCriteria(name=args.name, path=args.path, method=args.method),
            SortSpec(field=args.sort or tenancy.config.default_sort, reverse=args.reverse),
        )
    except RoostError as exc:
        logger.debug("Route listing for %s failed", args.domain, exc_info=True)
        _fail(exc)

    print(render_table(HEADERS, [record.as_row() for record in records]))


def _fail(exc: Exception) -> NoReturn:
    print(f"Error: {exc}", file=sys.stderr)
    raise SystemExit(1) from exc
