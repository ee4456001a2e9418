"""Projection, filtering, and sorting of route records.

Every record is built before any filtering happens, so a failing
middleware lookup aborts the listing before anything is printed.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeAlias

from roost.listing.records import FilterCriteria, RouteRecord, SortSpec
from roost.routing.route import Route

logger = logging.getLogger("roost.listing")

Resolver: TypeAlias = Callable[[Route], list[str]]


def project(route: Route, resolver: Resolver) -> RouteRecord:
    """Flatten a route into display strings."""
    return RouteRecord(
        domain=route.domain or "",
        method="|".join(route.methods),
        uri=route.path,
        name=route.name or "",
        action=route.action_name,
        middleware=",".join(resolver(route)),
    )


def build_records(routes: Iterable[Route], resolver: Resolver) -> list[RouteRecord]:
    """Project every route, preserving source order."""
    return [project(route, resolver) for route in routes]


def filter_records(records: Iterable[RouteRecord], criteria: FilterCriteria) -> list[RouteRecord]:
    """Keep records accepted by every supplied criterion."""
    return [record for record in records if criteria.accepts(record)]


def sort_records(records: Sequence[RouteRecord], spec: SortSpec) -> list[RouteRecord]:
    """Stable ascending sort by ``spec.field``, then reverse the whole list if asked.

    Reversing afterwards also flips the relative order of records with
    equal keys, which a descending sort would have preserved.
    """
    ordered = sorted(records, key=lambda record: getattr(record, spec.field, None) or "")
    if spec.reverse:
        ordered.reverse()
    return ordered


def list_routes(
    routes: Iterable[Route],
    resolver: Resolver,
    criteria: FilterCriteria | None = None,
    spec: SortSpec | None = None,
) -> list[RouteRecord]:
    """Run the full pipeline: project, filter, sort."""
    records = build_records(routes, resolver)
    kept = filter_records(records, criteria or FilterCriteria())
    logger.debug("Kept %d of %d route(s) after filtering", len(kept), len(records))
    return sort_records(kept, spec or SortSpec())
