"""Route listing — project, filter, sort, and render a tenant's routes.

Each stage is a plain function over an ordered sequence of records::

    records = build_records(routes, resolver)
    records = sort_records(filter_records(records, criteria), spec)
    print(render_table(HEADERS, [r.as_row() for r in records]))
"""

from roost.listing.pipeline import build_records, filter_records, list_routes, sort_records
from roost.listing.records import HEADERS, FilterCriteria, RouteRecord, SortSpec
from roost.listing.resolver import MiddlewareResolver
from roost.listing.table import render_table

__all__ = [
    "HEADERS",
    "FilterCriteria",
    "MiddlewareResolver",
    "RouteRecord",
    "SortSpec",
    "build_records",
    "filter_records",
    "list_routes",
    "render_table",
    "sort_records",
]
