"""Roost CLI — tenant-aware route introspection.

Entry point registered as ``roost`` in ``pyproject.toml``::

    [project.scripts]
    roost = "roost.cli:main"
"""

import argparse
import logging
import sys

from roost.config import LOG_LEVELS, SORT_ALIASES, SORT_FIELDS


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``roost`` command."""
    parser = argparse.ArgumentParser(
        prog="roost",
        description="Roost — tenant-aware route tables.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging verbosity (default: the Tenancy config, else warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- roost tenant:route:list ------------------------------------------
    list_parser = subparsers.add_parser(
        "tenant:route:list",
        help="List all registered routes in the specified tenant",
    )
    list_parser.add_argument("domain", help="Tenant domain (e.g. shop.example.com)")
    list_parser.add_argument(
        "--app",
        default="app",
        help="Import string of the Tenancy (e.g. myapp:tenancy, default: app)",
    )
    list_parser.add_argument("--method", default=None, help="Filter the routes by method.")
    list_parser.add_argument("--name", default=None, help="Filter the routes by name.")
    list_parser.add_argument("--path", default=None, help="Filter the routes by path.")
    list_parser.add_argument(
        "-r",
        "--reverse",
        action="store_true",
        help="Reverse the ordering of the routes.",
    )
    list_parser.add_argument(
        "--sort",
        choices=(*SORT_FIELDS, *SORT_ALIASES),
        default=None,
        help=f"The column ({', '.join(SORT_FIELDS)}) to sort by (default: uri).",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or "warning").upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "tenant:route:list":
        from roost.cli._routes import run_route_list

        run_route_list(args)
