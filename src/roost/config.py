"""Tenancy configuration.

TenancyConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from roost.errors import ConfigurationError

# Columns a route listing can be ordered by. "host" is kept as an alias of
# "domain" for scripts written against the older column name.
SORT_FIELDS: tuple[str, ...] = ("domain", "method", "uri", "name", "action", "middleware")
SORT_ALIASES: dict[str, str] = {"host": "domain"}

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")


@dataclass(frozen=True, slots=True)
class TenancyConfig:
    """Tenancy configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = TenancyConfig(default_sort="name", log_level="debug")
    """

    # Routes are only partitioned per tenant when tenants are keyed by domain
    domain_tenancy: bool = True

    # Listing
    default_sort: str = "uri"

    # Logging
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if normalize_sort_field(self.default_sort) not in SORT_FIELDS:
            msg = (
                f"default_sort={self.default_sort!r} is not a sortable column. "
                f"Choose one of: {', '.join(SORT_FIELDS)}."
            )
            raise ConfigurationError(msg)
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"log_level={self.log_level!r} is not one of: {', '.join(LOG_LEVELS)}."
            raise ConfigurationError(msg)


def normalize_sort_field(field: str) -> str:
    """Map a user-supplied sort column to its canonical record field."""
    return SORT_ALIASES.get(field, field)
