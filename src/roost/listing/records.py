"""RouteRecord, FilterCriteria, and SortSpec frozen dataclasses."""

from dataclasses import dataclass

from roost.config import SORT_FIELDS, normalize_sort_field
from roost.errors import ConfigurationError

HEADERS: tuple[str, ...] = ("Domain", "Method", "URI", "Name", "Action", "Middleware")


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """One route flattened into display strings.

    ``method`` is the route's verbs joined by ``|`` in declaration order;
    ``middleware`` is the resolved names joined by ``,``.
    """

    domain: str = ""
    method: str = ""
    uri: str = ""
    name: str = ""
    action: str = ""
    middleware: str = ""

    def as_row(self) -> tuple[str, ...]:
        """Cells in ``HEADERS`` order."""
        return (self.domain, self.method, self.uri, self.name, self.action, self.middleware)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Optional substring filters. ``None`` or ``""`` imposes no constraint."""

    name: str | None = None
    path: str | None = None
    method: str | None = None

    def accepts(self, record: RouteRecord) -> bool:
        """True when every supplied substring occurs in its field (case-sensitive)."""
        checks = (
            (self.name, record.name),
            (self.path, record.uri),
            (self.method, record.method),
        )
        return all(needle in haystack for needle, haystack in checks if needle)


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Sort column and whether to reverse the sorted list afterwards."""

    field: str = "uri"
    reverse: bool = False

    def __post_init__(self) -> None:
        field = normalize_sort_field(self.field)
        if field not in SORT_FIELDS:
            msg = f"Cannot sort routes by {self.field!r}. Choose one of: {', '.join(SORT_FIELDS)}."
            raise ConfigurationError(msg)
        object.__setattr__(self, "field", field)
