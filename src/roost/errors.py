"""Roost exception hierarchy.

Shared across Router, Container, Tenancy, and the listing pipeline so every
module raises and catches the same types.
"""


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when routes or tenancy are set up incorrectly.

    Typically raised while routes are registered, before anything is listed.
    """


class TenantNotFound(RoostError):  # noqa: N818
    """No tenant is registered for the requested domain."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"No tenant is registered for domain {domain!r}.")


class BindingResolutionError(RoostError):
    """The container could not build the requested key.

    Always chained (``raise ... from exc``) to the underlying import,
    attribute, or construction failure.
    """

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        self.reason = reason
        detail = f"Unable to resolve {key!r} from the container"
        super().__init__(f"{detail}: {reason}" if reason else f"{detail}.")
