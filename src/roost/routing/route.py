"""Route frozen dataclass."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

# Action label for routes whose handler is a callable rather than "Class@method"
CLOSURE_ACTION = "Closure"

Action: TypeAlias = str | Callable[..., Any]


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    ``methods`` keeps the order the route was declared with; listings
    render it as-is.  ``action`` is either a ``"Class@method"`` string
    naming a controller action or a callable handler.
    """

    path: str
    action: Action
    methods: tuple[str, ...] = ("GET",)
    name: str | None = None
    domain: str | None = None
    middleware: tuple[str, ...] = ()

    @property
    def action_name(self) -> str:
        """Controller action string, or ``"Closure"`` for callable handlers."""
        if isinstance(self.action, str):
            return self.action
        return CLOSURE_ACTION

    @property
    def is_controller_action(self) -> bool:
        """True when the action names a concrete ``Class@method`` pair."""
        return isinstance(self.action, str) and "@" in self.action
