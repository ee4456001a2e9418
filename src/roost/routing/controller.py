"""Controller base class and controller-scoped middleware.

A controller declares middleware in its constructor, optionally limited
to some of its action methods::

    class UserController(Controller):
        def __init__(self) -> None:
            super().__init__()
            self.middleware("auth")
            self.middleware("verified", only=["edit", "update"])
            self.middleware("cache", except_=["update"])
"""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MiddlewareOptions:
    """``only`` / ``except`` restrictions for one controller middleware.

    ``only`` includes the middleware solely for the listed methods;
    ``except_`` excludes it for the listed methods.  Both empty means
    the middleware applies to every method.
    """

    only: tuple[str, ...] = ()
    except_: tuple[str, ...] = ()

    def excludes(self, method: str) -> bool:
        """True when these options keep the middleware off ``method``."""
        if self.only and method not in self.only:
            return True
        return bool(self.except_) and method in self.except_


@dataclass(frozen=True, slots=True)
class MiddlewareDescriptor:
    """A controller middleware name together with its method restrictions."""

    name: str
    options: MiddlewareOptions = MiddlewareOptions()


class Controller:
    """Base class for controllers that declare their own middleware."""

    def __init__(self) -> None:
        self._middleware: dict[str, MiddlewareOptions] = {}

    def middleware(
        self,
        name: str,
        *,
        only: Iterable[str] | str | None = None,
        except_: Iterable[str] | str | None = None,
    ) -> None:
        """Declare middleware for this controller's actions.

        Declaring the same name twice replaces the earlier options.
        """
        self._middleware[name] = MiddlewareOptions(
            only=_as_tuple(only),
            except_=_as_tuple(except_),
        )

    def get_middleware(self) -> dict[str, MiddlewareOptions]:
        """Return ``{name: options}`` in declaration order."""
        return dict(self._middleware)


def split_action(action: str) -> tuple[str, str]:
    """Split ``"Class@method"`` into ``("Class", "method")``.

    The class part may itself be an import string (``"app.http:UserController"``),
    so the split happens at the last ``@``.
    """
    class_key, _, method = action.rpartition("@")
    return class_key, method


def _as_tuple(value: Iterable[str] | str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)
