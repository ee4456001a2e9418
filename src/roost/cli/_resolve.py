"""Locate the application's Tenancy from a ``--app`` import string."""

import importlib

from roost.errors import ConfigurationError, RoostError
from roost.tenancy import Tenancy

DEFAULT_ATTRIBUTE = "tenancy"


def resolve_tenancy(import_string: str) -> Tenancy:
    """Import ``"module:attribute"`` and return the Tenancy it names.

    The attribute defaults to ``tenancy``.  A callable that is not a
    Tenancy is treated as a factory and called with no arguments.

    Importing the module runs its route registration, so a
    ``ConfigurationError`` raised there (a ``<param>`` path, say)
    propagates unchanged.  Every other failure is reported as a
    ``ConfigurationError`` chained to its cause.
    """
    module_path, _, attr_name = import_string.partition(":")
    attr_name = attr_name or DEFAULT_ATTRIBUTE

    try:
        module = importlib.import_module(module_path)
    except RoostError:
        raise
    except ImportError as exc:
        msg = f"Cannot import {module_path!r} for --app {import_string!r}: {exc}"
        raise ConfigurationError(msg) from exc

    try:
        obj = getattr(module, attr_name)
    except AttributeError as exc:
        msg = f"Module {module_path!r} has no attribute {attr_name!r}."
        raise ConfigurationError(msg) from exc

    if callable(obj) and not isinstance(obj, Tenancy):
        try:
            obj = obj()
        except RoostError:
            raise
        except Exception as exc:
            msg = f"Tenancy factory {import_string!r} raised an error: {exc}"
            raise ConfigurationError(msg) from exc

    if not isinstance(obj, Tenancy):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, not a roost.Tenancy instance."
        raise ConfigurationError(msg)

    return obj
