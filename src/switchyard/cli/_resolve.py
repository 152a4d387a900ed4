"""Router lookup for the CLI — turns ``"module[:attribute]"`` into a Router.

``switchyard routes`` and ``switchyard resolve`` both start here.
"""

import importlib
from types import ModuleType

from switchyard.routing.router import Router

DEFAULT_ATTRIBUTE = "router"


def _find_module_router(module: ModuleType) -> Router:
    """Return the one Router bound at module level in *module*."""
    found = {name: obj for name, obj in vars(module).items() if isinstance(obj, Router)}
    if len(found) == 1:
        return next(iter(found.values()))
    if not found:
        msg = f"Module {module.__name__!r} has no {DEFAULT_ATTRIBUTE!r} attribute and no module-level Router."
        raise AttributeError(msg)
    names = ", ".join(sorted(found))
    msg = f"Module {module.__name__!r} defines several routers ({names}); name one with 'module:attribute'."
    raise AttributeError(msg)


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a switchyard Router.

    ``"pkg.app:api"`` imports ``pkg.app`` and takes ``api``. Without an
    attribute, ``router`` is used when the module defines it; otherwise
    the module's only module-level Router is taken.

    The attribute may also be a zero-argument factory. It is called once
    and whatever it returns must be a Router.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If no router can be found in the module.
        TypeError: If the attribute, or what its factory returns, is not a Router.

    """
    module_path, _, attr_name = import_string.partition(":")
    module = importlib.import_module(module_path)

    if not attr_name:
        if not hasattr(module, DEFAULT_ATTRIBUTE):
            return _find_module_router(module)
        attr_name = DEFAULT_ATTRIBUTE

    obj = getattr(module, attr_name)
    if isinstance(obj, Router):
        return obj

    if not callable(obj):
        msg = f"{import_string!r} is a {type(obj).__name__}, not a switchyard.Router or a factory for one"
        raise TypeError(msg)

    try:
        built = obj()
    except Exception as exc:
        msg = f"Router factory {import_string!r} raised {type(exc).__name__}: {exc}"
        raise TypeError(msg) from exc

    if not isinstance(built, Router):
        msg = f"Router factory {import_string!r} returned {type(built).__name__}, expected a switchyard.Router"
        raise TypeError(msg)
    return built
