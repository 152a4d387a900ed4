"""Switchyard — a request router with predictable lookup cost.

Static routes resolve through an exact-match index; ``[name]`` and
``*`` routes are tried in registration order. Middleware and handlers
are explicit chains of links.

Basic usage::

    from switchyard import Router

    router = Router()

    async def show_user(request, response, advance):
        response.end(f"user {request.params['id']}")

    router.get("/users/[id]", show_user)

    await router.dispatch(request, response)
"""

__version__ = "0.1.0"
__all__ = [
    "Chain",
    "ConfigurationError",
    "DispatchState",
    "HTTPError",
    "NotFound",
    "Phase",
    "Request",
    "Response",
    "Route",
    "RouteKind",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "SwitchyardError",
    "compile_pattern",
    "configure_logging",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import switchyard`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from switchyard.routing.router import Router

        return Router

    if name in ("Route", "RouteKind", "RouteMatch"):
        from switchyard.routing import route

        return getattr(route, name)

    if name == "compile_pattern":
        from switchyard.routing.pattern import compile_pattern

        return compile_pattern

    if name in ("RouterConfig", "configure_logging"):
        from switchyard import config

        return getattr(config, name)

    if name in ("SwitchyardError", "ConfigurationError", "HTTPError", "NotFound"):
        from switchyard import errors

        return getattr(errors, name)

    if name in ("Chain", "DispatchState", "Phase"):
        from switchyard import dispatch

        return getattr(dispatch, name)

    if name in ("Request", "Response"):
        from switchyard import http

        return getattr(http, name)

    msg = f"module 'switchyard' has no attribute {name!r}"
    raise AttributeError(msg)
