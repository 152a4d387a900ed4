"""Route registry and resolver.

Static routes sit in an exact ``"METHOD:path"`` index. Parametric and
wildcard routes are tried in registration order, first match wins.
The registry is frozen before the first dispatch and read without
locks afterwards.
"""

import logging
from collections.abc import Callable, Iterable
from http import HTTPMethod
from typing import TYPE_CHECKING, Any, TypeVar, cast

from switchyard._internal.types import Link
from switchyard.config import RouterConfig
from switchyard.errors import ConfigurationError, NotFound
from switchyard.routing.pattern import CompiledPattern, compile_pattern
from switchyard.routing.route import Route, RouteMatch

if TYPE_CHECKING:
    from switchyard.dispatch.state import DispatchState

logger = logging.getLogger("switchyard.routing")

F = TypeVar("F", bound=Callable[..., Any])


def _coerce_method(method: str | HTTPMethod | None) -> HTTPMethod | None:
    if not method:
        return None
    try:
        return HTTPMethod(str(method).upper())
    except ValueError:
        return None


class Router:
    """Registry of routes and middleware, plus the resolver over them.

    Usage::

        router = Router()
        router.use(log_requests)
        router.get("/users", list_users)
        router.get("/users/[id]", load_user, show_user)
        router.freeze()

        match = router.resolve("GET", "/users/42")
        match.params  # {"id": "42"}

    Handlers and middleware are chain links called as
    ``link(request, response, advance)``; see ``switchyard.dispatch``.
    """

    __slots__ = ("_config", "_dynamic_order", "_frozen", "_middlewares", "_routes", "_static_index")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._static_index: dict[str, int] = {}
        self._dynamic_order: list[int] = []
        self._middlewares: list[Link] = []
        self._frozen = False

    # -- Registration --

    def add(
        self,
        method: str | HTTPMethod | None,
        path: str | None,
        handlers: Link | Iterable[Link] | None,
    ) -> Route | None:
        """Register a route and return it.

        A missing path, an unknown or missing method, or an empty handler
        chain is ignored (``None`` is returned and a warning logged), or
        raises ``ConfigurationError`` when the router is strict.
        Malformed ``[name]`` markers always raise ``ConfigurationError``.
        """
        self._check_not_frozen()

        verb = _coerce_method(method)
        chain = self._coerce_handlers(handlers)
        if not path or verb is None or not chain:
            missing = [
                label
                for label, ok in (("path", bool(path)), ("method", verb is not None), ("handlers", bool(chain)))
                if not ok
            ]
            msg = f"Route {method!r} {path!r} is missing or has an invalid {', '.join(missing)}."
            if self._config.strict:
                raise ConfigurationError(msg)
            logger.warning("%s Registration ignored.", msg)
            return None

        route = Route(
            index=len(self._routes),
            method=verb,
            path=path,
            handlers=chain,
            pattern=compile_pattern(path),
        )

        if route.is_static:
            self._static_index[route.static_key] = route.index
        else:
            self._dynamic_order.append(route.index)
        self._routes.append(route)

        logger.debug(
            "Registered %s route #%d %s %s (%d handler(s))",
            route.kind,
            route.index,
            route.method,
            route.path,
            route.handler_count,
        )
        return route

    def get(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.GET, path, handlers)

    def post(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.POST, path, handlers)

    def put(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.PUT, path, handlers)

    def patch(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.PATCH, path, handlers)

    def delete(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.DELETE, path, handlers)

    def head(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.HEAD, path, handlers)

    def options(self, path: str, *handlers: Link) -> Route | None:
        return self.add(HTTPMethod.OPTIONS, path, handlers)

    def route(
        self,
        path: str,
        *before: Link,
        methods: Iterable[str | HTTPMethod] = ("GET",),
    ) -> Callable[[F], F]:
        """Decorator form of ``add``.

        The decorated function becomes the last link of the chain, after
        any *before* links::

            @router.route("/admin/[page]", require_admin, methods=["GET", "POST"])
            async def admin_page(request, response, advance):
                ...
        """

        def decorator(func: F) -> F:
            for method in methods:
                self.add(method, path, (*before, func))
            return func

        return decorator

    def use(self, *middlewares: Link) -> None:
        """Append middleware. Call order is execution order."""
        self._check_not_frozen()
        for middleware in middlewares:
            if not callable(middleware):
                msg = f"Middleware must be callable, got {type(middleware).__name__}."
                raise ConfigurationError(msg)
            self._middlewares.append(middleware)

    def freeze(self) -> None:
        """Freeze the router. No more routes or middleware can be added."""
        if not self._frozen:
            self._frozen = True
            logger.debug(
                "Router frozen: %d static, %d dynamic, %d middleware",
                self.static_count,
                self.dynamic_count,
                len(self._middlewares),
            )

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = "Cannot register routes or middleware after the router is frozen."
            raise RuntimeError(msg)

    @staticmethod
    def _coerce_handlers(handlers: Link | Iterable[Link] | None) -> tuple[Link, ...]:
        if handlers is None:
            return ()
        chain = (handlers,) if callable(handlers) else tuple(handlers)
        for handler in chain:
            if not callable(handler):
                msg = f"Route handlers must be callable, got {type(handler).__name__}."
                raise ConfigurationError(msg)
        return chain

    # -- Introspection --

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes in ``route_index`` order."""
        return tuple(self._routes)

    @property
    def middlewares(self) -> tuple[Link, ...]:
        return tuple(self._middlewares)

    @property
    def static_count(self) -> int:
        return len(self._static_index)

    @property
    def dynamic_count(self) -> int:
        return len(self._dynamic_order)

    def __len__(self) -> int:
        return len(self._routes)

    def route_at(self, index: int) -> Route:
        """Return the route registered under *index*."""
        return self._routes[index]

    # -- Resolution --

    def resolve(self, method: str, url: str) -> RouteMatch:
        """Find the route for *method* and *url*.

        Returns a ``RouteMatch`` on success, with params extracted for
        dynamic routes. Raises ``NotFound`` if no route matches.
        """
        index = self._static_index.get(f"{method}:{url}")
        if index is not None:
            return RouteMatch(route=self._routes[index], params={})

        prefix_check = self._config.prefix_check
        for index in self._dynamic_order:
            route = self._routes[index]
            if route.method != method:
                continue
            # Only dynamic routes are listed in _dynamic_order
            pattern = cast(CompiledPattern, route.pattern)
            if prefix_check and not url.startswith(pattern.prefix):
                continue
            if pattern.test(url):
                return RouteMatch(route=route, params=pattern.extract(url))

        raise NotFound(f"No route matches {method} {url!r}")

    # -- Dispatch --

    async def dispatch(self, request: Any, response: Any) -> "DispatchState":
        """Run middleware, resolution and the handler chain for one request.

        Freezes the router on first use. Exceptions raised by links
        propagate to the caller.
        """
        from switchyard.dispatch.handler import handle_request

        self.freeze()
        return await handle_request(self, request, response)

    def dispatch_sync(self, request: Any, response: Any) -> "DispatchState":
        """Run ``dispatch`` to completion on a fresh event loop.

        For threaded hosts. Must not be called from inside a running loop.
        """
        import anyio

        return anyio.run(self.dispatch, request, response)

    def callback(self) -> Callable[[Any, Any], Any]:
        """Return a ``handle_request(request, response)`` coroutine function for a host."""
        router = self

        async def handle_request(request: Any, response: Any) -> None:
            await router.dispatch(request, response)

        return handle_request
