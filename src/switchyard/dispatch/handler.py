"""Request dispatch — middleware, then routing, then the handler chain.

The only component that writes to the response on its own, and only on
the not-found path.
"""

import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from switchyard.dispatch.chain import Chain
from switchyard.dispatch.state import DispatchState, Phase
from switchyard.errors import NotFound

if TYPE_CHECKING:
    from switchyard.routing.router import Router

logger = logging.getLogger("switchyard.dispatch")


async def handle_request(router: "Router", request: Any, response: Any) -> DispatchState:
    """Process a single request and return its final dispatch state.

    Middleware runs first, once, if any is registered; the last
    middleware's ``advance()`` triggers routing. Exceptions raised by
    links are not caught.
    """
    state = DispatchState()
    middlewares = router.middlewares

    if middlewares:
        state.phase = Phase.RUNNING_MIDDLEWARE
        state.middleware_chain = Chain(
            middlewares,
            request,
            response,
            on_exhausted=partial(_route, router, request, response, state),
        )
        await state.middleware_chain.advance()
    else:
        await _route(router, request, response, state)

    return state


async def _route(router: "Router", request: Any, response: Any, state: DispatchState) -> None:
    """Resolve the route, publish params, and start the handler chain."""
    state.phase = Phase.ROUTING
    try:
        match = router.resolve(request.method, request.url)
    except NotFound:
        state.phase = Phase.NOT_FOUND
        logger.debug("No route for %s %s", request.method, request.url)
        config = router.config
        response.write_head(config.not_found_status)
        response.end(config.not_found_body)
        return

    state.route_index = match.route_index
    state.params = match.params
    request.params = match.params

    state.phase = Phase.RUNNING_HANDLERS
    state.handler_chain = Chain(
        match.route.handlers,
        request,
        response,
        on_exhausted=partial(_finish, state),
    )
    await state.handler_chain.advance()


async def _finish(state: DispatchState) -> None:
    state.phase = Phase.DONE
