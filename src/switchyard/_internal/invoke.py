"""Invoke helpers — call sync or async chain links uniformly.

Middleware and handlers can be ``def`` or ``async def``. Any code that
calls a user-provided link must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from switchyard._internal.invoke import invoke

    await invoke(link, request, response, advance)
"""

import inspect
from typing import Any


async def invoke(link: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a link and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync — advance() queues the next link; it runs once this returns
        def log_request(request, response, advance):
            print(request.url)
            advance()

        # async — awaits advance() to run the rest of the chain in place
        async def load_user(request, response, advance):
            request.locals["user"] = await fetch_user(request)
            await advance()
    """
    result = link(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
