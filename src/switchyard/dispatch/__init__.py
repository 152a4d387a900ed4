"""Dispatch — middleware chain, route resolution and handler chain.

Every middleware and handler is a chain link::

    async def link(request, response, advance): ...

A link continues the chain by calling ``advance()``. A link that never
calls it ends the request there (short-circuit). Sync links return
``advance()`` or simply call it; the next link then runs once they return.
"""

from switchyard.dispatch.chain import Chain, Step
from switchyard.dispatch.handler import handle_request
from switchyard.dispatch.state import DispatchState, Phase

__all__ = ["Chain", "DispatchState", "Phase", "Step", "handle_request"]
