"""Per-request dispatch bookkeeping."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from switchyard._internal.types import ParamKey

if TYPE_CHECKING:
    from switchyard.dispatch.chain import Chain


class Phase(StrEnum):
    """Where a request is in its lifecycle.

    INIT -> RUNNING_MIDDLEWARE -> ROUTING -> RUNNING_HANDLERS -> DONE
    INIT -> ROUTING when no middleware is registered
    ROUTING -> NOT_FOUND (terminal)

    A request left in RUNNING_MIDDLEWARE or RUNNING_HANDLERS after
    dispatch returns was short-circuited by a link that did not advance.
    """

    INIT = "init"
    RUNNING_MIDDLEWARE = "running_middleware"
    ROUTING = "routing"
    RUNNING_HANDLERS = "running_handlers"
    DONE = "done"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class DispatchState:
    """Mutable state for one request. Never shared between requests."""

    route_index: int = -1
    params: dict[ParamKey, str] = field(default_factory=dict)
    phase: Phase = Phase.INIT
    middleware_chain: "Chain | None" = field(default=None, repr=False)
    handler_chain: "Chain | None" = field(default=None, repr=False)

    @property
    def middleware_cursor(self) -> int:
        """Index of the middleware last invoked (-1 before the first)."""
        if self.middleware_chain is None:
            return -1
        return self.middleware_chain.cursor

    @property
    def handler_cursor(self) -> int:
        """Index of the handler last invoked (-1 before the first)."""
        if self.handler_chain is None:
            return -1
        return self.handler_chain.cursor

    @property
    def resolved(self) -> bool:
        return self.route_index >= 0
