"""Cursor-driven chain executor.

One ``Chain`` runs the router's middleware, another the resolved
route's handlers. Each link receives the chain's bound ``advance`` as
its continuation, so the engine owns the cursor and links only decide
whether to continue.

``advance()`` moves the cursor as soon as it is called and returns a
``Step``. A link may await the step, return it, or drop it: a step no
one started runs right after the link that created it returns.
"""

from collections.abc import Awaitable, Callable, Generator, Sequence
from typing import Any

from switchyard._internal.invoke import invoke
from switchyard._internal.types import Link


async def _already_run() -> None:
    return None


class Step:
    """The chain position one ``advance()`` call moved to. Runs at most once."""

    __slots__ = ("_chain", "cursor", "started")

    def __init__(self, chain: "Chain", cursor: int) -> None:
        self._chain = chain
        self.cursor = cursor
        self.started = False

    def __await__(self) -> Generator[Any, None, None]:
        if self.started:
            return _already_run().__await__()
        self.started = True
        return self._chain._run(self.cursor).__await__()


class Chain:
    """An ordered sequence of links plus the cursor advancing over it.

    Usage::

        chain = Chain(links, request, response, on_exhausted=route_request)
        await chain.advance()   # runs links[0], which may call advance()

    ``on_exhausted`` runs once, when ``advance`` moves past the last
    link. Later calls past the end do nothing.
    """

    __slots__ = ("_exhausted", "_links", "_on_exhausted", "_pending", "_request", "_response", "cursor")

    def __init__(
        self,
        links: Sequence[Link],
        request: Any,
        response: Any,
        *,
        on_exhausted: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._links = tuple(links)
        self._request = request
        self._response = response
        self._on_exhausted = on_exhausted
        self._exhausted = False
        # Steps created by the link currently running
        self._pending: list[Step] | None = None
        self.cursor = -1

    def __len__(self) -> int:
        return len(self._links)

    @property
    def exhausted(self) -> bool:
        """True once ``advance`` has moved past the last link."""
        return self._exhausted

    def advance(self) -> Step:
        """Move the cursor forward and return the step that runs the link under it."""
        self.cursor += 1
        step = Step(self, self.cursor)
        if self._pending is not None:
            self._pending.append(step)
        return step

    async def _run(self, cursor: int) -> None:
        if cursor >= len(self._links):
            if self._exhausted:
                return
            self._exhausted = True
            if self._on_exhausted is not None:
                await self._on_exhausted()
            return

        pending: list[Step] = []
        outer, self._pending = self._pending, pending
        try:
            await invoke(self._links[cursor], self._request, self._response, self.advance)
        finally:
            self._pending = outer

        for step in pending:
            if not step.started:
                await step
