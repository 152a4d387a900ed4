"""Structural types for host-provided request and response objects.

No base class required. The engine checks the shape, not the lineage.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HostRequest(Protocol):
    """What the engine reads from (and writes to) an inbound request.

    ``method`` and ``url`` are read. ``params`` is assigned by the
    dispatch engine once a dynamic route has been resolved.
    """

    method: str
    url: str
    params: dict[Any, str]


@runtime_checkable
class HostResponse(Protocol):
    """What the engine needs to write the not-found response."""

    def write_head(self, status: int, headers: Any = None) -> None: ...

    def end(self, body: str | bytes = "") -> None: ...
