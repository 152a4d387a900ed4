"""Mutable inbound request.

The transport fills ``method`` and ``url``; the dispatch engine fills
``params``. ``locals`` is scratch space for middleware to hand values to
handlers further down the chain.
"""

from dataclasses import dataclass, field
from typing import Any

from switchyard._internal.types import ParamKey


@dataclass(slots=True)
class Request:
    """An inbound request as seen by the router.

    ``url`` is the raw request target. A query string, if present, is
    part of the literal text the router matches against; it is never
    parsed.
    """

    method: str
    url: str
    params: dict[ParamKey, str] = field(default_factory=dict)
    headers: dict[str, str] = field(default_factory=dict)
    locals: dict[str, Any] = field(default_factory=dict)

    @property
    def path(self) -> str:
        """The URL without its query string."""
        return self.url.partition("?")[0]

    @property
    def query_string(self) -> str:
        """Everything after the first ``?``, or ``""``."""
        return self.url.partition("?")[2]
