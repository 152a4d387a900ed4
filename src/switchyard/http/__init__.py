"""Request and response types the dispatch engine reads from and writes to.

Host transports may pass their own objects as long as they satisfy
``HostRequest`` and ``HostResponse``. The dataclasses here are the
reference implementations used by ``switchyard.testing``.
"""

from switchyard.http.protocol import HostRequest, HostResponse
from switchyard.http.request import Request
from switchyard.http.response import Response

__all__ = ["HostRequest", "HostResponse", "Request", "Response"]
