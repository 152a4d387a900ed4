"""Test client for switchyard routers.

Uses the same Request and Response types a host would pass in.
No transport involved.
"""

from switchyard.dispatch.state import DispatchState
from switchyard.http.request import Request
from switchyard.http.response import Response
from switchyard.routing.router import Router


class TestClient:
    """Async test client for switchyard routers.

    Usage::

        client = TestClient(router)
        response = await client.get("/users/42")
        assert response.text == "user 42"
        assert client.last_request.params == {"id": "42"}
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("last_request", "last_state", "router")

    def __init__(self, router: Router) -> None:
        self.router = router
        self.last_request: Request | None = None
        self.last_state: DispatchState | None = None

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Dispatch *method* *url* and return the response the chain produced."""
        request = Request(method=method, url=url, headers=dict(headers or {}))
        response = Response()
        self.last_request = request
        self.last_state = await self.router.dispatch(request, response)
        return response

    async def get(self, url: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a GET request."""
        return await self.request("GET", url, headers=headers)

    async def post(self, url: str, *, headers: dict[str, str] | None = None) -> Response:
        """Send a POST request."""
        return await self.request("POST", url, headers=headers)
