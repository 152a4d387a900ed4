"""Tests for switchyard.errors — exception hierarchy and error messages."""

import pytest

from switchyard.errors import ConfigurationError, HTTPError, NotFound, SwitchyardError
from switchyard.routing.router import Router


class TestHierarchy:
    def test_http_error_is_switchyard_error(self) -> None:
        assert issubclass(HTTPError, SwitchyardError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_configuration_error_is_switchyard_error(self) -> None:
        assert issubclass(ConfigurationError, SwitchyardError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request")
        assert err.status == 400
        assert err.detail == "Bad request"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request")) == "400: Bad request"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"
        assert err.headers == ()

    def test_custom_detail(self) -> None:
        err = NotFound("No user 42")
        assert str(err) == "404: No user 42"


class TestRouterErrors:
    def test_resolve_raises_not_found_with_context(self) -> None:
        router = Router()
        with pytest.raises(NotFound) as exc_info:
            router.resolve("GET", "/missing")
        assert "GET" in str(exc_info.value)
        assert "/missing" in str(exc_info.value)

    def test_bad_pattern_raises_configuration_error(self) -> None:
        router = Router()
        with pytest.raises(ConfigurationError):
            router.get("/users/[id", lambda req, res, advance: None)
