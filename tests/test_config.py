"""Tests for switchyard.config — RouterConfig and logging setup."""

import logging
from collections.abc import Iterator

import pytest

from switchyard.config import RouterConfig, configure_logging


@pytest.fixture
def _clean_logger() -> Iterator[None]:
    logger = logging.getLogger("switchyard")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestRouterConfig:
    def test_defaults(self) -> None:
        config = RouterConfig()
        assert config.strict is False
        assert config.prefix_check is True
        assert config.not_found_status == 404
        assert config.not_found_body == "Not Found"
        assert config.log_level == "warning"

    def test_frozen(self) -> None:
        config = RouterConfig()
        with pytest.raises(AttributeError):
            config.strict = True  # type: ignore[misc]


@pytest.mark.usefixtures("_clean_logger")
class TestConfigureLogging:
    def test_sets_level(self) -> None:
        logger = configure_logging(RouterConfig(log_level="DEBUG"), handler=logging.NullHandler())
        assert logger.name == "switchyard"
        assert logger.level == logging.DEBUG

    def test_handler_added_once(self) -> None:
        handler = logging.NullHandler()
        configure_logging(RouterConfig(), handler=handler)
        logger = configure_logging(RouterConfig(), handler=handler)
        assert logger.handlers.count(handler) == 1

    def test_default_stream_handler(self) -> None:
        logger = configure_logging(RouterConfig(log_level="info"))
        assert any(isinstance(h, logging.StreamHandler) for h in logger.handlers)

    def test_unknown_level(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(RouterConfig(log_level="loud"))
