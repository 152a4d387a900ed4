"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

import logging
from dataclasses import dataclass

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict=True, log_level="debug")
    """

    # Registration
    strict: bool = False  # Raise ConfigurationError instead of ignoring bad routes

    # Dispatch
    prefix_check: bool = True  # Reject dynamic candidates by literal prefix first
    not_found_status: int = 404
    not_found_body: str = "Not Found"

    # Logging
    log_level: str = "warning"


def configure_logging(config: RouterConfig, handler: logging.Handler | None = None) -> logging.Logger:
    """Apply ``config.log_level`` to the ``switchyard`` logger.

    The library never installs handlers on its own. Hosts that want
    switchyard's records without configuring ``logging`` themselves call
    this once at startup; a ``StreamHandler`` is attached unless a
    handler is given.

    Raises ``ValueError`` for an unknown level name.
    """
    try:
        level = _LOG_LEVELS[config.log_level.lower()]
    except KeyError:
        msg = f"Unknown log level {config.log_level!r}. Expected one of: {', '.join(_LOG_LEVELS)}"
        raise ValueError(msg) from None

    logger = logging.getLogger("switchyard")
    logger.setLevel(level)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    if handler not in logger.handlers:
        logger.addHandler(handler)
    return logger
