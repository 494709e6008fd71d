"""Log file wiring for the server and the provider client library."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOG_NAME = "server.log"
PROVIDER_LOG_NAME = "provider.log"

#: Logger that every module under the package inherits from.
PACKAGE_LOGGER = "pair_programmer"

#: Loggers used by the OpenAI SDK and its HTTP transport.
PROVIDER_LOGGERS = ("openai", "httpx")

_installed: List[tuple[logging.Logger, logging.Handler]] = []


def _file_handler(path: Path) -> logging.FileHandler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    logger.setLevel(level)
    logger.addHandler(handler)
    _installed.append((logger, handler))


def reset_logging() -> None:
    """Detach and close every handler installed by `configure_logging`."""
    while _installed:
        logger, handler = _installed.pop()
        logger.removeHandler(handler)
        handler.close()


def configure_logging(log_dir: Path, debug: bool = False) -> logging.Logger:
    """
    Route the package log and the provider library log into `log_dir`.

    Both streams are append-only files; stdout is left untouched because the
    stdio transport uses it for protocol frames. Calling this again replaces
    the handlers from the previous call.

    Returns
    -------
    logging.Logger
        The package logger.
    """
    reset_logging()
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if debug else logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _attach(package_logger, _file_handler(log_dir / SERVER_LOG_NAME), level)

    # One shared handler so both libraries append to the same file.
    provider_handler = _file_handler(log_dir / PROVIDER_LOG_NAME)
    for name in PROVIDER_LOGGERS:
        _attach(logging.getLogger(name), provider_handler, level)

    return package_logger
