"""
Adapter: Logger service.

Implements the LoggerService port by forwarding to a stdlib logger.
Logging must not change program behavior, so sink failures are dropped.
"""

import logging

from app.domain.catalog.ports import LoggerService

DEFAULT_LOGGER_NAME = "bookstore.api"


class StandardLoggerService(LoggerService):
    """Forwards info/warn/error messages to ``logging``."""

    def __init__(self, name: str = DEFAULT_LOGGER_NAME) -> None:
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._emit(logging.INFO, message)

    def warn(self, message: str) -> None:
        self._emit(logging.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(logging.ERROR, message)

    def _emit(self, level: int, message: str) -> None:
        try:
            self._logger.log(level, message)
        except Exception:  # noqa: BLE001
            pass
