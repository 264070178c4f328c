"""Base service classes with logging and HTTP session handling."""

from abc import ABC
from logging import Logger, getLogger

import aiohttp


class BaseService(ABC):
    """Base class for all services with logging support."""

    def __init__(self) -> None:
        """Initialize base service with logger."""
        self._logger: Logger = getLogger(self.__class__.__name__)

    @property
    def logger(self) -> Logger:
        """Get logger instance."""
        return self._logger

    def log_debug(self, message: str) -> None:
        """Log debug message."""
        self._logger.debug(message)

    def log_info(self, message: str) -> None:
        """Log info message."""
        self._logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self._logger.warning(message)

    def log_error(self, message: str, exc_info: bool = False) -> None:
        """Log error message."""
        self._logger.error(message, exc_info=exc_info)


class HttpService(BaseService):
    """Service owning a lazily created aiohttp session.

    Usable as an async context manager so the session is closed on exit.
    """

    def __init__(self) -> None:
        """Initialize service without opening a session."""
        super().__init__()
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self.log_debug("Closed aiohttp session")
        self._session = None

    async def __aenter__(self) -> "HttpService":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
