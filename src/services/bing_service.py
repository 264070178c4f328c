"""Bing wallpaper-of-the-day service."""

from collections.abc import Iterable
from dataclasses import replace
from typing import Any

import aiohttp

from domain.config import Config, validate_base_url
from domain.exceptions import FetchError, ServiceError
from domain.resolution import DEFAULT_CATALOG, Resolution, ResolutionCatalog
from domain.wallpaper import WallpaperImage
from services.base import HttpService
from services.result_formatter import ResultFormatter
from services.url_rewriter import rewrite_url_for_resolution

HTTP_OK = 200


class BingWallpaperService(HttpService):
    """Async client for the Bing image archive with resolution rewriting."""

    ARCHIVE_PATH = "/HPImageArchive.aspx"

    def __init__(
        self,
        resolutions: Iterable[Any] | None = None,
        base_url: str | None = None,
        market: str | None = None,
    ) -> None:
        """Initialize Bing wallpaper service.

        Args:
            resolutions: Supported resolutions in ascending order (defaults to
                the built-in catalog)
            base_url: Absolute base URL of the image archive
            market: Default market such as "en-US", used when a request names none
        """
        super().__init__()
        self._config = Config(market=market)
        if resolutions is not None:
            self.set_resolutions(resolutions)
        if base_url is not None:
            self.set_base_url(base_url)

    @classmethod
    def from_config(cls, config: Config) -> "BingWallpaperService":
        """Create a service from a Config domain model."""
        config.validate()
        return cls(
            resolutions=config.resolutions,
            base_url=config.base_url,
            market=config.market,
        )

    @property
    def config(self) -> Config:
        """Copy of the current configuration; use the setters to change it."""
        return replace(self._config)

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        self.set_base_url(url)

    def get_base_url(self) -> str:
        """Get the image archive base URL."""
        return self._config.base_url

    def set_base_url(self, url: str) -> None:
        """Set the image archive base URL.

        Raises:
            InvalidUrlError: If the URL is invalid or malformed
        """
        self._config.base_url = validate_base_url(url)

    @property
    def resolutions(self) -> ResolutionCatalog:
        return self._config.resolutions

    @resolutions.setter
    def resolutions(self, resolutions: Iterable[Any]) -> None:
        self.set_resolutions(resolutions)

    def get_resolutions(self) -> ResolutionCatalog:
        """Get the catalog of supported resolutions."""
        return self._config.resolutions

    def set_resolutions(self, resolutions: Iterable[Any]) -> None:
        """Replace the catalog of supported resolutions.

        Args:
            resolutions: ResolutionCatalog or iterable of (width, height) pairs
                in ascending order

        Raises:
            InvalidResolutionError: If an entry is malformed
            ConfigError: If the catalog is empty
        """
        self._config.resolutions = ResolutionCatalog.from_pairs(resolutions)

    def find_nearest_resolution(self, resolution: Any) -> Resolution:
        """Find the nearest supported resolution not larger than the given one.

        Raises:
            InvalidResolutionError: If the resolution is missing or non-numeric
            NoMatchingResolutionError: If no supported resolution fits
        """
        return self._config.resolutions.find_nearest(resolution)

    def rewrite_url_for_resolution(self, url: str, resolution: Any) -> str:
        """Rewrite an image URL to point at the given resolution.

        Raises:
            InvalidResolutionError: If the resolution is missing or non-numeric
        """
        return rewrite_url_for_resolution(url, resolution)

    def _resolve(self, resolution: Any) -> Resolution | None:
        if resolution is None:
            return None
        requested = Resolution.coerce(resolution)
        if requested in self._config.resolutions:
            return requested
        nearest = self.find_nearest_resolution(requested)
        self.log_debug(f"Resolution {requested} not supported, using {nearest}")
        return nearest

    async def get_wallpaper(
        self,
        resolution: Any = None,
        count: int = 1,
        start_index: int = 0,
        market: str | None = None,
    ) -> list[WallpaperImage]:
        """Get wallpaper image(s) from Bing.

        Args:
            resolution: Desired resolution; unsupported ones are replaced by
                the nearest supported resolution
            count: Number of images to request
            start_index: Index of the first image, 0 being today
            market: Market targeting such as "en-US"

        Returns:
            List of WallpaperImage models

        Raises:
            InvalidResolutionError: If the resolution is invalid or nothing fits
            FetchError: If the request or JSON decoding fails
            FormattingError: If the response records cannot be formatted
        """
        if count < 1:
            raise ServiceError(f"Image count must be at least 1, got {count}")
        if start_index < 0:
            raise ServiceError(f"Start index must not be negative, got {start_index}")

        force_resolution = self._resolve(resolution)
        data = await self._fetch(count, start_index, market or self._config.market)

        formatter = ResultFormatter(self._config.base_url)
        try:
            return formatter.format(data, force_resolution)
        except ServiceError as e:
            self.log_error(f"Failed to process Bing wallpaper data: {e}", exc_info=True)
            raise

    async def _fetch(self, count: int, start_index: int, market: str | None) -> dict:
        params = {
            "format": "js",
            "n": count,
            "idx": start_index,
            "mkt": market or "",
        }
        url = self._config.base_url.rstrip("/") + self.ARCHIVE_PATH
        self.log_debug(f"Requesting {url} with {params}")

        try:
            session = await self._get_session()
            async with session.get(url, params=params) as response:
                if response.status != HTTP_OK:
                    raise FetchError(f"Bing returned HTTP {response.status}")
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            self.log_error(f"Bing wallpaper request failed: {e}", exc_info=True)
            raise FetchError(f"Failed to fetch Bing wallpaper data: {e}") from e

        if not isinstance(data, dict):
            raise FetchError(f"Unexpected Bing response: {data!r}")
        return data
