"""Domain models for the Bing wallpaper client."""

from .config import Config
from .exceptions import (
    BingWallpaperError,
    ConfigError,
    DateParseError,
    FetchError,
    FormattingError,
    InvalidResolutionError,
    InvalidUrlError,
    NoMatchingResolutionError,
    ServiceError,
)
from .resolution import DEFAULT_CATALOG, DEFAULT_RESOLUTIONS, Resolution, ResolutionCatalog
from .wallpaper import WallpaperImage

__all__ = [
    "Resolution",
    "ResolutionCatalog",
    "DEFAULT_CATALOG",
    "DEFAULT_RESOLUTIONS",
    "WallpaperImage",
    "Config",
    "BingWallpaperError",
    "ConfigError",
    "InvalidUrlError",
    "InvalidResolutionError",
    "NoMatchingResolutionError",
    "ServiceError",
    "FetchError",
    "FormattingError",
    "DateParseError",
]
