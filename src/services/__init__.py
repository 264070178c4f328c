"""Services for the Bing wallpaper client."""

from .bing_service import BingWallpaperService
from .config_service import ConfigService
from .result_formatter import ResultFormatter, parse_date, parse_datetime
from .url_rewriter import rewrite_url_for_resolution

__all__ = [
    "BingWallpaperService",
    "ConfigService",
    "ResultFormatter",
    "parse_date",
    "parse_datetime",
    "rewrite_url_for_resolution",
]
