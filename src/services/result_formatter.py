"""Formatting of raw HPImageArchive responses into domain models."""

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from typing import Any

from domain.exceptions import DateParseError, FormattingError
from domain.resolution import Resolution
from domain.wallpaper import WallpaperImage
from services.base import BaseService
from services.url_rewriter import rewrite_url_for_resolution

DATE_FORMAT = "%Y%m%d"
DATETIME_FORMAT = "%Y%m%d%H%M"


def parse_date(value: Any, field_name: str = "date") -> date:
    """Parse a YYYYMMDD string into a date.

    Raises:
        DateParseError: If value is not a string in the expected format
    """
    return _strptime(value, DATE_FORMAT, field_name).date()


def parse_datetime(value: Any, field_name: str = "datetime") -> datetime:
    """Parse a YYYYMMDDHHmm string into a naive datetime.

    Raises:
        DateParseError: If value is not a string in the expected format
    """
    return _strptime(value, DATETIME_FORMAT, field_name)


def join_url(base_url: str, path: Any) -> str:
    """Join an image path to the base URL with exactly one slash between them."""
    if not isinstance(path, str):
        raise TypeError(f"image url must be a string, got {path!r}")
    return base_url.rstrip("/") + "/" + path.lstrip("/")


def _strptime(value: Any, fmt: str, field_name: str) -> datetime:
    # strptime accepts single-digit fields, so the length is checked as well
    expected_length = len(datetime(2000, 1, 1).strftime(fmt))
    if not isinstance(value, str) or len(value) != expected_length or not value.isdigit():
        raise DateParseError(field_name, value, fmt)
    try:
        return datetime.strptime(value, fmt)
    except ValueError as e:
        raise DateParseError(field_name, value, fmt) from e


class ResultFormatter(BaseService):
    """Maps image archive records to WallpaperImage models."""

    def __init__(self, base_url: str) -> None:
        """Initialize formatter.

        Args:
            base_url: Absolute URL the relative image paths are joined to
        """
        super().__init__()
        self.base_url = base_url

    def format(
        self, raw: Mapping[str, Any], force_resolution: Resolution | None = None
    ) -> list[WallpaperImage]:
        """Format a decoded HPImageArchive response.

        Args:
            raw: Decoded JSON response
            force_resolution: If given, image URLs are rewritten to it

        Returns:
            One WallpaperImage per record, in response order

        Raises:
            DateParseError: If a record carries a malformed date
            FormattingError: If the images entry is not a list, or a record is
                missing fields or is malformed
        """
        images = raw.get("images")
        if images is None:
            self.log_debug("Response has no images entry")
            return []
        if isinstance(images, (str, bytes)) or not isinstance(images, Sequence):
            raise FormattingError(f"Response images entry is not a list: {images!r}")

        formatted = [
            self._image_from_dict(index, record, force_resolution)
            for index, record in enumerate(images)
        ]
        self.log_debug(f"Formatted {len(formatted)} images")
        return formatted

    def _image_from_dict(
        self, index: int, data: Any, force_resolution: Resolution | None
    ) -> WallpaperImage:
        if not isinstance(data, Mapping):
            raise FormattingError(f"Image record {index} is not an object: {data!r}")

        try:
            url = join_url(self.base_url, data["url"])
            if force_resolution is not None:
                url = rewrite_url_for_resolution(url, force_resolution)

            return WallpaperImage(
                start_date=parse_date(data["startdate"], "startdate"),
                full_start_date=parse_datetime(data["fullstartdate"], "fullstartdate"),
                end_date=parse_date(data["enddate"], "enddate"),
                url=url,
                copyright=data["copyright"],
                copyright_link=data["copyrightlink"],
                title=data.get("title", ""),
            )
        except KeyError as e:
            raise FormattingError(f"Image record {index} is missing field {e}") from e
        except TypeError as e:
            raise FormattingError(f"Image record {index} is malformed: {e}") from e
