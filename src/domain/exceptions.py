"""Custom exceptions for the Bing wallpaper domain."""


class BingWallpaperError(Exception):
    """Base exception for Bing wallpaper errors."""

    pass


class ConfigError(BingWallpaperError):
    """Configuration-related errors."""

    pass


class InvalidUrlError(ConfigError):
    """Base URL is not a well-formed absolute URL."""

    pass


class InvalidResolutionError(BingWallpaperError):
    """Resolution is missing a dimension or a dimension is not numeric."""

    pass


class NoMatchingResolutionError(InvalidResolutionError):
    """No catalog resolution fits within the requested bounds."""

    pass


class ServiceError(BingWallpaperError):
    """Service layer errors."""

    pass


class FetchError(ServiceError):
    """Transport, HTTP status or JSON decoding failure."""

    pass


class FormattingError(ServiceError):
    """An API record could not be turned into a WallpaperImage."""

    pass


class DateParseError(FormattingError):
    """A date field in an API record does not match its expected format."""

    def __init__(self, field_name: str, value: object, fmt: str) -> None:
        super().__init__(
            f"Cannot parse {field_name}={value!r} with format {fmt!r}"
        )
        self.field_name = field_name
        self.value = value
        self.fmt = fmt
