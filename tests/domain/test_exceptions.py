"""Tests for domain exceptions."""

import pytest

from domain.exceptions import (
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


@pytest.mark.parametrize(
    "error_class, parent",
    [
        (ConfigError, BingWallpaperError),
        (InvalidUrlError, ConfigError),
        (InvalidResolutionError, BingWallpaperError),
        (NoMatchingResolutionError, InvalidResolutionError),
        (ServiceError, BingWallpaperError),
        (FetchError, ServiceError),
        (FormattingError, ServiceError),
        (DateParseError, FormattingError),
    ],
)
def test_exception_hierarchy(error_class, parent):
    assert issubclass(error_class, parent)


def test_invalid_url_error_message():
    """Test InvalidUrlError with message."""
    error = InvalidUrlError("URL 'x' is invalid or malformed.")
    with pytest.raises(ConfigError, match="invalid or malformed"):
        raise error


def test_date_parse_error_attributes():
    error = DateParseError("startdate", "2015-01-01", "%Y%m%d")
    assert error.field_name == "startdate"
    assert error.value == "2015-01-01"
    assert error.fmt == "%Y%m%d"
    assert "startdate" in str(error)
    assert "'2015-01-01'" in str(error)
