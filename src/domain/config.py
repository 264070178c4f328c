"""Config domain model with validation."""

from dataclasses import dataclass, field
from typing import Optional

from yarl import URL

from .exceptions import ConfigError, InvalidUrlError
from .resolution import DEFAULT_CATALOG, ResolutionCatalog

DEFAULT_BASE_URL = "http://bing.com"


def validate_base_url(url: object) -> str:
    """Check that url is an absolute URL with a scheme and a host.

    Raises:
        InvalidUrlError: If the URL is invalid or malformed
    """
    if not isinstance(url, str) or not url or url != url.strip():
        raise InvalidUrlError(f"URL {url!r} is invalid or malformed.")
    try:
        parsed = URL(url)
    except (TypeError, ValueError) as e:
        raise InvalidUrlError(f"URL {url!r} is invalid or malformed.") from e
    if not parsed.is_absolute() or not parsed.scheme or not parsed.host:
        raise InvalidUrlError(f"URL {url!r} is invalid or malformed.")
    return url


@dataclass
class Config:
    """Client configuration domain model."""

    base_url: str = DEFAULT_BASE_URL
    resolutions: ResolutionCatalog = field(default=DEFAULT_CATALOG)
    market: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration state."""
        validate_base_url(self.base_url)
        if not isinstance(self.resolutions, ResolutionCatalog):
            raise ConfigError("resolutions must be a ResolutionCatalog")
        if self.market is not None and not isinstance(self.market, str):
            raise ConfigError("market must be a string such as 'en-US'")

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "base_url": self.base_url,
            "resolutions": self.resolutions.to_list(),
            "market": self.market,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create from dict for JSON deserialization."""
        resolutions = data.get("resolutions")
        return cls(
            base_url=data.get("base_url") or DEFAULT_BASE_URL,
            resolutions=ResolutionCatalog.from_pairs(resolutions)
            if resolutions
            else DEFAULT_CATALOG,
            market=data.get("market"),
        )
