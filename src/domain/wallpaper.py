"""Wallpaper image domain model."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WallpaperImage:
    """One normalized image record from the Bing image archive."""

    start_date: date
    full_start_date: datetime
    end_date: date
    url: str  # Absolute, possibly rewritten for a forced resolution
    copyright: str
    copyright_link: str
    title: str = ""

    @property
    def is_current(self) -> bool:
        """Check if the image is the wallpaper of today."""
        return self.start_date <= date.today() < self.end_date

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "start_date": self.start_date.isoformat(),
            "full_start_date": self.full_start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "url": self.url,
            "copyright": self.copyright,
            "copyright_link": self.copyright_link,
            "title": self.title,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WallpaperImage":
        """Create from dict produced by to_dict."""
        return cls(
            start_date=date.fromisoformat(data["start_date"]),
            full_start_date=datetime.fromisoformat(data["full_start_date"]),
            end_date=date.fromisoformat(data["end_date"]),
            url=data.get("url", ""),
            copyright=data.get("copyright", ""),
            copyright_link=data.get("copyright_link", ""),
            title=data.get("title", ""),
        )
