"""Resolution value object and the catalog of supported Bing resolutions."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .exceptions import ConfigError, InvalidResolutionError, NoMatchingResolutionError


def _to_dimension(value: Any, name: str) -> int:
    """Convert a width or height given as int or numeric string."""
    if isinstance(value, bool):
        raise InvalidResolutionError(f"Resolution {name} must be numeric, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    raise InvalidResolutionError(f"Resolution {name} must be numeric, got {value!r}")


@dataclass(frozen=True)
class Resolution:
    """Value object representing an image resolution."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidResolutionError(
                    f"Resolution {name} must be an integer, got {value!r}"
                )
            if value <= 0:
                raise InvalidResolutionError(
                    f"Resolution {name} must be positive, got {value}"
                )

    @classmethod
    def coerce(cls, value: Any) -> "Resolution":
        """Build a Resolution from the loosely shaped inputs callers pass around.

        Accepts a Resolution, a ``(width, height)`` pair, a mapping with
        ``width`` and ``height`` keys, or a ``"WxH"`` string.

        Raises:
            InvalidResolutionError: If a dimension is missing or not numeric
        """
        if isinstance(value, Resolution):
            return value
        if isinstance(value, str):
            parts = value.lower().split("x")
            if len(parts) != 2:
                raise InvalidResolutionError(f"Resolution {value!r} is invalid")
            width, height = parts
        elif isinstance(value, Mapping):
            width, height = value.get("width"), value.get("height")
        elif isinstance(value, Sequence) and len(value) == 2:
            width, height = value
        else:
            raise InvalidResolutionError(f"Resolution {value!r} is invalid")

        if width is None or height is None:
            raise InvalidResolutionError(f"Resolution {value!r} is missing a dimension")

        return cls(
            width=_to_dimension(width, "width"),
            height=_to_dimension(height, "height"),
        )

    @property
    def area(self) -> int:
        """Number of pixels."""
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        """Calculate aspect ratio."""
        return self.width / self.height

    def fits_within(self, bound: "Resolution") -> bool:
        """Check that neither dimension exceeds the bound."""
        return self.width <= bound.width and self.height <= bound.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class ResolutionCatalog:
    """Ordered, immutable list of resolutions the image archive serves.

    Entries are expected in ascending order. The order decides which entry
    wins in :meth:`find_nearest`, as the last fitting entry is returned.
    """

    entries: tuple[Resolution, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise ConfigError("Resolution catalog must not be empty")
        for entry in self.entries:
            if not isinstance(entry, Resolution):
                raise ConfigError(f"Catalog entry {entry!r} is not a Resolution")

    @classmethod
    def from_pairs(cls, pairs: Iterable[Any]) -> "ResolutionCatalog":
        """Create a catalog from any iterable of coercible resolutions."""
        if isinstance(pairs, ResolutionCatalog):
            return pairs
        return cls(entries=tuple(Resolution.coerce(pair) for pair in pairs))

    def __contains__(self, item: object) -> bool:
        try:
            resolution = Resolution.coerce(item)
        except InvalidResolutionError:
            return False
        return resolution in self.entries

    def __iter__(self) -> Iterator[Resolution]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find_nearest(self, requested: Any) -> Resolution:
        """Find the last catalog entry that fits within the requested resolution.

        Args:
            requested: Resolution or anything accepted by Resolution.coerce

        Returns:
            The matching catalog resolution

        Raises:
            InvalidResolutionError: If the requested resolution is malformed
            NoMatchingResolutionError: If the request is smaller than every entry
        """
        bound = Resolution.coerce(requested)
        fitting = [entry for entry in self.entries if entry.fits_within(bound)]
        if not fitting:
            raise NoMatchingResolutionError(
                f"No supported resolution fits within {bound}, smallest is {self.entries[0]}"
            )
        return fitting[-1]

    def to_list(self) -> list[list[int]]:
        """Convert to ``[[width, height], ...]`` for JSON serialization."""
        return [[entry.width, entry.height] for entry in self.entries]


DEFAULT_RESOLUTIONS: tuple[tuple[int, int], ...] = (
    (220, 176),
    (240, 240),
    (320, 240),
    (400, 240),
    (320, 320),
    (640, 360),
    (640, 480),
    (800, 480),
    (800, 600),
    (1024, 768),
    (1280, 720),
    (1280, 768),
    (1366, 768),
    (1920, 1080),
)

DEFAULT_CATALOG = ResolutionCatalog.from_pairs(DEFAULT_RESOLUTIONS)
