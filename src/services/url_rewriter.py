"""Rewriting of the resolution token embedded in Bing image URLs."""

import re
from typing import Any

from domain.resolution import Resolution

# "_1920x1080." right before the file extension
RESOLUTION_TOKEN = re.compile(r"_(\d+)x(\d+)\.")


def rewrite_url_for_resolution(url: str, resolution: Any) -> str:
    """Rewrite the first resolution token of url to the given resolution.

    URLs without a token are returned unchanged.

    Raises:
        InvalidResolutionError: If resolution is missing or non-numeric
    """
    target = Resolution.coerce(resolution)
    return RESOLUTION_TOKEN.sub(f"_{target.width}x{target.height}.", url, count=1)
