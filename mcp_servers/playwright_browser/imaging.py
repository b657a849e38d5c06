"""Screenshot inspection helpers."""

from __future__ import annotations

import io

from PIL import Image, UnidentifiedImageError


def describe_image(data: bytes) -> str | None:
    """Return e.g. '1280x720 PNG' for encoded image bytes, or None if undecodable."""
    if not data:
        return None
    try:
        with Image.open(io.BytesIO(data)) as img:
            width, height = img.size
            fmt = img.format or "image"
    except (UnidentifiedImageError, OSError):
        return None
    return f"{width}x{height} {fmt}"
