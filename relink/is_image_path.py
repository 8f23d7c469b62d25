"""Utility for deciding whether a tree path names a raster image."""

from collections.abc import Iterable
from pathlib import PurePosixPath


def is_image_path(path: str, extensions: Iterable[str]) -> bool:
    """Check the path suffix against a list of image extensions."""
    suffix = PurePosixPath(path).suffix.lower()
    if not suffix:
        return False
    return suffix in {ext.lower() for ext in extensions}
