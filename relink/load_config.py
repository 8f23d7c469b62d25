"""Logic for loading and merging configuration files."""

from pathlib import Path
from typing import Any

import yaml

from relink.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "relative_url_root": "/",
    "default_ref": "master",
    "image_extensions": [
        ".bmp",
        ".gif",
        ".ico",
        ".jpeg",
        ".jpg",
        ".png",
        ".tif",
        ".tiff",
        ".webp",
    ],
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = DEFAULT_CONFIG.copy()
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
