"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = {"image_extensions"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for additive keys.
    - 'image_extensions' is additive.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Lower-cased so ".PNG" and ".png" collapse into one entry
            merged_set = {str(v).lower() for v in result[key]}
            merged_set.update(str(v).lower() for v in value)
            result[key] = sorted(merged_set)
        else:
            result[key] = value
    return result
