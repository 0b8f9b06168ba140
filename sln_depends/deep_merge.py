"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = frozenset({"project_extensions", "solution_extensions"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for the extension lists.
    - 'project_extensions' and 'solution_extensions' are additive.
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
            # Extensions compare case-insensitively, so fold before deduplicating
            merged_set = {str(ext).lower() for ext in result[key]}
            merged_set.update(str(ext).lower() for ext in value)
            result[key] = sorted(merged_set)
        else:
            result[key] = value
    return result
