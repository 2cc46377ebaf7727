"""
Helpers shared by the connect cluster services.
"""

from typing import Mapping, Optional


def get_map_value_or_string(mapping: Optional[Mapping[str, str]], key: str, fallback: str) -> str:
    """Return the map entry for ``key``, or ``fallback`` if the entry does not exist.

    A missing mapping behaves like an empty one. Stored values are returned
    as-is, including empty strings.
    """
    if mapping and key in mapping:
        return mapping[key]

    return fallback
