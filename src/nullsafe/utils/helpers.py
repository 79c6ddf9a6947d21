"""Dotted-path helpers built on the chained accessor."""

from collections.abc import Callable, Mapping
from typing import Any

from nullsafe.accessor import fetch_chain
from nullsafe.exceptions import InvalidChainError


def _segment_accessor(key: str) -> Callable[[Any], Any]:
    def access(value: Any) -> Any:
        if isinstance(value, Mapping):
            return value.get(key)
        return getattr(value, key, None)

    access.__name__ = f"get_{key}"
    return access


def path_accessors(path: str) -> list[Callable[[Any], Any]]:
    """Build one accessor per segment of a dotted path.

    Mappings are read with ``.get``, any other value with ``getattr``; a
    missing key or attribute yields None.

    Raises:
        InvalidChainError: If the path or one of its segments is empty
    """
    if not path:
        raise InvalidChainError("Path must not be empty")
    keys = path.split(".")
    if not all(keys):
        raise InvalidChainError(f"Path contains an empty segment: {path!r}")
    return [_segment_accessor(key) for key in keys]


def get_nested_value(data: Any, path: str) -> Any:
    """Get nested value from mappings or objects using dot notation.

    Args:
        data: Mapping or object to extract value from
        path: Dot-separated path (e.g., "metadata.user.id")

    Returns:
        Value at path, or None if any level is absent

    Example:
        >>> data = {"metadata": {"user": {"id": 123}}}
        >>> get_nested_value(data, "metadata.user.id")
        123
    """
    return fetch_chain(data, *path_accessors(path))


def get_nested_value_or_default(data: Any, path: str, default: Any) -> Any:
    """Get nested value using dot notation, or ``default`` if it is absent."""
    value = get_nested_value(data, path)
    return default if value is None else value
