"""Flat listing helpers for top-level mapping entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Mapping


def prefix(values: list[Any], prefix_str: str) -> list[str]:
    """Prefix every element of ``values`` in place and return the same list."""
    for index, value in enumerate(values):
        values[index] = f"{prefix_str}{value}"
    return values


def flatten(mapping: Mapping[str, Any], glue: str = "=") -> list[str]:
    """Join each top-level key and value with ``glue``.

    Nested values are not expanded; they are rendered with ``str()``.
    """
    return [f"{key}{glue}{value}" for key, value in mapping.items()]


def keys(mapping: Mapping[str, Any], prefix_str: str | None = None) -> list[str]:
    result = list(mapping.keys())
    if prefix_str:
        return prefix(result, prefix_str)
    return result


def values(mapping: Mapping[str, Any], prefix_str: str | None = None) -> list[Any]:
    result = list(mapping.values())
    if prefix_str:
        return prefix(result, prefix_str)
    return result
