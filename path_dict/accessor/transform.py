"""Leaf transformation and path-to-path restructuring."""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .paths import get_path, path_exists, set_path


if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Iterable, Sequence


logger = logging.getLogger(__name__)


def map_leaves(
    callbacks: Sequence[Callable[[Any], Any]],
    mapping: Mapping[str, Any],
    keys: Collection[str] | None = None,
) -> dict[str, Any]:
    """Return a copy of ``mapping`` with every selected leaf passed through ``callbacks``.

    Callbacks run in order, each receiving the previous one's result. Nested
    mappings are always descended into; ``keys`` only filters leaves at the
    top level of ``mapping``. The input is never mutated.
    """
    if callable(callbacks):
        msg = "callbacks must be a sequence of callables; wrap a single callback in a list"
        raise TypeError(msg)
    if isinstance(keys, str):
        msg = "keys must be a collection of key names, not a string"
        raise TypeError(msg)

    result: dict[str, Any] = {}
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            result[key] = map_leaves(callbacks, value)
        elif keys is None or key in keys:
            for callback in callbacks:
                value = callback(value)
            result[key] = value
        else:
            result[key] = value
    return result


def remap(
    values: Mapping[str, Any],
    path_map: Mapping[str, str],
    create_mode: bool = True,
    *,
    default: Any = None,
    delimiter: str = ".",
) -> dict[str, Any]:
    """Build a new mapping by copying values from source paths to destination paths.

    With ``create_mode`` a missing source is written as ``default``; without
    it the destination is skipped. Copied values are deep copies, so the result
    shares no nested containers with ``values``.
    """
    results: dict[str, Any] = {}
    for source, destination in path_map.items():
        if path_exists(values, source, delimiter) or create_mode:
            value = copy.deepcopy(get_path(values, source, default, delimiter))
            set_path(results, destination, value, delimiter)
        else:
            logger.debug("skipping missing source path %r", source)
    return results


def remap_collection(
    collection: Iterable[Mapping[str, Any]],
    path_map: Mapping[str, str],
    create_mode: bool = True,
    *,
    default: Any = None,
    delimiter: str = ".",
) -> list[dict[str, Any]]:
    """Apply :func:`remap` to each item of ``collection``, preserving order."""
    return [remap(item, path_map, create_mode, default=default, delimiter=delimiter) for item in collection]
