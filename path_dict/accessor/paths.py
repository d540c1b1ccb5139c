"""Path-addressed access to nested mappings."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Iterable


logger = logging.getLogger(__name__)


class PathTypeError(TypeError):
    """Raised when a path segment traverses through a non-mapping value."""

    def __init__(self, path: str, value: Any) -> None:
        super().__init__(f"cannot traverse into non-mapping value at {path!r}: {type(value).__name__}")
        self.path = path
        self.value = value


def split_path(path: str, delimiter: str = ".") -> tuple[str, ...]:
    """Split a path string into its segments."""
    if not delimiter:
        msg = "delimiter must not be empty"
        raise ValueError(msg)
    return tuple(path.split(delimiter))


def get_path(mapping: Mapping[str, Any], path: str, default: Any = None, delimiter: str = ".") -> Any:
    """Return the value at ``path`` or ``default`` when any segment is missing.

    A literal key equal to ``path`` wins over segment traversal, so
    ``{"a.b": 1, "a": {"b": 2}}`` resolves ``"a.b"`` to ``1``.
    """
    if not mapping:
        return default
    if path in mapping:
        return mapping[path]

    current: Any = mapping
    for segment in split_path(path, delimiter):
        if not isinstance(current, Mapping) or segment not in current:
            return default
        current = current[segment]
    return current


def set_path(mapping: MutableMapping[str, Any], path: str, value: Any, delimiter: str = ".") -> None:
    """Assign ``value`` at ``path``, creating missing intermediate mappings.

    Raises
    ------
    PathTypeError
        If an intermediate segment already holds a non-mapping value.
    """
    segments = split_path(path, delimiter)
    if len(segments) == 1:
        mapping[path] = value
        return

    current = mapping
    for depth, segment in enumerate(segments[:-1], start=1):
        if segment not in current:
            logger.debug("creating intermediate mapping at %r", delimiter.join(segments[:depth]))
            current[segment] = {}
        child = current[segment]
        if not isinstance(child, MutableMapping):
            raise PathTypeError(delimiter.join(segments[:depth]), child)
        current = child
    current[segments[-1]] = value


def delete_path(mapping: MutableMapping[str, Any], path: str, delimiter: str = ".") -> None:
    """Remove the entry at ``path``; missing paths are a no-op."""
    if path in mapping:
        del mapping[path]
        return

    *parents, last = split_path(path, delimiter)
    current: Any = mapping
    for segment in parents:
        if not isinstance(current, MutableMapping) or segment not in current:
            return
        current = current[segment]
    if isinstance(current, MutableMapping):
        _ = current.pop(last, None)


def delete_paths(mapping: MutableMapping[str, Any], paths: Iterable[str], delimiter: str = ".") -> None:
    """Remove every path in ``paths``, in order."""
    for path in paths:
        delete_path(mapping, path, delimiter)


def path_exists(mapping: Mapping[str, Any], path: str, delimiter: str = ".") -> bool:
    """Return True when ``path`` resolves to a value, including ``None``."""
    if path in mapping:
        return True

    current: Any = mapping
    for segment in split_path(path, delimiter):
        if not isinstance(current, Mapping) or segment not in current:
            return False
        current = current[segment]
    return True
