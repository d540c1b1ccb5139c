"""MutableMapping facade that resolves keys as nested paths."""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, override

from path_dict.accessor import delete_path, get_path, path_exists, remap, set_path


_MISSING = object()


class PathDict(MutableMapping[str, Any]):
    """Dict-like view over a nested dict where keys are delimiter-joined paths.

    The wrapped dict is held by reference, so writes through the facade are
    visible to the caller's dict and vice versa.
    """

    def __init__(self, data: dict[str, Any] | None = None, delimiter: str = ".") -> None:
        super().__init__()
        if not delimiter:
            msg = "delimiter must not be empty"
            raise ValueError(msg)
        self._data: dict[str, Any] = {} if data is None else data
        self.delimiter = delimiter

    @override
    def __getitem__(self, path: str) -> Any:
        """Return the value at path, raising KeyError when it does not resolve."""
        value = get_path(self._data, path, _MISSING, self.delimiter)
        if value is _MISSING:
            raise KeyError(path)
        return value

    @override
    def __setitem__(self, path: str, value: Any) -> None:
        """Assign value at path, creating intermediate dicts as needed.

        An existing top-level key equal to ``path`` is overwritten directly,
        matching the literal-key priority used on reads.
        """
        if path in self._data:
            self._data[path] = value
            return
        set_path(self._data, path, value, self.delimiter)

    @override
    def __delitem__(self, path: str) -> None:
        """Delete the entry at path."""
        if not path_exists(self._data, path, self.delimiter):
            raise KeyError(path)
        delete_path(self._data, path, self.delimiter)

    @override
    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path_exists(self._data, path, self.delimiter)

    @override
    def __iter__(self) -> Iterator[str]:
        """Iterate top-level keys."""
        return iter(self._data)

    @override
    def __len__(self) -> int:
        """Return count of top-level keys."""
        return len(self._data)

    @override
    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self._data, path, default, self.delimiter)

    def remap(self, path_map: Mapping[str, str], create_mode: bool = True) -> PathDict:
        """Return a new PathDict restructured according to ``path_map``."""
        return PathDict(remap(self._data, path_map, create_mode, delimiter=self.delimiter), self.delimiter)

    def to_dict(self) -> dict[str, Any]:
        """Return the wrapped dict itself."""
        return self._data

    def copy(self) -> dict[str, Any]:
        """Return a detached deep copy of the wrapped dict."""
        return copy.deepcopy(self._data)

    @override
    def __repr__(self) -> str:
        return repr(self._data)

    @override
    def __str__(self) -> str:
        return str(self._data)
