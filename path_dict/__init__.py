"""path-dict - read, write and restructure nested dicts with dotted paths"""

from ._version import version as __version__
from .accessor import (
    PathTypeError,
    delete_path,
    delete_paths,
    flatten,
    get_path,
    keys,
    map_leaves,
    path_exists,
    prefix,
    remap,
    remap_collection,
    set_path,
    split_path,
    values,
)
from .mappings import PathDict


__all__ = [
    "PathDict",
    "PathTypeError",
    "__version__",
    "delete_path",
    "delete_paths",
    "flatten",
    "get_path",
    "keys",
    "map_leaves",
    "path_exists",
    "prefix",
    "remap",
    "remap_collection",
    "set_path",
    "split_path",
    "values",
]
