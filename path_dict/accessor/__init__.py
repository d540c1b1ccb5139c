"""Stateless path-addressed operations over nested mappings."""

from .listing import flatten, keys, prefix, values
from .paths import PathTypeError, delete_path, delete_paths, get_path, path_exists, set_path, split_path
from .transform import map_leaves, remap, remap_collection


__all__ = [
    "PathTypeError",
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
