"""Mapping facades built on the path accessor."""

from .path_dict import PathDict


__all__ = ["PathDict"]
