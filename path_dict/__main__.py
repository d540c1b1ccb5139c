"""Interface for ``python -m path_dict``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING, Any

from ._version import version
from .accessor import delete_paths, flatten, get_path, path_exists, remap, remap_collection, set_path


if TYPE_CHECKING:
    from argparse import Namespace
    from collections.abc import Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="path_dict", description="Query and reshape a JSON document with dotted paths.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("-d", "--delimiter", default=".", help="path segment delimiter (default: '.')")
    _ = parser.add_argument("-i", "--input", default="-", help="JSON file, or - for stdin (default: -)")
    _ = parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    get_cmd = commands.add_parser("get", help="print the value at a path")
    _ = get_cmd.add_argument("path")
    _ = get_cmd.add_argument("--default", type=json.loads, default=None, help="JSON value used when missing")

    set_cmd = commands.add_parser("set", help="assign a JSON value at a path")
    _ = set_cmd.add_argument("path")
    _ = set_cmd.add_argument("value", type=json.loads)

    delete_cmd = commands.add_parser("delete", help="remove one or more paths")
    _ = delete_cmd.add_argument("paths", nargs="+")

    exists_cmd = commands.add_parser("exists", help="exit 0 when a path resolves, 1 otherwise")
    _ = exists_cmd.add_argument("path")

    remap_cmd = commands.add_parser("remap", help="restructure using a JSON object of source to destination paths")
    _ = remap_cmd.add_argument("path_map", type=json.loads)
    _ = remap_cmd.add_argument("--no-create", dest="create_mode", action="store_false")

    flatten_cmd = commands.add_parser("flatten", help="print top-level entries as key<glue>value lines")
    _ = flatten_cmd.add_argument("--glue", default="=")

    return parser


def _load_document(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as handle:
        return json.load(handle)


def _require_object(document: Any) -> dict[str, Any]:
    if not isinstance(document, dict):
        msg = "input document must be a JSON object"
        raise TypeError(msg)
    return document


def _run(options: Namespace, document: Any) -> int:
    delimiter: str = options.delimiter

    if options.command == "remap":
        if not isinstance(options.path_map, dict):
            msg = "path map must be a JSON object"
            raise TypeError(msg)
        if isinstance(document, list):
            items = [_require_object(item) for item in document]
            result: Any = remap_collection(items, options.path_map, options.create_mode, delimiter=delimiter)
        else:
            result = remap(_require_object(document), options.path_map, options.create_mode, delimiter=delimiter)
        print(json.dumps(result))
        return 0

    data = _require_object(document)
    if options.command == "get":
        print(json.dumps(get_path(data, options.path, options.default, delimiter)))
    elif options.command == "set":
        set_path(data, options.path, options.value, delimiter)
        print(json.dumps(data))
    elif options.command == "delete":
        delete_paths(data, options.paths, delimiter)
        print(json.dumps(data))
    elif options.command == "exists":
        found = path_exists(data, options.path, delimiter)
        print(json.dumps(found))
        return 0 if found else 1
    elif options.command == "flatten":
        for line in flatten(data, options.glue):
            print(line)
    return 0


def main(args: Sequence[str] | None = None) -> int:
    """Argument parser for the CLI."""
    options = _build_parser().parse_args(args)
    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING)

    try:
        document = _load_document(options.input)
        logger.debug("running %s on %s document", options.command, type(document).__name__)
        return _run(options, document)
    except (OSError, ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
