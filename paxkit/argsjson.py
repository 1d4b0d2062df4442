"""Turn a JSON document into a flat list of command-line arguments."""

from __future__ import annotations

import json
from collections.abc import Callable
from os import PathLike
from pathlib import Path
from typing import Any

__all__ = ["parse_json_value", "parse_json_string", "parse_json_file"]

Exists = Callable[[str], bool]


def _dump(item: Any) -> str:
    return json.dumps(item, separators=(",", ":"), ensure_ascii=False)


def _accepted(exists: Exists | None, ident: str) -> bool:
    return exists is None or exists(ident)


def _parse(args: list[str], ident: str, value: Any, exists: Exists | None) -> None:
    if value is None:
        args.append(ident)
    elif isinstance(value, list):
        if _accepted(exists, ident):
            for item in value:
                if ident:
                    args.append(ident)
                args.append(_dump(item))
    elif isinstance(value, dict):
        for key in sorted(value):
            _parse(args, key, value[key], exists)
    elif _accepted(exists, ident):
        if not isinstance(value, str):
            raise TypeError(
                f"value of '{ident}' must be a string, not {type(value).__name__}"
            )
        if ident:
            args.append(ident)
        args.append(value)


def parse_json_value(value: Any, exists: Exists | None = None) -> list[str]:
    """Flatten decoded JSON into arguments, the first being ``"from json"``.

    Objects are walked with their keys in sorted order; nested object names are
    dropped, so only the innermost key precedes each value.  A null gives only
    its key, and an array repeats its key before each (JSON-encoded) item.
    Keys for which ``exists`` returns False are skipped.
    """
    args = ["from json"]
    _parse(args, "", value, exists)
    return args


def parse_json_string(text: str, exists: Exists | None = None) -> list[str]:
    """Flatten a JSON text into arguments."""
    return parse_json_value(json.loads(text), exists)


def parse_json_file(path: str | PathLike[str], exists: Exists | None = None) -> list[str]:
    """Flatten the JSON contents of a file into arguments."""
    with Path(path).open(encoding="utf-8") as stream:
        return parse_json_value(json.load(stream), exists)