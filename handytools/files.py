"""Reading and writing whole files: text lines, bytes and JSON."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Iterable, Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(filename: PathLike) -> bool:
    """Tell whether a file exists.

    Errors other than a missing file (such as permission problems) are raised.
    """
    try:
        os.stat(filename)
    except FileNotFoundError:
        return False
    return True


def read_lines(filename: PathLike) -> list[str]:
    """Read a text file and return its lines without line endings.

    Lines end at a newline; one carriage return before it is dropped.
    A final line without a newline is kept.
    """
    text = Path(filename).read_bytes().decode("utf-8", errors="surrogateescape")
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_bytes(filename: PathLike) -> bytes:
    """Return the binary contents of a file."""
    return Path(filename).read_bytes()


def write_bytes(filename: PathLike, content: bytes) -> None:
    """Write binary content to a file, replacing it."""
    Path(filename).write_bytes(content)


def write_lines(filename: PathLike, lines: Iterable[str]) -> None:
    """Write lines to a text file, each followed by a newline."""
    with open(filename, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        for line in lines:
            handle.write(line + "\n")


def read_json_file(filename: PathLike) -> Any:
    """Parse a JSON file and return its contents."""
    with open(filename, "rb") as handle:
        return json.loads(handle.read())


def write_json_file(filename: PathLike, data: Any) -> None:
    """Write data as compact JSON to a file, with object keys sorted.

    Raises TypeError if the data cannot be represented as JSON.
    """
    encoded = json.dumps(data, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    Path(filename).write_bytes(encoded.encode("utf-8"))