"""In-place editing of single lines in text files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

__all__ = ["replace_line_in_file", "delete_line_from_file"]

PathLike = Union[str, "os.PathLike[str]"]


def _read_lines(path: Path) -> list[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.read().split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            for line in lines:
                handle.write(line)
                handle.write("\n")
        os.replace(temp_name, path)
    except BaseException:
        try:
            os.unlink(temp_name)
        except FileNotFoundError:
            pass
        raise


def replace_line_in_file(path: PathLike, target_line: int, new_line: str) -> None:
    """Replace the 1-based ``target_line`` of a file with ``new_line``.

    If the file is shorter, it is padded with empty lines first.
    """
    file_path = Path(path)
    lines = _read_lines(file_path)
    if 1 <= target_line <= len(lines):
        lines[target_line - 1] = new_line
    elif target_line > len(lines):
        lines.extend([""] * (target_line - len(lines) - 1))
        lines.append(new_line)
    _write_lines(file_path, lines)


def delete_line_from_file(path: PathLike, target_line: int) -> None:
    """Remove the 1-based ``target_line`` of a file, if it exists."""
    file_path = Path(path)
    lines = _read_lines(file_path)
    kept = (line for number, line in enumerate(lines, start=1) if number != target_line)
    _write_lines(file_path, kept)