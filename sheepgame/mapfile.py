"""Reading level files into validated rows of tiles."""

from __future__ import annotations

import os

from .validation import MapError, check_file_name, validate

_EMPTY_MAP = "You need to provide a valid map file."


def split_rows(text: str) -> list[str]:
    """Split map text into rows, one per line, without line endings.

    Only '\\n' ends a line. A final newline does not start an extra row,
    but a blank line inside or at the end of the text is kept as an
    empty row.
    """
    if not text:
        return []
    rows = text.split("\n")
    if rows[-1] == "":
        rows.pop()
    return rows


def parse_map(text: str, bonus: bool = False) -> list[str]:
    """Turn map text into validated rows, raising MapError if it is unplayable."""
    rows = split_rows(text)
    if not rows:
        raise MapError(_EMPTY_MAP)
    return validate(rows, bonus)


def load_map(path: str | os.PathLike[str], bonus: bool = False) -> list[str]:
    """Read and validate the map stored at *path*.

    The file name must end in '.ber'. Errors opening the file surface as
    OSError; problems with the name or content raise MapError.
    """
    name = os.fspath(path)
    check_file_name(name)
    # Each byte is one tile, so decode byte for byte.
    with open(name, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_map(text, bonus)