"""Checks that a map file name and its rows describe a playable level."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "K"

_BASE_TILES = frozenset({FLOOR, WALL, COLLECTIBLE, EXIT, PLAYER})
_BONUS_TILES = _BASE_TILES | {ENEMY}

_BAD_NAME = (
    "❌ Invalid file name!\n"
    "👉 Please provide a valid map '.ber' extension."
)


class MapError(ValueError):
    """Raised when a map file name or map content is invalid."""


def check_file_name(path: str) -> str:
    """Return *path* if it names a '.ber' map file, else raise MapError."""
    last_dot = path.rfind(".")
    if last_dot <= 0:
        raise MapError(_BAD_NAME)
    if path.endswith("/.ber"):
        raise MapError(_BAD_NAME)
    if len(path) < 4 or not path.endswith(".ber"):
        raise MapError(_BAD_NAME)
    return path


def check_rectangular(rows: Sequence[str]) -> int:
    """Return the common row width, raising MapError if rows differ."""
    if not rows:
        raise MapError("You need to provide a valid map file.")
    width = len(rows[0])
    if any(len(row) != width for row in rows[1:]):
        raise MapError("Map is not rectangular")
    return width


def check_characters(rows: Sequence[str], bonus: bool = False) -> None:
    """Raise MapError at the first tile that is not allowed on the map."""
    allowed = _BONUS_TILES if bonus else _BASE_TILES
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile not in allowed:
                raise MapError(f"Invalid character '{tile}' found at [{y}, {x}]")


def check_required_elements(rows: Sequence[str]) -> int:
    """Check for one player, one exit and some collectibles.

    Returns the number of collectibles. Every problem found is reported
    together in a single MapError.
    """
    text = "".join(rows)
    players = text.count(PLAYER)
    exits = text.count(EXIT)
    collectibles = text.count(COLLECTIBLE)
    problems = []
    if players != 1:
        problems.append("You need to write one player in the map")
    if exits != 1:
        problems.append("You need to write one exit in the map")
    if collectibles < 1:
        problems.append("At least one collectible")
    if problems:
        raise MapError("\n".join(problems))
    return collectibles


def check_walls(rows: Sequence[str]) -> None:
    """Raise MapError unless the map is enclosed by walls."""
    if not rows:
        raise MapError("❌ Wall missing at row [0].")
    for y, row in enumerate(rows):
        if not row or row[0] != WALL or row[-1] != WALL:
            raise MapError(f"❌ Wall missing at row [{y}].")
    top, bottom = rows[0], rows[-1]
    for x, (upper, lower) in enumerate(zip(top, bottom)):
        if upper != WALL or lower != WALL:
            raise MapError(f"❌ Wall missing at column [{x}].")


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) position of the first player tile."""
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x >= 0:
            return x, y
    raise MapError("You need to write one player in the map")


def _reachable(rows: Sequence[str], start: tuple[int, int], bonus: bool) -> set[tuple[int, int]]:
    blocking = {WALL, ENEMY} if bonus else {WALL}
    seen: set[tuple[int, int]] = set()
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        if (x, y) in seen:
            continue
        if not (0 <= y < len(rows) and 0 <= x < len(rows[y])):
            continue
        if rows[y][x] in blocking:
            continue
        seen.add((x, y))
        queue.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return seen


def check_path(rows: Sequence[str], bonus: bool = False) -> set[tuple[int, int]]:
    """Check every collectible and the exit can be reached by the player.

    Returns the set of (x, y) cells the player can reach. Enemies block
    the way when *bonus* is set.
    """
    reachable = _reachable(rows, find_player(rows), bonus)
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile in (COLLECTIBLE, EXIT) and (x, y) not in reachable:
                raise MapError("❌ No valid path")
    return reachable


def validate(rows: Sequence[str], bonus: bool = False) -> list[str]:
    """Run every map check in order and return the rows as a list."""
    check_rectangular(rows)
    check_characters(rows, bonus)
    check_required_elements(rows)
    check_walls(rows)
    check_path(rows, bonus)
    return list(rows)