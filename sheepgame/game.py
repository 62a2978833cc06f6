"""Game state and the rules applied on each key press."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from .validation import (
    COLLECTIBLE,
    ENEMY,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    MapError,
    find_player,
)

ESC_KEY = 65307

_RULE = "-------------------------------------------------"

_LOSE_BANNER = (
    _RULE,
    "|      ❌❌❌  You lost! Game closing  ❌❌❌   |",
    "|     You failed to reach the exit...           |",
    "|     Better luck next time!                    |",
    "|     💡 Try again and improve your strategy!   |",
    _RULE,
)

DOOR_OPEN_MESSAGE = "Congrats! The door is now open."
DOOR_CLOSED_MESSAGE = "You need to eat all collectibles first!!..."


class Direction(enum.Enum):
    """A move on the grid, with the index of the matching player image."""

    RIGHT = (1, 0, 0)
    LEFT = (-1, 0, 1)
    UP = (0, -1, 2)
    DOWN = (0, 1, 3)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def image(self) -> int:
        """Index of the player image facing this way."""
        return self.value[2]


_KEYS = {
    119: Direction.UP, 87: Direction.UP, 65362: Direction.UP,
    115: Direction.DOWN, 83: Direction.DOWN, 65364: Direction.DOWN,
    97: Direction.LEFT, 65: Direction.LEFT, 65361: Direction.LEFT,
    100: Direction.RIGHT, 68: Direction.RIGHT, 65363: Direction.RIGHT,
}


class Outcome(enum.Enum):
    """What a key press led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    LOST = "lost"


def direction_for_key(keycode: int) -> Direction | None:
    """Return the direction bound to *keycode*, or None for other keys."""
    return _KEYS.get(keycode)


def _win_banner(steps: int, bonus: bool) -> tuple[str, ...]:
    padding = "    " if bonus else "     "
    return (
        _RULE,
        "|    🎉🎉🎉  Congratulations!!!!!  🎉🎉🎉       |",
        "|    You found all collectibles and exit.       |",
        "|        ✓✓✓✓✓✓✓✓ You won! ✓✓✓✓✓✓✓✓             |",
        f"|       🏆 Can you beat your own record?  {steps}{padding}|",
        _RULE,
    )


@dataclass
class Game:
    """A level in play: the grid, the player and the score so far."""

    grid: list[list[str]]
    player: tuple[int, int]
    exit: tuple[int, int]
    total_collectibles: int
    bonus: bool = False
    collected: int = 0
    key_count: int = 0
    facing: Direction = Direction.RIGHT
    door_open: bool = False
    messages: list[str] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile at column *x*, row *y*."""
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.grid[y][x]

    def press(self, direction: Direction | None) -> Outcome:
        """Apply one key press and return what it led to.

        None stands for a key with no direction: the player stays in
        place, which still counts as a move. Messages for the player are
        left in ``messages``.
        """
        self.messages = []
        px, py = self.player
        if direction is None:
            nx, ny = px, py
        else:
            nx, ny = px + direction.dx, py + direction.dy
            self.facing = direction
        target = self.grid[ny][nx]

        if self.bonus and target == ENEMY:
            self.messages.extend(_LOSE_BANNER)
            return Outcome.LOST

        if target == COLLECTIBLE:
            self.grid[ny][nx] = FLOOR
            self.collected += 1
            if self.collected == self.total_collectibles:
                self.door_open = True
                self.messages.append(DOOR_OPEN_MESSAGE)
        elif target == EXIT:
            if self.collected == self.total_collectibles:
                self.messages.extend(_win_banner(self.key_count, self.bonus))
                return Outcome.WON
            self.messages.append(DOOR_CLOSED_MESSAGE)

        if self.grid[ny][nx] == WALL:
            return Outcome.BLOCKED

        self.grid[py][px] = FLOOR
        self.grid[ny][nx] = PLAYER
        self.player = (nx, ny)
        self.key_count += 1
        if not self.bonus:
            self.messages.append(f"keys pressed: {self.key_count}")
        ex, ey = self.exit
        if self.grid[ey][ex] != PLAYER:
            self.grid[ey][ex] = EXIT
        return Outcome.MOVED

    def visible_rows(self) -> list[str]:
        """Return the grid as strings, one per row."""
        return ["".join(row) for row in self.grid]

    def step_digits(self) -> tuple[int, int, int, int, int]:
        """Return the five digits of the step counter, most significant first."""
        steps = self.key_count
        return (
            steps // 10000 % 10,
            steps // 1000 % 10,
            steps // 100 % 10,
            steps // 10 % 10,
            steps % 10,
        )


def new_game(rows: Sequence[str], bonus: bool = False) -> Game:
    """Start a game on the given map rows."""
    player = find_player(rows)
    exit_pos: tuple[int, int] | None = None
    collectibles = 0
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == COLLECTIBLE:
                collectibles += 1
            elif tile == EXIT:
                exit_pos = (x, y)
    if exit_pos is None:
        raise MapError("You need to write one exit in the map")
    return Game(
        grid=[list(row) for row in rows],
        player=player,
        exit=exit_pos,
        total_collectibles=collectibles,
        bonus=bonus,
    )