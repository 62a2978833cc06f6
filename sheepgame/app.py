"""Window, textures and the main loop that puts a level on screen."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

import pygame

from .game import ESC_KEY, Game, Outcome, direction_for_key, new_game
from .mapfile import load_map
from .validation import COLLECTIBLE, ENEMY, EXIT, PLAYER, WALL, MapError

TILE_SIZE = 64
HUD_HEIGHT = 100
HUD_STRIPE = 600
TITLE = "Sheep Protector"
TEXTURE_DIR = "textures"
ANIMATION_PERIOD = 12000

_DIGIT_POSITIONS = ((250, 15), (305, 15), (357, 15), (413, 15), (469, 15))

_BASE_FILES = (
    "floor",
    "wall",
    "collectible",
    "player_right",
    "player_left",
    "player_up",
    "player_down",
    "close_door",
    "open_door",
)
_ENEMY_FILES = tuple(f"enemy{n}" for n in range(1, 7))
_HUD_FILES = ("counter", "background_yellow")
_DIGIT_FILES = tuple(str(d) for d in range(10))

# pygame key constants mapped onto the X keysyms the game rules use.
_KEYSYMS = {
    pygame.K_w: 119,
    pygame.K_s: 115,
    pygame.K_a: 97,
    pygame.K_d: 100,
    pygame.K_UP: 65362,
    pygame.K_DOWN: 65364,
    pygame.K_LEFT: 65361,
    pygame.K_RIGHT: 65363,
    pygame.K_ESCAPE: ESC_KEY,
}


@dataclass(frozen=True)
class _Textures:
    floor: pygame.Surface
    wall: pygame.Surface
    collectible: pygame.Surface
    players: tuple[pygame.Surface, ...]
    doors: tuple[pygame.Surface, ...]
    enemies: tuple[pygame.Surface, ...] = ()
    counter: Optional[pygame.Surface] = None
    background: Optional[pygame.Surface] = None
    digits: tuple[pygame.Surface, ...] = ()


def window_size(width: int, height: int, bonus: bool = False) -> tuple[int, int]:
    """Return the window size in pixels for a map of *width* by *height* tiles."""
    extra = HUD_HEIGHT if bonus else 0
    return width * TILE_SIZE, height * TILE_SIZE + extra


def tile_origin(x: int, y: int, bonus: bool = False) -> tuple[int, int]:
    """Return the pixel position of the top-left corner of tile (x, y)."""
    extra = HUD_HEIGHT if bonus else 0
    return x * TILE_SIZE, y * TILE_SIZE + extra


def digit_positions() -> tuple[tuple[int, int], ...]:
    """Return where the five step-counter digits are drawn, left to right."""
    return _DIGIT_POSITIONS


def load_textures(directory: str | os.PathLike[str] = TEXTURE_DIR, bonus: bool = False) -> _Textures:
    """Load every image the game draws from *directory*.

    Raises OSError if any image cannot be loaded.
    """
    base = os.fspath(directory)

    def load(name: str) -> pygame.Surface:
        path = os.path.join(base, f"{name}.xpm")
        try:
            return pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise OSError(f"in loading images: {path}") from exc

    images = {name: load(name) for name in _BASE_FILES}
    players = tuple(images[n] for n in ("player_right", "player_left", "player_up", "player_down"))
    doors = (images["close_door"], images["open_door"])
    if not bonus:
        return _Textures(images["floor"], images["wall"], images["collectible"], players, doors)
    return _Textures(
        images["floor"],
        images["wall"],
        images["collectible"],
        players,
        doors,
        enemies=tuple(load(name) for name in _ENEMY_FILES),
        counter=load("counter"),
        background=load("background_yellow"),
        digits=tuple(load(name) for name in _DIGIT_FILES),
    )


class Renderer:
    """Draws a game onto a surface and steps the enemy animation."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: _Textures,
        bonus: bool = False,
        period: int = ANIMATION_PERIOD,
    ) -> None:
        self.surface = surface
        self.textures = textures
        self.bonus = bonus
        self.period = period
        self.frame = 0
        self.enemy_frame = 0

    def _tile_image(self, tile: str, game: Game) -> Optional[pygame.Surface]:
        textures = self.textures
        if tile == WALL:
            return textures.wall
        if tile == PLAYER:
            return textures.players[game.facing.image]
        if tile == COLLECTIBLE:
            return textures.collectible
        if tile == ENEMY and self.bonus:
            return textures.enemies[self.enemy_frame]
        if tile == EXIT:
            return None
        return textures.floor

    def _draw_hud(self, game: Game) -> None:
        textures = self.textures
        self.surface.blit(textures.counter, (0, 0))
        map_width = game.width * TILE_SIZE
        for dx in range(HUD_STRIPE, map_width, HUD_STRIPE):
            self.surface.blit(textures.background, (dx, 0))
        for digit, position in zip(game.step_digits(), _DIGIT_POSITIONS):
            self.surface.blit(textures.digits[digit], position)

    def draw(self, game: Game) -> None:
        """Draw the whole level, and in bonus mode the step counter."""
        if self.bonus:
            self._draw_hud(game)
        door = self.textures.doors[1 if game.door_open else 0]
        self.surface.blit(door, tile_origin(*game.exit, self.bonus))
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                image = self._tile_image(tile, game)
                if image is not None:
                    self.surface.blit(image, tile_origin(x, y, self.bonus))

    def animate(self, game: Game) -> bool:
        """Count one frame; every *period* frames show the next enemy image.

        Returns True when the enemies were redrawn.
        """
        if not self.bonus:
            return False
        self.frame += 1
        if self.frame % self.period != 0:
            return False
        self.enemy_frame = (self.enemy_frame + 1) % len(self.textures.enemies)
        image = self.textures.enemies[self.enemy_frame]
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                if tile == ENEMY:
                    self.surface.blit(image, tile_origin(x, y, True))
        return True


def _play(game: Game, renderer: Renderer) -> int:
    renderer.draw(game)
    pygame.display.flip()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                print("X detected")
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            keysym = _KEYSYMS.get(event.key, 0)
            if keysym == ESC_KEY:
                print("Game exited successfully!")
                return 0
            outcome = game.press(direction_for_key(keysym))
            for message in game.messages:
                print(message)
            if outcome is Outcome.LOST or (outcome is Outcome.WON and not game.bonus):
                print()
            if outcome in (Outcome.WON, Outcome.LOST):
                return 0
            renderer.draw(game)
            pygame.display.flip()
        if renderer.animate(game):
            pygame.display.flip()


def run(path: str, bonus: bool = False) -> int:
    """Load the map at *path* and play it in a window; return the exit status."""
    try:
        rows = load_map(path, bonus)
    except MapError as exc:
        print(f"Error\n{exc}")
        return 1
    except OSError as exc:
        print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
        return 1
    game = new_game(rows, bonus)
    pygame.init()
    try:
        surface = pygame.display.set_mode(window_size(game.width, game.height, bonus))
        pygame.display.set_caption(TITLE)
        try:
            textures = load_textures(TEXTURE_DIR, bonus)
        except OSError:
            print("Error\nin loading images", file=sys.stderr)
            return 1
        return _play(game, Renderer(surface, textures, bonus))
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: a map path, and '--bonus' for the extended game."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    rest = [arg for arg in args if arg != "--bonus"]
    if len(rest) != 1:
        return 1
    return run(rest[0], bonus)


if __name__ == "__main__":
    sys.exit(main())