"""Mouse-driven board view for Passo: tile selection, move input and drawing."""

from __future__ import annotations

import pygame

from .passo import FULL_STACK, HOLE, SIZE, TILE_COUNT, Move, Passo

TILE_SIZE = 165.0
SPACING = -10.0
STEP = TILE_SIZE + SPACING
SCREEN_SIZE = (1000.0, 1000.0)
LEFT = (SCREEN_SIZE[0] - SIZE * TILE_SIZE - (SIZE - 1) * SPACING) / 2.0
TOP = (SCREEN_SIZE[1] - SIZE * TILE_SIZE - (SIZE - 1) * SPACING) / 2.0
TITLE = "Passo"

PLAYER_COLOURS = ((250, 82, 82), (34, 139, 230))

_TILE_COLOUR = (222, 214, 196)
_TILE_BORDER = (120, 110, 95)
_SELECTED_SHADE = 150
_DOT_COLOUR = (0, 0, 0, 90)
_PIECE_OUTLINE = (0, 0, 0)


def _neighbours(tile: int):
    y, x = divmod(tile, SIZE)
    for i in range(max(y - 1, 0), min(y + 1, SIZE - 1) + 1):
        for j in range(max(x - 1, 0), min(x + 1, SIZE - 1) + 1):
            other = i * SIZE + j
            if other != tile:
                yield other


def _tile_origin(tile: int) -> tuple[float, float]:
    y, x = divmod(tile, SIZE)
    return LEFT + STEP * x, TOP + STEP * y


def _shade(colour: tuple[int, int, int]) -> tuple[int, int, int]:
    return tuple(channel * _SELECTED_SHADE // 255 for channel in colour)


class PassoBoard:
    """Turns clicks into Passo moves and draws the board."""

    def __init__(self) -> None:
        self.screen_size = SCREEN_SIZE
        self.title = TITLE
        self.selected_tile: int | None = None
        self.legal_targets: set[int] = set()
        self.reset()

    def reset(self) -> None:
        """Forget any selection."""
        self.deselect()

    def deselect(self) -> None:
        """Clear the selected tile and its highlighted targets."""
        self.selected_tile = None
        self.legal_targets = set()

    def handle_input(self, mouse_pos, game: Passo) -> Move | None:
        """Handle a click in board coordinates; return a move once one is complete."""
        px = mouse_pos[0] - LEFT
        py = mouse_pos[1] - TOP
        extent = STEP * SIZE
        if not (0.0 <= px <= extent and 0.0 <= py <= extent):
            self.deselect()
            return None

        x = min(int(px // STEP), SIZE - 1)
        y = min(int(py // STEP), SIZE - 1)
        tile = y * SIZE + x

        if tile in self.legal_targets:
            move = Move(self.selected_tile, tile)
            self.deselect()
            return move

        value = game.tiles[tile]
        if self.selected_tile == tile or value <= HOLE or (value & 1) != game.player_turn:
            self.deselect()
            return None

        self.deselect()
        self.selected_tile = tile
        self.legal_targets = {
            other
            for other in _neighbours(tile)
            if game.tiles[other] != HOLE and game.tiles[other] < FULL_STACK
        }
        return None

    def draw(self, surface: pygame.Surface, game: Passo) -> None:
        """Draw the tiles, their stacks and the targets of the selected piece."""
        for tile in range(TILE_COUNT):
            value = game.tiles[tile]
            if value == HOLE:
                continue
            left, top = _tile_origin(tile)
            rect = pygame.Rect(round(left), round(top), int(TILE_SIZE), int(TILE_SIZE))
            selected = tile == self.selected_tile
            fill = _shade(_TILE_COLOUR) if selected else _TILE_COLOUR
            border = _shade(_TILE_BORDER) if selected else _TILE_BORDER
            pygame.draw.rect(surface, fill, rect, border_radius=12)
            pygame.draw.rect(surface, border, rect, width=3, border_radius=12)
            self._draw_stack(surface, rect.center, value)

        radius = TILE_SIZE * 0.2
        for tile in self.legal_targets:
            left, top = _tile_origin(tile)
            size = int(radius * 2) + 2
            dot = pygame.Surface((size, size), pygame.SRCALPHA)
            pygame.draw.circle(dot, _DOT_COLOUR, (size / 2, size / 2), radius)
            centre = (left + TILE_SIZE / 2, top + TILE_SIZE / 2)
            surface.blit(dot, (round(centre[0] - size / 2), round(centre[1] - size / 2)))

    @staticmethod
    def _draw_stack(surface: pygame.Surface, centre, value: int) -> None:
        height = value.bit_length() - 1
        if height <= 0:
            return
        outer = TILE_SIZE * 0.4
        for level in range(height):
            owner = (value >> (height - 1 - level)) & 1
            radius = outer * (1.0 - 0.25 * level)
            pygame.draw.circle(surface, PLAYER_COLOURS[owner], centre, radius)
            pygame.draw.circle(surface, _PIECE_OUTLINE, centre, radius, width=2)