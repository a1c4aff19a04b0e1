"""Menu and status display around the game view: agent pickers, play button, clocks."""

from __future__ import annotations

import pygame

SCREEN_SIZE = (1920.0, 1080.0)
GAME_VIEWPORT_SIZE = (750.0, 750.0)

WHITE = (255, 255, 255)
PLAYER_ONE_COLOUR = (250, 82, 82)
PLAYER_ONE_OUTLINE = (224, 49, 49)
PLAYER_TWO_COLOUR = (34, 139, 230)
PLAYER_TWO_OUTLINE = (25, 113, 194)

BUTTON_SIZE = (500.0, 80.0)
BUTTON_OUTLINE = 5.0
BUTTON_FILL = (25, 25, 25)
HUMAN = "Human"

_ALIGNMENTS = ("left", "center", "right")
_SELECTED_OVERLAY = (0, 0, 0, 90)
_VIEWPORT_OUTLINE = 20.0


def _font(font_cache: dict, size: int) -> pygame.font.Font:
    if size not in font_cache:
        if not pygame.font.get_init():
            pygame.font.init()
        font_cache[size] = pygame.font.Font(None, size)
    return font_cache[size]


class Text:
    """A line of text anchored at a point; centred horizontally unless aligned otherwise."""

    def __init__(self, pos, string: str, size: int, color=WHITE) -> None:
        self.pos = (float(pos[0]), float(pos[1]))
        self.string = string
        self.size = size
        self.color = color
        self.align = "center"
        self.offset = (0.0, 0.0)
        self.italic = False

    def draw(self, surface: pygame.Surface, font_cache: dict) -> None:
        """Render the text onto the surface, using fonts from the cache."""
        if self.align not in _ALIGNMENTS:
            raise ValueError(f"unknown alignment {self.align!r}")
        if not self.string:
            return
        font = _font(font_cache, self.size)
        font.set_italic(self.italic)
        image = font.render(self.string, True, self.color)
        x = self.pos[0] + self.offset[0]
        if self.align == "center":
            x -= image.get_width() / 2
        elif self.align == "right":
            x -= image.get_width()
        y = self.pos[1] + self.offset[1]
        surface.blit(image, (round(x), round(y)))


class Button:
    """A captioned rectangle centred on a point, with an outline around it."""

    def __init__(self, pos, caption: str, size: int, fill=BUTTON_FILL, outline=WHITE) -> None:
        self.pos = (float(pos[0]), float(pos[1]))
        self.fill = fill
        self.outline = outline
        self.caption = Text((self.pos[0], self.pos[1] - size * 0.7), caption, size, WHITE)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Left, top, width and height of the button, outline included."""
        width = BUTTON_SIZE[0] + 2 * BUTTON_OUTLINE
        height = BUTTON_SIZE[1] + 2 * BUTTON_OUTLINE
        return (self.pos[0] - width / 2, self.pos[1] - height / 2, width, height)

    def contains(self, point) -> bool:
        """Whether the point lies on the button, edges included."""
        left, top, width, height = self.bounds
        return left <= point[0] <= left + width and top <= point[1] <= top + height

    def draw(self, surface: pygame.Surface, font_cache: dict) -> None:
        """Draw the outline, the body and the caption."""
        left, top, width, height = self.bounds
        outer = pygame.Rect(round(left), round(top), round(width), round(height))
        pygame.draw.rect(surface, self.outline, outer)
        inner = outer.inflate(-2 * int(BUTTON_OUTLINE), -2 * int(BUTTON_OUTLINE))
        pygame.draw.rect(surface, self.fill, inner)
        self.caption.draw(surface, font_cache)


def _darken(surface: pygame.Surface, button: Button) -> None:
    left, top, width, height = button.bounds
    overlay = pygame.Surface((round(width), round(height)), pygame.SRCALPHA)
    overlay.fill(_SELECTED_OVERLAY)
    surface.blit(overlay, (round(left), round(top)))


class Ui:
    """The screen around the game: title, player pickers, play button, names and clocks."""

    def __init__(self, game_title: str) -> None:
        self.fonts: dict = {}
        self.left_buttons: list[Button] = []
        self.right_buttons: list[Button] = []
        self.player_one = 0
        self.player_two = 0

        screen_w, screen_h = SCREEN_SIZE
        view_w, view_h = GAME_VIEWPORT_SIZE
        corner_x = (screen_w - view_w) / 2
        corner_y = (screen_h - view_h) / 2

        self.title = Text((screen_w / 2, 10.0), game_title, 84)
        self.player_one_label = Text((280.0, 70.0), "Player one", 60)
        self.player_two_label = Text((1640.0, 70.0), "Player two", 60)
        self.play_button = Button((screen_w / 2, 1000.0), "Play/Simulate", 50)

        self.player_one_name = Text((corner_x, corner_y + view_h), "", 60, PLAYER_ONE_COLOUR)
        self.player_one_name.align = "left"
        self.player_one_name.offset = (5.0, -80.0)
        self.player_one_time = Text(
            (corner_x + view_w, corner_y + view_h), "", 60, PLAYER_ONE_COLOUR
        )
        self.player_one_time.align = "right"
        self.player_one_time.offset = (-20.0, -80.0)
        self.player_two_name = Text((corner_x, corner_y), "", 60, PLAYER_TWO_COLOUR)
        self.player_two_name.align = "left"
        self.player_two_name.offset = (5.0, -10.0)
        self.player_two_time = Text((corner_x + view_w, corner_y), "", 60, PLAYER_TWO_COLOUR)
        self.player_two_time.align = "right"
        self.player_two_time.offset = (-20.0, -10.0)

    def add_agents(self, agent_names) -> None:
        """Create a picker button per agent on each side, then one for a human player."""
        names = list(agent_names)
        self.player_one = len(names)
        self.player_two = len(names)
        for index, name in enumerate(names + [HUMAN]):
            y = 875.0 if index == len(names) else 215.0 + 100.0 * index
            self.left_buttons.append(
                Button((280.0, y), name, 50, PLAYER_ONE_COLOUR, PLAYER_ONE_OUTLINE)
            )
            self.right_buttons.append(
                Button((1640.0, y), name, 50, PLAYER_TWO_COLOUR, PLAYER_TWO_OUTLINE)
            )

    def handle_input(self, mouse_pos) -> bool:
        """Update the picked players from a click; return whether Play was clicked."""
        left = next((i for i, b in enumerate(self.left_buttons) if b.contains(mouse_pos)), None)
        if left is not None:
            self.player_one = left
        right = next((i for i, b in enumerate(self.right_buttons) if b.contains(mouse_pos)), None)
        if right is not None:
            self.player_two = right
        return self.play_button.contains(mouse_pos)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the whole interface in screen coordinates."""
        for index, button in enumerate(self.left_buttons):
            button.draw(surface, self.fonts)
            if index == self.player_one:
                _darken(surface, button)
        for index, button in enumerate(self.right_buttons):
            button.draw(surface, self.fonts)
            if index == self.player_two:
                _darken(surface, button)

        view_w, view_h = GAME_VIEWPORT_SIZE
        outline = pygame.Rect(
            round((SCREEN_SIZE[0] - view_w) / 2 - _VIEWPORT_OUTLINE),
            round((SCREEN_SIZE[1] - view_h) / 2 - _VIEWPORT_OUTLINE),
            round(view_w + 2 * _VIEWPORT_OUTLINE),
            round(view_h + 2 * _VIEWPORT_OUTLINE),
        )
        pygame.draw.rect(surface, WHITE, outline, width=int(_VIEWPORT_OUTLINE))

        for text in (self.title, self.player_one_label, self.player_two_label):
            text.draw(surface, self.fonts)
        self.play_button.draw(surface, self.fonts)
        for text in (
            self.player_one_name,
            self.player_one_time,
            self.player_two_name,
            self.player_two_time,
        ):
            text.draw(surface, self.fonts)