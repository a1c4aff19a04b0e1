import pygame
import pytest

from algobattle.ui import HUMAN, SCREEN_SIZE, Button, Text, Ui


def blank():
    surface = pygame.Surface((400, 200), pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


@pytest.fixture
def ui():
    menu = Ui("Passo")
    menu.add_agents(["Random-Agent", "DefenceAgent"])
    return menu


def test_add_agents_defaults_to_human(ui):
    assert ui.player_one == 2
    assert ui.player_two == 2
    assert [b.caption.string for b in ui.left_buttons] == ["Random-Agent", "DefenceAgent", HUMAN]
    assert [b.caption.string for b in ui.right_buttons] == ["Random-Agent", "DefenceAgent", HUMAN]


def test_title_and_play_caption(ui):
    assert ui.title.string == "Passo"
    assert ui.play_button.caption.string == "Play/Simulate"


def test_clicking_left_button_picks_player_one(ui):
    assert ui.handle_input(ui.left_buttons[1].pos) is False
    assert ui.player_one == 1
    assert ui.player_two == 2


def test_clicking_right_button_picks_player_two(ui):
    assert ui.handle_input(ui.right_buttons[0].pos) is False
    assert ui.player_two == 0
    assert ui.player_one == 2


def test_play_button_reports_click(ui):
    assert ui.handle_input(ui.play_button.pos) is True
    assert (ui.player_one, ui.player_two) == (2, 2)


def test_click_on_nothing_changes_nothing(ui):
    assert ui.handle_input((SCREEN_SIZE[0] / 2, SCREEN_SIZE[1] / 2)) is False
    assert (ui.player_one, ui.player_two) == (2, 2)


def test_button_contains_its_bounds():
    button = Button((300.0, 200.0), "x", 50)
    left, top, width, height = button.bounds
    assert button.contains(button.pos)
    assert button.contains((left, top))
    assert button.contains((left + width, top + height))
    assert not button.contains((left - 1, top))
    assert not button.contains((left, top + height + 1))
    assert left + width / 2 == button.pos[0]


def test_button_caption_sits_above_centre():
    button = Button((300.0, 200.0), "caption", 50)
    assert button.caption.pos[0] == button.pos[0]
    assert button.caption.pos[1] < button.pos[1]


def test_centred_text_moves_with_its_anchor():
    text = Text((100.0, 50.0), "Passo", 40)
    first = blank()
    text.draw(first, {})
    text.pos = (200.0, 50.0)
    second = blank()
    text.draw(second, {})
    r1, r2 = first.get_bounding_rect(), second.get_bounding_rect()
    assert r1.width > 0
    assert r2.x - r1.x == 100
    assert r1.width == r2.width


def test_left_and_right_alignment():
    fonts = {}
    left = Text((150.0, 50.0), "Human", 40)
    left.align = "left"
    surface = blank()
    left.draw(surface, fonts)
    assert surface.get_bounding_rect().left >= 150

    right = Text((150.0, 50.0), "Human", 40)
    right.align = "right"
    surface = blank()
    right.draw(surface, fonts)
    bounds = surface.get_bounding_rect()
    assert bounds.width > 0
    assert bounds.right <= 150


def test_empty_text_draws_nothing():
    surface = blank()
    Text((100.0, 50.0), "", 40).draw(surface, {})
    assert surface.get_bounding_rect().width == 0


def test_unknown_alignment_is_rejected():
    text = Text((100.0, 50.0), "x", 40)
    text.align = "middle"
    with pytest.raises(ValueError):
        text.draw(blank(), {})


def test_draw_darkens_selected_button(ui):
    def sample(button):
        return (round(button.pos[0] - 240), round(button.pos[1] + 30))

    surface = pygame.Surface((int(SCREEN_SIZE[0]), int(SCREEN_SIZE[1])))
    ui.draw(surface)
    human_selected = surface.get_at(sample(ui.left_buttons[2]))
    agent_plain = surface.get_at(sample(ui.left_buttons[0]))
    assert human_selected != agent_plain

    ui.handle_input(ui.left_buttons[0].pos)
    surface.fill((0, 0, 0))
    ui.draw(surface)
    assert surface.get_at(sample(ui.left_buttons[0])) == human_selected
    assert surface.get_at(sample(ui.left_buttons[2])) == agent_plain