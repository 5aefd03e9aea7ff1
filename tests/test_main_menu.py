import pygame
import pytest

from dungeonui.core import InputState
from dungeonui.main_menu import MainMenu, MenuState


def center(button):
    b = button.bounds
    return (b.x + b.width / 2, b.y + b.height / 2)


def click(menu, button):
    menu.update(0.016, InputState(mouse=center(button), mouse_pressed=True, frame_time=0.016))


@pytest.fixture
def menu():
    return MainMenu(1400, 800)


def test_starts_on_main_page_with_nothing_selected(menu):
    assert menu.state is MenuState.MAIN
    assert (menu.start_game_selected, menu.load_game_selected, menu.quit_selected) == (False, False, False)


def test_start_button_selects_start(menu):
    click(menu, menu.start_button)
    assert menu.start_game_selected is True
    assert menu.quit_selected is False


def test_load_and_quit_buttons(menu):
    click(menu, menu.load_button)
    click(menu, menu.quit_button)
    assert menu.load_game_selected is True
    assert menu.quit_selected is True


def test_reset_selections_clears_choices(menu):
    click(menu, menu.start_button)
    click(menu, menu.quit_button)
    menu.reset_selections()
    assert (menu.start_game_selected, menu.load_game_selected, menu.quit_selected) == (False, False, False)


def test_options_page_and_back(menu):
    click(menu, menu.options_button)
    assert menu.state is MenuState.OPTIONS
    click(menu, menu.back_button)
    assert menu.state is MenuState.MAIN


def test_credits_page_and_back(menu):
    click(menu, menu.credits_button)
    assert menu.state is MenuState.CREDITS
    click(menu, menu.back_button)
    assert menu.state is MenuState.MAIN


def test_main_buttons_ignored_on_other_pages(menu):
    click(menu, menu.credits_button)
    click(menu, menu.start_button)
    assert menu.start_game_selected is False
    assert menu.state is MenuState.CREDITS


def test_click_outside_does_nothing(menu):
    menu.update(0.016, InputState(mouse=(1.0, 1.0), mouse_pressed=True))
    assert menu.state is MenuState.MAIN
    assert menu.start_game_selected is False


def test_initialize_returns_to_main(menu):
    click(menu, menu.options_button)
    menu.start_game_selected = True
    menu.initialize()
    assert menu.state is MenuState.MAIN
    assert menu.start_game_selected is False


def test_buttons_are_centred_and_evenly_spaced(menu):
    bounds = [menu.button_bounds(i, 5) for i in range(5)]
    for b in bounds:
        assert b.x + b.width / 2 == pytest.approx(700)
    gaps = {round(b2.y - b1.y, 6) for b1, b2 in zip(bounds, bounds[1:])}
    assert len(gaps) == 1
    top = bounds[0].y
    bottom = bounds[-1].y + bounds[-1].height
    assert (top + bottom) / 2 == pytest.approx(400)


def test_main_buttons_use_stacked_bounds(menu):
    assert menu.start_button.bounds == menu.button_bounds(0, 5)
    assert menu.quit_button.bounds == menu.button_bounds(4, 5)


def test_resize_relays_buttons(menu):
    menu.resize(1000, 600)
    assert (menu.screen_width, menu.screen_height) == (1000, 600)
    assert menu.start_button.bounds == menu.button_bounds(0, 5)
    assert center(menu.back_button)[0] == pytest.approx(500)


def test_resize_to_same_size_keeps_buttons(menu):
    before = menu.start_button
    menu.resize(1400, 800)
    assert menu.start_button is before


def test_draw_paints_content_frame(menu):
    surface = pygame.Surface((1400, 800))
    menu.draw(surface)
    pixel = surface.get_at((410, 210))
    assert pixel.b > pixel.g


def test_draw_uses_background_texture():
    background = pygame.Surface((50, 50))
    background.fill((0, 255, 0))
    menu = MainMenu(1400, 800, background_texture=background)
    surface = pygame.Surface((1400, 800))
    menu.draw(surface)
    pixel = surface.get_at((100, 700))
    assert pixel.g > 200
    assert pixel.r < 50


def test_draw_uses_title_texture():
    title = pygame.Surface((100, 40))
    title.fill((255, 0, 0))
    menu = MainMenu(1400, 800, title_texture=title)
    surface = pygame.Surface((1400, 800))
    menu.draw(surface)
    pixel = surface.get_at((700, 35))
    assert pixel.r > 200
    assert pixel.g < 50


def test_draw_credits_page(menu):
    click(menu, menu.credits_button)
    surface = pygame.Surface((1400, 800))
    menu.draw(surface)
    assert menu.state is MenuState.CREDITS
    assert surface.get_at((410, 210)).b > 0