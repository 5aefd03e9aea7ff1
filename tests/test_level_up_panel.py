import pygame
import pytest

from dungeonui.core import InputState, Rect
from dungeonui.level_up_panel import (
    DEFAULT_MAX_POINTS,
    REQUIRED_POINTS,
    LevelUpPanel,
    Stat,
)


class FakeHero:
    def __init__(self):
        self.calls = []

    def level_up(self, strength, mana, health):
        self.calls.append((strength, mana, health))


def center(rect: Rect):
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


@pytest.fixture
def panel():
    p = LevelUpPanel()
    p.show()
    return p


def test_increment_and_decrement(panel):
    panel.increment(Stat.STRENGTH)
    panel.increment(Stat.STRENGTH)
    panel.increment(Stat.MANA)
    assert panel.strength_points == 2
    assert panel.input_texts[Stat.STRENGTH] == "2"
    assert panel.total_points_allocated == 3
    assert panel.remaining_points() == DEFAULT_MAX_POINTS - 3
    panel.decrement(Stat.STRENGTH)
    assert panel.strength_points == 1


def test_decrement_at_zero_is_ignored(panel):
    panel.decrement(Stat.HEALTH)
    assert panel.health_points == 0
    assert panel.input_texts[Stat.HEALTH] == "0"


def test_increment_stops_at_max(panel):
    panel.set_max_points(3)
    for _ in range(5):
        panel.increment(Stat.MANA)
    assert panel.mana_points == 3
    assert panel.remaining_points() == 0


def test_set_max_points_has_floor_of_one(panel):
    panel.set_max_points(0)
    assert panel.max_points == 1


def test_type_text_replaces_zero_and_limits_digits(panel):
    panel.type_text(Stat.STRENGTH, "1")
    assert panel.input_texts[Stat.STRENGTH] == "1"
    panel.type_text(Stat.STRENGTH, "2x9")
    assert panel.input_texts[Stat.STRENGTH] == "12"
    assert panel.strength_points == 12


def test_backspace_falls_back_to_zero(panel):
    panel.type_text(Stat.MANA, "7")
    panel.backspace(Stat.MANA)
    assert panel.input_texts[Stat.MANA] == "0"
    assert panel.mana_points == 0


def test_over_allocation_is_clamped(panel):
    panel.type_text(Stat.STRENGTH, "25")
    panel.type_text(Stat.MANA, "20")
    assert panel.strength_points == 25
    assert panel.total_points_allocated == panel.max_points
    assert panel.input_texts[Stat.MANA] == str(panel.mana_points)
    assert panel.remaining_points() == 0


def test_confirm_applies_to_hero_and_hides(panel):
    hero = FakeHero()
    confirmed = []
    panel.on_confirm = lambda s, m, h: confirmed.append((s, m, h))
    panel.show_for_hero(hero)
    panel.increment(Stat.STRENGTH)
    panel.increment(Stat.HEALTH)
    panel.confirm()
    assert hero.calls == [(1, 0, 1)]
    assert confirmed == [(1, 0, 1)]
    assert panel.visible is False


def test_cancel_notifies_and_resets(panel):
    cancelled = []
    panel.on_cancel = lambda: cancelled.append(True)
    panel.type_text(Stat.HEALTH, "9")
    panel.cancel()
    assert cancelled == [True]
    assert panel.health_points == 0
    assert panel.total_points_allocated == 0


def test_show_resets_allocation(panel):
    panel.increment(Stat.MANA)
    panel.hide()
    panel.show()
    assert panel.mana_points == 0
    assert panel.visible is True


def test_clicking_plus_button_increments(panel):
    inputs = InputState(mouse=center(panel.up_buttons[Stat.MANA].bounds), mouse_pressed=True)
    panel.update(inputs)
    assert panel.mana_points == 1


def test_click_focuses_field_and_typing_fills_it(panel):
    field = panel.input_bounds[Stat.HEALTH]
    panel.update(InputState(mouse=center(field), mouse_pressed=True, chars="8"))
    assert panel.active_input is Stat.HEALTH
    assert panel.health_points == 8
    panel.update(InputState(mouse=center(field), keys_pressed=frozenset({"enter"})))
    assert panel.active_input is None


def test_confirm_button_only_works_with_all_points_spent(panel):
    hero = FakeHero()
    panel.hero = hero
    click = InputState(mouse=center(panel.confirm_button.bounds), mouse_pressed=True)
    panel.type_text(Stat.STRENGTH, "10")
    panel.update(click)
    assert hero.calls == []
    assert panel.visible is True

    panel.type_text(Stat.MANA, str(REQUIRED_POINTS - panel.strength_points))
    panel.update(click)
    assert hero.calls == [(10, REQUIRED_POINTS - 10, 0)]
    assert panel.visible is False


def test_update_ignored_when_hidden():
    panel = LevelUpPanel()
    inputs = InputState(mouse=center(panel.up_buttons[Stat.STRENGTH].bounds), mouse_pressed=True)
    panel.update(inputs)
    assert panel.strength_points == 0


def test_set_bounds_moves_fields():
    panel = LevelUpPanel()
    panel.set_bounds(Rect(0, 0, 450, 300))
    assert panel.input_bounds[Stat.STRENGTH].x == 150
    assert panel.confirm_button.bounds.x == 50


def test_draw_renders_panel(panel):
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    panel.draw(surface)
    x, y = int(panel.bounds.x + 10), int(panel.bounds.y + panel.bounds.height / 2)
    assert surface.get_at((x, y))[:3] != (0, 0, 0)
    assert surface.get_at((x, y))[0] > 0