from dataclasses import dataclass
from typing import Optional

import pygame
import pytest

from dungeonui.core import GREEN, RED, WHITE, InputState
from dungeonui.equipment_panel import (
    EquipmentPanel,
    ItemType,
    bonus_difference,
    difference_color,
    level_difference,
    level_difference_color,
    wrap_words,
)


@dataclass
class FakeItem:
    name: str
    level: int
    bonus: float
    item_type: str


@dataclass
class FakeInventory:
    weapon: FakeItem
    spell: FakeItem
    armor: Optional[FakeItem] = None

    def new_armor(self, item):
        self.armor = item

    def new_weapon(self, item):
        self.weapon = item

    def new_spell(self, item):
        self.spell = item


@dataclass
class FakeHero:
    inventory: FakeInventory


@pytest.fixture
def hero():
    return FakeHero(
        FakeInventory(
            weapon=FakeItem("Nightstalker Dagger", 4, 25.0, "WEAPON"),
            spell=FakeItem("Thunderlord's Wrath", 4, 35.0, "SPELL"),
        )
    )


def _click(button):
    b = button.bounds
    return InputState(mouse=(b.x + b.width / 2, b.y + b.height / 2), mouse_pressed=True)


def test_bonus_difference_positive():
    result = bonus_difference(10.0, 12.5)
    assert result.startswith("+")
    assert float(result) == pytest.approx(2.5)


def test_bonus_difference_negative():
    result = bonus_difference(12.5, 10.0)
    assert result.startswith("-")
    assert float(result) == pytest.approx(-2.5)


def test_bonus_difference_negligible():
    assert bonus_difference(10.0, 10.04) == ""
    assert bonus_difference(10.0, 9.96) == ""


@pytest.mark.parametrize("current,new", [(3, 5), (5, 3), (1, 10)])
def test_level_difference_round_trip(current, new):
    result = level_difference(current, new)
    assert int(result) == new - current
    assert result[0] == ("+" if new > current else "-")


def test_level_difference_equal():
    assert level_difference(4, 4) == ""


def test_difference_colors():
    assert difference_color(10.0, 12.0) == GREEN
    assert difference_color(12.0, 10.0) == RED
    assert difference_color(10.0, 10.01) == WHITE
    assert level_difference_color(1, 2) == GREEN
    assert level_difference_color(2, 1) == RED
    assert level_difference_color(2, 2) == WHITE


def test_wrap_words_keeps_words_and_limit():
    text = "Increases attack damage taken by enemies"
    lines = wrap_words(text, 12, len)
    assert " ".join(lines) == text
    assert all(len(line) <= 12 for line in lines)


def test_wrap_words_long_word_alone():
    assert wrap_words("abcdefghij xy", 5, len) == ["abcdefghij", "xy"]


def test_wrap_words_empty():
    assert wrap_words("", 10, len) == []


def test_show_comparison_without_armor(hero):
    panel = EquipmentPanel(hero)
    armor = FakeItem("Aegis of Eternity", 4, 12.5, "ARMOR")
    panel.show_comparison(armor)
    assert panel.visible
    assert panel.current_item is None
    assert panel.new_item is armor
    assert panel.item_type is ItemType.ARMOR


def test_show_comparison_weapon_uses_equipped(hero):
    panel = EquipmentPanel(hero)
    sword = FakeItem("Sword", 5, 30.0, ItemType.WEAPON)
    panel.show_comparison(sword)
    assert panel.current_item is hero.inventory.weapon
    assert panel.item_type is ItemType.WEAPON


def test_show_comparison_none_ignored(hero):
    panel = EquipmentPanel(hero)
    panel.show_comparison(None)
    assert panel.visible is False


@pytest.mark.parametrize("kind,slot", [("ARMOR", "armor"), ("WEAPON", "weapon"), ("SPELL", "spell")])
def test_equip_new_fills_slot(hero, kind, slot):
    panel = EquipmentPanel(hero)
    item = FakeItem("New", 7, 40.0, kind)
    panel.show_comparison(item)
    panel.equip_new()
    assert getattr(hero.inventory, slot) is item
    assert panel.visible is False


def test_keep_current_leaves_inventory(hero):
    panel = EquipmentPanel(hero)
    old = hero.inventory.weapon
    panel.show_comparison(FakeItem("Sword", 5, 30.0, "WEAPON"))
    panel.keep_current()
    assert hero.inventory.weapon is old
    assert panel.visible is False


def test_equip_without_new_item_hides(hero):
    panel = EquipmentPanel(hero)
    panel.show(None, None)
    panel.equip_new()
    assert panel.visible is False


def test_unknown_type_is_not_equipped(hero):
    panel = EquipmentPanel(hero)
    old = hero.inventory.weapon
    panel.show(None, FakeItem("Potion", 1, 1.0, "POTION"))
    assert panel.item_type is None
    panel.equip_new()
    assert hero.inventory.weapon is old
    assert hero.inventory.armor is None


def test_escape_hides(hero):
    panel = EquipmentPanel(hero)
    panel.show_comparison(FakeItem("Sword", 5, 30.0, "WEAPON"))
    panel.update(InputState(keys_pressed=frozenset({"escape"})))
    assert panel.visible is False


def test_click_right_equips(hero):
    panel = EquipmentPanel(hero)
    sword = FakeItem("Sword", 5, 30.0, "WEAPON")
    panel.show_comparison(sword)
    panel.update(_click(panel.right_button))
    assert hero.inventory.weapon is sword
    assert panel.visible is False


def test_click_left_keeps(hero):
    panel = EquipmentPanel(hero)
    old = hero.inventory.spell
    panel.show_comparison(FakeItem("Fireball", 5, 30.0, "SPELL"))
    panel.update(_click(panel.left_button))
    assert hero.inventory.spell is old
    assert panel.visible is False


def test_hidden_panel_ignores_clicks(hero):
    panel = EquipmentPanel(hero)
    panel.new_item = FakeItem("Sword", 5, 30.0, "WEAPON")
    old = hero.inventory.weapon
    panel.update(_click(panel.right_button))
    assert hero.inventory.weapon is old


def test_draw_hidden_leaves_surface(hero):
    panel = EquipmentPanel(hero)
    surface = pygame.Surface((1400, 800))
    surface.fill((255, 255, 255))
    panel.draw(surface)
    assert surface.get_at((5, 5)) == pygame.Color(255, 255, 255, 255)


def test_draw_visible_darkens_screen(hero):
    panel = EquipmentPanel(hero)
    panel.show_comparison(FakeItem("Aegis of Eternity", 4, 12.5, "ARMOR"))
    surface = pygame.Surface((1400, 800))
    surface.fill((255, 255, 255))
    panel.draw(surface)
    assert surface.get_at((5, 5)).r < 255