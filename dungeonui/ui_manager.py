"""Top-level screen controller that switches between menu, map, battle and panels.

The hero exposes ``position`` (a :class:`Position`), ``inventory`` (with
``armor``, ``weapon`` and ``spell``) and whatever the HUD and battle panel
read.  The map offers ``load_from_file(path, tag)``, ``width``, ``height``,
``cell(position)``, ``is_passable(x, y)`` and the lists ``monsters`` and
``treasures``; monsters carry an ``is_boss`` flag and ``is_defeated()``.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

import pygame

from .battle_panel import BattlePanel, BattleResult
from .core import (
    WHITE,
    Color,
    InputState,
    Position,
    Rect,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)
from .equipment_panel import EquipmentPanel, ItemType
from .game_hud import GameHUD
from .level_up_panel import LevelUpPanel
from .main_menu import MainMenu
from .map_renderer import MapRenderer
from .portal_finder import find_nearest_wall_position

DEFAULT_MAP_FILE = "assets/maps/maps.txt"
TRANSITION_SECONDS = 2.0
LEVEL_UP_POINTS = 30
PORTAL_CELL_SIZE = 40.0
PORTAL_KEYS = frozenset({"space", "return", "enter"})
TRANSITION_TEXT = "Level Complete! Preparing next level..."
TRANSITION_FONT_SIZE = 40


class UIState(Enum):
    """Which screen is in front."""

    MAIN_MENU = auto()
    GAMEPLAY = auto()
    BATTLE = auto()
    LEVEL_UP = auto()
    EQUIPMENT_SELECTION = auto()
    LEVEL_TRANSITION = auto()


@dataclass
class Portal:
    """A level exit opened in a wall once the level is cleared."""

    position: Position
    is_active: bool = True
    animation_time: float = 0.0


def _level_tag(level_number: int) -> str:
    return f"[LEVEL_{level_number}]"


def _draw_circle(surface, center: tuple[float, float], radius: float, color: Color, width: int = 0) -> None:
    r = max(int(radius), 1)
    layer = pygame.Surface((2 * r + 1, 2 * r + 1), pygame.SRCALPHA)
    pygame.draw.circle(layer, tuple(color), (r, r), r, width)
    surface.blit(layer, (int(center[0]) - r, int(center[1]) - r))


class UIManager:
    """Owns every screen and panel and moves the game between them."""

    def __init__(self, screen_width: int, screen_height: int, map_file_path: str = DEFAULT_MAP_FILE,
                 *, rng: Optional[random.Random] = None) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.map_file_path = map_file_path

        self.state = UIState.MAIN_MENU
        self.previous_state = UIState.MAIN_MENU

        self.main_menu = MainMenu(screen_width, screen_height)
        self.main_menu.initialize()
        self.game_hud = GameHUD(screen_width, screen_height)
        self.battle_panel = BattlePanel(screen_width, screen_height, rng=rng)
        self.level_up_panel = LevelUpPanel()
        self.level_up_panel.on_confirm = self._on_level_up_confirm
        self.level_up_panel.on_cancel = self._on_level_up_cancel
        self.equipment_panel = EquipmentPanel(None, screen_width, screen_height)
        self.map_renderer = MapRenderer(screen_width, screen_height)

        self._hero = None
        self.current_map = None
        self.attack_system = None
        self.current_battle_monster = None

        self.current_level = 1
        self.level_complete = False
        self.portal_created = False
        self.portals: list[Portal] = []
        self.transition_timer = 0.0
        self.is_transitioning = False

    # -- references -------------------------------------------------------

    @property
    def hero(self):
        return self._hero

    @hero.setter
    def hero(self, hero) -> None:
        self._hero = hero
        self.equipment_panel.player = hero
        self.game_hud.initialize(hero)

    @property
    def should_quit(self) -> bool:
        return self.main_menu.quit_selected

    @property
    def is_battle_active(self) -> bool:
        return self.state is UIState.BATTLE and self.battle_panel.is_active()

    @property
    def battle_result(self) -> BattleResult:
        return self.battle_panel.result

    @property
    def is_equipment_panel_visible(self) -> bool:
        return self.equipment_panel.visible

    # -- state ------------------------------------------------------------

    def set_state(self, new_state: UIState) -> None:
        if self.state is new_state:
            return
        self.previous_state = self.state
        self.state = new_state
        if new_state is UIState.GAMEPLAY and self.previous_state is UIState.MAIN_MENU:
            self._initialize_gameplay()
        elif new_state is UIState.MAIN_MENU and self.previous_state is UIState.GAMEPLAY:
            self._cleanup_gameplay()

    def start_new_game(self) -> None:
        self.current_level = 1
        self.load_level(self.current_level)
        self.set_state(UIState.GAMEPLAY)

    def load_game(self) -> None:
        self.start_new_game()

    def load_level(self, level_number: int) -> bool:
        """Load a level from the map file; a failed load leaves the level as it was."""
        if self.current_map is None:
            return False
        try:
            self.current_map.load_from_file(self.map_file_path, _level_tag(level_number))
        except (OSError, ValueError, KeyError):
            return False
        self.current_level = level_number
        self._reset_level_state()
        if self._hero is not None:
            self.map_renderer.initialize(self.current_map, self._hero.position)
        self._update_hud_stats()
        return True

    def generate_new_level(self) -> bool:
        return self.load_level(self.current_level + 1)

    # -- level completion and portals ------------------------------------

    def _all_defeated(self, bosses: bool) -> bool:
        if self.current_map is None:
            return False
        return all(
            monster.is_boss != bosses or monster.is_defeated()
            for monster in self.current_map.monsters
        )

    def check_level_completion(self) -> None:
        """Mark the level done and open a portal once monsters or bosses are all beaten."""
        if self.level_complete or self.portal_created:
            return
        if self._all_defeated(bosses=False) or self._all_defeated(bosses=True):
            self.level_complete = True
            self.create_portal()

    def create_portal(self) -> None:
        if self.portal_created or self._hero is None or self.current_map is None:
            return
        position = find_nearest_wall_position(self.current_map, self._hero.position)
        if position is not None:
            self.portals.append(Portal(position))
            self.portal_created = True

    def _handle_portal_interaction(self, inputs: InputState) -> None:
        if self._hero is None or not self.portals:
            return
        hero_pos = self._hero.position
        for portal in self.portals:
            near = (abs(hero_pos.x - portal.position.x) <= 1
                    and abs(hero_pos.y - portal.position.y) <= 1)
            if portal.is_active and near and PORTAL_KEYS & set(inputs.keys_pressed):
                self.is_transitioning = True
                self.set_state(UIState.LEVEL_TRANSITION)
                break

    # -- battle -----------------------------------------------------------

    def start_battle(self, hero, monster) -> None:
        if hero is None or monster is None or self.attack_system is None:
            return
        self.current_battle_monster = monster
        self.battle_panel.start_battle(hero, monster, self.attack_system)
        self.set_state(UIState.BATTLE)

    def end_battle(self) -> None:
        """Apply the battle outcome and go back to the map."""
        self._on_battle_end(self.battle_panel.result)
        self.current_battle_monster = None
        self.set_state(UIState.GAMEPLAY)

    def _on_battle_end(self, result: BattleResult) -> None:
        if (result is BattleResult.PLAYER_WON and self.current_battle_monster is not None
                and self.current_map is not None):
            beaten = self.current_battle_monster
            self.current_map.monsters[:] = [m for m in self.current_map.monsters if m is not beaten]
            self._update_hud_stats()

    # -- panels -----------------------------------------------------------

    def show_equipment_choice(self, new_item) -> None:
        """Offer ``new_item`` against whatever occupies the same slot."""
        if self._hero is None or new_item is None:
            return
        inventory = self._hero.inventory
        try:
            item_type = ItemType(new_item.item_type)
        except ValueError:
            item_type = None
        current = None
        if item_type is ItemType.ARMOR:
            current = inventory.armor
        elif item_type is ItemType.WEAPON:
            current = inventory.weapon
        elif item_type is ItemType.SPELL:
            current = inventory.spell
        self.equipment_panel.player = self._hero
        self.equipment_panel.show(current, new_item)
        self.set_state(UIState.EQUIPMENT_SELECTION)

    def hide_equipment_panel(self) -> None:
        self.equipment_panel.hide()
        self.set_state(UIState.GAMEPLAY)

    def show_level_up_panel(self, available_points: int) -> None:
        if self._hero is None:
            return
        self.level_up_panel.set_max_points(available_points)
        self.level_up_panel.show_for_hero(self._hero)
        self.set_state(UIState.LEVEL_UP)

    def hide_level_up_panel(self) -> None:
        self.level_up_panel.hide()
        self.set_state(UIState.GAMEPLAY)

    def _on_level_up_confirm(self, strength: int, mana: int, health: int) -> None:
        self.hide_level_up_panel()

    def _on_level_up_cancel(self) -> None:
        self.hide_level_up_panel()

    # -- helpers ----------------------------------------------------------

    def _update_hud_stats(self) -> None:
        if self.current_map is None:
            return
        self.game_hud.current_level = self.current_level
        self.game_hud.monsters_remaining = len(self.current_map.monsters)
        self.game_hud.treasures_remaining = len(self.current_map.treasures)

    def _initialize_gameplay(self) -> None:
        if self._hero is not None:
            self.game_hud.initialize(self._hero)
            if self.current_map is not None:
                self.map_renderer.initialize(self.current_map, self._hero.position)
        self._update_hud_stats()

    def _cleanup_gameplay(self) -> None:
        self.portals.clear()
        self.portal_created = False
        self.level_complete = False
        self.current_battle_monster = None

    def _reset_level_state(self) -> None:
        self.portals.clear()
        self.portal_created = False
        self.level_complete = False
        self.transition_timer = 0.0
        self.is_transitioning = False

    # -- frame ------------------------------------------------------------

    def update(self, delta_time: float, inputs: Optional[InputState] = None) -> None:
        inputs = inputs or InputState()
        state = self.state
        if state is UIState.MAIN_MENU:
            self.main_menu.update(delta_time, inputs)
            if self.main_menu.start_game_selected:
                self.start_new_game()
                self.main_menu.reset_selections()
            elif self.main_menu.load_game_selected:
                self.load_game()
                self.main_menu.reset_selections()
        elif state is UIState.GAMEPLAY:
            self.game_hud.update(delta_time, inputs)
            self.map_renderer.update(delta_time)
            self.check_level_completion()
            self._handle_portal_interaction(inputs)
        elif state is UIState.BATTLE:
            self.battle_panel.update(delta_time, inputs)
            if self.battle_panel.is_finished():
                self.end_battle()
        elif state is UIState.LEVEL_UP:
            self.level_up_panel.update(inputs)
        elif state is UIState.EQUIPMENT_SELECTION:
            self.equipment_panel.update(inputs)
            if not self.equipment_panel.visible:
                self.hide_equipment_panel()
        elif state is UIState.LEVEL_TRANSITION:
            self._update_level_transition(delta_time)

        for portal in self.portals:
            portal.animation_time += delta_time

    def _update_level_transition(self, delta_time: float) -> None:
        self.transition_timer += delta_time
        if self.transition_timer >= TRANSITION_SECONDS:
            self.current_level += 1
            self.load_level(self.current_level)
            self.show_level_up_panel(LEVEL_UP_POINTS)
            self.transition_timer = 0.0
            self.is_transitioning = False

    def draw(self, surface) -> None:
        state = self.state
        if state is UIState.MAIN_MENU:
            self.main_menu.draw(surface)
            return
        self._draw_gameplay(surface)
        if state is UIState.BATTLE:
            self.battle_panel.draw(surface)
        elif state is UIState.LEVEL_UP:
            self.level_up_panel.draw(surface)
        elif state is UIState.EQUIPMENT_SELECTION:
            self.equipment_panel.draw(surface)
        elif state is UIState.LEVEL_TRANSITION:
            self._draw_level_transition(surface)

    def _draw_gameplay(self, surface) -> None:
        self.map_renderer.draw(surface)
        self.game_hud.draw(surface)
        self._draw_portals(surface)

    def _draw_portals(self, surface) -> None:
        for portal in self.portals:
            if not portal.is_active:
                continue
            pulse = 1.0 + math.sin(portal.animation_time * 4.0) * 0.2
            alpha = int((math.sin(portal.animation_time * 3.0) + 1.0) * 127)
            center = (portal.position.x * PORTAL_CELL_SIZE, portal.position.y * PORTAL_CELL_SIZE)
            _draw_circle(surface, center, 20.0 * pulse, Color(100, 200, 255, alpha))
            _draw_circle(surface, center, 25.0 * pulse, Color(150, 255, 255, 200), width=1)

    def _draw_level_transition(self, surface) -> None:
        width, height = surface.get_size()
        alpha = int(math.sin(self.transition_timer * 2.0) * 127 + 128)
        _draw_rect(surface, Rect(0, 0, width, height), Color(0, 0, 0, max(0, min(255, alpha))))
        font = _default_font(TRANSITION_FONT_SIZE)
        text_w, _ = _measure_text(font, TRANSITION_TEXT)
        _draw_text(surface, font, TRANSITION_TEXT, ((width - text_w) // 2, height // 2 - 20), WHITE)