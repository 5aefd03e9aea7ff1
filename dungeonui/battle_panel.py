"""A turn-based battle overlay between the hero and a monster.

The player and the monster expose ``name``, ``level``, ``health``,
``max_health`` and ``is_defeated()``; the player also has an ``inventory``
whose ``weapon`` and ``spell`` carry a ``name``, and a
``restore_health_after_battle()`` method.  The attack system offers
``perform_attack(attacker, defender, attack_type)`` returning the damage
dealt and ``reward_experience(player, monster)``.
"""

from __future__ import annotations

import random
from enum import Enum, auto
from typing import Optional

from .button import Button
from .core import (
    BLUE,
    DARKBLUE,
    DARKGRAY,
    DARKGREEN,
    GRAY,
    GREEN,
    LIGHTGRAY,
    MAROON,
    PINK,
    RED,
    WHITE,
    Color,
    InputState,
    Rect,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
    ease_out_cubic,
)

MAX_LOG_LINES = 8
DEFAULT_ANIMATION_SPEED = 3.0

_BUTTON_WIDTH = 120.0
_BUTTON_HEIGHT = 40.0
_BUTTON_SPACING = 20.0
_BAR_WIDTH = 200.0
_BAR_HEIGHT = 20.0
_LOG_LINE_HEIGHT = 25.0


class BattleState(Enum):
    """Where the panel is in its show/fight/hide cycle."""

    HIDDEN = auto()
    ANIMATING_IN = auto()
    ACTIVE = auto()
    ANIMATING_OUT = auto()
    FINISHED = auto()


class BattleResult(Enum):
    """How a battle ended, or that it has not yet."""

    ONGOING = auto()
    PLAYER_WON = auto()
    PLAYER_LOST = auto()
    PLAYER_FLED = auto()


class AttackType(Enum):
    """The kind of attack used in a turn."""

    WEAPON = auto()
    SPELL = auto()


_MONSTER_ATTACK_NAMES = {AttackType.WEAPON: "Claw Attack", AttackType.SPELL: "Fire Breath"}


class BattlePanel:
    """Slides in, alternates player and monster turns, then slides out."""

    def __init__(self, screen_width: int = 1400, screen_height: int = 800,
                 rng: Optional[random.Random] = None, font=None) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.rng = rng or random.Random()
        self.font = font

        self.state = BattleState.HIDDEN
        self.result = BattleResult.ONGOING
        self.animation_progress = 0.0
        self.animation_speed = DEFAULT_ANIMATION_SPEED
        self.battle_log: list[str] = []

        self.player = None
        self.monster = None
        self.attack_system = None
        self.is_player_turn = True
        self.waiting_for_input = False

        self.panel_color = Color(30, 30, 30, 240)
        self.header_color = Color(50, 50, 50, 255)
        self.log_background_color = Color(20, 20, 20, 255)
        self.text_color = WHITE

        panel_w = screen_width * 0.8
        panel_h = screen_height * 0.8
        self.target_bounds = Rect((screen_width - panel_w) / 2, (screen_height - panel_h) / 2, panel_w, panel_h)
        self.hidden_bounds = Rect(self.target_bounds.x, float(screen_height), panel_w, panel_h)
        self.bounds = self.hidden_bounds

        button_y = self.target_bounds.y + self.target_bounds.height - 60
        start_x = self.target_bounds.x + (
            self.target_bounds.width - (3 * _BUTTON_WIDTH + 2 * _BUTTON_SPACING)
        ) / 2
        step = _BUTTON_WIDTH + _BUTTON_SPACING

        def make(index: int, label: str, action) -> Button:
            return Button(Rect(start_x + index * step, button_y, _BUTTON_WIDTH, _BUTTON_HEIGHT), label, action)

        self.weapon_button = make(0, "Weapon", self.weapon_attack)
        self.weapon_button.set_colors(DARKGREEN, GREEN, LIGHTGRAY, WHITE)
        self.spell_button = make(1, "Spell", self.spell_attack)
        self.spell_button.set_colors(DARKBLUE, BLUE, LIGHTGRAY, WHITE)
        self.flee_button = make(2, "Flee", self.flee)
        self.flee_button.set_colors(MAROON, RED, PINK, WHITE)
        for button in self._buttons():
            button.corner_radius = 5.0

    def _buttons(self) -> tuple[Button, Button, Button]:
        return self.weapon_button, self.spell_button, self.flee_button

    def start_battle(self, player, monster, attack_system) -> None:
        """Begin a fight; does nothing without both combatants."""
        if player is None or monster is None:
            return
        self.player = player
        self.monster = monster
        self.attack_system = attack_system
        self.state = BattleState.ANIMATING_IN
        self.result = BattleResult.ONGOING
        self.animation_progress = 0.0
        self.is_player_turn = True
        self.waiting_for_input = True
        self.clear_log()
        self.add_log_entry("Battle begins!")

    def update(self, delta_time: float, inputs: Optional[InputState] = None) -> None:
        inputs = inputs or InputState()
        if self.state is BattleState.ANIMATING_IN:
            self.animation_progress += delta_time * self.animation_speed
            if self.animation_progress >= 1.0:
                self.animation_progress = 1.0
                self.state = BattleState.ACTIVE
            self.bounds = self.hidden_bounds.lerp(self.target_bounds, ease_out_cubic(self.animation_progress))
        elif self.state is BattleState.ANIMATING_OUT:
            self.animation_progress -= delta_time * self.animation_speed
            if self.animation_progress <= 0.0:
                self.animation_progress = 0.0
                self.state = BattleState.FINISHED
            self.bounds = self.hidden_bounds.lerp(self.target_bounds, ease_out_cubic(self.animation_progress))
        elif self.state is BattleState.ACTIVE and self.player is not None and self.monster is not None:
            if self.player.is_defeated():
                self.end_battle(BattleResult.PLAYER_LOST)
            elif self.monster.is_defeated():
                self.end_battle(BattleResult.PLAYER_WON)
            elif self.is_player_turn:
                if self.waiting_for_input:
                    for button in self._buttons():
                        button.update(inputs)
                else:
                    self.is_player_turn = False
            else:
                self._monster_attack()

    def weapon_attack(self) -> None:
        if self.waiting_for_input and self.is_player_turn:
            self._player_attack(AttackType.WEAPON)

    def spell_attack(self) -> None:
        if self.waiting_for_input and self.is_player_turn:
            self._player_attack(AttackType.SPELL)

    def flee(self) -> None:
        """Leave the fight; it counts as a win."""
        if not (self.waiting_for_input and self.is_player_turn):
            return
        self.add_log_entry(f"{self.player.name} fled from battle!")
        self.end_battle(BattleResult.PLAYER_WON)

    def _player_attack(self, attack_type: AttackType) -> None:
        if self.player is None or self.monster is None or self.attack_system is None:
            return
        self.waiting_for_input = False
        inventory = self.player.inventory
        item = inventory.weapon if attack_type is AttackType.WEAPON else inventory.spell
        damage = self.attack_system.perform_attack(self.player, self.monster, attack_type)
        self.add_log_entry(f"{self.player.name} used {item.name}! It dealt {int(damage)} damage.")

        if self.monster.is_defeated():
            self.add_log_entry(f"{self.monster.name} is defeated!")
            self.end_battle(BattleResult.PLAYER_WON)
        else:
            self.is_player_turn = False

    def _monster_attack(self) -> None:
        if self.player is None or self.monster is None or self.attack_system is None:
            return
        attack_type = AttackType.WEAPON if self.rng.randint(0, 1) == 0 else AttackType.SPELL
        damage = self.attack_system.perform_attack(self.monster, self.player, attack_type)
        self.add_log_entry(
            f"{self.monster.name} used {_MONSTER_ATTACK_NAMES[attack_type]}! You lost {int(damage)} HP."
        )

        if self.player.is_defeated():
            self.add_log_entry(f"{self.player.name} is defeated!")
            self.end_battle(BattleResult.PLAYER_LOST)
        else:
            self.is_player_turn = True
            self.waiting_for_input = True

    def end_battle(self, result: BattleResult) -> None:
        """Record the outcome, hand out rewards on a win and start hiding."""
        self.result = result
        if result is BattleResult.PLAYER_WON:
            self.add_log_entry(f"Victory! {self.player.name} wins!")
            if self.attack_system is not None and self.monster is not None:
                self.attack_system.reward_experience(self.player, self.monster)
                self.player.restore_health_after_battle()
        elif result is BattleResult.PLAYER_LOST:
            self.add_log_entry(f"Defeat! {self.player.name} was defeated!")
        elif result is BattleResult.PLAYER_FLED:
            self.add_log_entry("You escaped from battle!")
        self.state = BattleState.ANIMATING_OUT

    def add_log_entry(self, entry: str) -> None:
        self.battle_log.append(entry)
        if len(self.battle_log) > MAX_LOG_LINES:
            del self.battle_log[0]

    def clear_log(self) -> None:
        self.battle_log.clear()

    def is_active(self) -> bool:
        return self.state in (BattleState.ACTIVE, BattleState.ANIMATING_IN)

    def is_finished(self) -> bool:
        return self.state is BattleState.FINISHED

    def _font(self, size: int):
        return self.font or _default_font(size)

    def draw(self, surface) -> None:
        if self.state in (BattleState.HIDDEN, BattleState.FINISHED):
            return
        width, height = surface.get_size()
        _draw_rect(surface, Rect(0, 0, width, height), Color(0, 0, 0, 150))
        _draw_rect(surface, self.bounds, self.panel_color, roundness=0.05)
        _draw_rect(surface, self.bounds, WHITE, width=2, roundness=0.05)

        self._draw_header(surface)
        self._draw_health_bars(surface)
        self._draw_log(surface)

        if self.state is BattleState.ACTIVE and self.is_player_turn and self.waiting_for_input:
            self._draw_buttons(surface)

    def _draw_header(self, surface) -> None:
        if self.player is None or self.monster is None:
            return
        b = self.bounds
        header = Rect(b.x + 10, b.y + 10, b.width - 20, 60)
        _draw_rect(surface, header, self.header_color, roundness=0.1)
        font = self._font(20)
        _draw_text(surface, font, f"{self.player.name} | Level: {self.player.level}",
                   (header.x + 10, header.y + 10), WHITE)
        monster_info = f"{self.monster.name} | Level: {self.monster.level}"
        text_w, _ = _measure_text(font, monster_info)
        _draw_text(surface, font, monster_info, (header.x + header.width - text_w - 10, header.y + 10),
                   self.text_color)

    def _draw_bar(self, surface, x: float, y: float, combatant, fill: Color, align_right: bool) -> None:
        background = Rect(x, y, _BAR_WIDTH, _BAR_HEIGHT)
        ratio = combatant.health / combatant.max_health if combatant.max_health else 0.0
        _draw_rect(surface, background, DARKGRAY)
        _draw_rect(surface, Rect(x, y, _BAR_WIDTH * ratio, _BAR_HEIGHT), fill)
        _draw_rect(surface, background, WHITE, width=1)
        font = self._font(16)
        text = f"{int(combatant.health)}/{combatant.max_health}"
        text_w, _ = _measure_text(font, text)
        text_x = x + _BAR_WIDTH - text_w - 5 if align_right else x + 5
        _draw_text(surface, font, text, (text_x, y + 2), WHITE)

    def _draw_health_bars(self, surface) -> None:
        if self.player is None or self.monster is None:
            return
        b = self.bounds
        bar_y = b.y + 80
        self._draw_bar(surface, b.x + 20, bar_y, self.player, GREEN, False)
        self._draw_bar(surface, b.x + b.width - _BAR_WIDTH - 20, bar_y, self.monster, RED, True)

    def _draw_log(self, surface) -> None:
        b = self.bounds
        log_rect = Rect(b.x + 20, b.y + 120, b.width - 40, b.height - 220)
        _draw_rect(surface, log_rect, self.log_background_color, roundness=0.05)
        _draw_rect(surface, log_rect, GRAY, width=1, roundness=0.05)
        _draw_text(surface, self._font(18), "Battle Log", (log_rect.x + 10, log_rect.y + 5), LIGHTGRAY)
        font = self._font(16)
        text_y = log_rect.y + 35
        for line in self.battle_log[-MAX_LOG_LINES:]:
            _draw_text(surface, font, line, (log_rect.x + 10, text_y), self.text_color)
            text_y += _LOG_LINE_HEIGHT

    def _draw_buttons(self, surface) -> None:
        if self.player is None:
            return
        for button in self._buttons():
            button.draw(surface)
        font = self._font(14)
        inventory = self.player.inventory
        for button, label in ((self.weapon_button, inventory.weapon.name), (self.spell_button, inventory.spell.name)):
            bounds = button.bounds
            text_w, text_h = _measure_text(font, label)
            _draw_text(
                surface, font, label,
                (bounds.x + (bounds.width - text_w) / 2, bounds.y + (bounds.height - text_h) / 2 + 15),
                LIGHTGRAY,
            )