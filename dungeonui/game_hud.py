"""The heads-up display shown over the map during play.

The hero exposes ``health``, ``max_health``, ``xp``, ``strength`` and
``mana``; items expose ``name``, ``level`` and ``bonus``.
"""

from __future__ import annotations

from typing import Optional

from .button import Button
from .core import (
    Color,
    InputState,
    Rect,
    _blit_texture,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)
from .hud_layout import (
    TOOLTIP_LINE_HEIGHT,
    TOOLTIP_WIDTH,
    armor_button_bounds,
    format_bonus,
    hp_bar_bounds,
    spell_button_bounds,
    tooltip_rect,
    weapon_button_bounds,
    wrap_name,
    xp_bar_bounds,
)
from .progress_bar import ProgressBar

FRAME_HEIGHT = 120
XP_FOR_LEVEL = 100
BAR_FONT_SIZE = 21
STAT_FONT_SIZE = 23
LEVEL_FONT_SIZE = 24

SLOTS = ("armor", "weapon", "spell")


def _hp_text(current: float, maximum: float) -> str:
    return f"{int(current)}/{int(maximum)}"


def _xp_text(current: float, maximum: float) -> str:
    return f"{int(current / maximum * 100.0)}%"


class GameHUD:
    """Health and experience bars, hero stats, level info and equipment slots."""

    def __init__(self, screen_width: int, screen_height: int, textures: Optional[dict] = None,
                 font=None) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.font = font
        # Optional images keyed by "background", "armor", "weapon", "spell".
        self.textures: dict = dict(textures or {})
        self.hero = None
        self.armor = None
        self.weapon = None
        self.spell = None
        self.hovered_slot: Optional[str] = None
        self.current_level = 1
        self.monsters_remaining = 0
        self.treasures_remaining = 0

        self.frame_color = Color(40, 40, 70, 230)
        self.text_color = Color(220, 220, 250, 255)
        self.dark_purple = Color(30, 20, 50, 255)
        self.mystic_blue = Color(60, 80, 120, 255)
        self.deep_red = Color(150, 30, 50, 255)
        self.stone_gray = Color(80, 80, 90, 200)

        self.hp_bar = ProgressBar(hp_bar_bounds(screen_width), 50.0)
        self.xp_bar = ProgressBar(xp_bar_bounds(self.hp_bar.bounds), 0.0)
        self._style_bars()

        self.armor_button = Button(armor_button_bounds(screen_width))
        self.weapon_button = Button(weapon_button_bounds(screen_width))
        self.spell_button = Button(spell_button_bounds(screen_width))
        self._style_buttons()

    def _style_bars(self) -> None:
        hp, xp = self.hp_bar, self.xp_bar
        hp.background_color = Color(40, 40, 50, 255)
        hp.foreground_color = self.deep_red
        hp.border_color = Color(78, 15, 15, 255)
        hp.text_prefix = "HP: "
        hp.text_formatter = _hp_text
        hp.enable_pulsating_effect(True, 0.2, 0.8)

        xp.background_color = Color(58, 181, 105, 70)
        xp.foreground_color = Color(35, 152, 80, 255)
        xp.border_color = Color(33, 49, 40, 255)
        xp.text_prefix = "XP: "
        xp.text_formatter = _xp_text
        xp.enable_pulsating_effect(True, 0.1, 0.6)

        for bar in (hp, xp):
            bar.set_border_thickness(3.0)
            bar.set_rounding(0.2)
            bar.show_text = True
            bar.font = self.font
            bar.font_size = BAR_FONT_SIZE
            bar.text_color = self.text_color

    def _style_buttons(self) -> None:
        for slot, button in zip(SLOTS, self._buttons()):
            button.set_colors(
                Color(60, 60, 85, 255), Color(75, 75, 110, 255), Color(90, 90, 130, 255), self.text_color
            )
            button.set_border(Color(110, 110, 170, 255), 1)
            button.enable_hover_animation(True, 1.1, 8.0)
            button.corner_radius = 0.3
            button.texture = self.textures.get(slot)

    def _buttons(self) -> tuple[Button, Button, Button]:
        return self.armor_button, self.weapon_button, self.spell_button

    def _items(self) -> tuple:
        return self.armor, self.weapon, self.spell

    def initialize(self, hero) -> None:
        self.hero = hero
        for button, item in zip(self._buttons(), self._items()):
            button.active = item is not None

    def set_armor(self, armor) -> None:
        self.armor = armor
        self.armor_button.active = armor is not None

    def set_weapon(self, weapon) -> None:
        self.weapon = weapon
        self.weapon_button.active = weapon is not None

    def set_spell(self, spell) -> None:
        self.spell = spell
        self.spell_button.active = spell is not None

    def resize(self, screen_width: int, screen_height: int) -> None:
        """Move the bars and rebuild the slot buttons for a new screen size."""
        if (screen_width, screen_height) == (self.screen_width, self.screen_height):
            return
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.hp_bar.bounds = hp_bar_bounds(screen_width)
        self.xp_bar.bounds = xp_bar_bounds(self.hp_bar.bounds)
        self.armor_button = Button(armor_button_bounds(screen_width))
        self.weapon_button = Button(weapon_button_bounds(screen_width))
        self.spell_button = Button(spell_button_bounds(screen_width))

    def update(self, delta_time: float, inputs: InputState) -> None:
        if self.hero is None:
            return

        self.hp_bar.update(self.hero.health, delta_time)
        self.hp_bar.set_max_value(self.hero.max_health)
        self.xp_bar.update(self.hero.xp, delta_time)
        self.xp_bar.set_max_value(XP_FOR_LEVEL)

        self.hovered_slot = next(
            (
                slot
                for slot, button in zip(SLOTS, self._buttons())
                if button.active and button.bounds.contains(*inputs.mouse)
            ),
            None,
        )

        for button in self._buttons():
            button.update(inputs)

    def _font(self, size: int):
        return self.font or _default_font(size)

    def draw(self, surface) -> None:
        if self.hero is None:
            return
        self.resize(*surface.get_size())

        background = self.textures.get("background")
        if background is not None:
            _blit_texture(surface, background, Rect(0, 0, self.screen_width, self.screen_height))

        self._draw_frame(surface)
        self._draw_stats(surface)
        self._draw_level_info(surface)
        self._draw_inventory(surface)
        self.hp_bar.draw(surface)
        self.xp_bar.draw(surface)

    def _draw_frame(self, surface) -> None:
        w, h = self.screen_width, self.screen_height
        _draw_rect(surface, Rect(0, 0, w, FRAME_HEIGHT), self.frame_color.with_alpha(0.9))

        _draw_rect(surface, Rect(0, 0, w, h - 2), self.stone_gray, width=2)
        _draw_rect(surface, Rect(0, 1, w, h - 1), self.mystic_blue.with_alpha(0.6), width=3)
        _draw_rect(surface, Rect(0, 2, w, h), self.mystic_blue.with_alpha(0.3), width=4)

        _draw_rect(surface, Rect(0, FRAME_HEIGHT, w, 1), self.stone_gray)
        _draw_rect(surface, Rect(0, FRAME_HEIGHT - 2, w, 2), self.mystic_blue.with_alpha(0.6))
        _draw_rect(surface, Rect(0, FRAME_HEIGHT - 1, w, 3), self.mystic_blue.with_alpha(0.3))

    def _glow_text(self, surface, font, text: str, pos: tuple[float, float], color: Color,
                   glow_dx: float = -1.5, glow_dy: float = 1.5) -> None:
        _draw_text(surface, font, text, pos, color)
        _draw_text(surface, font, text, (pos[0] + glow_dx, pos[1] + glow_dy), color._replace(a=100))

    def _draw_stats(self, surface) -> None:
        font = self._font(STAT_FONT_SIZE)
        bar = self.hp_bar.bounds
        label_y = bar.y + bar.height + 25
        value_y = label_y + 1

        self._glow_text(surface, font, "Strength:", (bar.x + 3, label_y), self.text_color)
        self._glow_text(surface, font, str(self.hero.strength), (bar.x + 109, value_y), Color(220, 220, 100, 255))

        mana_x = bar.x + bar.width / 2
        self._glow_text(surface, font, "Mana:", (mana_x + 42, label_y), self.text_color)
        self._glow_text(surface, font, str(self.hero.mana), (mana_x + 107, value_y), Color(120, 180, 255, 255))

    def _draw_level_info(self, surface) -> None:
        start_x = self.screen_width - 330
        start_y = 18.0
        line_height = 30.0

        self._glow_text(
            surface, self._font(LEVEL_FONT_SIZE + 2), f"LEVEL {self.current_level}",
            (start_x, start_y), Color(255, 255, 150, 255),
        )
        font = self._font(LEVEL_FONT_SIZE)
        counter_color = Color(220, 100, 100, 255)
        self._glow_text(
            surface, font, f"Current number of monsters: {self.monsters_remaining}",
            (start_x - 110, start_y + line_height), counter_color,
        )
        self._glow_text(
            surface, font, f"Current number of treasures: {self.treasures_remaining}",
            (start_x - 118, start_y + line_height * 2), counter_color,
        )

    def _draw_inventory(self, surface) -> None:
        for button in self._buttons():
            button.draw(surface)
        for slot, button, item in zip(SLOTS, self._buttons(), self._items()):
            if self.hovered_slot == slot and item is not None:
                self._draw_tooltip(surface, item, button.bounds)
                break

    def _draw_tooltip(self, surface, item, item_bounds: Rect) -> None:
        lines = wrap_name(item.name)
        rect = tooltip_rect(item_bounds, len(lines), self.screen_height)

        _draw_rect(surface, rect, self.dark_purple.with_alpha(0.9))
        for inset, alpha in ((0, 0.9), (1, 0.6), (2, 0.3)):
            inner = Rect(rect.x + inset, rect.y + inset, rect.width - 2 * inset, rect.height - 2 * inset)
            _draw_rect(surface, inner, self.mystic_blue.with_alpha(alpha), width=1)

        name_font = self._font(24)
        text_y = rect.y + 15
        for line in lines:
            width, _ = _measure_text(name_font, line)
            text_x = rect.x + (TOOLTIP_WIDTH - width) / 2.0
            self._glow_text(surface, name_font, line, (text_x, text_y), self.text_color, glow_dy=1)
            text_y += TOOLTIP_LINE_HEIGHT

        detail_font = self._font(22)
        level_text = f"Level: {item.level}"
        width, _ = _measure_text(detail_font, level_text)
        level_x = rect.x + (TOOLTIP_WIDTH - width) / 2.0
        _draw_text(surface, detail_font, level_text, (level_x, text_y + 5), Color(200, 220, 100, 255))
        _draw_text(surface, detail_font, level_text, (level_x - 1.5, text_y + 6.5), Color(180, 180, 100, 80))
        text_y += 22

        bonus_text = f"Bonus: {format_bonus(item.bonus)}%"
        width, _ = _measure_text(detail_font, bonus_text)
        bonus_x = rect.x + (TOOLTIP_WIDTH - width) / 2.0
        _draw_text(surface, detail_font, bonus_text, (bonus_x, text_y + 5), Color(120, 240, 120, 255))
        _draw_text(surface, detail_font, bonus_text, (bonus_x - 2, text_y + 6.5), Color(100, 200, 100, 80))