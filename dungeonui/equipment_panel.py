"""A side-by-side chooser between the equipped item and a newly found one.

Items expose ``name``, ``level``, ``bonus`` and ``item_type`` (an
:class:`ItemType` or its name as a string).  The player exposes an
``inventory`` with ``armor`` (``None`` when the slot is empty), ``weapon``
and ``spell`` attributes and ``new_armor``, ``new_weapon`` and
``new_spell`` methods that equip an item.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from .button import Button
from .core import (
    BLACK,
    BLUE,
    DARKGRAY,
    GRAY,
    GREEN,
    LIGHTGRAY,
    PURPLE,
    RED,
    WHITE,
    YELLOW,
    Color,
    InputState,
    Rect,
    _default_font,
    _draw_rect,
    _draw_text,
    _measure_text,
)

PANEL_WIDTH = 250
PANEL_HEIGHT = 300
PANEL_SPACING = 50
ICON_SIZE = 64
FONT_SIZE = 20
SMALL_FONT_SIZE = 16
SYMBOL_FONT_SIZE = 40

SIGNIFICANT_BONUS_CHANGE = 0.05

_STAT_LINE_HEIGHT = 30
_DESCRIPTION_LINE_HEIGHT = 20


class ItemType(Enum):
    """The equipment slot an item belongs to."""

    ARMOR = "ARMOR"
    WEAPON = "WEAPON"
    SPELL = "SPELL"


_ICONS = {
    ItemType.ARMOR: (BLUE, "A"),
    ItemType.WEAPON: (RED, "W"),
    ItemType.SPELL: (PURPLE, "S"),
}

_DESCRIPTIONS = {
    ItemType.WEAPON: "Increases attack damage",
    ItemType.ARMOR: "Reduces damage taken",
    ItemType.SPELL: "Increases spell power",
}


def _type_of(item) -> Optional[ItemType]:
    try:
        return ItemType(item.item_type)
    except ValueError:
        return None


def bonus_difference(current_bonus: float, new_bonus: float) -> str:
    """Signed bonus change with two decimals, or '' when negligible."""
    difference = new_bonus - current_bonus
    if difference > SIGNIFICANT_BONUS_CHANGE:
        return f"+{difference:.2f}"
    if difference < -SIGNIFICANT_BONUS_CHANGE:
        return f"{difference:.2f}"
    return ""


def level_difference(current_level: int, new_level: int) -> str:
    """Signed level change, or '' when the levels match."""
    difference = new_level - current_level
    if difference > 0:
        return f"+{difference}"
    if difference < 0:
        return str(difference)
    return ""


def difference_color(current: float, new_value: float) -> Color:
    difference = new_value - current
    if difference > SIGNIFICANT_BONUS_CHANGE:
        return GREEN
    if difference < -SIGNIFICANT_BONUS_CHANGE:
        return RED
    return WHITE


def level_difference_color(current_level: int, new_level: int) -> Color:
    difference = new_level - current_level
    if difference > 0:
        return GREEN
    if difference < 0:
        return RED
    return WHITE


def wrap_words(text: str, max_width: float, measure: Callable[[str], float]) -> list[str]:
    """Break ``text`` into lines no wider than ``max_width``.

    A single word wider than the limit is kept whole on a line of its own.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if measure(candidate) > max_width:
            if line:
                lines.append(line)
                line = word
            else:
                lines.append(word)
        else:
            line = candidate
    if line:
        lines.append(line)
    return lines


class EquipmentPanel:
    """Shows the current and the new item; clicking one side decides."""

    def __init__(self, player, screen_width: int = 1400, screen_height: int = 800) -> None:
        self.player = player
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.visible = False
        self.current_item = None
        self.new_item = None
        self.item_type: Optional[ItemType] = None
        self._setup_buttons()

    def _layout(self) -> tuple[int, int, int]:
        total_width = PANEL_WIDTH * 2 + PANEL_SPACING
        left_x = (self.screen_width - total_width) // 2
        top = (self.screen_height - PANEL_HEIGHT) // 2
        return left_x, left_x + PANEL_WIDTH + PANEL_SPACING, top

    def _setup_buttons(self) -> None:
        left_x, right_x, top = self._layout()
        self.left_button = Button(Rect(left_x, top, PANEL_WIDTH, PANEL_HEIGHT), "", self.keep_current)
        self.right_button = Button(Rect(right_x, top, PANEL_WIDTH, PANEL_HEIGHT), "", self.equip_new)
        for button in (self.left_button, self.right_button):
            button.set_colors(
                Color(0, 0, 0, 0), Color(255, 255, 255, 50), Color(255, 255, 255, 100), WHITE,
            )
            button.set_border(Color(255, 255, 255, 150), 2)
            button.enable_hover_animation(True, 1.05, 8.0)

    def show(self, current_item, new_item) -> None:
        self.current_item = current_item
        self.new_item = new_item
        if new_item is not None:
            item_type = _type_of(new_item)
            if item_type is not None:
                self.item_type = item_type
        self._setup_buttons()
        self.visible = True

    def show_comparison(self, new_item) -> None:
        """Compare ``new_item`` with whatever the player has in the same slot."""
        if new_item is None:
            return
        inventory = self.player.inventory
        item_type = _type_of(new_item)
        current = None
        if item_type is ItemType.ARMOR:
            current = inventory.armor
        elif item_type is ItemType.WEAPON:
            current = inventory.weapon
        elif item_type is ItemType.SPELL:
            current = inventory.spell
        if item_type is not None:
            self.item_type = item_type
        self.show(current, new_item)

    def hide(self) -> None:
        self.visible = False

    def keep_current(self) -> None:
        self.hide()

    def equip_new(self) -> None:
        """Put the new item into its slot and close."""
        if self.new_item is not None:
            inventory = self.player.inventory
            item_type = _type_of(self.new_item)
            if item_type is ItemType.ARMOR:
                inventory.new_armor(self.new_item)
            elif item_type is ItemType.WEAPON:
                inventory.new_weapon(self.new_item)
            elif item_type is ItemType.SPELL:
                inventory.new_spell(self.new_item)
        self.hide()

    def update(self, inputs: InputState) -> None:
        if not self.visible:
            return
        self.left_button.update(inputs)
        self.right_button.update(inputs)
        if "escape" in inputs.keys_pressed:
            self.hide()

    def _stat_lines(self, item, show_comparison: bool) -> list[tuple[str, Color]]:
        current = self.current_item

        level_text = f"Level: {item.level}"
        level_color = WHITE
        bonus_text = f"Bonus: {item.bonus:.1f}%"
        bonus_color = WHITE

        if show_comparison and current is not None:
            diff = level_difference(current.level, item.level)
            if diff:
                level_text += f" ({diff})"
                level_color = level_difference_color(current.level, item.level)
            diff = bonus_difference(current.bonus, item.bonus)
            if diff:
                bonus_text += f" ({diff})"
                bonus_color = difference_color(current.bonus, item.bonus)
        elif show_comparison:
            level_text += f" (+{item.level})"
            level_color = GREEN
            bonus_text += f" (+{item.bonus:.1f}%)"
            bonus_color = GREEN

        return [(level_text, level_color), (bonus_text, bonus_color)]

    def draw(self, surface) -> None:
        if not self.visible:
            return

        self.screen_width, self.screen_height = surface.get_size()
        left_x, right_x, top = self._layout()

        _draw_rect(surface, Rect(0, 0, self.screen_width, self.screen_height), BLACK.with_alpha(0.5))

        self.left_button.draw(surface)
        self.right_button.draw(surface)

        self._draw_panel_content(surface, left_x, top, self.current_item, False)
        self._draw_panel_content(surface, right_x, top, self.new_item, True)

        font = _default_font(FONT_SIZE)
        small = _default_font(SMALL_FONT_SIZE)

        current_title = "Keep Current" if self.current_item is not None else "Keep None"
        new_title = "Equip New"
        for title, x, button in (
            (current_title, left_x, self.left_button),
            (new_title, right_x, self.right_button),
        ):
            width, _ = _measure_text(font, title)
            color = YELLOW if button.is_hovered else WHITE
            _draw_text(surface, font, title, (x + (PANEL_WIDTH - width) // 2, top - 30), color)

        instruction = "Click to choose equipment or press ESC to close"
        width, _ = _measure_text(small, instruction)
        _draw_text(
            surface, small, instruction,
            ((self.screen_width - width) // 2, top + PANEL_HEIGHT + 10), LIGHTGRAY,
        )

        hint = None
        if self.left_button.is_hovered:
            hint = (
                "Keep your current equipment"
                if self.current_item is not None
                else "Keep no equipment in this slot"
            )
        elif self.right_button.is_hovered:
            hint = "Equip the new item"
        if hint:
            width, _ = _measure_text(small, hint)
            _draw_text(surface, small, hint, ((self.screen_width - width) // 2, top + PANEL_HEIGHT + 35), YELLOW)

    def _draw_panel_content(self, surface, x: int, y: int, item, show_comparison: bool) -> None:
        font = _default_font(FONT_SIZE)
        small = _default_font(SMALL_FONT_SIZE)
        symbol_font = _default_font(SYMBOL_FONT_SIZE)

        if item is None:
            text = "No Equipment"
            width, _ = _measure_text(font, text)
            _draw_text(surface, font, text, (x + (PANEL_WIDTH - width) // 2, y + PANEL_HEIGHT // 2 - 10), DARKGRAY)
            icon = Rect(x + 10, y + 10, ICON_SIZE, ICON_SIZE)
            _draw_rect(surface, icon, DARKGRAY)
            _draw_rect(surface, icon, GRAY, width=2)
            self._draw_symbol(surface, symbol_font, "?", icon, GRAY)
            return

        self._draw_icon(surface, x + 10, y + 10, item)

        name = item.name
        name_width, _ = _measure_text(font, name)
        if name_width > PANEL_WIDTH - 20:
            name = item.name[: PANEL_WIDTH - 20] + "..."
        _draw_text(surface, font, name, (x + 10, y + 85), WHITE)

        item_type = _type_of(item)
        type_label = item_type.value if item_type is not None else str(item.item_type)
        _draw_text(surface, small, type_label, (x + 10, y + 110), LIGHTGRAY)

        line_y = y + 140
        for text, color in self._stat_lines(item, show_comparison):
            _draw_text(surface, small, text, (x + 10, line_y), color)
            line_y += _STAT_LINE_HEIGHT

        description = _DESCRIPTIONS.get(item_type)
        if description:
            line_y += 10
            for line in wrap_words(description, PANEL_WIDTH - 20, lambda s: _measure_text(small, s)[0]):
                _draw_text(surface, small, line, (x + 10, line_y), LIGHTGRAY)
                line_y += _DESCRIPTION_LINE_HEIGHT

    def _draw_icon(self, surface, x: int, y: int, item) -> None:
        background, symbol = _ICONS.get(_type_of(item), (GRAY, "?"))
        icon = Rect(x, y, ICON_SIZE, ICON_SIZE)
        _draw_rect(surface, icon, background)
        _draw_rect(surface, icon, WHITE, width=2)
        self._draw_symbol(surface, _default_font(SYMBOL_FONT_SIZE), symbol, icon, WHITE)

    @staticmethod
    def _draw_symbol(surface, font, symbol: str, icon: Rect, color: Color) -> None:
        width, _ = _measure_text(font, symbol)
        pos = (icon.x + (ICON_SIZE - width) // 2, icon.y + (ICON_SIZE - SYMBOL_FONT_SIZE) // 2)
        _draw_text(surface, font, symbol, pos, color)