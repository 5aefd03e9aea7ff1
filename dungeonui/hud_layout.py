"""Positions and text helpers for the in-game heads-up display."""

from __future__ import annotations

from .core import Rect

NAME_WRAP_WIDTH = 13

HP_BAR_MARGIN = 30.0
HP_BAR_TOP = 20.0
HP_BAR_WIDTH = 360.0
HP_BAR_HEIGHT = 28.0

XP_BAR_GAP = 35.0
XP_BAR_WIDTH = 320.0
XP_BAR_HEIGHT = 25.0

BUTTON_SIZE = 60.0
BUTTON_SPACING = 20.0
BUTTON_MARGIN = 20.0

TOOLTIP_WIDTH = 200
TOOLTIP_LINE_HEIGHT = 22
TOOLTIP_BASE_HEIGHT = 75


def wrap_name(name: str, width: int = NAME_WRAP_WIDTH) -> list[str]:
    """Split an item name into chunks of at most ``width`` characters.

    Breaks after the last space within reach; the space stays on the
    earlier line.  A word without a nearby space is cut at ``width``.
    """
    lines: list[str] = []
    rest = name
    while rest:
        if len(rest) <= width:
            lines.append(rest)
            break
        cut = width
        while cut > 0 and rest[cut] != " ":
            cut -= 1
        if cut == 0:
            cut = width
        else:
            cut += 1
        lines.append(rest[:cut])
        rest = rest[cut:]
    return lines


def format_bonus(bonus: float) -> str:
    return f"{bonus:.1f}"


def hp_bar_bounds(screen_width: float) -> Rect:
    center_x = screen_width / 2.0
    return Rect(center_x - (center_x - HP_BAR_MARGIN), HP_BAR_TOP, HP_BAR_WIDTH, HP_BAR_HEIGHT)


def xp_bar_bounds(hp_bounds: Rect) -> Rect:
    return Rect(
        hp_bounds.x + hp_bounds.width + XP_BAR_GAP,
        hp_bounds.height / 2 + 25,
        XP_BAR_WIDTH,
        XP_BAR_HEIGHT,
    )


def armor_button_bounds(screen_width: float) -> Rect:
    return Rect(
        screen_width - BUTTON_SIZE - BUTTON_MARGIN,
        screen_width / 4.0,
        BUTTON_SIZE,
        BUTTON_SIZE,
    )


def _below(bounds: Rect) -> Rect:
    return Rect(bounds.x, bounds.y + bounds.height + BUTTON_SPACING, BUTTON_SIZE, BUTTON_SIZE)


def weapon_button_bounds(screen_width: float) -> Rect:
    return _below(armor_button_bounds(screen_width))


def spell_button_bounds(screen_width: float) -> Rect:
    return _below(weapon_button_bounds(screen_width))


def tooltip_rect(item_bounds: Rect, line_count: int, screen_height: float) -> Rect:
    """Where an item tooltip goes: left of the item, kept on screen."""
    height = TOOLTIP_BASE_HEIGHT + line_count * TOOLTIP_LINE_HEIGHT
    x = item_bounds.x - TOOLTIP_WIDTH - 10
    y = item_bounds.y + item_bounds.height / 2 - height // 2
    if x < 10:
        x = item_bounds.x + item_bounds.width + 1
    if y + height > screen_height:
        y = screen_height - height - 10
    return Rect(x, y, float(TOOLTIP_WIDTH), float(height))